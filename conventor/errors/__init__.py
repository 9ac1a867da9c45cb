"""
Error classification system for the bidding-system compiler.

Notation problems are recoverable and mostly absorbed into the data model;
ingestion and configuration problems mean the caller handed over a document
of the wrong shape and are raised to the caller unchanged.
"""

from .notation import (
    NotationError,
    InvalidCallError,
)
from .ingestion import (
    IngestionError,
    MalformedDocumentError,
    MissingDocumentError,
    ConfigurationError,
)

__all__ = [
    # Notation Errors
    "NotationError",
    "InvalidCallError",
    # Ingestion Failures
    "IngestionError",
    "MalformedDocumentError",
    "MissingDocumentError",
    "ConfigurationError",
]
