"""
Ingestion failure classifications for unrecoverable input errors.

These exceptions mean the external document or configuration violated the
expected shape; the compiler performs no recovery for them.
"""

from typing import Optional, Dict, Any


class IngestionError(Exception):
    """Base class for unrecoverable ingestion failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class MalformedDocumentError(IngestionError):
    """A document node has a shape the ingestion rules do not recognize."""

    def __init__(self, message: str, path: Optional[str] = None,
                 key: Optional[str] = None, expected_shape: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path
        self.key = key
        self.expected_shape = expected_shape


class MissingDocumentError(IngestionError):
    """A convention file or section path does not exist."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path


class ConfigurationError(IngestionError):
    """The merged compiler configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
