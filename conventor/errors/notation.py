"""
Notation error classifications for call construction.

Unparseable notation is not an error (it becomes an opaque token), so this
module only covers attempts to build calls that cannot exist.
"""

from typing import Optional, Dict, Any


class NotationError(Exception):
    """Base class for notation issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InvalidCallError(NotationError, ValueError):
    """A level/strain combination that is not Pass, Double, Redouble or a contract."""

    def __init__(self, message: str, level: Optional[int] = None,
                 strain: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.level = level
        self.strain = strain
