"""
Exceptions raised by the S3 file resource.
"""
from typing import List, Optional


class S3ResourceError(Exception):
    """Base exception for all reconciliation failures."""
    pass


class ConfigError(S3ResourceError):
    """No valid S3 client configuration could be resolved."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = list(errors or [])


class LocatorError(S3ResourceError):
    """A source string could not be split into bucket and key."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Invalid source '{source}': {reason}")
        self.source = source
        self.reason = reason


class StoreError(S3ResourceError):
    """A transport or service failure reported by the object store."""

    def __init__(self, code: str, message: str):
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message
