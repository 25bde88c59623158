"""
Custom exceptions for the TrackGuide parser.

Failing to find a field is never an error: extractors return None. The
exceptions below are reserved for call-time contract violations and for
unreadable inputs at the CLI boundary.
"""

from typing import Any, Dict, Optional


class TrackGuideError(Exception):
    """Base exception for all TrackGuide-specific errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class MissingVocabularyError(TrackGuideError, ValueError):
    """The key extractor was called without a scale vocabulary."""

    def __init__(self) -> None:
        super().__init__(
            "A scale vocabulary is required to resolve keys "
            "(pass an empty list to accept best-effort results)"
        )


class ScaleFileError(TrackGuideError):
    """A scale vocabulary file could not be read or has the wrong shape."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot load scale vocabulary from '{path}': {reason}", {"path": path})
