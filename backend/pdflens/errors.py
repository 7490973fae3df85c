from __future__ import annotations

from typing import Optional


class ApiError(Exception):
    """An error that is rendered to the client as ``{"error", "details"}``."""

    def __init__(self, status_code: int, error: str, details: Optional[str] = None) -> None:
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details


class UploadRejected(ApiError):
    """Raised by the ingress layer for client-side upload problems."""

    def __init__(self, error: str) -> None:
        super().__init__(400, error)


class DocumentProcessingError(Exception):
    """Raised when PDF bytes cannot be turned into text."""

    def __init__(self, code: str, message: str, original: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.code = code
        self.original = original


class ModelError(Exception):
    """Raised when the chat-completion provider call fails."""


class ModelConfigurationError(ModelError):
    pass


class SearchError(Exception):
    """Raised when the web-search provider call fails."""


class SearchConfigurationError(SearchError):
    pass
