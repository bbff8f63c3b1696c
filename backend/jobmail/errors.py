"""
Error types surfaced by the API.

Every error reaches the client as ``{"success": false, "error": ..., "details": ...}``
via the handlers registered in ``jobmail.main``. Client mistakes map to 400,
anything that went wrong downstream (LLM provider, file I/O) maps to 500.
"""

from __future__ import annotations

from typing import Optional


class JobMailError(Exception):
    """Base class for errors that carry an HTTP status and a client-facing message."""

    status_code: int = 500

    def __init__(self, error: str, details: Optional[str] = None):
        super().__init__(error)
        self.error = error
        self.details = details


class InvalidInputError(JobMailError):
    """The request is missing required input or names something unknown."""

    status_code = 400


class UploadRejectedError(InvalidInputError):
    """The uploaded file has a disallowed type or exceeds the size limit."""


class FileProcessingError(JobMailError):
    """Reading an uploaded file failed."""


class GenerationError(JobMailError):
    """The email could not be generated (provider failure, empty reply, ...)."""

    def __init__(self, details: str):
        super().__init__("Failed to generate email", details)
