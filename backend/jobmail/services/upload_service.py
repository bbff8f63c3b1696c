"""
Upload Service — accept a job description file for a single request.

Responsibilities:
  • Reject disallowed mime types before anything touches the disk
  • Stream the upload into the upload directory, enforcing the size limit
  • Extract the job description (plain text verbatim, PDF via pdfplumber,
    images as a notice since there is no OCR)
  • Delete the stored file once it has been read
"""

from __future__ import annotations

import logging
import random
import re
import time
from dataclasses import dataclass
from pathlib import Path

import pdfplumber
from fastapi import UploadFile

from jobmail.config import settings
from jobmail.errors import FileProcessingError, UploadRejectedError
from jobmail.utils.text_cleanup import normalize_text

logger = logging.getLogger(__name__)

ALLOWED_MIME_TYPES = frozenset({
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/webp",
    "text/plain",
    "application/pdf",
})

_CHUNK_SIZE = 64 * 1024

IMAGE_NOTICE = (
    "Image file uploaded - please ensure the job description is clear and readable in the image."
)
EMPTY_PDF_NOTICE = (
    "PDF file uploaded - no extractable text was found, the document may be a scanned image."
)
UNKNOWN_FILE_NOTICE = "File uploaded - content processing is not available for this file type."


@dataclass(frozen=True)
class StoredUpload:
    """An uploaded file on disk. Lives for one request only."""

    path: Path
    mime_type: str
    original_name: str
    size: int


# ── Public API ───────────────────────────────────────────────────────────────


def ensure_upload_dir() -> Path:
    upload_dir = settings.upload_path
    upload_dir.mkdir(parents=True, exist_ok=True)
    return upload_dir


def validate_mime_type(mime_type: str | None) -> str:
    """Return the normalized mime type, or raise if uploads of that type are not accepted."""
    normalized = (mime_type or "").split(";", 1)[0].strip().lower()
    if normalized not in ALLOWED_MIME_TYPES:
        raise UploadRejectedError(
            "Invalid file type. Only images, text files, and PDFs are allowed."
        )
    return normalized


async def store_upload(file: UploadFile) -> StoredUpload:
    """Stream an upload to disk. Nothing is left behind when the upload is rejected."""
    mime_type = validate_mime_type(file.content_type)
    original_name = file.filename or "upload"
    path = ensure_upload_dir() / _unique_name(original_name)

    max_bytes = settings.max_upload_bytes
    size = 0
    try:
        with path.open("wb") as out:
            while True:
                chunk = await file.read(_CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > max_bytes:
                    raise UploadRejectedError(
                        f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB."
                    )
                out.write(chunk)
    except BaseException:
        remove_upload(path)
        raise

    logger.info(f"Stored upload '{original_name}' ({mime_type}, {size} bytes) at {path.name}")
    return StoredUpload(path=path, mime_type=mime_type, original_name=original_name, size=size)


def extract_text(upload: StoredUpload) -> str:
    """Turn a stored upload into job description text."""
    try:
        if upload.mime_type.startswith("image/"):
            return IMAGE_NOTICE
        if upload.mime_type == "application/pdf":
            return _extract_pdf_text(upload.path) or EMPTY_PDF_NOTICE
        if upload.mime_type == "text/plain":
            return upload.path.read_text(encoding="utf-8")
        return UNKNOWN_FILE_NOTICE
    except Exception as e:
        raise FileProcessingError("Failed to generate email", f"Error reading file: {e}") from e


async def read_job_description(file: UploadFile) -> str:
    """Store, read, and delete an uploaded job description file."""
    upload = await store_upload(file)
    logger.info(f"Processing file: {upload.original_name} {upload.mime_type}")
    try:
        return extract_text(upload)
    finally:
        remove_upload(upload.path)


def remove_upload(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.error(f"Error deleting file {path}: {e}")


# ── Helpers ──────────────────────────────────────────────────────────────────


def _unique_name(original_name: str) -> str:
    """``<epoch ms>-<random>-<sanitized name>``, unique enough for concurrent requests."""
    safe = re.sub(r"[^A-Za-z0-9._-]", "_", Path(original_name).name) or "upload"
    return f"{int(time.time() * 1000)}-{random.randint(0, 10**9 - 1)}-{safe}"


def _extract_pdf_text(path: Path) -> str:
    """Extract text from a PDF file using pdfplumber."""
    text_parts: list[str] = []
    with pdfplumber.open(path) as pdf:
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
    return normalize_text("\n\n".join(text_parts))
