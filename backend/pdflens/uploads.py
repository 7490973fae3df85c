from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from fastapi import Depends, File, UploadFile
from starlette.datastructures import UploadFile as StarletteUploadFile

from .config import Settings, get_settings
from .errors import UploadRejected


logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


@dataclass(frozen=True)
class UploadedDocument:
    filename: str
    byte_size: int
    content: bytes = field(repr=False)


def _size_limit_message(limit: int) -> str:
    return f"File size too large. Maximum size is {limit // (1024 * 1024)}MB"


def _declared_type(upload: UploadFile) -> str:
    return (upload.content_type or "").split(";", 1)[0].strip().lower()


async def read_pdf_upload(
    pdf: Union[UploadFile, str, None] = File(None),
    settings: Settings = Depends(get_settings),
) -> UploadedDocument:
    """Validate the ``pdf`` multipart field and buffer it in memory.

    Runs as a route dependency, so rejected uploads never reach the
    route body or the extraction step.
    """
    # A plain text field named "pdf" counts as no file at all
    if not isinstance(pdf, StarletteUploadFile) or not pdf.filename:
        raise UploadRejected("No PDF file uploaded")

    if _declared_type(pdf) != PDF_CONTENT_TYPE:
        logger.info("Rejected upload %s with content type %s", pdf.filename, pdf.content_type)
        raise UploadRejected("Only PDF files are allowed")

    limit = settings.max_upload_bytes
    if pdf.size is not None and pdf.size > limit:
        raise UploadRejected(_size_limit_message(limit))

    contents = await pdf.read(limit + 1)
    if len(contents) > limit:
        raise UploadRejected(_size_limit_message(limit))

    logger.info("Processing PDF: %s Size: %d bytes", pdf.filename, len(contents))
    return UploadedDocument(filename=pdf.filename, byte_size=len(contents), content=contents)
