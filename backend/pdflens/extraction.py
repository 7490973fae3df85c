"""Turn raw PDF bytes into plain text, a page count and the Info metadata."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from io import BytesIO
from typing import Any, Dict

from pdfminer.high_level import extract_text
from pdfminer.pdfdocument import PDFDocument
from pdfminer.pdfpage import PDFPage
from pdfminer.pdfparser import PDFParser
from pdfminer.pdftypes import resolve1
from pdfminer.psparser import PSLiteral
from pdfminer.utils import decode_text

from .errors import DocumentProcessingError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractedDocument:
    text: str
    page_count: int
    metadata: Dict[str, str] = field(default_factory=dict)


def _safe_message(exc: Exception) -> str:
    try:
        message = str(exc)
        message.encode("utf-8", errors="strict")
    except (UnicodeEncodeError, UnicodeDecodeError):
        message = _strip_surrogates(repr(exc))
    return message or type(exc).__name__


def _classify_extraction_failure(exc: Exception) -> DocumentProcessingError:
    message = _safe_message(exc)
    lowered = f"{type(exc).__name__} {message}".lower()

    if "password" in lowered:
        return DocumentProcessingError(
            "password_protected",
            f"Document is password protected and cannot be processed: {message}",
            exc,
        )

    if "encrypt" in lowered:
        return DocumentProcessingError(
            "encrypted_document",
            f"Failed to parse encrypted document: {message}",
            exc,
        )

    if any(keyword in lowered for keyword in ("is this really a pdf", "invalid file header", "unsupported")):
        return DocumentProcessingError(
            "unsupported_format",
            f"Unsupported document format: {message}",
            exc,
        )

    return DocumentProcessingError(
        "extraction_failure",
        f"Failed to extract document text: {message}",
        exc,
    )


def _strip_surrogates(text: str) -> str:
    return "".join(char for char in text if ord(char) < 0xD800 or ord(char) > 0xDFFF)


def _normalize_text(raw: str) -> str:
    # pdfminer terminates every page with a form feed
    text = raw.replace("\x0c", "\n")
    try:
        text.encode("utf-8", errors="strict")
    except UnicodeEncodeError:
        text = _strip_surrogates(text)
    return text.strip()


def _decode_info_value(value: Any) -> str:
    value = resolve1(value)
    if isinstance(value, bytes):
        return decode_text(value)
    if isinstance(value, PSLiteral):
        name = value.name
        return name.decode("latin-1") if isinstance(name, bytes) else str(name)
    return str(value)


def _read_structure(content: bytes) -> tuple[int, Dict[str, str]]:
    parser = PDFParser(BytesIO(content))
    document = PDFDocument(parser)

    metadata: Dict[str, str] = {}
    for info in document.info:
        for key, value in info.items():
            name = key.decode("latin-1") if isinstance(key, bytes) else str(key)
            metadata[name] = _decode_info_value(value)

    page_count = sum(1 for _ in PDFPage.create_pages(document))
    return page_count, metadata


def extract_document(content: bytes) -> ExtractedDocument:
    """Extract text, page count and metadata from PDF bytes.

    Any parser failure is re-raised as ``DocumentProcessingError`` carrying
    the library's message.
    """
    try:
        page_count, metadata = _read_structure(content)
        raw_text = extract_text(BytesIO(content)) or ""
    except Exception as exc:
        raise _classify_extraction_failure(exc) from exc

    return ExtractedDocument(
        text=_normalize_text(raw_text),
        page_count=page_count,
        metadata=metadata,
    )


async def extract_document_async(content: bytes) -> ExtractedDocument:
    extracted = await asyncio.to_thread(extract_document, content)
    logger.info("PDF processed successfully: %d pages", extracted.page_count)
    return extracted
