"""Orchestration of the upload flows: extract, then summarise or search."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Protocol

from .extraction import extract_document_async
from .schemas import (
    AnalysisResult,
    PdfPreview,
    PdfSearchResult,
    SearchEnvelope,
    SearchResultItem,
    SearchSection,
)
from .uploads import UploadedDocument


logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful assistant that analyzes PDF documents and provides structured summaries."
)
PROMPT_CHAR_LIMIT = 10_000
QUERY_CHAR_LIMIT = 200
PREVIEW_CHAR_LIMIT = 500

_RESULT_FIELDS = ("title", "link", "displayLink", "snippet")


class ModelClient(Protocol):
    async def complete(self, system: str, prompt: str) -> str: ...


class SearchClient(Protocol):
    async def search(self, query: str) -> Dict[str, Any]: ...


def build_summary_prompt(filename: str, page_count: int, text: str) -> str:
    return (
        "Please analyze this PDF document and provide a summary:\n\n"
        f"Filename: {filename}\n"
        f"Pages: {page_count}\n\n"
        f"Content:\n{text[:PROMPT_CHAR_LIMIT]}"
    )


async def summarize(model_client: ModelClient, filename: str, page_count: int, text: str) -> str:
    prompt = build_summary_prompt(filename, page_count, text)
    logger.info("Sending %s to the model for analysis", filename)
    analysis = await model_client.complete(SYSTEM_PROMPT, prompt)
    logger.info("Model analysis completed for %s", filename)
    return analysis


def derive_search_query(text: str, user_query: Optional[str]) -> str:
    if user_query:
        return user_query
    return text[:QUERY_CHAR_LIMIT]


def _reshape_items(items: Any) -> List[SearchResultItem]:
    if not isinstance(items, list):
        return []
    results = []
    for item in items:
        if not isinstance(item, dict):
            continue
        fields = {key: str(item[key]) for key in _RESULT_FIELDS if item.get(key) is not None}
        results.append(SearchResultItem.model_validate(fields))
    return results


def build_search_envelope(query: str, payload: Dict[str, Any]) -> SearchEnvelope:
    info = payload.get("searchInformation")
    total = info.get("totalResults") if isinstance(info, dict) else None
    return SearchEnvelope(
        query=query,
        results=_reshape_items(payload.get("items")),
        total_results=str(total) if total else "0",
    )


async def search_and_attach(
    search_client: SearchClient,
    text: str,
    user_query: Optional[str],
) -> SearchEnvelope:
    query = derive_search_query(text, user_query)
    payload = await search_client.search(query)
    return build_search_envelope(query, payload)


async def analyze_upload(upload: UploadedDocument, model_client: ModelClient) -> AnalysisResult:
    extracted = await extract_document_async(upload.content)
    analysis = await summarize(model_client, upload.filename, extracted.page_count, extracted.text)
    return AnalysisResult(
        filename=upload.filename,
        pages=extracted.page_count,
        text=extracted.text,
        info=extracted.metadata,
        ai_analysis=analysis,
    )


async def search_upload(
    upload: UploadedDocument,
    search_client: SearchClient,
    user_query: Optional[str],
) -> PdfSearchResult:
    extracted = await extract_document_async(upload.content)
    envelope = await search_and_attach(search_client, extracted.text, user_query)
    return PdfSearchResult(
        pdf=PdfPreview(
            filename=upload.filename,
            pages=extracted.page_count,
            text_preview=extracted.text[:PREVIEW_CHAR_LIMIT],
        ),
        search=SearchSection(
            query=envelope.query,
            results=envelope.results,
            total_results=envelope.total_results,
        ),
    )
