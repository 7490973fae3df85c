from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form

from ..analysis import analyze_upload, search_upload
from ..errors import ApiError, DocumentProcessingError, ModelError, SearchError
from ..llm import ChatModelClient, get_model_client
from ..schemas import AnalysisResult, ErrorResponse, PdfSearchResult
from ..search import GoogleSearchClient, get_search_client
from ..uploads import UploadedDocument, read_pdf_upload


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["pdf"])

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.post("/upload-pdf", response_model=AnalysisResult, responses=ERROR_RESPONSES)
async def upload_pdf(
    upload: UploadedDocument = Depends(read_pdf_upload),
    model_client: ChatModelClient = Depends(get_model_client),
) -> AnalysisResult:
    try:
        return await analyze_upload(upload, model_client)
    except (DocumentProcessingError, ModelError) as exc:
        logger.exception("Error processing PDF %s", upload.filename)
        raise ApiError(500, "Failed to process PDF file", str(exc)) from exc


@router.post("/upload-pdf-and-search", response_model=PdfSearchResult, responses=ERROR_RESPONSES)
async def upload_pdf_and_search(
    upload: UploadedDocument = Depends(read_pdf_upload),
    search_query: Optional[str] = Form(None, alias="searchQuery"),
    search_client: GoogleSearchClient = Depends(get_search_client),
) -> PdfSearchResult:
    try:
        return await search_upload(upload, search_client, search_query)
    except (DocumentProcessingError, SearchError) as exc:
        logger.exception("Error processing request for %s", upload.filename)
        raise ApiError(500, "Failed to process request", str(exc)) from exc
