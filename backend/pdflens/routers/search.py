from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from ..analysis import build_search_envelope
from ..errors import ApiError, SearchError
from ..schemas import ErrorResponse, SearchEnvelope, SearchRequest
from ..search import GoogleSearchClient, get_search_client


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["search"])


@router.post(
    "/search",
    response_model=SearchEnvelope,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search(
    payload: Optional[SearchRequest] = None,
    search_client: GoogleSearchClient = Depends(get_search_client),
) -> SearchEnvelope:
    raw_query = payload.query if payload is not None else None
    if not raw_query:
        raise ApiError(400, "Search query is required")
    query = raw_query if isinstance(raw_query, str) else str(raw_query)

    try:
        results = await search_client.search(query)
    except SearchError as exc:
        logger.exception("Error performing search")
        raise ApiError(500, "Failed to perform search", str(exc)) from exc

    return build_search_envelope(query, results)
