from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(BaseModel):
    status: str
    message: str


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None


class SearchResultItem(CamelModel):
    title: str = ""
    link: str = ""
    display_link: str = ""
    snippet: str = ""


class SearchRequest(BaseModel):
    query: Any = None


class SearchEnvelope(CamelModel):
    success: bool = True
    query: str
    results: list[SearchResultItem] = Field(default_factory=list)
    total_results: str = "0"


class AnalysisResult(CamelModel):
    success: bool = True
    filename: str
    pages: int
    text: str
    info: dict[str, str] = Field(default_factory=dict)
    ai_analysis: str | None = None


class PdfPreview(CamelModel):
    filename: str
    pages: int
    text_preview: str


class SearchSection(CamelModel):
    query: str
    results: list[SearchResultItem] = Field(default_factory=list)
    total_results: str = "0"


class PdfSearchResult(CamelModel):
    success: bool = True
    pdf: PdfPreview
    search: SearchSection
