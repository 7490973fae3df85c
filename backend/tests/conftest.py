from __future__ import annotations

from pathlib import Path
import sys
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple

import pytest
from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[1]))

from pdflens.llm import get_model_client
from pdflens.main import app
from pdflens.search import get_search_client


def build_pdf(pages: Sequence[str] = ("Hello World",), info: Optional[Dict[str, str]] = None) -> bytes:
    """Assemble a minimal PDF with one Helvetica text line per page."""
    font_number = 3
    objects: Dict[int, bytes] = {
        1: b"<</Type /Catalog /Pages 2 0 R>>",
        font_number: b"<</Type /Font /Subtype /Type1 /BaseFont /Helvetica>>",
    }
    kids = []
    for index, text in enumerate(pages):
        page_number = 4 + 2 * index
        content_number = page_number + 1
        kids.append(b"%d 0 R" % page_number)
        stream = b"BT /F1 24 Tf 100 700 Td (" + text.encode("latin-1") + b") Tj ET"
        objects[page_number] = (
            b"<</Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            b"/Contents %d 0 R /Resources <</Font <</F1 %d 0 R>>>>>>" % (content_number, font_number)
        )
        objects[content_number] = b"<</Length %d>>\nstream\n" % len(stream) + stream + b"\nendstream"
    objects[2] = b"<</Type /Pages /Kids [" + b" ".join(kids) + b"] /Count %d>>" % len(pages)

    info_number = None
    if info:
        info_number = max(objects) + 1
        entries = b" ".join(
            b"/" + key.encode("latin-1") + b" (" + value.encode("latin-1") + b")"
            for key, value in info.items()
        )
        objects[info_number] = b"<<" + entries + b">>"

    out = bytearray(b"%PDF-1.4\n")
    offsets: Dict[int, int] = {}
    for number in sorted(objects):
        offsets[number] = len(out)
        out += b"%d 0 obj\n" % number + objects[number] + b"\nendobj\n"

    size = max(objects) + 1
    xref_offset = len(out)
    out += b"xref\n0 %d\n" % size
    out += b"0000000000 65535 f \n"
    for number in range(1, size):
        out += b"%010d 00000 n \n" % offsets[number]

    trailer = b"<</Size %d /Root 1 0 R" % size
    if info_number is not None:
        trailer += b" /Info %d 0 R" % info_number
    out += b"trailer\n" + trailer + b">>\nstartxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


class StubModelClient:
    def __init__(self, reply: str = "Summary: greeting", error: Optional[Exception] = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: List[Tuple[str, str]] = []

    async def complete(self, system: str, prompt: str) -> str:
        self.calls.append((system, prompt))
        if self.error is not None:
            raise self.error
        return self.reply


class StubSearchClient:
    def __init__(self, payload: Optional[Dict[str, Any]] = None, error: Optional[Exception] = None) -> None:
        self.payload = payload if payload is not None else {}
        self.error = error
        self.queries: List[str] = []

    async def search(self, query: str) -> Dict[str, Any]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def pdf_factory() -> Callable[..., bytes]:
    return build_pdf


@pytest.fixture
def hello_pdf() -> bytes:
    return build_pdf(["Hello World"], info={"Title": "Greeting", "Author": "PDFLens Tests"})


@pytest.fixture
def model_client() -> StubModelClient:
    return StubModelClient()


@pytest.fixture
def search_client() -> StubSearchClient:
    return StubSearchClient(
        {
            "items": [{"title": "T", "link": "L", "displayLink": "D", "snippet": "S"}],
            "searchInformation": {"totalResults": "1"},
        }
    )


@pytest.fixture
def api_client(model_client: StubModelClient, search_client: StubSearchClient) -> Iterator[TestClient]:
    app.dependency_overrides[get_model_client] = lambda: model_client
    app.dependency_overrides[get_search_client] = lambda: search_client
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
