from __future__ import annotations

from pathlib import Path

import pytest

import debug_extraction


def test_prints_pages_metadata_and_preview(tmp_path: Path, hello_pdf: bytes, capsys: pytest.CaptureFixture[str]) -> None:
    document = tmp_path / "hello.pdf"
    document.write_bytes(hello_pdf)

    assert debug_extraction.main([str(document), "--preview-chars", "5"]) == 0

    out = capsys.readouterr().out
    assert "[ok] 1 pages, 11 characters" in out
    assert '"Title": "Greeting"' in out
    assert "Hello\n…" in out


def test_reports_extraction_failure(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    document = tmp_path / "broken.pdf"
    document.write_bytes(b"not a pdf")

    assert debug_extraction.main([str(document)]) == 2
    assert "[error] Extraction failed" in capsys.readouterr().err


def test_missing_document_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        debug_extraction.main([str(tmp_path / "absent.pdf")])
