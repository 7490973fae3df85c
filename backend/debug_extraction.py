"""Utility script to inspect PDF text extraction.

Usage:
    python backend/debug_extraction.py /path/to/document.pdf

The script runs the backend's extraction adapter directly, prints the page
count, the Info metadata and the first few hundred characters of the
extracted text, and surfaces any raised exception. This mirrors the
backend's extraction step without the model or search calls, making it
easier to isolate parser issues.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

sys.path.append(str(Path(__file__).resolve().parent))

from pdflens.errors import DocumentProcessingError  # noqa: E402
from pdflens.extraction import extract_document  # noqa: E402


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run PDF text extraction on a document")
    parser.add_argument("document", type=Path, help="Path to the PDF to inspect")
    parser.add_argument(
        "--preview-chars",
        type=int,
        default=600,
        help="How many characters of the extracted text to print",
    )

    args = parser.parse_args(argv)

    if not args.document.exists():
        raise SystemExit(f"Document not found: {args.document}")

    try:
        extracted = extract_document(args.document.read_bytes())
    except DocumentProcessingError as exc:
        print(f"[error] Extraction failed ({exc.code}):", exc, file=sys.stderr)
        return 2

    total_chars = len(extracted.text)
    print(f"[ok] {extracted.page_count} pages, {total_chars} characters")
    if extracted.metadata:
        print("[metadata]")
        print(json.dumps(extracted.metadata, indent=2, ensure_ascii=False))

    if total_chars == 0:
        print("[warn] Extraction returned empty text")
        return 0

    preview = extracted.text[: args.preview_chars]
    print("[preview]")
    print(preview)
    if total_chars > len(preview):
        print("…")
    return 0


if __name__ == "__main__":  # pragma: no cover - manual script execution
    raise SystemExit(main())
