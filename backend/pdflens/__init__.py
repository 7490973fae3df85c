"""PDFLens: PDF text extraction with model summaries and web search."""

__version__ = "0.1.0"
