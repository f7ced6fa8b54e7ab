"""PDF extraction: text, page count and document-info metadata."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pdfminer.high_level import extract_text as extract_miner
from pdfminer.pdfdocument import PDFDocument
from pdfminer.pdfpage import PDFPage
from pdfminer.pdfparser import PDFParser, PDFSyntaxError
from pdfminer.pdftypes import resolve1
from pdfminer.psparser import PSException
from pdfminer.utils import decode_text

from paperlib.models import Paper
from paperlib.text_clean import clean_pdf_text


# PDF Info dict key -> Paper.metadata key
_INFO_FIELDS: dict[str, str] = {
    "Title": "title",
    "Author": "author",
    "Subject": "subject",
    "Keywords": "keywords",
    "Creator": "creator",
    "Producer": "producer",
    "CreationDate": "creation_date",
    "ModDate": "modification_date",
}


def _decode_info_value(value: Any) -> str | None:
    value = resolve1(value)
    if isinstance(value, bytes):
        value = decode_text(value)
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def _read_info(pdf_path: Path) -> tuple[int, dict[str, str | None]]:
    """Return (page count, metadata). Unreadable trailers give (0, all None)."""
    metadata: dict[str, str | None] = {key: None for key in _INFO_FIELDS.values()}
    try:
        with open(pdf_path, "rb") as fp:
            document = PDFDocument(PDFParser(fp))
            pages = sum(1 for _ in PDFPage.create_pages(document))
            info = document.info[0] if document.info else {}
    except (PDFSyntaxError, PSException):
        return 0, metadata

    for pdf_key, key in _INFO_FIELDS.items():
        if pdf_key in info:
            metadata[key] = _decode_info_value(info[pdf_key])
    return pages, metadata


def extract_text(pdf_path: Path, max_pages: int | None = None) -> str:
    """Extract text using pdfminer.six (handles two-column layouts)."""
    # maxpages=0 means "all pages" in pdfminer
    txt = extract_miner(str(pdf_path), maxpages=max_pages or 0) or ""
    return txt.strip()


def extract_paper_from_pdf(pdf_path: Path, max_pages: int | None = None) -> Paper:
    """
    Extract cleaned full text plus document info from a PDF.

    Raises: FileNotFoundError if pdf_path does not exist; pdfminer errors
    propagate for files that cannot be parsed at all.
    """
    pdf_path = Path(pdf_path)
    if not pdf_path.is_file():
        raise FileNotFoundError(f"PDF file not found: {pdf_path}")

    txt = extract_text(pdf_path, max_pages=max_pages)
    if txt:
        txt = clean_pdf_text(txt)
    pages, metadata = _read_info(pdf_path)
    return Paper(pdf_path=pdf_path, text=txt, pages=pages, metadata=metadata)
