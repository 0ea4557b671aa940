"""Text extraction from uploaded resume files (PDF, DOCX, plain text).

PDFs go through progressively lossier strategies; each is accepted only when
it recovers more than `settings.fallback_min_chars` characters. If the
format-specific path fails outright, generic byte decoding is tried before
giving up with ExtractionError.
"""

import io
import logging
import re

import pdfplumber
from docx import Document

from config import settings

logger = logging.getLogger(__name__)

READ_ERROR_MESSAGE = "Could not read this file. Try saving as a TXT file or using a different PDF."

PDF_MIME = "application/pdf"
DOCX_MIME_MARKER = "wordprocessingml"

# Patterns for scraping text runs straight out of a PDF byte stream
_RAW_PDF_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"\(([^()]+)\)"),
    re.compile(r"\[([^\[\]]+)\]"),
    re.compile(r"T[mdJ]*\(([^()]+)\)"),
    re.compile(r"[A-Za-z0-9\s.,;:!?@#$%^&*()\-_+=<>{}\[\]|\\/'\"`~]{10,}"),
)
_RAW_PDF_MARKERS_RE = re.compile(r"T[mdJ]*\(|[()\[\]]")
_RAW_PDF_ESCAPE_RE = re.compile(r"\\[A-Za-z]")
_WHITESPACE_RE = re.compile(r"\s+")

# Byte prefix examined by the raw PDF scan and the generic decoders
_SCAN_LIMIT = 100_000

_FALLBACK_ENCODINGS = ("utf-8", "latin-1", "ascii", "utf-16-le")


class ExtractionError(Exception):
    """The uploaded document could not be turned into text."""


def extract_text(content: bytes, filename: str = "", content_type: str | None = None) -> str:
    """Extract text from an uploaded file, dispatching on MIME type or extension."""
    name = (filename or "").lower()
    mime = content_type or ""
    try:
        if mime == PDF_MIME or name.endswith(".pdf"):
            logger.info("Processing PDF file %s", filename)
            return extract_text_pdf(content)
        if DOCX_MIME_MARKER in mime or name.endswith(".docx"):
            logger.info("Processing DOCX file %s", filename)
            return extract_text_docx(content)
        logger.info("Processing text file %s", filename)
        return extract_text_plain(content)
    except Exception as e:
        logger.warning("Extraction failed for %s: %s", filename, e)

    fallback = extract_with_fallback_methods(content)
    if fallback and len(fallback) > settings.fallback_min_chars:
        logger.info("Fallback extraction succeeded for %s", filename)
        return fallback
    raise ExtractionError(READ_ERROR_MESSAGE)


def extract_text_pdf(pdf_bytes: bytes) -> str:
    """Extract text from a PDF, falling back to word-level and raw-byte strategies."""
    min_chars = settings.fallback_min_chars

    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        # Strategy 1: page text
        text = "\n".join(page.extract_text() or "" for page in pdf.pages).strip()
        if len(text) > min_chars:
            logger.info("Standard PDF extraction: %d chars", len(text))
            return text

        # Strategy 2: rebuild from individual words
        words = [w["text"] for page in pdf.pages for w in page.extract_words()]
        text = " ".join(words).strip()
        if len(text) > min_chars:
            logger.info("Word-level PDF extraction: %d chars", len(text))
            return text

    # Strategy 3: scrape the raw byte stream
    text = extract_raw_pdf_text(pdf_bytes)
    if len(text) > min_chars:
        logger.info("Raw buffer extraction: %d chars", len(text))
        return text

    raise ExtractionError("PDF appears to be empty or unreadable")


def extract_raw_pdf_text(pdf_bytes: bytes) -> str:
    """Best-effort scrape of text runs from an (often corrupted) PDF byte stream."""
    buffer = pdf_bytes[:_SCAN_LIMIT].decode("latin-1")
    chunks = []
    for pattern in _RAW_PDF_PATTERNS:
        for match in pattern.finditer(buffer):
            cleaned = _RAW_PDF_MARKERS_RE.sub("", match.group())
            cleaned = _RAW_PDF_ESCAPE_RE.sub(" ", cleaned)
            cleaned = _WHITESPACE_RE.sub(" ", cleaned).strip()
            if len(cleaned) > 5:
                chunks.append(cleaned)
    return " ".join(chunks)


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_text_plain(content: bytes) -> str:
    return content.decode("utf-8", errors="replace")


def extract_with_fallback_methods(content: bytes) -> str:
    """Decode arbitrary bytes as text; returns "" when nothing plausible is found."""
    # Method 1: leading chunk as UTF-8
    as_text = content[:_SCAN_LIMIT].decode("utf-8", errors="replace")
    if len(as_text) > 200 and " " in as_text:
        return as_text

    # Method 2: other encodings
    for encoding in _FALLBACK_ENCODINGS:
        try:
            text = content[:50_000].decode(encoding)
        except UnicodeDecodeError:
            continue
        if len(text) > 200 and re.search(r"[A-Za-z]", text):
            logger.info("Found text with %s encoding", encoding)
            return text
    return ""
