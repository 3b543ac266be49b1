"""Plain-text extraction from uploaded résumé files."""

import io
import logging

import pdfplumber
from docx import Document

from services import gemini_client

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".txt", ".md")

# Transcribed by Gemini; there is no local OCR
IMAGE_MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
}


class UnsupportedFileType(ValueError):
    """Raised for uploads whose extension has no extractor."""


class ExtractionUnavailable(ValueError):
    """Raised when an image upload cannot be transcribed (AI off or failed)."""


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_text_plain(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace").strip()


def extract_text_from_upload(filename: str, content: bytes) -> str:
    """Dispatch on the file extension and return normalised plain text."""
    name = (filename or "").lower()
    if name.endswith(".pdf"):
        text = extract_text(content)
    elif name.endswith(".docx"):
        text = extract_text_docx(content)
    elif name.endswith((".txt", ".md")):
        text = extract_text_plain(content)
    else:
        raise UnsupportedFileType(
            f"Unsupported file type. Accepted: {', '.join(SUPPORTED_EXTENSIONS + tuple(IMAGE_MIME_TYPES))}"
        )

    # Normalise Windows line endings so header matching sees clean lines
    text = text.replace("\r\n", "\n")
    logger.info("Extracted %d characters from %s", len(text), filename)
    return text


def image_mime_type(filename: str) -> str | None:
    name = (filename or "").lower()
    for ext, mime in IMAGE_MIME_TYPES.items():
        if name.endswith(ext):
            return mime
    return None


async def extract_upload(filename: str, content: bytes) -> str:
    """Like ``extract_text_from_upload``, with Gemini transcription for images
    and for PDFs that have no text layer (scans).
    """
    mime = image_mime_type(filename)
    if mime is not None:
        if not gemini_client.is_configured():
            raise ExtractionUnavailable("Image uploads need AI transcription, which is not configured")
        text = await gemini_client.transcribe_document(content, mime)
        if text is None:
            raise ExtractionUnavailable("Could not transcribe the uploaded image")
        logger.info("Transcribed %d characters from %s", len(text), filename)
        return text.replace("\r\n", "\n")

    text = extract_text_from_upload(filename, content)
    if not text and (filename or "").lower().endswith(".pdf") and gemini_client.is_configured():
        logger.info("No text layer in %s, falling back to transcription", filename)
        text = await gemini_client.transcribe_document(content, "application/pdf") or ""
        text = text.replace("\r\n", "\n")
    return text
