"""Text extraction entry point.

Routes an upload to the extractor for its declared MIME type. Extractors
own their failure policy: DOCX, TXT and PPTX raise, PDF and images return
placeholder text when they degrade.
"""

import logging
from pathlib import Path
from typing import Awaitable, Callable, Dict, Optional, Union

from .config import Settings, settings as default_settings
from .extractors import (
    ImageExtractor,
    PdfExtractor,
    PresentationExtractor,
    extract_docx,
    extract_txt,
)
from .guards import ocr_available
from .schemas import ExtractionRequest
from .utils.asyncio import run_async
from .utils.errors import UnsupportedFormat

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TXT_MIME = "text/plain"
PPTX_MIME = "application/vnd.openxmlformats-officedocument.presentationml.presentation"
IMAGE_MIMES = ("image/jpeg", "image/png", "image/gif", "image/webp")

SUPPORTED_MIME_TYPES = (PDF_MIME, DOCX_MIME, TXT_MIME, PPTX_MIME) + IMAGE_MIMES

Source = Union[bytes, bytearray, memoryview, str, Path]
Handler = Callable[[ExtractionRequest], Awaitable[str]]


class TextExtractor:
    """
    MIME-type dispatcher over the per-format extractors.

    Everything environment-dependent is decided here, once, from the
    settings passed in; the extractors themselves hold no process state.
    Instances keep no per-call state and may serve concurrent calls.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        pdf: Optional[PdfExtractor] = None,
        image: Optional[ImageExtractor] = None,
        presentation: Optional[PresentationExtractor] = None,
    ):
        self.settings = settings or default_settings

        self.pdf = pdf or PdfExtractor(
            max_size_mb=self.settings.MAX_PDF_SIZE_MB,
            backend=self.settings.PDF_BACKEND,
        )
        self.image = image or ImageExtractor(
            ocr_available=ocr_available(self.settings),
            language=self.settings.OCR_LANGUAGE,
        )
        self.presentation = presentation or PresentationExtractor(
            fallback=self.settings.PPTX_FALLBACK,
        )

        self._handlers: Dict[str, Handler] = {
            PDF_MIME: self.pdf.extract,
            DOCX_MIME: extract_docx,
            TXT_MIME: extract_txt,
            PPTX_MIME: self.presentation.extract,
        }
        for mime in IMAGE_MIMES:
            self._handlers[mime] = self.image.extract

    def supports(self, mime_type: str) -> bool:
        return mime_type in self._handlers

    async def extract(self, request: ExtractionRequest) -> str:
        """
        Extract text from a document.

        Args:
            request: Source and declared MIME type

        Returns:
            Extracted text or a placeholder describing a degraded result

        Raises:
            UnsupportedFormat: If the MIME type is not recognized
            ExtractionError: If a format without a degraded mode fails
        """
        handler = self._handlers.get(request.mime_type)
        if handler is None:
            logger.error(f"[extraction] Unsupported MIME type: {request.mime_type}")
            raise UnsupportedFormat(f"Unsupported MIME type: {request.mime_type}")

        logger.info(f"[extraction] {request.mime_type} from {request.describe()}")
        text = await handler(request)
        logger.debug(f"[extraction] Returning {len(text)} chars for {request.mime_type}")
        return text


_default_extractor: Optional[TextExtractor] = None


def get_extractor() -> TextExtractor:
    """Return the shared extractor built from global settings."""
    global _default_extractor

    if _default_extractor is None:
        _default_extractor = TextExtractor()

    return _default_extractor


async def extract_text_from_file(
    source: Source,
    mime_type: str,
    extractor: Optional[TextExtractor] = None,
) -> str:
    """
    Extract text from an upload given as bytes or a file path.

    Args:
        source: File content or path to the file
        mime_type: Declared MIME type of the upload
        extractor: Dispatcher to use (defaults to the shared one)

    Returns:
        Extracted text or placeholder text
    """
    request = ExtractionRequest(source=source, mime_type=mime_type)
    return await (extractor or get_extractor()).extract(request)


def extract_text_from_file_sync(
    source: Source,
    mime_type: str,
    extractor: Optional[TextExtractor] = None,
) -> str:
    """Blocking variant of ``extract_text_from_file`` for sync callers."""
    return run_async(extract_text_from_file(source, mime_type, extractor))


__all__ = [
    "SUPPORTED_MIME_TYPES",
    "TextExtractor",
    "get_extractor",
    "extract_text_from_file",
    "extract_text_from_file_sync",
]
