"""Image OCR with a single-use tesseract worker per call."""

import inspect
import io
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable, Union

import pytesseract
from PIL import Image

from .. import placeholders
from ..classification import OCR_ORDER, FailureCategory, classify_exception
from ..schemas import ExtractionRequest
from ..utils.asyncio import run_blocking
from ..utils.errors import WorkerTeardownFailure

logger = logging.getLogger(__name__)


class TesseractWorker:
    """Runs tesseract through pytesseract for one locale.

    Holds the images it opened so ``terminate`` can release them.
    """

    def __init__(self, language: str = "eng"):
        self.language = language
        self._images = []

    def recognize(self, source: Union[bytes, str]) -> str:
        image = Image.open(io.BytesIO(source) if isinstance(source, bytes) else source)
        self._images.append(image)
        return pytesseract.image_to_string(image, lang=self.language)

    def terminate(self) -> None:
        while self._images:
            self._images.pop().close()


@asynccontextmanager
async def ocr_worker(factory: Callable[[str], Any], language: str) -> AsyncIterator[Any]:
    """
    Create a worker, yield it, and terminate it exactly once on exit.

    Termination errors are logged and dropped so they never replace the
    recognition result or the error that ended the block.
    """
    worker = factory(language)
    if inspect.isawaitable(worker):
        worker = await worker

    try:
        yield worker
    finally:
        try:
            result = worker.terminate()
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            failure = WorkerTeardownFailure(f"OCR worker termination failed: {e}")
            failure.__cause__ = e
            logger.warning(f"[ocr] {failure}", exc_info=failure)


def recognized_text(result: Any) -> str:
    """Pull text out of a recognition result (str, dict or object)."""
    if isinstance(result, str):
        return result
    data = result.get("data") if isinstance(result, dict) else getattr(result, "data", None)
    if data is not None:
        text = data.get("text") if isinstance(data, dict) else getattr(data, "text", None)
    elif isinstance(result, dict):
        text = result.get("text")
    else:
        text = getattr(result, "text", None)
    return text if isinstance(text, str) else ""


_FAILURE_PLACEHOLDERS = {
    FailureCategory.UNSUPPORTED_RUNTIME: placeholders.IMAGE_RUNTIME_UNSUPPORTED,
    FailureCategory.TIMEOUT: placeholders.IMAGE_TIMEOUT,
    FailureCategory.MEMORY: placeholders.IMAGE_MEMORY,
}


def failure_placeholder(exc: BaseException) -> str:
    category = classify_exception(exc, OCR_ORDER)
    if category in _FAILURE_PLACEHOLDERS:
        return _FAILURE_PLACEHOLDERS[category]
    return placeholders.IMAGE_FAILED.format(message=exc)


class ImageExtractor:
    """OCR images, degrading to placeholders when OCR can't run."""

    def __init__(
        self,
        ocr_available: bool,
        language: str = "eng",
        worker_factory: Callable[[str], Any] = TesseractWorker,
    ):
        self.ocr_available = ocr_available
        self.language = language
        self.worker_factory = worker_factory

    async def extract(self, request: ExtractionRequest) -> str:
        """
        Recognize text in an image.

        Returns:
            Recognized text, or a placeholder when OCR is unavailable,
            finds nothing, or fails
        """
        if not self.ocr_available:
            logger.info("[ocr] OCR unavailable in this environment, returning placeholder")
            return placeholders.IMAGE_OCR_UNAVAILABLE

        source = request.source if request.is_buffer else str(request.source)
        try:
            async with ocr_worker(self.worker_factory, self.language) as worker:
                result = await run_blocking(worker.recognize, source)
            text = recognized_text(result).strip()
        except Exception as e:
            logger.error(f"[ocr] Recognition failed for {request.describe()}: {e}")
            return failure_placeholder(e)

        if not text:
            logger.warning(f"[ocr] No text detected in {request.describe()}")
            return placeholders.IMAGE_NO_TEXT

        logger.info(f"[ocr] Recognized {len(text)} chars from {request.describe()}")
        return text
