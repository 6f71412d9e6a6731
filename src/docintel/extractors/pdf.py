"""PDF extraction across incompatible PDF library entry points.

PDF libraries have changed their public surface between releases, so the
entry point is chosen at call time from a small ordered registry of known
shapes. Each shape has a pure predicate over the imported module and an
invoker returning the library's raw result.

Failure policy: oversized input and parser errors degrade to placeholder
text. Only an unusable library (import failure, no known shape) raises.
"""

import importlib
import inspect
import io
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from .. import placeholders
from ..classification import FailureCategory, classify_exception
from ..guards import exceeds_limit, size_in_mb
from ..schemas import ExtractionRequest
from ..utils.asyncio import run_blocking
from ..utils.errors import UnsupportedLibraryShape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PdfShape:
    """One calling convention of a PDF library."""
    name: str
    matches: Callable[[Any], bool]
    invoke: Callable[[Any, bytes], Any]


# ===== SHAPE: reader class (PyPDF2 >= 2, pypdf) =====
def _has_reader_class(module: Any) -> bool:
    return inspect.isclass(getattr(module, "PdfReader", None))


def _read_with_reader_class(module: Any, data: bytes) -> str:
    reader = module.PdfReader(io.BytesIO(data))
    try:
        if getattr(reader, "is_encrypted", False) and not reader.decrypt(""):
            raise PermissionError("PDF is encrypted and requires a password")

        text_parts = []
        for page_num, page in enumerate(reader.pages):
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
            else:
                logger.debug(f"[pdf] No text found on page {page_num + 1}")
        return "\n".join(text_parts)
    finally:
        close = getattr(reader, "close", None)
        if callable(close):
            close()


# ===== SHAPE: extract_text function (pdfminer.six high_level style) =====
def _has_extract_function(module: Any) -> bool:
    return callable(getattr(module, "extract_text", None))


def _call_extract_function(module: Any, data: bytes) -> Any:
    return module.extract_text(io.BytesIO(data))


# ===== SHAPE: module object is itself callable =====
def _is_callable_module(module: Any) -> bool:
    return callable(module)


def _call_module(module: Any, data: bytes) -> Any:
    return module(io.BytesIO(data))


PDF_SHAPES: List[PdfShape] = [
    PdfShape("reader_class", _has_reader_class, _read_with_reader_class),
    PdfShape("extract_text_function", _has_extract_function, _call_extract_function),
    PdfShape("module_callable", _is_callable_module, _call_module),
]


def resolve_shape(module: Any, shapes: Optional[List[PdfShape]] = None) -> PdfShape:
    """
    Return the first registered shape the module satisfies.

    Raises:
        UnsupportedLibraryShape: If no shape matches
    """
    for shape in shapes if shapes is not None else PDF_SHAPES:
        if shape.matches(module):
            return shape

    exported = sorted(name for name in dir(module) if not name.startswith("_"))
    logger.error(f"[pdf] Unsupported PDF library export shape: {exported[:20]}")
    raise UnsupportedLibraryShape("Unsupported PDF library export shape")


def result_text(result: Any) -> str:
    """Accept a bare string or anything carrying a ``text`` field."""
    if isinstance(result, str):
        return result
    if isinstance(result, dict):
        text = result.get("text")
    else:
        text = getattr(result, "text", None)
    return text if isinstance(text, str) else ""


_FAILURE_PLACEHOLDERS = {
    FailureCategory.TIMEOUT: placeholders.PDF_TIMEOUT,
    FailureCategory.MEMORY: placeholders.PDF_MEMORY,
    FailureCategory.ENCRYPTED: placeholders.PDF_ENCRYPTED,
}


def failure_placeholder(exc: BaseException) -> str:
    category = classify_exception(exc)
    if category in _FAILURE_PLACEHOLDERS:
        return _FAILURE_PLACEHOLDERS[category]
    return placeholders.PDF_FAILED.format(message=exc)


class PdfExtractor:
    """Extract text from PDFs with a size guard and soft failures."""

    def __init__(
        self,
        max_size_mb: float,
        backend: str = "PyPDF2",
        module_loader: Optional[Callable[[], Any]] = None,
        shapes: Optional[List[PdfShape]] = None,
    ):
        self.max_size_mb = max_size_mb
        self.backend = backend
        self.module_loader = module_loader or (lambda: importlib.import_module(self.backend))
        self.shapes = shapes

    def load_module(self) -> Any:
        try:
            return self.module_loader()
        except ImportError as e:
            logger.error(f"[pdf] PDF backend {self.backend!r} could not be imported: {e}")
            raise UnsupportedLibraryShape(
                f"PDF backend {self.backend!r} could not be imported: {e}"
            ) from e

    async def extract(self, request: ExtractionRequest) -> str:
        """
        Extract text from a PDF.

        Returns:
            Extracted text, or a placeholder for oversized, empty or
            unreadable documents

        Raises:
            UnsupportedLibraryShape: If the PDF library can't be used at all
        """
        try:
            data = await run_blocking(request.read_bytes)
        except OSError as e:
            logger.error(f"[pdf] Failed to read {request.describe()}: {e}")
            return failure_placeholder(e)

        size_mb = size_in_mb(data)
        if exceeds_limit(data, self.max_size_mb):
            logger.warning(
                f"[pdf] {size_mb:.1f}MB exceeds {self.max_size_mb}MB limit, skipping parse"
            )
            return placeholders.PDF_TOO_LARGE

        module = self.load_module()
        shape = resolve_shape(module, self.shapes)
        logger.info(f"[pdf] Using {shape.name} entry point ({size_mb:.2f}MB)")

        try:
            text = result_text(await run_blocking(shape.invoke, module, data))
        except Exception as e:
            logger.error(f"[pdf] Extraction error for {request.describe()}: {e}")
            return failure_placeholder(e)

        if not text.strip():
            logger.warning(f"[pdf] No text content found in {request.describe()}")
            return placeholders.PDF_NO_TEXT

        logger.info(f"[pdf] Extracted {len(text)} chars from {request.describe()}")
        return text
