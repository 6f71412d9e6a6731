"""PPTX extraction.

python-pptx is the primary entry point. When it refuses a file, a
function-style fallback parser is looked up by import path and called with
the same path. Both return something with slides; slide text is flattened
one slide per line.
"""

import importlib
import logging
from typing import Any, Callable, Iterable, Optional

from pptx import Presentation

from .. import placeholders
from ..schemas import ExtractionRequest
from ..utils.asyncio import run_blocking
from ..utils.errors import PresentationExtractionFailure

logger = logging.getLogger(__name__)


def load_entry_point(reference: str) -> Callable[[str], Any]:
    """
    Resolve a ``module:function`` reference to a callable.

    Without a function name the module's ``default`` attribute is used, or
    the module itself if that is callable.
    """
    module_name, _, attr = reference.partition(":")
    module = importlib.import_module(module_name)
    target = getattr(module, attr or "default", None)
    if target is None and callable(module):
        target = module
    if not callable(target):
        raise ImportError(f"No callable entry point at {reference!r}")
    return target


def _slides_of(structure: Any) -> Iterable[Any]:
    if structure is None:
        return []
    if isinstance(structure, dict):
        return structure.get("slides") or []
    if isinstance(structure, (list, tuple)):
        return structure
    return getattr(structure, "slides", None) or []


def _slide_text(slide: Any) -> str:
    if isinstance(slide, str):
        return slide
    if isinstance(slide, dict):
        return slide.get("text") or ""

    text = getattr(slide, "text", None)
    if isinstance(text, str):
        return text

    # python-pptx slide
    shapes = getattr(slide, "shapes", None)
    if shapes is None:
        return ""
    parts = []
    for shape in shapes:
        if getattr(shape, "has_text_frame", False) and shape.text_frame.text.strip():
            parts.append(shape.text_frame.text.strip())
    return "\n".join(parts)


def flatten_slides(structure: Any) -> str:
    """Join the text of every slide that has any, one per line."""
    texts = [_slide_text(slide) for slide in _slides_of(structure)]
    return "\n".join(t for t in texts if t).strip()


class PresentationExtractor:
    """Extract slide text from PPTX files on disk."""

    def __init__(
        self,
        fallback: str,
        presentation_factory: Callable[[str], Any] = Presentation,
        fallback_loader: Callable[[str], Callable[[str], Any]] = load_entry_point,
    ):
        self.fallback = fallback
        self.presentation_factory = presentation_factory
        self.fallback_loader = fallback_loader

    async def extract(self, request: ExtractionRequest) -> str:
        """
        Extract text from a presentation.

        Buffers are not parsed at all; they get a fixed placeholder.

        Raises:
            PresentationExtractionFailure: If neither entry point can read the file
        """
        if request.is_buffer:
            logger.warning("[pptx] Buffer input is not processed, returning placeholder")
            return placeholders.PPTX_BUFFER_UNSUPPORTED

        path = str(request.source)
        try:
            structure = await self._open(path)
            text = flatten_slides(structure)
        except Exception as e:
            logger.error(f"[pptx] Failed to extract {path}: {e}")
            raise PresentationExtractionFailure(f"PPTX extraction failed: {e}") from e

        logger.info(f"[pptx] Extracted {len(text)} chars from {path}")
        return text

    async def _open(self, path: str) -> Optional[Any]:
        try:
            return await run_blocking(self.presentation_factory, path)
        except Exception as e:
            logger.warning(f"[pptx] Primary parser failed ({e}); trying {self.fallback}")

        parse = self.fallback_loader(self.fallback)
        return await run_blocking(parse, path)
