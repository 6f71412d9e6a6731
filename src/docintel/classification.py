"""Map raw parser/OCR failures onto a small set of categories.

Libraries report most failures as plain exceptions with free-form messages,
so classification is a case-insensitive substring match. Keep it here so
adapters never inspect messages themselves.

Timeout is always checked first. After that the order depends on the
caller: document parsers check memory and encryption before runtime
support, OCR checks runtime support first because a missing WebAssembly
or tesseract runtime also surfaces as allocation errors.
"""

import enum
from typing import Dict, Sequence, Tuple


class FailureCategory(str, enum.Enum):
    TIMEOUT = "timeout"
    MEMORY = "memory"
    ENCRYPTED = "encrypted"
    UNSUPPORTED_RUNTIME = "unsupported_runtime"
    GENERIC = "generic"


_NEEDLES: Dict[FailureCategory, Tuple[str, ...]] = {
    FailureCategory.TIMEOUT: ("timeout", "timed out"),
    FailureCategory.MEMORY: ("memory", "heap"),
    FailureCategory.ENCRYPTED: ("encrypt", "password"),
    FailureCategory.UNSUPPORTED_RUNTIME: (
        "wasm", "webassembly", "not installed", "not in your path", "unsupported runtime",
    ),
}

DOCUMENT_ORDER: Tuple[FailureCategory, ...] = (
    FailureCategory.TIMEOUT,
    FailureCategory.MEMORY,
    FailureCategory.ENCRYPTED,
    FailureCategory.UNSUPPORTED_RUNTIME,
)

OCR_ORDER: Tuple[FailureCategory, ...] = (
    FailureCategory.TIMEOUT,
    FailureCategory.UNSUPPORTED_RUNTIME,
    FailureCategory.MEMORY,
    FailureCategory.ENCRYPTED,
)


def classify_message(
    message: str,
    order: Sequence[FailureCategory] = DOCUMENT_ORDER,
) -> FailureCategory:
    """Classify an error message; first category in ``order`` to match wins."""
    lowered = (message or "").lower()
    for category in order:
        if any(needle in lowered for needle in _NEEDLES[category]):
            return category
    return FailureCategory.GENERIC


def classify_exception(
    exc: BaseException,
    order: Sequence[FailureCategory] = DOCUMENT_ORDER,
) -> FailureCategory:
    """
    Classify an exception.

    The message decides unless it says nothing recognisable; only then do
    ``MemoryError`` and ``TesseractNotFoundError`` count by type.
    """
    if isinstance(exc, TimeoutError):
        return FailureCategory.TIMEOUT

    category = classify_message(str(exc), order)
    if category is not FailureCategory.GENERIC:
        return category

    if isinstance(exc, MemoryError):
        return FailureCategory.MEMORY
    if _is_tesseract_missing(exc):
        return FailureCategory.UNSUPPORTED_RUNTIME
    return FailureCategory.GENERIC


def _is_tesseract_missing(exc: BaseException) -> bool:
    try:
        from pytesseract import TesseractNotFoundError
    except ImportError:
        return False
    return isinstance(exc, TesseractNotFoundError)


__all__ = [
    "FailureCategory",
    "DOCUMENT_ORDER",
    "OCR_ORDER",
    "classify_message",
    "classify_exception",
]
