"""Pre-flight checks run before expensive extraction work starts."""

import logging
import os
import shutil
from typing import Callable, Mapping, Optional

logger = logging.getLogger(__name__)

BYTES_PER_MB = 1024 * 1024

# Environment variables set by hosted function runtimes that cannot run
# the tesseract binary.
SERVERLESS_INDICATORS = (
    "VERCEL",
    "AWS_LAMBDA_FUNCTION_NAME",
    "NETLIFY",
    "FUNCTION_TARGET",
    "K_SERVICE",
)


# ===== SIZE GUARD =====
def size_in_mb(data: bytes) -> float:
    return len(data) / BYTES_PER_MB


def exceeds_limit(data: bytes, max_mb: float) -> bool:
    """Return True if ``data`` is larger than ``max_mb`` megabytes."""
    return size_in_mb(data) > max_mb


# ===== OCR AVAILABILITY =====
def ocr_available(
    settings,
    environ: Optional[Mapping[str, str]] = None,
    which: Callable[[str], Optional[str]] = shutil.which,
) -> bool:
    """
    Decide whether native OCR can run in this process.

    An explicit ``settings.OCR_AVAILABLE`` always wins. Otherwise OCR is
    considered unavailable inside known serverless runtimes or when the
    tesseract binary is not on PATH.

    Args:
        settings: Settings instance
        environ: Environment mapping (defaults to os.environ)
        which: Binary lookup function

    Returns:
        True if OCR should be attempted
    """
    if settings.OCR_AVAILABLE is not None:
        return settings.OCR_AVAILABLE

    environ = os.environ if environ is None else environ
    flagged = [name for name in SERVERLESS_INDICATORS if environ.get(name)]
    if flagged:
        logger.info(f"[ocr_available] Serverless runtime detected ({', '.join(flagged)}); OCR disabled")
        return False

    if which("tesseract") is None:
        logger.info("[ocr_available] tesseract binary not found on PATH; OCR disabled")
        return False

    return True


__all__ = ["BYTES_PER_MB", "SERVERLESS_INDICATORS", "size_in_mb", "exceeds_limit", "ocr_available"]
