"""Plain text extraction."""

import logging

from ..schemas import ExtractionRequest
from ..utils.asyncio import run_blocking
from ..utils.errors import TextReadFailure

logger = logging.getLogger(__name__)


async def extract_txt(request: ExtractionRequest) -> str:
    """
    Decode a plain text upload as UTF-8.

    Args:
        request: Buffer or path source

    Returns:
        File content

    Raises:
        TextReadFailure: If the file can't be read or isn't valid UTF-8
    """
    try:
        if request.is_buffer:
            text = request.source.decode("utf-8")
        else:
            text = await run_blocking(request.source.read_text, "utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"[txt] Failed to read {request.describe()}: {e}")
        raise TextReadFailure(f"TXT extraction failed: {e}") from e

    logger.info(f"[txt] Extracted {len(text)} chars from {request.describe()}")
    return text
