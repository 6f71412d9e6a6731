"""DOCX extraction using python-docx."""

import io
import logging

from docx import Document

from ..schemas import ExtractionRequest
from ..utils.asyncio import run_blocking
from ..utils.errors import DocumentExtractionFailure

logger = logging.getLogger(__name__)


def _docx_text(source) -> str:
    doc = Document(source)
    text_parts = [para.text for para in doc.paragraphs if para.text.strip()]

    for table in doc.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if cells:
                text_parts.append("\t".join(cells))

    return "\n".join(text_parts)


async def extract_docx(request: ExtractionRequest) -> str:
    """
    Extract raw text from a DOCX document.

    Buffers are wrapped in a file object, paths are handed to python-docx
    as-is. There is no degraded mode: every failure reaches the caller.

    Args:
        request: Buffer or path source

    Returns:
        Paragraph text followed by table text, newline separated

    Raises:
        DocumentExtractionFailure: If the document can't be parsed
    """
    source = io.BytesIO(request.source) if request.is_buffer else str(request.source)

    try:
        text = await run_blocking(_docx_text, source)
    except Exception as e:
        logger.error(f"[docx] Failed to extract {request.describe()}: {e}")
        raise DocumentExtractionFailure(f"DOCX extraction failed: {e}") from e

    logger.info(f"[docx] Extracted {len(text)} chars from {request.describe()}")
    return text
