"""Background text extraction task."""

import logging
from celery import Task
from celery.exceptions import SoftTimeLimitExceeded
from pydantic import ValidationError
from ..celery_app import EXTRACTION_TASK, celery_app
from ..config import settings
from ..extraction import get_extractor
from ..placeholders import is_placeholder
from ..schemas import DocumentExtractionJob, ExtractionRequest
from ..utils import PermanentError, run_async

logger = logging.getLogger(__name__)


class CallbackTask(Task):
    """Task with error handling callback."""

    def on_failure(self, exc, task_id, args, kwargs, einfo):
        """Called when task fails."""
        logger.error(f"Task {task_id} failed: {exc}", exc_info=einfo.exc_info)


@celery_app.task(
    base=CallbackTask,
    bind=True,
    max_retries=3,
    name=EXTRACTION_TASK,
)
def extract_text_from_document(self, job_payload: dict) -> dict:
    """Extract text from an uploaded file on shared storage."""
    async def async_extract():
        try:
            job = DocumentExtractionJob(**job_payload)
        except ValidationError as e:
            error_msg = f"Invalid job payload: {e}"
            logger.error(f"[extract_text] {error_msg}")
            raise PermanentError(error_msg) from e

        logger.info(f"[extract_text] Starting for document {job.document_id} ({job.mime_type})")
        request = ExtractionRequest(source=job.file_path, mime_type=job.mime_type)
        text = await get_extractor().extract(request)

        logger.info(f"[extract_text] Extracted {len(text)} chars for document {job.document_id}")
        return {
            "status": "success",
            "document_id": job.document_id,
            "text_length": len(text),
            "placeholder": is_placeholder(text),
            "text": text,
        }

    try:
        return run_async(async_extract())
    except PermanentError as e:
        logger.error(f"[extract_text] Permanent error (no retry): {e}")
        raise
    except SoftTimeLimitExceeded as e:
        error_msg = f"Extraction exceeded the {settings.TASK_SOFT_TIME_LIMIT}s time limit"
        logger.error(f"[extract_text] {error_msg} for document {job_payload.get('document_id')}")
        raise PermanentError(error_msg) from e
    except Exception as e:
        error_type = type(e).__name__
        error_msg = f"Unexpected error ({error_type}): {str(e)}"
        logger.error(
            f"[extract_text] {error_msg} for document {job_payload.get('document_id')}",
            exc_info=True
        )
        # Retry with exponential backoff (60s first retry)
        logger.info(f"[extract_text] Retrying task (attempt {self.request.retries + 1}/3)")
        raise self.retry(exc=e, countdown=60)
