from docintel import utils
from docintel.config import Settings
from docintel.utils import errors


def test_settings_expose_only_extraction_and_worker_fields():
    fields = set(Settings.model_fields)

    assert {"MAX_PDF_SIZE_MB", "OCR_AVAILABLE", "OCR_LANGUAGE", "PDF_BACKEND", "PPTX_FALLBACK"} <= fields
    assert "ENV" not in fields
    assert "DEBUG" not in fields


def test_celery_urls_default_to_redis():
    config = Settings(REDIS_URL="redis://broker:6379/2")

    assert config.CELERY_BROKER_URL == "redis://broker:6379/2"
    assert config.CELERY_RESULT_BACKEND == "redis://broker:6379/2"


def test_error_taxonomy_has_no_retryable_error():
    assert not hasattr(errors, "RetryableError")
    assert "RetryableError" not in utils.__all__
    assert issubclass(errors.ExtractionError, errors.PermanentError)
