"""Unified configuration for the extraction package and its worker."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
import logging


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The extractor and the Celery worker share this configuration. Pass an
    explicit instance to ``TextExtractor`` to keep behaviour independent of
    process-wide state.
    """

    # ===== EXTRACTION SETTINGS =====
    MAX_PDF_SIZE_MB: float = 50
    """PDFs larger than this are not parsed; a placeholder is returned."""

    OCR_AVAILABLE: Optional[bool] = None
    """Force OCR on or off. None means detect it from the runtime environment."""

    OCR_LANGUAGE: str = "eng"
    """Tesseract language used for every OCR call."""

    PDF_BACKEND: str = "PyPDF2"
    """Importable module providing PDF text extraction."""

    PPTX_FALLBACK: str = "docintel.extractors.slide_xml:extract_slides"
    """``module:function`` used when python-pptx cannot open a presentation."""

    # ===== REDIS =====
    REDIS_URL: str = "redis://localhost:6379/0"
    """Redis connection string (Celery broker)."""

    # ===== CELERY =====
    CELERY_BROKER_URL: Optional[str] = None
    """Celery broker URL (defaults to REDIS_URL if not set)."""

    CELERY_RESULT_BACKEND: Optional[str] = None
    """Celery result backend (defaults to REDIS_URL if not set)."""

    CELERY_TASK_SERIALIZER: str = "json"
    """Celery task serializer format."""

    CELERY_RESULT_SERIALIZER: str = "json"
    """Celery result serializer format."""

    CELERY_ACCEPT_CONTENT: list = ["json"]
    """Celery accepted content types."""

    CELERY_TIMEZONE: str = "UTC"
    """Celery timezone."""

    # ===== WORKER SETTINGS =====
    EXTRACTION_QUEUE: str = "extraction"
    """Queue the extraction task is routed to and the worker consumes."""

    WORKER_CONCURRENCY: int = 2
    """Worker processes. OCR and PDF parsing are CPU and memory heavy."""

    WORKER_MAX_MEMORY_PER_CHILD_KB: int = 512000  # 500 MB
    """Recycle a worker process once its resident memory exceeds this."""

    WORKER_PREFETCH_MULTIPLIER: int = 1
    """Celery worker prefetch multiplier."""

    TASK_SOFT_TIME_LIMIT: int = 300  # 5 minutes
    """Seconds one extraction may run before it is abandoned."""

    TASK_TIME_LIMIT: int = 360  # 6 minutes
    """Celery task hard time limit in seconds."""

    # ===== LOGGING =====
    LOG_LEVEL: str = logging.getLevelName(logging.INFO)
    """Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    def __init__(self, **data):
        """Initialize settings with defaults for Celery URLs."""
        super().__init__(**data)

        # Default Celery URLs to Redis URL if not explicitly set
        if self.CELERY_BROKER_URL is None:
            self.CELERY_BROKER_URL = self.REDIS_URL
        if self.CELERY_RESULT_BACKEND is None:
            self.CELERY_RESULT_BACKEND = self.REDIS_URL


# Singleton instance
settings = Settings()

__all__ = ["Settings", "settings"]
