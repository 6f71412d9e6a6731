"""Celery application for background extraction."""

from celery import Celery

from .config import Settings, settings

EXTRACTION_TASK = "docintel.workers.document_extraction.extract_text_from_document"


def create_celery_app(config: Settings = settings) -> Celery:
    """Build the Celery app from package settings.

    Extraction runs on its own queue. Time limits bound a single PDF parse
    or OCR run, and worker processes are recycled by memory use because
    parsers and tesseract can hold on to large allocations.
    """
    app = Celery("docintel", include=["docintel.workers.document_extraction"])

    app.conf.update(
        broker_url=config.CELERY_BROKER_URL,
        result_backend=config.CELERY_RESULT_BACKEND,
        task_serializer=config.CELERY_TASK_SERIALIZER,
        result_serializer=config.CELERY_RESULT_SERIALIZER,
        accept_content=config.CELERY_ACCEPT_CONTENT,
        timezone=config.CELERY_TIMEZONE,
        task_default_queue=config.EXTRACTION_QUEUE,
        task_routes={EXTRACTION_TASK: {"queue": config.EXTRACTION_QUEUE}},
        task_acks_late=True,
        task_reject_on_worker_lost=True,
        task_soft_time_limit=config.TASK_SOFT_TIME_LIMIT,
        task_time_limit=config.TASK_TIME_LIMIT,
        worker_concurrency=config.WORKER_CONCURRENCY,
        worker_prefetch_multiplier=config.WORKER_PREFETCH_MULTIPLIER,
        worker_max_memory_per_child=config.WORKER_MAX_MEMORY_PER_CHILD_KB,
        # Keep the JSON handler installed by setup_logging
        worker_hijack_root_logger=False,
    )
    return app


celery_app = create_celery_app()
