"""Worker entry point: ``python -m docintel [extra celery worker options]``."""

import sys
from typing import List, Optional

from .celery_app import celery_app
from .config import Settings, settings
from .utils import setup_logging


def worker_argv(config: Settings = settings, extra: Optional[List[str]] = None) -> List[str]:
    """Celery worker command line derived from settings."""
    return [
        "worker",
        f"--loglevel={config.LOG_LEVEL}",
        f"--concurrency={config.WORKER_CONCURRENCY}",
        f"--queues={config.EXTRACTION_QUEUE}",
    ] + list(extra or [])


def main(argv: Optional[List[str]] = None) -> None:
    setup_logging("docintel")
    celery_app.worker_main(worker_argv(extra=sys.argv[1:] if argv is None else argv))


if __name__ == "__main__":
    main()
