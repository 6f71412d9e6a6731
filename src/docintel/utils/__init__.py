from .errors import (
    DocIntelError,
    PermanentError,
    ExtractionError,
    UnsupportedFormat,
    UnsupportedLibraryShape,
    TextReadFailure,
    DocumentExtractionFailure,
    PresentationExtractionFailure,
    WorkerTeardownFailure,
)
from .logging import setup_logging, JSONFormatter
from .asyncio import run_async, run_blocking

__all__ = [
    "DocIntelError",
    "PermanentError",
    "ExtractionError",
    "UnsupportedFormat",
    "UnsupportedLibraryShape",
    "TextReadFailure",
    "DocumentExtractionFailure",
    "PresentationExtractionFailure",
    "WorkerTeardownFailure",
    "setup_logging",
    "JSONFormatter",
    "run_async",
    "run_blocking",
]
