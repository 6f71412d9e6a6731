"""DocIntel extraction - flatten uploaded documents to plain text."""

from .utils import (
    setup_logging,
    DocIntelError,
    PermanentError,
    ExtractionError,
    UnsupportedFormat,
    UnsupportedLibraryShape,
    TextReadFailure,
    DocumentExtractionFailure,
    PresentationExtractionFailure,
    WorkerTeardownFailure,
    run_async,
)
from .schemas import ExtractionRequest, DocumentExtractionJob
from .placeholders import is_placeholder
from .classification import FailureCategory, classify_message, classify_exception
from .extraction import (
    SUPPORTED_MIME_TYPES,
    TextExtractor,
    get_extractor,
    extract_text_from_file,
    extract_text_from_file_sync,
)
from .config import Settings, settings

__version__ = "0.1.0"
__all__ = [
    "setup_logging",
    "DocIntelError",
    "PermanentError",
    "ExtractionError",
    "UnsupportedFormat",
    "UnsupportedLibraryShape",
    "TextReadFailure",
    "DocumentExtractionFailure",
    "PresentationExtractionFailure",
    "WorkerTeardownFailure",
    "run_async",
    "ExtractionRequest",
    "DocumentExtractionJob",
    "is_placeholder",
    "FailureCategory",
    "classify_message",
    "classify_exception",
    "SUPPORTED_MIME_TYPES",
    "TextExtractor",
    "get_extractor",
    "extract_text_from_file",
    "extract_text_from_file_sync",
    "Settings",
    "settings",
]
