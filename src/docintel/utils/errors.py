"""Shared error definitions for DocIntel extraction."""


class DocIntelError(Exception):
    """Base exception for DocIntel."""
    pass


class PermanentError(DocIntelError):
    """Error that should not be retried."""
    pass


class ExtractionError(PermanentError):
    """Text extraction failed in a way the caller must see."""
    pass


class UnsupportedFormat(ExtractionError):
    """No extractor is registered for the declared MIME type."""
    pass


class UnsupportedLibraryShape(ExtractionError):
    """The PDF library exposes no entry point we know how to call."""
    pass


class TextReadFailure(ExtractionError):
    """Plain text could not be read or decoded."""
    pass


class DocumentExtractionFailure(ExtractionError):
    """DOCX extraction failed."""
    pass


class PresentationExtractionFailure(ExtractionError):
    """PPTX extraction failed."""
    pass


class WorkerTeardownFailure(DocIntelError):
    """OCR worker could not be terminated. Logged, never raised to callers."""
    pass
