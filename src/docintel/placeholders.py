"""Stand-in texts returned when extraction degrades instead of failing.

Placeholders are ordinary strings. Callers store and display them like real
text; ``is_placeholder`` is the only way to tell them apart.
"""

PDF_TOO_LARGE = "[Large PDF uploaded - text extraction may be limited in serverless environment...]"
PDF_NO_TEXT = "[PDF processed - no text content found]"
PDF_TIMEOUT = "[PDF uploaded - text extraction timed out]"
PDF_MEMORY = "[PDF uploaded - text extraction failed due to memory limits]"
PDF_ENCRYPTED = "[PDF uploaded - file appears to be password-protected]"
PDF_FAILED = "[PDF uploaded - text extraction failed: {message}]"

PPTX_BUFFER_UNSUPPORTED = "[PPTX file uploaded - processing not available in serverless environment]"

IMAGE_OCR_UNAVAILABLE = "[Image uploaded - OCR processing not available in serverless environment]"
IMAGE_NO_TEXT = "[Image processed - no text detected]"
IMAGE_RUNTIME_UNSUPPORTED = "[Image uploaded - OCR not supported in serverless environment]"
IMAGE_TIMEOUT = "[Image uploaded - OCR processing timed out]"
IMAGE_MEMORY = "[Image uploaded - OCR failed due to memory limits]"
IMAGE_FAILED = "[Image uploaded - OCR failed: {message}]"

_PREFIXES = (
    "[Large PDF uploaded - ",
    "[PDF processed - ",
    "[PDF uploaded - ",
    "[PPTX file uploaded - ",
    "[Image uploaded - ",
    "[Image processed - ",
)


def is_placeholder(text: str) -> bool:
    """Return True if ``text`` is one of the placeholders above."""
    return bool(text) and text.endswith("]") and text.startswith(_PREFIXES)
