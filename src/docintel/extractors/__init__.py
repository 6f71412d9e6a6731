"""Per-format text extractors."""

from .text import extract_txt
from .document import extract_docx
from .presentation import PresentationExtractor, flatten_slides, load_entry_point
from .pdf import PdfExtractor, PdfShape, PDF_SHAPES, resolve_shape
from .image import ImageExtractor, TesseractWorker, ocr_worker

__all__ = [
    "extract_txt",
    "extract_docx",
    "PresentationExtractor",
    "flatten_slides",
    "load_entry_point",
    "PdfExtractor",
    "PdfShape",
    "PDF_SHAPES",
    "resolve_shape",
    "ImageExtractor",
    "TesseractWorker",
    "ocr_worker",
]
