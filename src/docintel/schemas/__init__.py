from .requests import ExtractionRequest, DocumentExtractionJob

__all__ = ["ExtractionRequest", "DocumentExtractionJob"]
