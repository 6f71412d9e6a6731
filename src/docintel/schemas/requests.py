"""Type-safe request and job payload definitions."""

from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator


class ExtractionRequest(BaseModel):
    """A document to flatten to text.

    ``source`` is either the raw bytes of the upload or a path to it. String
    sources are treated as paths. The buffer is only read, never modified.
    """

    model_config = ConfigDict(frozen=True)

    source: Union[Path, bytes]
    mime_type: str

    @field_validator("source", mode="before")
    @classmethod
    def copy_buffer_views(cls, v):
        if isinstance(v, (bytearray, memoryview)):
            return bytes(v)
        return v

    @property
    def is_buffer(self) -> bool:
        return isinstance(self.source, bytes)

    def read_bytes(self) -> bytes:
        """Return the buffer, reading it from disk for path sources."""
        if self.is_buffer:
            return self.source
        return self.source.read_bytes()

    def describe(self) -> str:
        if self.is_buffer:
            return f"buffer ({len(self.source)} bytes)"
        return str(self.source)


class DocumentExtractionJob(BaseModel):
    """Job payload for background text extraction."""
    file_path: str
    mime_type: str
    document_id: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "file_path": "/tmp/uploads/report.pdf",
                "mime_type": "application/pdf",
                "document_id": "doc_123",
            }
        }
    )
