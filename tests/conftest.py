"""Test configuration and fixtures."""

import pytest
from unittest.mock import MagicMock

from docintel.config import Settings


@pytest.fixture
def test_settings():
    """Settings that never touch the host environment."""
    return Settings(OCR_AVAILABLE=False, MAX_PDF_SIZE_MB=50)


@pytest.fixture
def docx_path(tmp_path):
    """Create a DOCX file with a single paragraph."""
    from docx import Document

    path = tmp_path / "report.docx"
    doc = Document()
    doc.add_paragraph("Report Body")
    doc.save(str(path))
    return path


@pytest.fixture
def pptx_path(tmp_path):
    """Create a two-slide PPTX file."""
    from pptx import Presentation

    path = tmp_path / "deck.pptx"
    prs = Presentation()
    layout = prs.slide_layouts[1]  # Title and Content

    slide = prs.slides.add_slide(layout)
    slide.shapes.title.text = "Quarterly Review"
    slide.placeholders[1].text = "Revenue up"

    slide = prs.slides.add_slide(layout)
    slide.shapes.title.text = "Next Steps"

    prs.save(str(path))
    return path


class FakeWorker:
    """OCR worker double that counts terminations."""

    def __init__(self, text="", error=None, terminate_error=None):
        self.text = text
        self.error = error
        self.terminate_error = terminate_error
        self.recognized = []
        self.terminate_calls = 0

    def recognize(self, source):
        self.recognized.append(source)
        if self.error is not None:
            raise self.error
        return {"data": {"text": self.text}}

    def terminate(self):
        self.terminate_calls += 1
        if self.terminate_error is not None:
            raise self.terminate_error


@pytest.fixture
def fake_worker_factory():
    """Return a builder producing (factory_mock, worker)."""
    def build(**kwargs):
        worker = FakeWorker(**kwargs)
        return MagicMock(return_value=worker), worker
    return build
