"""Tests for PPTX extraction."""

import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock

from docintel import placeholders
from docintel.extractors.presentation import (
    PresentationExtractor,
    flatten_slides,
    load_entry_point,
)
from docintel.extractors.slide_xml import extract_slides
from docintel.schemas import ExtractionRequest
from docintel.utils.errors import PresentationExtractionFailure

PPTX_MIME = "application/vnd.openxmlformats-officedocument.presentationml.presentation"
FALLBACK = "docintel.extractors.slide_xml:extract_slides"


def _request(source):
    return ExtractionRequest(source=source, mime_type=PPTX_MIME)


@pytest.mark.asyncio
@pytest.mark.parametrize("content", [b"", b"PK\x03\x04 anything", b"\x00" * 64])
async def test_buffer_returns_fixed_placeholder(content):
    """Buffers are never parsed"""
    factory = MagicMock()
    extractor = PresentationExtractor(fallback=FALLBACK, presentation_factory=factory)

    text = await extractor.extract(_request(content))

    assert text == "[PPTX file uploaded - processing not available in serverless environment]"
    assert text == placeholders.PPTX_BUFFER_UNSUPPORTED
    factory.assert_not_called()


@pytest.mark.asyncio
async def test_primary_parser_reads_real_file(pptx_path):
    extractor = PresentationExtractor(fallback=FALLBACK)

    text = await extractor.extract(_request(str(pptx_path)))

    assert text == "Quarterly Review\nRevenue up\nNext Steps"


@pytest.mark.asyncio
async def test_fallback_used_when_constructor_fails():
    """Primary constructor throws, fallback function returns slides"""
    factory = MagicMock(side_effect=TypeError("Presentation() got an unexpected keyword"))
    parse = MagicMock(return_value={"slides": ["Title", "Body"]})
    loader = MagicMock(return_value=parse)
    extractor = PresentationExtractor(
        fallback="vendor.pptx:parse",
        presentation_factory=factory,
        fallback_loader=loader,
    )

    text = await extractor.extract(_request("/uploads/deck.pptx"))

    assert text == "Title\nBody"
    loader.assert_called_once_with("vendor.pptx:parse")
    parse.assert_called_once_with("/uploads/deck.pptx")


@pytest.mark.asyncio
async def test_fallback_to_slide_xml_parser(pptx_path):
    factory = MagicMock(side_effect=KeyError("no relationship"))
    extractor = PresentationExtractor(fallback=FALLBACK, presentation_factory=factory)

    text = await extractor.extract(_request(pptx_path))

    assert text == "Quarterly Review\nRevenue up\nNext Steps"


@pytest.mark.asyncio
async def test_both_entry_points_fail():
    extractor = PresentationExtractor(fallback=FALLBACK)

    with pytest.raises(PresentationExtractionFailure) as exc_info:
        await extractor.extract(_request("/nonexistent/deck.pptx"))

    assert str(exc_info.value).startswith("PPTX extraction failed: ")


@pytest.mark.asyncio
async def test_unresolvable_fallback_is_hard_failure():
    factory = MagicMock(side_effect=ValueError("corrupt"))
    extractor = PresentationExtractor(
        fallback="no_such_module_xyz:parse",
        presentation_factory=factory,
    )

    with pytest.raises(PresentationExtractionFailure, match="no_such_module_xyz"):
        await extractor.extract(_request("/uploads/deck.pptx"))


def test_extract_slides_reads_xml_in_slide_order(pptx_path):
    result = extract_slides(str(pptx_path))

    assert result == {
        "slides": [
            {"text": "Quarterly Review\nRevenue up"},
            {"text": "Next Steps"},
        ]
    }


@pytest.mark.parametrize(
    "structure, expected",
    [
        ({"slides": [{"text": "A"}, {"text": ""}, {"notes": "x"}, {"text": "B"}]}, "A\nB"),
        (SimpleNamespace(slides=[SimpleNamespace(text="  A  ")]), "A"),
        (["one", "two"], "one\ntwo"),
        ({"slides": []}, ""),
        (None, ""),
    ],
)
def test_flatten_slides(structure, expected):
    assert flatten_slides(structure) == expected


def test_load_entry_point_variants():
    assert load_entry_point(FALLBACK) is extract_slides
    assert load_entry_point("docintel.extractors.slide_xml") is extract_slides

    with pytest.raises(ImportError):
        load_entry_point("docintel.extractors.slide_xml:missing")
