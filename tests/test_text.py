import pytest

from docintel.extractors.text import extract_txt
from docintel.schemas import ExtractionRequest
from docintel.utils.errors import TextReadFailure


def _request(source):
    return ExtractionRequest(source=source, mime_type="text/plain")


@pytest.mark.asyncio
async def test_extract_txt_buffer():
    """Test buffer content is returned exactly"""
    assert await extract_txt(_request(b"hello")) == "hello"


@pytest.mark.asyncio
async def test_extract_txt_path(tmp_path):
    """Test extracting from a path"""
    txt_path = tmp_path / "notes.txt"
    txt_path.write_text("Test TXT Content\nSecond line", encoding="utf-8")

    text = await extract_txt(_request(str(txt_path)))

    assert text == "Test TXT Content\nSecond line"


@pytest.mark.asyncio
async def test_extract_txt_path_read_off_event_loop(tmp_path, mocker):
    """Test file reads go through the thread pool helper"""
    from docintel.utils.asyncio import run_blocking

    txt_path = tmp_path / "threaded.txt"
    txt_path.write_text("off loop", encoding="utf-8")
    offload = mocker.patch("docintel.extractors.text.run_blocking", side_effect=run_blocking)

    assert await extract_txt(_request(txt_path)) == "off loop"

    offload.assert_awaited_once()
    func, encoding = offload.call_args[0]
    assert func.__name__ == "read_text"
    assert encoding == "utf-8"


@pytest.mark.asyncio
async def test_extract_txt_empty_buffer():
    assert await extract_txt(_request(b"")) == ""


@pytest.mark.asyncio
async def test_extract_txt_utf8_multibyte():
    assert await extract_txt(_request("Zürich – 東京".encode("utf-8"))) == "Zürich – 東京"


@pytest.mark.asyncio
async def test_extract_txt_invalid_utf8():
    """Test undecodable bytes raise TextReadFailure"""
    with pytest.raises(TextReadFailure, match="TXT extraction failed"):
        await extract_txt(_request(b"\xff\xfe\xfa"))


@pytest.mark.asyncio
async def test_extract_txt_not_found():
    """Test missing file raises TextReadFailure"""
    with pytest.raises(TextReadFailure) as exc_info:
        await extract_txt(_request("/nonexistent/file.txt"))

    assert isinstance(exc_info.value.__cause__, FileNotFoundError)
