import pytest

from docintel.config import Settings
from docintel.guards import exceeds_limit, ocr_available, size_in_mb


def test_size_in_mb():
    assert size_in_mb(b"") == 0
    assert size_in_mb(b"x" * (1024 * 1024)) == 1


def test_exceeds_limit_is_strict():
    one_mb = b"x" * (1024 * 1024)
    assert not exceeds_limit(one_mb, 1)
    assert exceeds_limit(one_mb + b"x", 1)


@pytest.mark.parametrize("forced", [True, False])
def test_explicit_setting_wins(forced):
    settings = Settings(OCR_AVAILABLE=forced)

    assert ocr_available(settings, environ={"VERCEL": "1"}, which=lambda name: None) is forced


@pytest.mark.parametrize("variable", ["VERCEL", "AWS_LAMBDA_FUNCTION_NAME", "NETLIFY", "FUNCTION_TARGET", "K_SERVICE"])
def test_serverless_indicators_disable_ocr(variable):
    settings = Settings(OCR_AVAILABLE=None)

    assert ocr_available(settings, environ={variable: "x"}, which=lambda name: "/usr/bin/tesseract") is False


def test_empty_indicator_is_ignored():
    settings = Settings(OCR_AVAILABLE=None)

    assert ocr_available(settings, environ={"VERCEL": ""}, which=lambda name: "/usr/bin/tesseract") is True


def test_missing_binary_disables_ocr():
    settings = Settings(OCR_AVAILABLE=None)
    looked_up = []

    def which(name):
        looked_up.append(name)
        return None

    assert ocr_available(settings, environ={}, which=which) is False
    assert looked_up == ["tesseract"]
