"""
Tests for the upload endpoint and the form page.
"""

import asyncio
import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.exceptions import RequestValidationError
from fastapi.testclient import TestClient

from vidtranslate.api import app, get_translator, validation_error_handler
from vidtranslate.errors import ConfigurationMissing, InputMissing, MediaExtractionFailed


@pytest.fixture
def translator():
    mock = MagicMock()
    mock.translate.return_value = SimpleNamespace(url="data:video/mp4;base64,AAAA")
    app.dependency_overrides[get_translator] = lambda: mock
    yield mock
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


def test_index_serves_form(client):
    response = client.get("/")
    assert response.status_code == 200
    assert 'name="targetLang"' in response.text
    assert "/api/translate" in response.text


def test_translate_success(client, translator):
    files = {"video": ("clip.mp4", b"fake-video", "video/mp4")}
    response = client.post("/api/translate", files=files, data={"targetLang": "en"})

    assert response.status_code == 200
    assert response.json() == {"url": "data:video/mp4;base64,AAAA"}
    args, kwargs = translator.translate.call_args
    assert args == (b"fake-video", "en")
    assert kwargs["filename"] == "clip.mp4"


def test_target_lang_omitted(client, translator):
    files = {"video": ("clip.mp4", b"fake-video", "video/mp4")}
    response = client.post("/api/translate", files=files)
    assert response.status_code == 200
    assert translator.translate.call_args.args == (b"fake-video", None)


def test_missing_file(client, translator):
    response = client.post("/api/translate", data={"targetLang": "hi"})
    assert response.status_code == 400
    assert response.json()["code"] == InputMissing.code
    translator.translate.assert_not_called()


@pytest.mark.parametrize(
    "error, status",
    [
        (MediaExtractionFailed("Audio extraction failed: ffmpeg failed with code 1"), 500),
        (ConfigurationMissing("OPENAI_API_KEY is not set."), 500),
        (InputMissing("No video file provided"), 400),
    ],
)
def test_pipeline_errors_become_json(client, translator, error, status):
    translator.translate.side_effect = error
    files = {"video": ("clip.mp4", b"fake-video", "video/mp4")}
    response = client.post("/api/translate", files=files)

    assert response.status_code == status
    assert response.json() == {"error": str(error), "code": error.code}


def test_get_not_allowed(client):
    response = client.get("/api/translate")
    assert response.status_code == 405
    assert "error" in response.json()


def test_validation_errors_use_error_shape():
    """Request validation failures are rendered like every other failure."""
    exc = RequestValidationError(
        [{"type": "missing", "loc": ("body", "targetLang"), "msg": "Field required", "input": None}]
    )
    response = asyncio.run(validation_error_handler(MagicMock(), exc))

    assert response.status_code == 422
    body = json.loads(response.body)
    assert body["code"] == "invalid_request"
    assert "body.targetLang: Field required" in body["error"]
    assert "detail" not in body
