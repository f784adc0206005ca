"""
Shared fixtures: a config rooted in tmp_path and stubbed pipeline stages.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from vidtranslate.config import PipelineConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of the tests."""
    for name in (
        "OPENAI_API_KEY",
        "FFMPEG_PATH",
        "FFPROBE_PATH",
        "DEFAULT_TARGET_LANG",
        "SUPPORTED_LANGUAGES",
        "WORKSPACE_ROOT",
        "OPENAI_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config(tmp_path):
    return PipelineConfig(openai_api_key="test-key", workspace_root=str(tmp_path / "work"))


@pytest.fixture
def stages(monkeypatch):
    """Replace every external call made by the orchestrator with a recording fake."""
    calls: list[str] = []
    stubs = MagicMock()

    def fake_extract(input_video, out_wav, **kwargs):
        calls.append("extract")
        assert Path(input_video).read_bytes()
        Path(out_wav).write_bytes(b"RIFF")

    def fake_transcribe(client, wav_path, **kwargs):
        calls.append("transcribe")
        stubs.transcribe_kwargs = kwargs
        return "hello"

    def fake_translate(client, text, source, target, **kwargs):
        calls.append("translate")
        stubs.translate_args = (text, source, target)
        return "नमस्ते"

    def fake_synthesize(client, text, language, out_path, **kwargs):
        calls.append("synthesize")
        stubs.synthesize_args = (text, language)
        Path(out_path).write_bytes(b"ID3")

    def fake_mux(input_video, audio_path, output_video, **kwargs):
        calls.append("remux")
        Path(output_video).write_bytes(b"dubbed-video")

    def fake_duration(path, **kwargs):
        return 1200

    monkeypatch.setattr("vidtranslate.pipeline.extract_audio", fake_extract)
    monkeypatch.setattr("vidtranslate.pipeline.transcribe_whisper_api", fake_transcribe)
    monkeypatch.setattr("vidtranslate.pipeline.translate_text", fake_translate)
    monkeypatch.setattr("vidtranslate.pipeline.synthesize_speech", fake_synthesize)
    monkeypatch.setattr("vidtranslate.pipeline.mux_audio_to_video", fake_mux)
    monkeypatch.setattr("vidtranslate.pipeline.get_media_duration_ms", fake_duration)
    stubs.calls = calls
    return stubs
