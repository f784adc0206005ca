"""
Speech-to-text transcription with the OpenAI Whisper API.
"""

import logging

from openai import OpenAI, OpenAIError

from .errors import TranscriptionFailed

logger = logging.getLogger("vidtranslate")


def _text_from_response(resp) -> str:
    text = getattr(resp, "text", None)
    if text is None and isinstance(resp, dict):
        text = resp.get("text")
    if text is None and isinstance(resp, str):
        text = resp
    return str(text or "").strip()


def transcribe_whisper_api(
    client: OpenAI, wav_path: str, model: str = "whisper-1", language: str | None = None
) -> str:
    """Transcribe a wave file; an empty transcript is a failure, not silence."""
    try:
        with open(wav_path, "rb") as f:
            logger.info(f"Transcribing with {model} (language: {language or 'auto'}) …")
            kwargs = {
                "model": model,
                "file": f,
                "response_format": "json",
            }
            if language:
                kwargs["language"] = language
            resp = client.audio.transcriptions.create(**kwargs)
    except OpenAIError as e:
        logger.error(f"Transcription failed: {e}")
        raise TranscriptionFailed(f"Transcription failed: {e}") from e

    text = _text_from_response(resp)
    if not text:
        raise TranscriptionFailed("Transcription returned empty text.")
    logger.info(f"Transcript: {len(text)} characters")
    return text
