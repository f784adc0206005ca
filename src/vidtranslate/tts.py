"""
Text-to-speech synthesis with OpenAI.
"""

import logging

from openai import OpenAI

from .errors import SynthesisFailed
from .languages import get_language_name

logger = logging.getLogger("vidtranslate")


def tts_speak_openai(
    client: OpenAI,
    text: str,
    model: str,
    voice: str,
    out_path: str,
    instructions: str | None = None,
) -> None:
    """Synthesize speech using OpenAI TTS into a compressed mp3 file."""
    with client.audio.speech.with_streaming_response.create(
        model=model,
        voice=voice,
        input=text,
        response_format="mp3",
        instructions=instructions,
    ) as resp:
        resp.stream_to_file(out_path)


def synthesize_speech(
    client: OpenAI,
    text: str,
    language: str,
    out_path: str,
    *,
    model: str = "gpt-4o-mini-tts",
    voice: str = "alloy",
) -> None:
    """Speak text in the given language into a compressed mp3 file."""
    instructions = f"Speak naturally in {get_language_name(language)}."
    logger.info(f"Synthesizing speech with {model} ({voice}, {language}) …")
    try:
        tts_speak_openai(client, text, model, voice, out_path, instructions=instructions)
    except Exception as e:
        logger.error(f"Speech synthesis failed: {e}")
        raise SynthesisFailed(str(e)) from e
    logger.info(f"Synthesized speech -> {out_path}")
