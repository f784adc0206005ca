"""
Translation of transcripts between the supported languages using OpenAI GPT.
"""

import logging

from openai import OpenAI, OpenAIError

from .errors import TranslationFailed
from .languages import get_language_name

logger = logging.getLogger("vidtranslate")

SYSTEM_PROMPT = (
    "You are a professional translator for video voice-overs. "
    "Always provide accurate, natural translations that read well when spoken aloud."
)


def build_prompt(text: str, source_language: str, target_language: str) -> str:
    """Prompt asking for plain-text output only."""
    return f"""Translate the following text from {get_language_name(source_language)} to {get_language_name(target_language)}.
Maintain the original tone, style, and meaning.
Return only the translated text as plain text, without explanations, quotes or formatting.

Text to translate:
{text}"""


def translate_text(
    client: OpenAI,
    text: str,
    source_language: str,
    target_language: str,
    model: str = "gpt-4o-mini",
) -> str:
    """
    Translate text from the source to the target language.

    Args:
        client: OpenAI client instance
        text: Transcript to translate
        source_language: Language code of the transcript
        target_language: Language code to translate into
        model: GPT model to use for translation

    Returns:
        Translated plain text (never empty)

    Raises:
        TranslationFailed: the API call failed or returned no text
    """
    try:
        logger.info(f"Translating text ({source_language} -> {target_language}) using {model}...")
        response = client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_prompt(text, source_language, target_language)},
            ],
            temperature=0.1,  # Low temperature for consistent translation
            max_tokens=4000,
        )
    except OpenAIError as e:
        logger.error(f"Translation failed: {e}")
        raise TranslationFailed(f"Translation failed: {e}") from e

    choices = getattr(response, "choices", None) or []
    content = choices[0].message.content if choices else None
    translated_text = (content or "").strip()
    if not translated_text:
        raise TranslationFailed("Translation returned empty text.")

    logger.info(f"Translation completed: {len(text)} -> {len(translated_text)} characters")
    return translated_text
