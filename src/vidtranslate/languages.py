"""
Supported languages and source-language inference.
"""

from .errors import UnsupportedLanguage

LANGUAGE_NAMES = {
    "en": "English",
    "hi": "Hindi",
    "ru": "Russian",
    "de": "German",
    "fr": "French",
    "es": "Spanish",
    "it": "Italian",
    "pt": "Portuguese",
    "ja": "Japanese",
    "ko": "Korean",
    "zh": "Chinese",
    "ar": "Arabic",
}


def get_language_name(language_code: str) -> str:
    """Get human-readable language name from language code."""
    return LANGUAGE_NAMES.get(language_code.lower(), language_code.upper())


def resolve_target_language(target: str | None, languages: tuple[str, ...], default: str) -> str:
    """Apply the default and check the target against the configured set."""
    code = (target or default).strip().lower()
    if code not in languages:
        raise UnsupportedLanguage(
            f"Unsupported target language '{code}'. Choose one of: {', '.join(languages)}"
        )
    return code


def infer_source_language(
    target: str, languages: tuple[str, ...], source: str | None = None
) -> str:
    """
    Pick the spoken language of the input.

    An explicit source wins. Otherwise the source can only be inferred while
    exactly two languages are configured: it is the one that is not the target.
    """
    if source:
        code = source.strip().lower()
        if code not in languages:
            raise UnsupportedLanguage(
                f"Unsupported source language '{code}'. Choose one of: {', '.join(languages)}"
            )
    else:
        if len(languages) != 2:
            raise UnsupportedLanguage(
                "Source language can only be inferred when exactly two languages are configured "
                f"(configured: {', '.join(languages)}); pass it explicitly."
            )
        code = languages[1] if languages[0] == target else languages[0]

    if code == target:
        raise UnsupportedLanguage(f"Source and target language are both '{code}'.")
    return code
