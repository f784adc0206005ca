"""
Failure taxonomy for the translation pipeline.

Every failure reaching the caller is a ``DubbingError`` subclass tagged with a
stable ``code`` and the HTTP status the upload endpoint answers with.
"""


class DubbingError(Exception):
    """Base error for the video translation pipeline."""

    code = "unclassified"
    status_code = 500

    def __init__(self, message: str, *, stage: str | None = None) -> None:
        super().__init__(message)
        self.stage = stage


class InputMissing(DubbingError):
    """Raised when no video content was supplied."""

    code = "input_missing"
    status_code = 400


class UnsupportedLanguage(DubbingError):
    """Raised when a language is outside the configured set."""

    code = "unsupported_language"
    status_code = 400


class ConfigurationMissing(DubbingError):
    """Raised when a required credential is absent."""

    code = "configuration_missing"


class MediaExtractionFailed(DubbingError):
    code = "media_extraction_failed"


class TranscriptionFailed(DubbingError):
    code = "transcription_failed"


class TranslationFailed(DubbingError):
    code = "translation_failed"


class SynthesisFailed(DubbingError):
    code = "synthesis_failed"


class RemuxFailed(DubbingError):
    code = "remux_failed"


class UnclassifiedFailure(DubbingError):
    """Catch-all; the message of the underlying exception is preserved."""

    code = "unclassified"


class MediaToolError(RuntimeError):
    """Raised when ffmpeg/ffprobe exits non-zero or cannot be started."""

    def __init__(self, message: str, output: str = "") -> None:
        super().__init__(message)
        self.output = output
