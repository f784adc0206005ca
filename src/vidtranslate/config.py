"""
Pipeline configuration loaded from the environment (and an optional .env file).
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .errors import ConfigurationMissing

DEFAULT_LANGUAGES = ("en", "hi")


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration."""
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = logging.DEBUG if verbose else getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def load_env(env_path: str | None = None) -> None:
    """Load a .env file from the given path, the project root or the current directory."""
    if env_path:
        load_dotenv(env_path)
        return
    project_root = Path(__file__).parent.parent.parent
    candidate = project_root / ".env"
    if candidate.exists():
        load_dotenv(candidate)
    else:
        load_dotenv()


@dataclass
class PipelineConfig:
    """Explicit settings handed to the orchestrator at construction."""

    openai_api_key: str | None = None
    ffmpeg_bin: str = "ffmpeg"
    ffprobe_bin: str = "ffprobe"
    languages: tuple[str, ...] = DEFAULT_LANGUAGES
    default_target_language: str = "hi"
    stt_model: str = "whisper-1"
    translation_model: str = "gpt-4o-mini"
    tts_model: str = "gpt-4o-mini-tts"
    tts_voice: str = "alloy"
    sample_rate: int = 16000
    request_timeout: float = 120.0
    workspace_root: str | None = None

    @classmethod
    def from_env(cls, env_path: str | None = None) -> "PipelineConfig":
        """Build a config from environment variables."""
        load_env(env_path)
        languages = tuple(
            code.strip().lower()
            for code in os.getenv("SUPPORTED_LANGUAGES", ",".join(DEFAULT_LANGUAGES)).split(",")
            if code.strip()
        )
        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            ffmpeg_bin=os.getenv("FFMPEG_PATH", "ffmpeg"),
            ffprobe_bin=os.getenv("FFPROBE_PATH", "ffprobe"),
            languages=languages or DEFAULT_LANGUAGES,
            default_target_language=os.getenv("DEFAULT_TARGET_LANG", "hi").lower(),
            stt_model=os.getenv("OPENAI_STT_MODEL", "whisper-1"),
            translation_model=os.getenv("OPENAI_TRANSLATION_MODEL", "gpt-4o-mini"),
            tts_model=os.getenv("OPENAI_TTS_MODEL", "gpt-4o-mini-tts"),
            tts_voice=os.getenv("OPENAI_TTS_VOICE", "alloy"),
            request_timeout=float(os.getenv("OPENAI_TIMEOUT", "120")),
            workspace_root=os.getenv("WORKSPACE_ROOT") or None,
        )

    def require_api_key(self) -> str:
        """Return the speech-to-text credential or raise ConfigurationMissing."""
        if not self.openai_api_key:
            raise ConfigurationMissing("OPENAI_API_KEY is not set. Put it in .env or environment.")
        return self.openai_api_key
