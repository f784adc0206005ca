"""
Video Translation - replace the spoken audio of a short clip with synthesized
speech in another language.

Pipeline stages:
- Extracting audio from the uploaded video (ffmpeg)
- Transcribing speech (OpenAI Whisper API)
- Translating the transcript (OpenAI GPT)
- Synthesizing speech in the target language (OpenAI TTS)
- Remuxing the new audio with the original video stream
"""

from .config import PipelineConfig
from .errors import DubbingError
from .pipeline import VideoTranslator

__version__ = "0.1.0"

__all__ = ["DubbingError", "PipelineConfig", "VideoTranslator", "__version__"]
