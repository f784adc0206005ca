"""
Pipeline orchestrator: stage video, extract audio, transcribe, translate,
synthesize speech and remux it into the original video.

Each stage runs once, strictly after the previous one, inside a workspace
that is removed whatever the outcome.
"""

import logging
import mimetypes
from pathlib import Path

import httpx
from openai import OpenAI

from .config import PipelineConfig
from .errors import (
    DubbingError,
    InputMissing,
    MediaExtractionFailed,
    MediaToolError,
    RemuxFailed,
    UnclassifiedFailure,
)
from .io_ffmpeg import extract_audio, get_media_duration_ms, mux_audio_to_video
from .languages import infer_source_language, resolve_target_language
from .models import Job, JobState, TranslationResult
from .stt import transcribe_whisper_api
from .translation import translate_text
from .tts import synthesize_speech
from .workspace import job_workspace

logger = logging.getLogger("vidtranslate")

DEFAULT_SUFFIX = ".mp4"


def video_suffix(filename: str | None) -> str:
    """Container suffix for workspace files; only known video extensions are kept."""
    suffix = Path(filename).suffix.lower() if filename else ""
    mime_type = mimetypes.guess_type(f"video{suffix}")[0] if suffix else None
    if mime_type and mime_type.startswith("video/"):
        return suffix
    return DEFAULT_SUFFIX


class VideoTranslator:
    """Runs the dubbing pipeline for one video per call."""

    def __init__(self, config: PipelineConfig, client: OpenAI | None = None) -> None:
        self.config = config
        self._client = client

    def _get_client(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(
                api_key=self.config.require_api_key(),
                http_client=httpx.Client(timeout=self.config.request_timeout),
            )
        return self._client

    def translate(
        self,
        video: bytes | None,
        target_lang: str | None = None,
        *,
        filename: str | None = None,
        source_lang: str | None = None,
    ) -> TranslationResult:
        """Dub a video into the target language; raises a DubbingError subclass on failure."""
        if not video:
            raise InputMissing("No video file provided")

        cfg = self.config
        target = resolve_target_language(target_lang, cfg.languages, cfg.default_target_language)
        source = infer_source_language(target, cfg.languages, source_lang)
        cfg.require_api_key()
        client = self._get_client()

        job = Job(source_language=source, target_language=target)
        logger.info(f"[{job.job_id}] New job: {len(video)} bytes, {source} -> {target}")
        try:
            with job_workspace(cfg.workspace_root) as workdir:
                return self._run_stages(job, client, workdir, video, video_suffix(filename))
        except DubbingError as e:
            e.stage = job.fail(str(e)).value
            logger.error(f"[{job.job_id}] Failed at {e.stage}: {e}")
            raise
        except Exception as e:
            stage = job.fail(str(e)).value
            logger.exception(f"[{job.job_id}] Unexpected failure at {stage}")
            raise UnclassifiedFailure(str(e) or e.__class__.__name__, stage=stage) from e

    def _run_stages(
        self, job: Job, client: OpenAI, workdir: Path, video: bytes, suffix: str
    ) -> TranslationResult:
        cfg = self.config
        input_video = workdir / f"input{suffix}"
        audio_wav = workdir / "audio.wav"
        speech_mp3 = workdir / "speech.mp3"
        output_video = workdir / f"output{suffix}"

        input_video.write_bytes(video)
        self._advance(job, JobState.STAGED)

        try:
            extract_audio(
                str(input_video), str(audio_wav), ffmpeg=cfg.ffmpeg_bin, sample_rate=cfg.sample_rate
            )
        except MediaToolError as e:
            raise MediaExtractionFailed(f"Audio extraction failed: {e}") from e
        self._advance(job, JobState.AUDIO_EXTRACTED)

        transcript = transcribe_whisper_api(
            client, str(audio_wav), model=cfg.stt_model, language=job.source_language
        )
        self._advance(job, JobState.TRANSCRIBED)

        translated = translate_text(
            client, transcript, job.source_language, job.target_language, model=cfg.translation_model
        )
        self._advance(job, JobState.TRANSLATED)

        synthesize_speech(
            client,
            translated,
            job.target_language,
            str(speech_mp3),
            model=cfg.tts_model,
            voice=cfg.tts_voice,
        )
        speech_ms = self._speech_duration_ms(speech_mp3)
        self._advance(job, JobState.SYNTHESIZED)

        try:
            mux_audio_to_video(
                str(input_video), str(speech_mp3), str(output_video), ffmpeg=cfg.ffmpeg_bin
            )
            duration_ms = get_media_duration_ms(str(output_video), ffprobe=cfg.ffprobe_bin)
        except MediaToolError as e:
            raise RemuxFailed(f"Remux failed: {e}") from e
        logger.info(
            f"[{job.job_id}] [dur] speech = {speech_ms / 1000:.3f}s, output = {duration_ms / 1000:.3f}s"
        )
        self._advance(job, JobState.REMUXED)

        mime_type = mimetypes.guess_type(output_video.name)[0] or "video/mp4"
        result = TranslationResult(
            video=output_video.read_bytes(),
            mime_type=mime_type,
            source_language=job.source_language,
            target_language=job.target_language,
            transcript=transcript,
            translated_text=translated,
            duration_ms=duration_ms,
        )
        self._advance(job, JobState.COMPLETED)
        return result

    def _speech_duration_ms(self, speech_mp3: Path) -> int:
        """Length of the synthesized audio, for logging only (0 when ffprobe fails)."""
        try:
            return get_media_duration_ms(str(speech_mp3), ffprobe=self.config.ffprobe_bin)
        except MediaToolError as e:
            logger.warning(f"Could not read speech duration: {e}")
            return 0

    @staticmethod
    def _advance(job: Job, state: JobState) -> None:
        job.advance(state)
        logger.info(f"[{job.job_id}] -> {state.value}")
