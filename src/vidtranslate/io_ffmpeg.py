"""
Audio and video processing utilities using ffmpeg/ffprobe.
"""

import logging
import subprocess
from pathlib import Path

from .errors import MediaToolError

logger = logging.getLogger("vidtranslate")


def run(cmd: list[str], *, check: bool = True) -> str:
    """Run a media tool command and return its combined output."""
    logger.debug("Running: %s", " ".join(map(str, cmd)))
    try:
        proc = subprocess.run(
            cmd, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True, check=False
        )
    except FileNotFoundError as e:
        raise MediaToolError(f"Executable not found: {cmd[0]}") from e
    if proc.returncode != 0 and check:
        logger.error("Command failed with code %d: %s", proc.returncode, proc.stdout)
        msg = f"{Path(cmd[0]).name} failed with code {proc.returncode}"
        raise MediaToolError(msg, output=proc.stdout)
    return proc.stdout


def ensure_dir(path: str) -> None:
    """Ensure directory exists."""
    if path:
        Path(path).mkdir(parents=True, exist_ok=True)


def extract_audio(
    input_video: str, out_wav: str, *, ffmpeg: str = "ffmpeg", sample_rate: int = 16000
) -> None:
    """Extract the audio track as 16-bit PCM wave, keeping the source channel layout."""
    ensure_dir(str(Path(out_wav).parent))
    cmd = [
        ffmpeg,
        "-y",
        "-i",
        input_video,
        "-vn",
        "-acodec",
        "pcm_s16le",
        "-ar",
        str(sample_rate),
        out_wav,
    ]
    run(cmd)


def mux_audio_to_video(
    input_video: str, audio_path: str, output_video: str, *, ffmpeg: str = "ffmpeg"
) -> None:
    """Replace the audio of a video (copy video stream, stop at the shorter stream)."""
    cmd = [
        ffmpeg,
        "-y",
        "-i",
        input_video,
        "-i",
        audio_path,
        "-map",
        "0:v:0",
        "-map",
        "1:a:0",
        "-c:v",
        "copy",
        "-shortest",
        output_video,
    ]
    run(cmd)


def get_media_duration_ms(path: str, *, ffprobe: str = "ffprobe") -> int:
    """Get container duration in milliseconds (0 when ffprobe reports none)."""
    out = run(
        [
            ffprobe,
            "-v",
            "error",
            "-show_entries",
            "format=duration",
            "-of",
            "default=noprint_wrappers=1:nokey=1",
            path,
        ]
    )
    try:
        seconds = float(out.strip())
    except ValueError:
        seconds = 0.0
    return int(seconds * 1000)
