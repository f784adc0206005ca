"""
Command-line interface for the video translation pipeline.
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import PipelineConfig, setup_logging
from .errors import DubbingError
from .pipeline import VideoTranslator

logger = logging.getLogger("vidtranslate")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    ap = argparse.ArgumentParser(description="Translate the speech of a short video")

    # IO
    ap.add_argument("--input_video", required=True)
    ap.add_argument("--output", default=None, help="Defaults to <input>_<lang><suffix>")
    ap.add_argument("--env-file", default=None, help="Path to a .env file")

    # Languages
    ap.add_argument("--target-lang", default=None, help="Target language code (default: hi)")
    ap.add_argument(
        "--source-lang",
        default=None,
        help="Source language code. Inferred when exactly two languages are configured.",
    )

    # Logging
    ap.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    return ap.parse_args(argv)


def default_output_path(input_video: str, target_lang: str) -> str:
    src = Path(input_video)
    return str(src.with_name(f"{src.stem}_{target_lang}{src.suffix or '.mp4'}"))


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    config = PipelineConfig.from_env(args.env_file)
    input_path = Path(args.input_video)
    video = input_path.read_bytes() if input_path.is_file() else b""

    try:
        result = VideoTranslator(config).translate(
            video, args.target_lang, filename=input_path.name, source_lang=args.source_lang
        )
    except DubbingError as e:
        logger.error(f"{e.code}: {e}")
        return 1

    output = args.output or default_output_path(args.input_video, result.target_language)
    try:
        Path(output).write_bytes(result.video)
    except OSError as e:
        logger.error(f"Could not write {output}: {e}")
        return 1
    logger.info(f"Transcript ({result.source_language}): {result.transcript}")
    logger.info(f"Translation ({result.target_language}): {result.translated_text}")
    logger.info(f"Done (translated) -> {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
