"""
Job-scoped temporary working directory.
"""

import logging
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from .io_ffmpeg import ensure_dir

logger = logging.getLogger("vidtranslate")


def remove_workspace(path: Path) -> None:
    """Recursively delete a workspace; failures are logged, never raised."""
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Failed to remove workspace %s: %s", path, e)


@contextmanager
def job_workspace(root: str | None = None) -> Iterator[Path]:
    """Create a fresh directory for one job and remove it on every exit path."""
    if root:
        ensure_dir(root)
    path = Path(tempfile.mkdtemp(prefix="vidtranslate-", dir=root))
    logger.debug("Created workspace %s", path)
    try:
        yield path
    finally:
        remove_workspace(path)
        logger.debug("Removed workspace %s", path)
