"""Temporary storage for downloaded archives."""

import logging
import tempfile
from pathlib import Path

from atomicwrites import atomic_write

from dmget.domain.errors import StagingError
from dmget.domain.models import StagedFile

logger = logging.getLogger(__name__)


def stage_archive(content: bytes, filename: str, temp_dir: Path | None = None) -> StagedFile:
    """Write a downloaded archive to the temp directory.

    A leftover file with the same name from an aborted run is replaced.

    Args:
        content: Archive payload
        filename: Archive filename, e.g. making-decisions.zip
        temp_dir: Directory to write into (defaults to the system temp dir)

    Returns:
        StagedFile pointing at the written archive

    Raises:
        StagingError: If the file could not be written
    """
    directory = Path(temp_dir) if temp_dir is not None else Path(tempfile.gettempdir())
    path = (directory / filename).absolute()

    try:
        with atomic_write(path, mode="wb", overwrite=True) as f:
            f.write(content)
    except OSError as e:
        logger.error(f"Failed to write staged archive {path}: {e}")
        raise StagingError(path, e) from e

    logger.info(f"Temporarily saved archive to {path}")
    return StagedFile(path=path, size=len(content))


def discard_staged(staged: StagedFile) -> bool:
    """Delete a staged archive.

    Returns:
        True if a file was removed, False if it was already gone
    """
    try:
        staged.path.unlink()
    except FileNotFoundError:
        logger.debug(f"Staged archive {staged.path} already removed")
        return False

    logger.info(f"Removed {staged.path}")
    return True
