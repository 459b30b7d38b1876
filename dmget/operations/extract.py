"""Zip extraction that never overwrites existing work."""

import logging
import shutil
import zipfile
import zlib
from pathlib import Path, PurePosixPath

from dmget.domain.errors import (
    AlreadyExistsError,
    CorruptArchiveError,
    ExtractionWriteError,
    UnsafeEntryError,
)
from dmget.domain.types import ExtractionProgressHook

logger = logging.getLogger(__name__)

# What zipfile raises for a damaged or unsupported member body
DECOMPRESSION_ERRORS = (zipfile.BadZipFile, zlib.error, EOFError, NotImplementedError)


def _entry_parts(entry_name: str, extract_dir: Path) -> tuple[str, ...]:
    """Split an entry name into path components, rejecting unsafe names."""
    pure = PurePosixPath(entry_name.replace("\\", "/"))
    parts = tuple(part for part in pure.parts if part not in ("", "."))
    if pure.is_absolute() or ".." in parts:
        raise UnsafeEntryError(entry_name, extract_dir)
    return parts


def _safe_destination(extract_dir: Path, parts: tuple[str, ...], entry_name: str) -> Path:
    """Return the on-disk path for an entry, preventing path traversal."""
    root = extract_dir.resolve()
    target = root.joinpath(*parts).resolve()
    try:
        target.relative_to(root)
    except ValueError as exc:
        raise UnsafeEntryError(entry_name, extract_dir) from exc
    return target


def _write_member(archive: zipfile.ZipFile, member: zipfile.ZipInfo, target: Path) -> None:
    """Write a single entry to disk, creating parent directories as needed."""
    if member.is_dir():
        target.mkdir(parents=True, exist_ok=True)
        return

    target.parent.mkdir(parents=True, exist_ok=True)
    with archive.open(member) as source, open(target, "wb") as dest:
        shutil.copyfileobj(source, dest)


def _make_directory(directory: Path) -> None:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ExtractionWriteError(directory, e) from e


def extract_zip(
    archive_path: Path,
    extract_dir: Path,
    progress_hook: ExtractionProgressHook | None = None,
) -> str | None:
    """Extract a zip archive without touching existing top-level paths.

    Entries are processed in archive order. The first time an entry with a
    new top-level name is seen (``proj/`` or ``proj/src/app.js`` both have
    the top-level name ``proj``), ``extract_dir / proj`` must not exist yet;
    otherwise extraction stops before anything for that entry is written.
    Entries below an already checked top-level name are written directly.

    Args:
        archive_path: Path to the .zip archive
        extract_dir: Directory to extract the top-level entries into
        progress_hook: Optional callback(entry_name, current, total) for progress tracking

    Returns:
        Name of the first top-level entry (the project directory), or None
        if the archive has no entries

    Raises:
        AlreadyExistsError: If a top-level entry would overwrite an existing path
        UnsafeEntryError: If an entry points outside ``extract_dir``
        CorruptArchiveError: If the file is not a readable zip archive
        ExtractionWriteError: If files cannot be written under ``extract_dir``
    """
    _make_directory(extract_dir)
    project_name: str | None = None
    checked_top_level: set[str] = set()

    logger.info(f"Extracting {archive_path} to {extract_dir}")

    try:
        with zipfile.ZipFile(archive_path) as archive:
            members = archive.infolist()
            total = len(members)

            for index, member in enumerate(members, start=1):
                parts = _entry_parts(member.filename, extract_dir)
                if not parts:
                    continue

                top_level = parts[0]
                if top_level not in checked_top_level:
                    existing = extract_dir / top_level
                    if existing.exists() or existing.is_symlink():
                        raise AlreadyExistsError(existing)
                    checked_top_level.add(top_level)
                    if project_name is None:
                        project_name = top_level

                target = _safe_destination(extract_dir, parts, member.filename)
                if progress_hook:
                    progress_hook(member.filename, index, total)
                try:
                    _write_member(archive, member, target)
                except OSError as e:
                    raise ExtractionWriteError(target, e) from e
                logger.debug(f"Extracted {member.filename}")
    except DECOMPRESSION_ERRORS as e:
        raise CorruptArchiveError(archive_path, e) from e

    if project_name is None:
        logger.warning(f"Archive {archive_path} contained no entries")
    else:
        logger.info(f"Extraction complete: {extract_dir / project_name}")
    return project_name
