"""Archive download."""

import logging

import httpx

from dmget.domain.errors import ArchiveNotFoundError, RemoteError, TransportError
from dmget.domain.models import RemoteArchive
from dmget.domain.types import DownloadProgressHook

logger = logging.getLogger(__name__)


def fetch_archive(
    archive: RemoteArchive,
    slug: str,
    client: httpx.Client | None = None,
    timeout: float = 30.0,
    progress_hook: DownloadProgressHook | None = None,
    chunk_size: int = 64 * 1024,
) -> bytes:
    """Download an archive into memory with a single GET request.

    Args:
        archive: Archive to download
        slug: Exercise name the user typed, used in not-found messages
        client: Optional HTTP client (a fresh one is created and closed otherwise)
        timeout: Connection/read timeout in seconds for a fresh client
        progress_hook: Optional callback(downloaded, total) for progress tracking
        chunk_size: Size of chunks to read (default 64KB)

    Returns:
        The archive payload

    Raises:
        ArchiveNotFoundError: If the server answers 404
        RemoteError: If the server answers any other non-success status
        TransportError: If no response was received
    """
    if client is None:
        with httpx.Client(timeout=timeout, follow_redirects=True) as own_client:
            return fetch_archive(archive, slug, own_client, timeout, progress_hook, chunk_size)

    logger.info(f"Downloading {archive.url}")
    try:
        with client.stream("GET", archive.url) as resp:
            if resp.status_code == httpx.codes.NOT_FOUND:
                raise ArchiveNotFoundError(slug, archive.url)
            if not resp.is_success:
                raise RemoteError(archive.url, resp.status_code, resp.reason_phrase)

            total = resp.headers.get("Content-Length")
            total_bytes: int | None = int(total) if total is not None else None

            downloaded = 0
            if progress_hook:
                progress_hook(downloaded, total_bytes)

            buffer = bytearray()
            for chunk in resp.iter_bytes(chunk_size=chunk_size):
                buffer.extend(chunk)
                downloaded += len(chunk)
                if progress_hook:
                    progress_hook(downloaded, total_bytes)
    except httpx.TransportError as e:
        raise TransportError(archive.url, e) from e

    logger.debug(f"Downloaded {len(buffer)} bytes from {archive.url}")
    return bytes(buffer)
