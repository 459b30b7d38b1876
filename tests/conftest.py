"""Configure tests."""

import struct
import zipfile
from pathlib import Path

import httpx
import pytest

from dmget.config import Settings

BASE_URL = "https://materials.test/materials"


def create_zip_with_files(
    archive_path: Path,
    files: dict[str, bytes],
    compression: int = zipfile.ZIP_STORED,
) -> Path:
    """Create a zip archive with the given entries.

    Args:
        archive_path: Path where the archive will be created
        files: Dictionary mapping entry names to their content. Names ending
            in "/" become directory entries.
        compression: zipfile compression method for every entry
    """
    with zipfile.ZipFile(archive_path, "w", compression=compression) as archive:
        for entry_name, content in files.items():
            archive.writestr(entry_name, content)
    return archive_path


def corrupt_member_data(archive_path: Path, entry_name: str) -> Path:
    """Overwrite the middle of an entry's compressed bytes in place.

    The central directory stays intact, so the archive still opens and only
    reading that entry fails.
    """
    with zipfile.ZipFile(archive_path) as archive:
        info = archive.getinfo(entry_name)

    data = bytearray(archive_path.read_bytes())
    name_length, extra_length = struct.unpack_from("<HH", data, info.header_offset + 26)
    start = info.header_offset + 30 + name_length + extra_length
    for offset in range(start + 2, start + info.compress_size - 2):
        data[offset] ^= 0xFF
    archive_path.write_bytes(bytes(data))
    return archive_path


@pytest.fixture
def make_zip(tmp_path):
    """Return a factory that builds a zip archive in tmp_path and returns its path."""
    counter = 0

    def _make(files: dict[str, bytes], name: str | None = None) -> Path:
        nonlocal counter
        counter += 1
        return create_zip_with_files(tmp_path / (name or f"archive-{counter}.zip"), files)

    return _make


class RecordingServer:
    """Fake materials server backed by httpx.MockTransport."""

    def __init__(self, responses: dict[str, httpx.Response] | None = None):
        self.responses = responses or {}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.get(str(request.url))
        if response is None:
            return httpx.Response(404)
        return response

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler), follow_redirects=True)

    @property
    def requested_urls(self) -> list[str]:
        return [str(r.url) for r in self.requests]


@pytest.fixture
def server():
    """Create a fake materials server with no archives."""
    return RecordingServer()


@pytest.fixture
def staging_dir(tmp_path):
    """Create a temporary staging directory."""
    directory = tmp_path / "staging"
    directory.mkdir()
    return directory


@pytest.fixture
def destination(tmp_path):
    """Return the extraction root (not created up front)."""
    return tmp_path / "src"


@pytest.fixture
def settings(destination, staging_dir):
    """Create settings pointing at the fake server and temporary directories."""
    return Settings(base_url=BASE_URL, destination=destination, temp_dir=staging_dir)


@pytest.fixture
def exercise_zip(make_zip):
    """Archive bytes for the making-decisions starter exercise."""
    return make_zip(
        {
            "making-decisions/": b"",
            "making-decisions/index.html": b"<html><body>Decisions</body></html>",
            "making-decisions/js/": b"",
            "making-decisions/js/main.js": b"console.log('hi');\n",
        },
        name="making-decisions-fixture.zip",
    ).read_bytes()


@pytest.fixture
def damaged_zip(tmp_path):
    """Deflated archive whose single file entry cannot be decompressed."""
    archive = create_zip_with_files(
        tmp_path / "damaged-fixture.zip",
        {
            "making-decisions/": b"",
            "making-decisions/index.html": b"<p>Decisions</p>\n" * 500,
        },
        compression=zipfile.ZIP_DEFLATED,
    )
    return corrupt_member_data(archive, "making-decisions/index.html")
