"""Error taxonomy for dmget.

Every failure a user can hit is a subclass of :class:`DmgetError`. Callers
branch on the exception type (or on ``retryable``), never on message text:

* :class:`ConfigError` - the invocation itself is wrong.
* :class:`FetchError` - the archive could not be downloaded.
* :class:`StagingError` - the archive could not be written to temp space.
* :class:`ExtractionError` - the archive could not be unpacked or written out.
"""

from pathlib import Path


class DmgetError(Exception):
    """Base class for failures that end a run."""

    retryable = False

    @property
    def hint(self) -> str | None:
        """Optional next step for the user."""
        return None


class ConfigError(DmgetError):
    """Bad combination of options or arguments."""


class IncompatibleFlagsError(ConfigError):
    """Two options were passed that cannot be used together."""

    def __init__(self, first: str, second: str, reason: str):
        self.first = first
        self.second = second
        self.reason = reason
        super().__init__(f"{first} and {second} can't be both passed as options because {reason}.")


class InvalidSlugError(ConfigError):
    """The slug is empty or otherwise unusable."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Invalid exercise name: {slug!r}")

    @property
    def hint(self) -> str | None:
        return "Run 'dmget tldr' to see example invocations."


class FetchError(DmgetError):
    """Downloading the archive failed."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(message)


class ArchiveNotFoundError(FetchError):
    """The server has no archive under the requested name (HTTP 404)."""

    def __init__(self, slug: str, url: str):
        self.slug = slug
        super().__init__(
            url,
            f"No file exists at {url} -- are you sure you spelled {slug!r} correctly?",
        )

    @property
    def hint(self) -> str | None:
        return "Check the spelling of the exercise name and the --homework/--demo flags."


class RemoteError(FetchError):
    """The server answered with a non-success status other than 404."""

    retryable = True

    def __init__(self, url: str, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(url, f"Failed to download {url} with status: {reason} {status_code}")

    @property
    def hint(self) -> str | None:
        return "Try again later; report the problem if it persists."


class TransportError(FetchError):
    """The request never got a response (DNS, refused connection, timeout)."""

    retryable = True

    def __init__(self, url: str, cause: Exception):
        self.cause = cause
        super().__init__(url, f"Could not reach {url}: {cause}")

    @property
    def hint(self) -> str | None:
        return "Check your internet connection and try again."


class StagingError(DmgetError):
    """The downloaded archive could not be written to temporary storage."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to save archive to {path}: {cause}")


class ExtractionError(DmgetError):
    """The archive could not be unpacked."""


class AlreadyExistsError(ExtractionError):
    """A top-level archive entry would overwrite an existing path."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Can't extract files because {path} already exists.")

    @property
    def hint(self) -> str | None:
        return f"If you really want to overwrite it, delete {self.path} and try again."


class UnsafeEntryError(ExtractionError):
    """An archive entry points outside the extraction directory."""

    def __init__(self, entry_name: str, directory: Path):
        self.entry_name = entry_name
        self.directory = directory
        super().__init__(f"Refusing to extract {entry_name}: outside {directory}")


class CorruptArchiveError(ExtractionError):
    """The downloaded payload is not a readable zip archive."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Downloaded file {path} is not a valid zip archive: {cause}")


class ExtractionWriteError(ExtractionError):
    """Extracted files could not be written to the destination."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write {path}: {cause}")

    @property
    def hint(self) -> str | None:
        return (
            "Check that the destination is a writable directory with free space, "
            "or pass --path."
        )
