"""Domain layer."""

from dmget.domain.errors import (
    AlreadyExistsError,
    ArchiveNotFoundError,
    ConfigError,
    CorruptArchiveError,
    DmgetError,
    ExtractionError,
    ExtractionWriteError,
    FetchError,
    IncompatibleFlagsError,
    InvalidSlugError,
    RemoteError,
    StagingError,
    TransportError,
    UnsafeEntryError,
)
from dmget.domain.models import (
    Category,
    ExerciseRequest,
    ExtractionTarget,
    FetchOutcome,
    RemoteArchive,
    Stage,
    StagedFile,
    Variant,
)

__all__ = [
    # Models
    "Category",
    "Variant",
    "Stage",
    "ExerciseRequest",
    "RemoteArchive",
    "StagedFile",
    "ExtractionTarget",
    "FetchOutcome",
    # Errors
    "DmgetError",
    "ConfigError",
    "IncompatibleFlagsError",
    "InvalidSlugError",
    "FetchError",
    "ArchiveNotFoundError",
    "RemoteError",
    "TransportError",
    "StagingError",
    "ExtractionError",
    "AlreadyExistsError",
    "UnsafeEntryError",
    "CorruptArchiveError",
    "ExtractionWriteError",
]
