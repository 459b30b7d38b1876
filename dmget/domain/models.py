"""Domain models for a single dmget run."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from dmget.domain.errors import DmgetError


class Category(str, Enum):
    """Kind of course material being fetched."""

    EXERCISE = "exercise"
    HOMEWORK = "homework"
    DEMO = "demo"  # Lecture demo, never has a solution


class Variant(str, Enum):
    """Starter code or the instructor's solution."""

    STARTER = "starter"
    SOLUTION = "solution"


class Stage(str, Enum):
    """Lifecycle stage of a run."""

    IDLE = "idle"
    RESOLVING = "resolving"
    FETCHING = "fetching"
    STAGED = "staged"
    EXTRACTING = "extracting"
    DONE = "done"
    FAILED = "failed"


class ExerciseRequest(BaseModel):
    """What the user asked for."""

    model_config = ConfigDict(frozen=True)

    slug: str
    category: Category = Category.EXERCISE
    variant: Variant = Variant.STARTER

    @field_validator("slug", mode="before")
    @classmethod
    def strip_slug(cls, v: str) -> str:
        """Trim whitespace around the slug."""
        if isinstance(v, str):
            return v.strip()
        return v

    @property
    def is_solution(self) -> bool:
        """Return True if the solution variant was requested."""
        return self.variant is Variant.SOLUTION


class RemoteArchive(BaseModel):
    """Location of the archive on the materials server."""

    model_config = ConfigDict(frozen=True)

    url: str
    filename: str  # e.g. making-decisions-solution.zip


class StagedFile(BaseModel):
    """Downloaded archive written to the temp directory."""

    model_config = ConfigDict(frozen=True)

    path: Path
    size: int  # Bytes written


class ExtractionTarget(BaseModel):
    """Where an archive gets unpacked."""

    model_config = ConfigDict(frozen=True)

    destination_root: Path
    subpath: str = ""  # "", "homework" or "demos"

    @property
    def directory(self) -> Path:
        """Directory the archive's top-level entries are written into."""
        if self.subpath:
            return self.destination_root / self.subpath
        return self.destination_root

    def project_dir(self, entry_name: str) -> Path:
        """Return the local path of a top-level archive entry."""
        return self.directory / entry_name


class FetchOutcome(BaseModel):
    """Result of one run, successful or not."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    request: ExerciseRequest
    stage: Stage = Stage.IDLE
    archive: RemoteArchive | None = None
    target: ExtractionTarget | None = None
    staged: StagedFile | None = None
    project_dir: Path | None = None
    error: DmgetError | None = None
    failed_at: Stage | None = None  # Stage that was running when the error occurred

    @property
    def succeeded(self) -> bool:
        """Return True if the run reached the DONE stage."""
        return self.stage is Stage.DONE
