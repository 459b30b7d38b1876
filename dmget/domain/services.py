"""Business logic services for resolving what to download and where to put it."""

from pathlib import Path

from dmget.domain.errors import IncompatibleFlagsError, InvalidSlugError
from dmget.domain.models import (
    Category,
    ExerciseRequest,
    ExtractionTarget,
    RemoteArchive,
)

# Remote path segment per category
CATEGORY_URL_PATHS: dict[Category, str] = {
    Category.EXERCISE: "exercises",
    Category.HOMEWORK: "homework",
    Category.DEMO: "lectures",
}

# Local subdirectory per category
CATEGORY_LOCAL_PATHS: dict[Category, str] = {
    Category.EXERCISE: "",
    Category.HOMEWORK: "homework",
    Category.DEMO: "demos",
}

# Characters that would change the meaning of the URL or the local path
RESERVED_SLUG_CHARACTERS = frozenset("/\\?#%")

SOLUTION_SUFFIX = "-solution"
ARCHIVE_EXTENSION = ".zip"


class RequestValidationService:
    """Service for rejecting requests that can never succeed."""

    @staticmethod
    def validate(request: ExerciseRequest) -> None:
        """Check request invariants before any I/O happens.

        Args:
            request: The user's request

        Raises:
            InvalidSlugError: If the slug is empty or contains a path separator
                or a URL-reserved character
            IncompatibleFlagsError: If a solution is requested for a lecture demo
        """
        slug = request.slug
        if not slug or slug in (".", "..") or RESERVED_SLUG_CHARACTERS.intersection(slug):
            raise InvalidSlugError(slug)

        if request.category is Category.DEMO and request.is_solution:
            raise IncompatibleFlagsError(
                "--solution", "--demo", "lecture demos don't have solutions"
            )


class ArchiveResolutionService:
    """Service for turning a request into a download URL."""

    def __init__(self, base_url: str):
        """Initialize the resolver.

        Args:
            base_url: Root of the materials server, e.g. https://host/materials
        """
        self.base_url = base_url.rstrip("/")

    @staticmethod
    def archive_filename(request: ExerciseRequest) -> str:
        """Return the archive filename for a request."""
        suffix = SOLUTION_SUFFIX if request.is_solution else ""
        return f"{request.slug}{suffix}{ARCHIVE_EXTENSION}"

    def resolve(self, request: ExerciseRequest) -> RemoteArchive:
        """Build the archive URL for a request.

        Args:
            request: The user's request

        Returns:
            RemoteArchive with ``{base}/{category path}/{slug}[-solution].zip``
        """
        filename = self.archive_filename(request)
        category_path = CATEGORY_URL_PATHS[request.category]
        return RemoteArchive(url=f"{self.base_url}/{category_path}/{filename}", filename=filename)


class DestinationService:
    """Service for choosing the local extraction directory."""

    @staticmethod
    def plan_target(request: ExerciseRequest, destination_root: Path) -> ExtractionTarget:
        """Return where a request's archive should be unpacked.

        Args:
            request: The user's request
            destination_root: Root directory for all downloaded material

        Returns:
            ExtractionTarget with the category subdirectory applied
        """
        return ExtractionTarget(
            destination_root=Path(destination_root),
            subpath=CATEGORY_LOCAL_PATHS[request.category],
        )
