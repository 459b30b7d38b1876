"""dmget.

Download Devmountain exercises, homework assignments and lecture demos and
extract them into a local workspace without overwriting existing work.

Quick Start (High-Level API):
    >>> from dmget import fetch_exercise
    >>> outcome = fetch_exercise("making-decisions")
    >>> outcome.project_dir
    PosixPath('/home/me/src/making-decisions')

Quick Start (SDK API):
    >>> from dmget import ExerciseFetch, ExerciseRequest, Settings, Variant
    >>> config = Settings(destination="~/bootcamp")
    >>> request = ExerciseRequest(slug="making-decisions", variant=Variant.SOLUTION)
    >>> outcome = ExerciseFetch(config).run(request)

Configuration:
    >>> import os
    >>> os.environ["DMGET_REQUEST_TIMEOUT"] = "60"
    >>> config = Settings()  # Loads from environment

Public API:
    High-level functions:
        - fetch_exercise: Download and extract one archive

    Orchestrators:
        - ExerciseFetch: Download/stage/extract/cleanup lifecycle

    Configuration:
        - Settings: Configuration model

    Domain Models:
        - ExerciseRequest, Category, Variant: What to download
        - FetchOutcome, Stage: How a run ended

    Errors:
        - DmgetError and its subclasses

    Reporters (for custom UIs):
        - Reporter: Progress reporter (use silent=True for headless mode)
"""

# Configuration
from dmget.config import Settings

# Domain models and errors
from dmget.domain import (
    AlreadyExistsError,
    ArchiveNotFoundError,
    Category,
    ConfigError,
    DmgetError,
    ExerciseRequest,
    ExtractionError,
    FetchError,
    FetchOutcome,
    IncompatibleFlagsError,
    Stage,
    StagingError,
    Variant,
)

# Orchestrators
from dmget.orchestrators import ExerciseFetch

# UI Reporters
from dmget.ui import Reporter

__all__ = [
    # High-level functions
    "fetch_exercise",
    # Orchestrators
    "ExerciseFetch",
    # Configuration
    "Settings",
    # Domain models
    "Category",
    "Variant",
    "Stage",
    "ExerciseRequest",
    "FetchOutcome",
    # Errors
    "DmgetError",
    "ConfigError",
    "IncompatibleFlagsError",
    "FetchError",
    "ArchiveNotFoundError",
    "StagingError",
    "ExtractionError",
    "AlreadyExistsError",
    # Reporters
    "Reporter",
]

# Version
__version__ = "0.1.0"


def fetch_exercise(
    slug: str,
    category: Category = Category.EXERCISE,
    variant: Variant = Variant.STARTER,
    config: Settings | None = None,
    reporter: Reporter | None = None,
) -> FetchOutcome:
    """Download and extract one archive (high-level convenience function).

    Failures do not raise; inspect ``outcome.succeeded`` and ``outcome.error``.

    Args:
        slug: Exercise identifier, e.g. "making-decisions"
        category: Exercise, homework or lecture demo
        variant: Starter code or solution
        config: Configuration. If None, loads Settings() from the environment.
        reporter: Progress reporter. If None, runs silently.

    Returns:
        FetchOutcome for the run

    Example:
        >>> from dmget import fetch_exercise, Category, Variant
        >>> outcome = fetch_exercise("coding-intro", Category.HOMEWORK, Variant.SOLUTION)
        >>> outcome.succeeded
        True
    """
    request = ExerciseRequest(slug=slug, category=category, variant=variant)
    return ExerciseFetch(config).run(request, reporter)
