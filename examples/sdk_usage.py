"""Example: Using dmget as an SDK.

This example demonstrates how to use dmget programmatically
as a Python library (SDK) rather than via the CLI.
"""

import os
from pathlib import Path

from dmget import (
    AlreadyExistsError,
    ArchiveNotFoundError,
    Category,
    ExerciseFetch,
    ExerciseRequest,
    Reporter,
    Settings,
    Variant,
    fetch_exercise,
)


def example_simple_usage():
    """Simplest usage - download starter code with default settings."""
    print("=" * 60)
    print("Example 1: Simple Usage")
    print("=" * 60)

    outcome = fetch_exercise("making-decisions", reporter=Reporter())
    print(f"Succeeded: {outcome.succeeded}, project: {outcome.project_dir}")


def example_with_environment_config():
    """Load configuration from environment variables."""
    print("\n" + "=" * 60)
    print("Example 2: Environment Configuration")
    print("=" * 60)

    os.environ["DMGET_REQUEST_TIMEOUT"] = "60"
    os.environ["DMGET_DESTINATION"] = "~/bootcamp"

    settings = Settings()
    print(f"Base URL: {settings.base_url}")
    print(f"Destination: {settings.destination}")

    outcome = fetch_exercise("coding-intro", Category.HOMEWORK, config=settings)
    print(f"Stage reached: {outcome.stage.value}")


def example_handling_errors():
    """Branch on the error type instead of parsing messages."""
    print("\n" + "=" * 60)
    print("Example 3: Error Handling")
    print("=" * 60)

    settings = Settings(destination=Path("/tmp/dmget-example"))
    request = ExerciseRequest(slug="making-decisions", variant=Variant.SOLUTION)
    outcome = ExerciseFetch(settings).run(request)

    if outcome.succeeded:
        print(f"Extracted to {outcome.project_dir}")
    elif isinstance(outcome.error, AlreadyExistsError):
        print(f"Already downloaded: {outcome.error.path}")
    elif isinstance(outcome.error, ArchiveNotFoundError):
        print(f"No such exercise: {outcome.error.slug}")
    elif outcome.error is not None and outcome.error.retryable:
        print(f"Server trouble, try again later: {outcome.error}")
    else:
        print(f"Failed: {outcome.error}")


if __name__ == "__main__":
    example_simple_usage()
    example_with_environment_config()
    example_handling_errors()
