"""Typer-based CLI for dmget."""

from pathlib import Path

import typer

from dmget.config import Settings
from dmget.domain.models import Category, ExerciseRequest, Variant
from dmget.logging_config import setup_logging
from dmget.orchestrators import ExerciseFetch
from dmget.ui import Reporter
from dmget.ui.messages import DESCRIPTION

TLDR_SLUG = "tldr"

app = typer.Typer(help=DESCRIPTION, add_completion=False)


def _category(homework: bool, demo: bool) -> Category:
    """Pick the category from flags; --demo wins over --homework."""
    if demo:
        return Category.DEMO
    if homework:
        return Category.HOMEWORK
    return Category.EXERCISE


@app.command()
def main(
    slug: str = typer.Argument(
        None,
        help="Unique identifier of the exercise to download (or 'tldr' for examples)",
        show_default=False,
    ),
    url: str = typer.Option(None, "--url", "-u", help="Base URL of the materials server"),
    path: Path = typer.Option(None, "--path", "-p", help="Path to extract files to [default: ~/src]"),
    solution: bool = typer.Option(
        False, "--solution", help="Download the solution instead of the starter code"
    ),
    homework: bool = typer.Option(
        False, "--homework", help="Download a homework assignment instead of an exercise"
    ),
    demo: bool = typer.Option(False, "--demo", help="Download a lecture demo instead of an exercise"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Download an exercise, homework assignment, or lecture demo and extract it."""
    setup_logging(verbose)
    reporter = Reporter()
    reporter.report_running()

    if slug is None:
        reporter.report_error("missing required argument 'slug'")
        reporter.print_help_hint()
        raise typer.Exit(2)

    if slug == TLDR_SLUG:
        reporter.print_tldr()
        return

    overrides = {}
    if url:
        overrides["base_url"] = url
    if path is not None:
        overrides["destination"] = path
    config = Settings(**overrides)

    request = ExerciseRequest(
        slug=slug,
        category=_category(homework, demo),
        variant=Variant.SOLUTION if solution else Variant.STARTER,
    )
    outcome = ExerciseFetch(config).run(request, reporter)

    if not outcome.succeeded:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
