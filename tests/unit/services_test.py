"""Unit tests for request validation, URL resolution and destination planning."""

from pathlib import Path

import pytest

from dmget.domain.errors import ConfigError, IncompatibleFlagsError, InvalidSlugError
from dmget.domain.models import Category, ExerciseRequest, Variant
from dmget.domain.services import (
    ArchiveResolutionService,
    DestinationService,
    RequestValidationService,
)

BASE = "https://ed.example.com/materials"


class TestArchiveResolution:
    """Test URL construction."""

    @pytest.mark.parametrize(
        "category, variant, expected",
        [
            (Category.EXERCISE, Variant.STARTER, f"{BASE}/exercises/making-decisions.zip"),
            (Category.EXERCISE, Variant.SOLUTION, f"{BASE}/exercises/making-decisions-solution.zip"),
            (Category.HOMEWORK, Variant.STARTER, f"{BASE}/homework/making-decisions.zip"),
            (Category.HOMEWORK, Variant.SOLUTION, f"{BASE}/homework/making-decisions-solution.zip"),
            (Category.DEMO, Variant.STARTER, f"{BASE}/lectures/making-decisions.zip"),
        ],
    )
    def test_url_shape(self, category, variant, expected):
        """URL is {base}/{category path}/{slug}[-solution].zip."""
        request = ExerciseRequest(slug="making-decisions", category=category, variant=variant)

        archive = ArchiveResolutionService(BASE).resolve(request)

        assert archive.url == expected
        assert archive.filename == expected.rsplit("/", 1)[1]

    def test_trailing_slash_on_base_is_ignored(self):
        """A base URL ending in / should not produce a double slash."""
        request = ExerciseRequest(slug="coding-intro")

        archive = ArchiveResolutionService(BASE + "/").resolve(request)

        assert archive.url == f"{BASE}/exercises/coding-intro.zip"

    def test_resolution_is_pure(self):
        """Resolving the same request twice yields equal archives."""
        request = ExerciseRequest(slug="loops", variant=Variant.SOLUTION)
        resolver = ArchiveResolutionService(BASE)

        assert resolver.resolve(request) == resolver.resolve(request)

    def test_slug_whitespace_stripped(self):
        """Surrounding whitespace in the slug is not sent to the server."""
        request = ExerciseRequest(slug="  loops \n")

        assert ArchiveResolutionService.archive_filename(request) == "loops.zip"


class TestRequestValidation:
    """Test request invariants."""

    @pytest.mark.parametrize("slug", ["anything", "making-decisions", "x", "coding-intro"])
    def test_demo_solution_rejected(self, slug):
        """Lecture demos never have a solution variant."""
        request = ExerciseRequest(slug=slug, category=Category.DEMO, variant=Variant.SOLUTION)

        with pytest.raises(IncompatibleFlagsError) as exc_info:
            RequestValidationService.validate(request)

        assert isinstance(exc_info.value, ConfigError)
        assert "--solution" in str(exc_info.value)
        assert "--demo" in str(exc_info.value)

    @pytest.mark.parametrize(
        "category, variant",
        [
            (Category.EXERCISE, Variant.STARTER),
            (Category.EXERCISE, Variant.SOLUTION),
            (Category.HOMEWORK, Variant.STARTER),
            (Category.HOMEWORK, Variant.SOLUTION),
            (Category.DEMO, Variant.STARTER),
        ],
    )
    def test_valid_combinations_accepted(self, category, variant):
        """Every other combination passes validation."""
        request = ExerciseRequest(slug="loops", category=category, variant=variant)

        RequestValidationService.validate(request)

    @pytest.mark.parametrize(
        "slug", ["", "   ", "../etc", "a/b", "a\\b", "..", ".", "foo?x", "a#b", "100%"]
    )
    def test_unusable_slugs_rejected(self, slug):
        """Empty slugs, path separators and URL-reserved characters are rejected."""
        with pytest.raises(InvalidSlugError):
            RequestValidationService.validate(ExerciseRequest(slug=slug))


class TestDestinationPlanning:
    """Test local directory selection."""

    def test_exercise_goes_to_root(self, tmp_path):
        """Exercises extract straight into the destination root."""
        target = DestinationService.plan_target(ExerciseRequest(slug="loops"), tmp_path)

        assert target.directory == tmp_path
        assert target.project_dir("loops") == tmp_path / "loops"

    def test_homework_segment(self, tmp_path):
        """Homework extracts below a homework directory."""
        request = ExerciseRequest(slug="coding-intro", category=Category.HOMEWORK)

        target = DestinationService.plan_target(request, tmp_path)

        assert target.directory == tmp_path / "homework"

    def test_demo_segment(self):
        """Lecture demos extract below a demos directory."""
        request = ExerciseRequest(slug="coding-intro", category=Category.DEMO)

        target = DestinationService.plan_target(request, Path("/work"))

        assert target.directory == Path("/work/demos")
        assert target.project_dir("coding-intro") == Path("/work/demos/coding-intro")
