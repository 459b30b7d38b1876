"""Exercise fetch orchestrator.

Coordinates one download-and-extract run from request to cleanup.
"""

import logging

import httpx
from rich.markup import escape

from dmget.config import Settings
from dmget.domain.errors import DmgetError
from dmget.domain.models import (
    Category,
    ExerciseRequest,
    FetchOutcome,
    Stage,
)
from dmget.domain.services import (
    ArchiveResolutionService,
    DestinationService,
    RequestValidationService,
)
from dmget.operations.download import fetch_archive
from dmget.operations.extract import extract_zip
from dmget.operations.staging import discard_staged, stage_archive
from dmget.ui import Reporter, display_path

logger = logging.getLogger(__name__)


class ExerciseFetch:
    """Orchestrates downloading and extracting a single archive.

    The run moves through these stages:
    1. Resolving: validate the request and build the archive URL
    2. Fetching: download the archive
    3. Staged: archive written to the temp directory
    4. Extracting: unpack into the destination without overwriting anything
    5. Done

    Any DmgetError moves the run to Failed. The staged archive is removed
    exactly once on every path out of the run.
    """

    def __init__(self, config: Settings | None = None, client: httpx.Client | None = None):
        """Initialize the orchestrator.

        Args:
            config: CLI configuration. If None, creates new Settings() from environment.
            client: Optional HTTP client, mainly for tests. A short-lived client
                is created per download otherwise.
        """
        self.config = config if config is not None else Settings()
        self.client = client
        self.validation_service = RequestValidationService()
        self.resolution_service = ArchiveResolutionService(self.config.base_url)
        self.destination_service = DestinationService()

    def run(self, request: ExerciseRequest, reporter: Reporter | None = None) -> FetchOutcome:
        """Download and extract the archive for a request.

        Args:
            request: What to download
            reporter: Optional reporter for progress. Defaults to a silent Reporter.

        Returns:
            FetchOutcome describing where the run ended and why
        """
        if reporter is None:
            reporter = Reporter(silent=True)

        outcome = FetchOutcome(request=request)
        cleanup_error: OSError | None = None
        removed = False

        try:
            self._run_stages(request, outcome, reporter)
        except DmgetError as e:
            logger.info(f"Run failed during {outcome.stage.value}: {e}")
            outcome.failed_at = outcome.stage
            outcome.stage = Stage.FAILED
            outcome.error = e
        finally:
            staged = outcome.staged
            if staged is not None:
                try:
                    removed = discard_staged(staged)
                except OSError as e:
                    logger.error(f"Failed to remove staged archive {staged.path}: {e}")
                    cleanup_error = e

        self._report_outcome(outcome, reporter)

        if removed and staged is not None:
            reporter.report_cleanup(staged.path)
        if cleanup_error is not None and staged is not None:
            reporter.report_warning(
                f"Could not remove temporary file {staged.path}: {cleanup_error}"
            )

        return outcome

    def _run_stages(
        self,
        request: ExerciseRequest,
        outcome: FetchOutcome,
        reporter: Reporter,
    ) -> None:
        """Advance through the stages, recording progress on the outcome."""
        # Step 1: Validate and resolve, no I/O yet
        outcome.stage = Stage.RESOLVING
        self.validation_service.validate(request)
        archive = self.resolution_service.resolve(request)
        target = self.destination_service.plan_target(request, self.config.destination)
        outcome.archive = archive
        outcome.target = target

        reporter.report_task(
            f"Setting up {self._describe(request)} code for [green]{escape(request.slug)}[/green]"
        )

        # Step 2: Download
        outcome.stage = Stage.FETCHING
        reporter.report_subtask(f"Downloading {archive.url}")
        with reporter.download_context():
            content = fetch_archive(
                archive,
                request.slug,
                client=self.client,
                timeout=self.config.request_timeout,
                progress_hook=reporter.create_download_progress_hook(archive.filename),
            )

        # Step 3: Stage in temp space
        staged = stage_archive(content, archive.filename, self.config.staging_dir)
        outcome.staged = staged
        outcome.stage = Stage.STAGED
        reporter.report_subtask(f"Temporarily saved file to {staged.path}")

        # Step 4: Extract
        outcome.stage = Stage.EXTRACTING
        reporter.report_subtask(f"Extracting files to {display_path(target.directory)}")
        with reporter.extraction_context():
            project_name = extract_zip(
                staged.path,
                target.directory,
                progress_hook=reporter.create_extraction_progress_hook(),
            )
        if project_name is not None:
            outcome.project_dir = target.project_dir(project_name)

        outcome.stage = Stage.DONE

    def _report_outcome(self, outcome: FetchOutcome, reporter: Reporter) -> None:
        """Render the final result through the reporter."""
        if outcome.error is not None:
            reporter.report_error(outcome.error)
        elif outcome.project_dir is not None:
            reporter.report_success(outcome.project_dir)
        elif outcome.target is not None:
            reporter.report_empty_archive(outcome.target.directory)

    @staticmethod
    def _describe(request: ExerciseRequest) -> str:
        """Return a short label such as 'starter', 'solution' or 'demo'."""
        if request.category is Category.DEMO:
            return "demo"
        return request.variant.value
