"""Interactive session state.

One ``Session`` is owned by the front end's event loop. It holds the user
input, the in-flight latch and the assignment model, and is the only thing
the front ends talk to.
"""
import logging
from dataclasses import dataclass, field

from .assignment import AssignmentModel
from .errors import ChannelDisconnectedError, NoIdentifierError
from .executor import execute, format_report, summarize
from .fetch import FetchCoordinator, FetchHandle
from .models import Episode, Failed, Fetched, LocalFile, RenameOutcome, RenamePlanEntry
from .omdb import extract_imdb_id
from .planner import build_plan

log = logging.getLogger(__name__)


@dataclass
class Session:
    """State of one interactive run."""
    link: str = ""
    directory: str = ""
    season: int = 1
    api_key: str = ""
    model: AssignmentModel = field(default_factory=AssignmentModel)
    coordinator: FetchCoordinator = field(default_factory=FetchCoordinator)
    status: str = ""
    report: str = ""
    error: str | None = None
    _handle: FetchHandle | None = field(default=None, init=False, repr=False)

    @property
    def is_fetching(self) -> bool:
        return self._handle is not None

    def can_fetch(self) -> bool:
        return (
            not self.is_fetching
            and bool(self.link.strip())
            and bool(self.directory.strip())
            and bool(self.api_key.strip())
        )

    def start_fetch(self) -> bool:
        """
        Start a fetch attempt for the current input.

        Returns:
            True if a worker was started
        """
        if self.is_fetching:
            return False
        if not self.can_fetch():
            self.error = self.status = "Enter an IMDb link, a folder and an API key first"
            return False
        try:
            extract_imdb_id(self.link)
        except NoIdentifierError as e:
            self.error = self.status = str(e)
            return False

        self.report = ""
        self.error = None
        self._handle = self.coordinator.start(
            self.link, self.directory, self.season, self.api_key
        )
        self.status = f"Fetching season {self.season}..."
        return True

    def tick(self) -> bool:
        """
        Poll the running fetch, if any. Never blocks.

        Returns:
            True if the session state changed
        """
        if self._handle is None:
            return False

        try:
            result = self.coordinator.poll(self._handle)
        except ChannelDisconnectedError as e:
            log.error("Internal error: %s", e)
            self._handle = None
            self.error = f"Internal error: {e}"
            self.status = self.error
            return True

        if result is None:
            return False
        self._handle = None

        if not self.coordinator.is_current(result):
            log.debug("Discarding stale result of fetch %d", result.generation)
            return False

        if isinstance(result, Failed):
            self.error = result.reason
            self.status = f"Fetch failed: {result.reason}"
        elif isinstance(result, Fetched):
            self.model.seed(result.episodes, result.files)
            self.status = (
                f"Fetched {len(result.episodes)} episode(s), "
                f"found {len(result.files)} file(s)"
            )
        return True

    # -- editing -----------------------------------------------------------

    def assign(self, file: LocalFile, episode: Episode) -> None:
        self.model.assign(file, episode)

    def unassign(self, file: LocalFile) -> None:
        self.model.unassign(file)

    # -- confirmation ------------------------------------------------------

    def preview(self) -> list[RenamePlanEntry]:
        entries, _unnamed = build_plan(self.model.confirmed_plan(), self.season)
        return entries

    def confirm(self) -> list[RenameOutcome]:
        """Rename the planned files, keep the report and reset the model."""
        outcomes = execute(self.model.confirmed_plan(), self.season)
        renamed, errors = summarize(outcomes)
        self.report = format_report(outcomes)
        self.status = f"Renamed {renamed} file(s), {errors} error(s)"
        # Paths in the model are stale once anything was renamed
        self.model.clear()
        return outcomes
