"""Apply a confirmed plan to the filesystem."""
import logging
from pathlib import Path

from .errors import MissingExtensionError
from .models import Episode, LocalFile, RenameFailure, RenameOutcome, RenameSuccess
from .planner import plan_name

log = logging.getLogger(__name__)


def rename_file(source: Path, dest: Path) -> str | None:
    """
    Rename a file in place.

    Args:
        source: Source path
        dest: Destination path, in the same folder

    Returns:
        None on success, otherwise the error message
    """
    try:
        if dest.exists() and source.resolve() != dest.resolve():
            return "destination already exists"
        source.rename(dest)
    except OSError as e:
        return str(e)
    return None


def execute(plan: dict[Episode, LocalFile], season: int) -> list[RenameOutcome]:
    """
    Rename every file of *plan*.

    A failing entry is recorded and the batch carries on. Outcomes follow
    the plan's iteration order; match them by ``old_path``.
    """
    outcomes: list[RenameOutcome] = []

    for episode, file in plan.items():
        try:
            new_name = plan_name(episode, file, season)
        except MissingExtensionError:
            log.warning("Skipping %s: missing extension", file.path)
            outcomes.append(RenameFailure(file.path, "missing extension"))
            continue

        new_path = file.path.parent / new_name
        error = rename_file(file.path, new_path)
        if error:
            log.error("Rename failed for %s: %s", file.path, error)
            outcomes.append(RenameFailure(file.path, error))
        else:
            log.info("Renamed: %s -> %s", file.path.name, new_name)
            outcomes.append(RenameSuccess(file.path, new_path))

    return outcomes


def summarize(outcomes: list[RenameOutcome]) -> tuple[int, int]:
    """Return (renamed, errors)."""
    renamed = sum(1 for o in outcomes if isinstance(o, RenameSuccess))
    return renamed, len(outcomes) - renamed


def format_report(outcomes: list[RenameOutcome]) -> str:
    """Human-readable report of a rename batch."""
    lines = []
    for outcome in outcomes:
        if isinstance(outcome, RenameSuccess):
            lines.append(f"  {outcome.old_path.name}\n  -> {outcome.new_path.name}")
        else:
            lines.append(f"  [ERROR] {outcome.old_path.name}\n          {outcome.reason}")

    renamed, errors = summarize(outcomes)
    lines.append("-" * 50)
    lines.append(f"Renamed: {renamed} | Errors: {errors}")
    return "\n".join(lines)
