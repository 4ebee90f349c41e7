"""File to episode assignment.

``AssignmentModel`` is the only writer of the rename plan. It keeps two
indexes (episode -> file and file -> episode) in step, so a file can never
sit under two episodes, and every file known at seed time is either in the
plan or in the unassigned pool, never both.
"""
import logging
from typing import Iterable

from .models import Episode, LocalFile

log = logging.getLogger(__name__)


def episode_sort_key(episode: Episode) -> tuple[int, int, str]:
    """Sort numeric labels numerically, anything else after them."""
    label = episode.episode_label.strip()
    if label.isascii() and label.isdigit():
        return (0, int(label), label)
    return (1, 0, label)


class AssignmentModel:
    """Episodes, unassigned files and the in-progress plan.

    Usage::

        model = AssignmentModel()
        model.seed(episodes, files)
        model.assign(files[0], episodes[0])
        plan = model.confirmed_plan()
    """

    def __init__(self):
        self._episodes: set[Episode] = set()
        self._unassigned: list[LocalFile] = []
        self._plan: dict[Episode, LocalFile] = {}
        self._by_file: dict[LocalFile, Episode] = {}

    # -- state -------------------------------------------------------------

    def seed(self, episodes: Iterable[Episode], files: Iterable[LocalFile]) -> None:
        """Replace all state with a fresh fetch result."""
        self._episodes = set(episodes)
        self._unassigned = list(dict.fromkeys(files))
        self._plan = {}
        self._by_file = {}
        log.debug("Seeded %d episode(s), %d file(s)",
                  len(self._episodes), len(self._unassigned))

    def clear(self) -> None:
        self.seed((), ())

    @property
    def episodes(self) -> list[Episode]:
        return sorted(self._episodes, key=episode_sort_key)

    @property
    def unassigned(self) -> tuple[LocalFile, ...]:
        return tuple(self._unassigned)

    @property
    def is_empty(self) -> bool:
        return not self._episodes and not self._unassigned

    def __len__(self) -> int:
        return len(self._plan)

    def file_for(self, episode: Episode) -> LocalFile | None:
        return self._plan.get(episode)

    def episode_for(self, file: LocalFile) -> Episode | None:
        return self._by_file.get(file)

    def confirmed_plan(self) -> dict[Episode, LocalFile]:
        """Snapshot of the plan, in assignment order."""
        return dict(self._plan)

    # -- mutation ----------------------------------------------------------

    def assign(self, file: LocalFile, episode: Episode) -> None:
        """
        Put *file* in *episode*'s slot.

        The file leaves wherever it was (unassigned pool or another
        episode). A different file already holding the slot goes back to
        the unassigned pool.

        Raises:
            KeyError: If *episode* is not one of the seeded episodes
        """
        if episode not in self._episodes:
            raise KeyError(episode)

        if file in self._unassigned:
            self._unassigned.remove(file)

        previous_episode = self._by_file.pop(file, None)
        if previous_episode is not None:
            del self._plan[previous_episode]

        displaced = self._plan.pop(episode, None)
        if displaced is not None and displaced != file:
            del self._by_file[displaced]
            self._return_to_pool(displaced)

        self._plan[episode] = file
        self._by_file[file] = episode

    def unassign(self, file: LocalFile) -> None:
        """Move *file* back to the unassigned pool. No-op if already there."""
        episode = self._by_file.pop(file, None)
        if episode is not None:
            del self._plan[episode]
        self._return_to_pool(file)

    def _return_to_pool(self, file: LocalFile) -> None:
        if file not in self._unassigned:
            self._unassigned.append(file)
