"""Background fetch of the folder listing and the season episode list.

A fetch attempt runs on one daemon thread and reports exactly one
``FetchResult`` through a queue owned by its ``FetchHandle``. The
interactive loop calls ``FetchCoordinator.poll`` on every tick; it never
blocks.

Every attempt gets a generation number. Results carry it, so a consumer
can tell a late result of an abandoned attempt from the current one.
"""
import logging
import queue
import threading
from dataclasses import dataclass, field
from pathlib import Path

from .errors import CatalogError, ChannelDisconnectedError
from .models import Failed, Fetched, FetchResult
from .omdb import resolve_and_fetch
from .scanner import scan

log = logging.getLogger(__name__)


@dataclass
class FetchHandle:
    """Receiving end of one fetch attempt."""
    generation: int
    channel: queue.Queue = field(default_factory=queue.Queue, repr=False)
    thread: threading.Thread | None = field(default=None, repr=False)
    delivered: bool = False


class FetchCoordinator:
    """Starts fetch workers and hands their results to the caller.

    The coordinator does not enforce single-flight; callers gate
    ``start`` on their own in-flight flag.
    """

    def __init__(self):
        self._generation = 0

    @property
    def current_generation(self) -> int:
        return self._generation

    def is_current(self, result: FetchResult) -> bool:
        """True if *result* belongs to the most recently started attempt."""
        return result.generation == self._generation

    def start(
        self,
        link: str,
        root: Path | str,
        season: int,
        api_key: str
    ) -> FetchHandle:
        """Spawn a worker that scans *root* and fetches *season*."""
        self._generation += 1
        handle = FetchHandle(generation=self._generation)
        handle.thread = threading.Thread(
            target=_run_fetch,
            args=(handle.channel, handle.generation, link, Path(root), season, api_key),
            name=f"fetch-{handle.generation}",
            daemon=True,
        )
        log.debug("Starting fetch %d for %s", handle.generation, root)
        handle.thread.start()
        return handle

    def poll(self, handle: FetchHandle) -> FetchResult | None:
        """
        Return the attempt's result if it has arrived.

        Returns None while the worker is still running, and after the
        result has been handed out once.

        Raises:
            ChannelDisconnectedError: If the worker ended without a result
        """
        if handle.delivered:
            return None
        try:
            result = handle.channel.get_nowait()
        except queue.Empty:
            if handle.thread is not None and handle.thread.is_alive():
                return None
            # The worker may have sent right before exiting.
            try:
                result = handle.channel.get_nowait()
            except queue.Empty:
                handle.delivered = True
                raise ChannelDisconnectedError(
                    f"fetch {handle.generation} ended without a result"
                ) from None
        handle.delivered = True
        return result


def _run_fetch(
    channel: queue.Queue,
    generation: int,
    link: str,
    root: Path,
    season: int,
    api_key: str
) -> None:
    """Worker body: scan, then fetch, then send one message."""
    files = scan(root)
    try:
        episodes = resolve_and_fetch(link, season, api_key)
    except CatalogError as e:
        log.warning("Fetch %d failed: %s", generation, e)
        channel.put(Failed(reason=str(e), generation=generation))
        return
    channel.put(Fetched(episodes=episodes, files=files, generation=generation))
