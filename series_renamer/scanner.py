"""Directory scanning."""
import logging
import os
from pathlib import Path

from .models import LocalFile

log = logging.getLogger(__name__)


def _on_walk_error(error: OSError) -> None:
    log.debug("Skipping unreadable entry %s: %s", error.filename, error)


def scan(root: Path | str) -> list[LocalFile]:
    """
    Find all regular files below a folder.

    Symlinks are not regular files and are left out. Unreadable subtrees
    and entries that vanish during the walk are skipped. Order is
    traversal order.

    Args:
        root: Folder to walk recursively

    Returns:
        One LocalFile per regular file
    """
    root = Path(root)
    if not root.is_dir():
        log.debug("Not a directory: %s", root)
        return []

    files = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_on_walk_error):
        for filename in filenames:
            path = Path(dirpath) / filename
            try:
                if path.is_file() and not path.is_symlink():
                    files.append(LocalFile(path))
            except OSError as e:
                log.debug("Skipping %s: %s", path, e)

    log.info("Found %d file(s) under %s", len(files), root)
    return files
