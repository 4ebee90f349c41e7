"""Target file name generation."""
from .errors import MissingExtensionError
from .models import Episode, LocalFile, RenamePlanEntry


def sanitize_title(title: str) -> str:
    """
    Keep only alphanumeric and whitespace characters.

    Args:
        title: Episode title from the catalog

    Returns:
        The filtered title, possibly empty
    """
    return "".join(c for c in title if c.isalnum() or c.isspace())


def format_episode_ordinal(label: str) -> str:
    """Two-digit number for numeric labels, the raw label otherwise."""
    if label.isascii() and label.isdigit():
        return f"{int(label):02d}"
    return label


def file_extension(file: LocalFile) -> str:
    """
    Return the text after the last dot of the file name.

    Raises:
        MissingExtensionError: If the name has no dot or ends with one
    """
    name = file.name
    _stem, dot, extension = name.rpartition(".")
    if not dot or not extension:
        raise MissingExtensionError(name)
    return extension


def plan_name(episode: Episode, file: LocalFile, season: int) -> str:
    """
    Build the new name for *file* as *episode* of *season*.

    ``S01E03 - The Beginning Part One.mkv``

    Raises:
        MissingExtensionError: If *file* has no extension
    """
    extension = file_extension(file)
    ordinal = format_episode_ordinal(episode.episode_label)
    title = sanitize_title(episode.title)
    return f"S{season:02d}E{ordinal} - {title}.{extension}"


def build_plan(
    plan: dict[Episode, LocalFile],
    season: int
) -> tuple[list[RenamePlanEntry], list[tuple[Episode, LocalFile]]]:
    """
    Compute target names for a whole plan, for preview.

    Returns:
        Tuple of (entries, pairs that cannot be named)
    """
    entries = []
    unnamed = []
    for episode, file in plan.items():
        try:
            entries.append(RenamePlanEntry(episode, file, plan_name(episode, file, season)))
        except MissingExtensionError:
            unnamed.append((episode, file))
    return entries, unnamed
