"""Data models for the series renamer."""
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Episode:
    """Represents one episode of a season from OMDb."""
    title: str
    episode_label: str  # raw catalog value, not guaranteed numeric
    external_id: str = ""


@dataclass(frozen=True)
class LocalFile:
    """A file found under the scanned folder."""
    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    def __str__(self) -> str:
        return str(self.path)


@dataclass
class Fetched:
    """Successful fetch attempt."""
    episodes: list[Episode] = field(default_factory=list)
    files: list[LocalFile] = field(default_factory=list)
    generation: int = 0


@dataclass
class Failed:
    """Failed fetch attempt."""
    reason: str
    generation: int = 0


FetchResult = Fetched | Failed


@dataclass
class RenamePlanEntry:
    """A planned rename, derived just before preview or execution."""
    episode: Episode
    file: LocalFile
    target_name: str

    @property
    def target_path(self) -> Path:
        return self.file.path.parent / self.target_name


@dataclass
class RenameSuccess:
    """Represents a completed rename."""
    old_path: Path
    new_path: Path


@dataclass
class RenameFailure:
    """Represents a rename that did not happen."""
    old_path: Path
    reason: str


RenameOutcome = RenameSuccess | RenameFailure
