"""
Series Renamer

Rename the episode files of one season using OMDb metadata.
"""
from .models import (
    Episode,
    LocalFile,
    Fetched,
    Failed,
    RenamePlanEntry,
    RenameSuccess,
    RenameFailure,
)
from .errors import (
    RenamerError,
    CatalogError,
    NoIdentifierError,
    NetworkError,
    ApiError,
    DecodeError,
    ChannelDisconnectedError,
    MissingExtensionError,
)
from .omdb import OMDbClient, extract_imdb_id, resolve_and_fetch
from .scanner import scan
from .fetch import FetchCoordinator, FetchHandle
from .assignment import AssignmentModel
from .planner import plan_name, build_plan
from .executor import execute, format_report
from .session import Session

__version__ = "0.1.0"
__all__ = [
    "Episode",
    "LocalFile",
    "Fetched",
    "Failed",
    "RenamePlanEntry",
    "RenameSuccess",
    "RenameFailure",
    "RenamerError",
    "CatalogError",
    "NoIdentifierError",
    "NetworkError",
    "ApiError",
    "DecodeError",
    "ChannelDisconnectedError",
    "MissingExtensionError",
    "OMDbClient",
    "extract_imdb_id",
    "resolve_and_fetch",
    "scan",
    "FetchCoordinator",
    "FetchHandle",
    "AssignmentModel",
    "plan_name",
    "build_plan",
    "execute",
    "format_report",
    "Session",
]
