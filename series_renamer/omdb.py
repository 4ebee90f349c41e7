"""OMDb API client module."""
import logging
from typing import Any

import requests

from .errors import ApiError, DecodeError, NetworkError, NoIdentifierError
from .models import Episode

log = logging.getLogger(__name__)

OMDB_BASE_URL = "https://www.omdbapi.com/"
DEFAULT_TIMEOUT = 10
IMDB_ID_PREFIX = "tt"


def extract_imdb_id(link: str) -> str:
    """
    Extract the IMDb identifier from a user supplied link.

    The link is split on slashes and the first segment starting with
    ``tt`` is returned, so both ``https://www.imdb.com/title/tt0903747/``
    and a bare ``tt0903747`` work.

    Raises:
        NoIdentifierError: If no segment carries the prefix
    """
    for segment in link.strip().split("/"):
        if segment.startswith(IMDB_ID_PREFIX):
            return segment
    raise NoIdentifierError(link)


def _parse_episode(item: dict[str, Any]) -> Episode:
    return Episode(
        title=str(item.get("Title") or ""),
        episode_label=str(item.get("Episode") or ""),
        external_id=str(item.get("imdbID") or ""),
    )


class OMDbClient:
    """Client for the OMDb season endpoint."""

    def __init__(
        self,
        api_key: str,
        base_url: str = OMDB_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT
    ):
        """
        Initialize OMDb client.

        Args:
            api_key: OMDb API key, passed through without validation.
            base_url: Endpoint URL.
            timeout: Request timeout in seconds.
        """
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    def _request(self, params: dict[str, Any]) -> dict[str, Any]:
        """
        Make a single GET request and decode the JSON object body.

        No retries: one attempt per call.
        """
        log.debug("GET %s params=%s", self.base_url, params)
        all_params = {**params, "apikey": self.api_key}

        try:
            response = requests.get(self.base_url, params=all_params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise NetworkError(str(e)) from e

        log.debug("Response status: %s", response.status_code)

        if not 200 <= response.status_code < 300:
            raise ApiError(response.status_code, response.reason or "")

        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(str(e)) from e

        if not isinstance(data, dict):
            raise DecodeError(f"expected a JSON object, got {type(data).__name__}")
        return data

    def get_season(self, imdb_id: str, season: int) -> list[Episode]:
        """
        Fetch the episode list of one season.

        Args:
            imdb_id: IMDb identifier of the show (``tt...``)
            season: Season number

        Returns:
            Episodes in catalog order, empty if OMDb lists none
        """
        data = self._request({"i": imdb_id, "Season": season})

        if data.get("Response") == "False":
            log.warning("OMDb error for %s season %s: %s",
                        imdb_id, season, data.get("Error", "unknown"))

        raw_episodes = data.get("Episodes") or []
        if not isinstance(raw_episodes, list):
            raise DecodeError("'Episodes' is not an array")

        episodes = [
            _parse_episode(item) for item in raw_episodes
            if isinstance(item, dict)
        ]
        log.info("Fetched %d episode(s) for %s season %s",
                 len(episodes), imdb_id, season)
        return episodes


def resolve_and_fetch(link: str, season: int, api_key: str) -> list[Episode]:
    """Resolve the identifier from *link* and fetch *season* of that show."""
    imdb_id = extract_imdb_id(link)
    return OMDbClient(api_key).get_season(imdb_id, season)
