"""Settings management for the series renamer."""
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

log = logging.getLogger(__name__)

APP_DIR_NAME = "SeriesRenamer"
API_KEY_ENV = "OMDB_API_KEY"
API_KEY_PLACEHOLDER = "YOUR_API_KEY_HERE"


# ---------------------------------------------------------------------------
# Platform-appropriate settings directory
# ---------------------------------------------------------------------------

def settings_dir() -> Path:
    """Return the platform settings directory (not created)."""
    if sys.platform == "win32":
        base = Path(os.environ.get("APPDATA", Path.home()))
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base / APP_DIR_NAME


def settings_file() -> Path:
    return settings_dir() / "settings.json"


DEFAULT_SETTINGS: dict[str, Any] = {
    "api_key": API_KEY_PLACEHOLDER,

    # Last used input (not shown anywhere as settings)
    "last_link": "",
    "last_folder": "",
    "last_season": 1,
}


# ---------------------------------------------------------------------------
# SettingsManager -- single authority for reading / writing settings
# ---------------------------------------------------------------------------

class SettingsManager:
    """Settings store backed by a JSON file.

    Usage:
        mgr = SettingsManager()
        key = mgr.get("api_key")
        mgr.set("last_folder", "/media/show")
        mgr.save()
    """

    def __init__(self, path: Path | None = None):
        self.path = path or settings_file()
        self._data = self._load()

    # -- public API -------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        fallback = DEFAULT_SETTINGS.get(key, default)
        return self._data.get(key, fallback)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def save(self) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, ensure_ascii=False)
            return True
        except OSError as e:
            log.warning("Could not save settings to %s: %s", self.path, e)
            return False

    def all(self) -> dict[str, Any]:
        """Return a merged view: defaults + saved values."""
        merged = DEFAULT_SETTINGS.copy()
        merged.update(self._data)
        return merged

    def reload(self) -> None:
        self._data = self._load()

    # -- private ----------------------------------------------------------

    def _load(self) -> dict[str, Any]:
        if self.path.exists():
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    return data
                log.warning("Ignoring malformed settings file %s", self.path)
            except (json.JSONDecodeError, OSError) as e:
                log.warning("Could not read settings from %s: %s", self.path, e)
        return {}


def _usable(key: str | None) -> bool:
    return bool(key) and key.strip() != API_KEY_PLACEHOLDER


def load_api_key(settings: SettingsManager | None = None) -> str | None:
    """
    Load the OMDb API key.

    Priority:
    1. OMDB_API_KEY environment variable
    2. .env file in current directory
    3. .env file in user home directory
    4. settings file

    Returns:
        API key string or None if not configured
    """
    api_key = os.environ.get(API_KEY_ENV)
    if _usable(api_key):
        return api_key

    for env_path in (Path.cwd() / ".env", Path.home() / ".env"):
        if env_path.exists():
            load_dotenv(env_path)
            api_key = os.environ.get(API_KEY_ENV)
            if _usable(api_key):
                return api_key

    if settings is not None:
        api_key = settings.get("api_key")
        if _usable(api_key):
            return api_key.strip()

    return None
