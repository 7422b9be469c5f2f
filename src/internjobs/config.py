import logging
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def get_config() -> dict[str, str]:
    """
    Load configuration from environment variables.
    Called lazily so importing the package never touches the environment twice.
    """
    return {
        "PREFERENCE_DB_PATH": os.getenv("INTERNJOBS_PREFERENCE_DB", "preferences.db"),
        "LOG_LEVEL": os.getenv("INTERNJOBS_LOG_LEVEL", "INFO"),
        "ANY_LOCATION": os.getenv("INTERNJOBS_ANY_LOCATION", "United States"),
    }


class _Config:
    """Lazy configuration that only validates when values are actually accessed."""

    def __init__(self) -> None:
        self._config: dict[str, str] | None = None

    def _load(self) -> dict[str, str]:
        if self._config is None:
            self._config = get_config()
        return self._config

    @property
    def PREFERENCE_DB_PATH(self) -> str:
        """Path of the SQLite file holding the education-level preference."""
        raw = self._load()["PREFERENCE_DB_PATH"].strip()
        if not raw:
            raise ValueError("INTERNJOBS_PREFERENCE_DB must not be empty.")
        return raw

    @property
    def LOG_LEVEL(self) -> str:
        """Logging level name, e.g. DEBUG or INFO."""
        raw = self._load()["LOG_LEVEL"].strip().upper()
        if raw not in logging.getLevelNamesMapping():
            raise ValueError(f"INTERNJOBS_LOG_LEVEL must be a logging level name, got '{raw}'")
        return raw

    @property
    def ANY_LOCATION(self) -> str:
        """Location value that means "anywhere". Empty string disables it."""
        return self._load()["ANY_LOCATION"].strip()


_cfg = _Config()

# Module-level type declarations for mypy.
# The actual values come from __getattr__ below.
PREFERENCE_DB_PATH: str
LOG_LEVEL: str
ANY_LOCATION: str


# Module-level lazy access using __getattr__ (PEP 562).
def __getattr__(name: str) -> str:
    if name == "PREFERENCE_DB_PATH":
        return _cfg.PREFERENCE_DB_PATH
    if name == "LOG_LEVEL":
        return _cfg.LOG_LEVEL
    if name == "ANY_LOCATION":
        return _cfg.ANY_LOCATION
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
