# =============================================================================
# core/config.py  —  Runtime settings from the environment
# =============================================================================
#
# All knobs are environment variables (optionally loaded from a .env file by
# the entry points via python-dotenv).  Nothing here reads files or touches
# the network, so load_settings() is safe to call at import time.
#
#   USER_DIRECTORY_DB_PATH           where the JSON array of users lives
#   USER_DIRECTORY_SERIALIZE_WRITES  "true" → appends go through a lock
#   USER_DIRECTORY_LOG_LEVEL         stderr log level (default INFO)
#   USER_DIRECTORY_SAMPLING_MODEL    LiteLLM model string for the host client
# =============================================================================

import os
from dataclasses import dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_DB_PATH = PROJECT_ROOT / "data" / "users.json"
DEFAULT_SAMPLING_MODEL = "openrouter/openai/gpt-4o"


@dataclass(frozen=True)
class Settings:
    db_path: Path
    serialize_writes: bool = False
    log_level: str = "INFO"
    sampling_model: str = DEFAULT_SAMPLING_MODEL


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    db_path = os.environ.get("USER_DIRECTORY_DB_PATH")
    return Settings(
        db_path=Path(db_path).expanduser() if db_path else DEFAULT_DB_PATH,
        serialize_writes=_env_flag("USER_DIRECTORY_SERIALIZE_WRITES"),
        log_level=os.environ.get("USER_DIRECTORY_LOG_LEVEL", "INFO").upper(),
        sampling_model=os.environ.get(
            "USER_DIRECTORY_SAMPLING_MODEL", DEFAULT_SAMPLING_MODEL
        ),
    )
