"""Static configuration for craftref.

User-editable settings (catalog location, display limits, assistant models,
logging) live in a single JSON file so they can be tweaked without touching
Python. Secrets come from the environment via python-dotenv.
"""

import json
import os

from dotenv import load_dotenv

from craftref.core.config import DEFAULT_MAX_RESULTS, AssistantConfig, CatalogConfig, DisplayConfig
from craftref.core.locator import DEFAULT_BASE_URL
from craftref.core.models import PLATFORM_JAVA

load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))

# config.json sits at the project root unless CRAFTREF_CONFIG points elsewhere.
CONFIG_PATH = os.getenv("CRAFTREF_CONFIG") or os.path.join(PROJECT_ROOT, "config.json")


def _load_json_config() -> dict:
    """Load config.json; a missing file means built-in defaults."""

    if not os.path.exists(CONFIG_PATH):
        return {}

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        loaded = json.load(handle)
    if not isinstance(loaded, dict):
        raise ValueError(f"Config root must be an object: {CONFIG_PATH}")
    return loaded


_CONFIG = _load_json_config()

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# Remote catalog location (PrismarineJS minecraft-data) and read timeout.
_catalog = _CONFIG.get("catalog", {})
CATALOG = CatalogConfig(
    base_url=_catalog.get("base_url", DEFAULT_BASE_URL),
    timeout_seconds=float(_catalog.get("timeout_seconds", 15)),
)

# Display cap applied to catalog results by the browser and the CLI.
_display = _CONFIG.get("display", {})
DISPLAY = DisplayConfig(max_results=int(_display.get("max_results", DEFAULT_MAX_RESULTS)))

# Search history database; relative paths resolve against the config file.
_history = _CONFIG.get("history", {})
HISTORY_DB_PATH = _history.get("db_path", "craftref.db")
if not os.path.isabs(HISTORY_DB_PATH):
    HISTORY_DB_PATH = os.path.join(os.path.dirname(os.path.abspath(CONFIG_PATH)), HISTORY_DB_PATH)

# Gemini models are tried in order; the key is only read from the environment.
_assistant = _CONFIG.get("assistant", {})
ASSISTANT = AssistantConfig(
    models=tuple(_assistant.get("models", AssistantConfig().models)),
    timeout_seconds=float(_assistant.get("timeout_seconds", 30)),
)
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")

# Startup selection for the browser.
_defaults = _CONFIG.get("defaults", {})
DEFAULT_PLATFORM = _defaults.get("platform", PLATFORM_JAVA)
DEFAULT_VIEW = _defaults.get("view", "commands")

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
