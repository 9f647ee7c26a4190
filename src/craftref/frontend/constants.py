"""Shared constants for the Textual browser."""

from __future__ import annotations

GRASS_GREEN = "#5D9C3C"
DIAMOND_BLUE = "#4AEDD9"

COMMAND_OPTION_PREFIX = "cmd-"
ENTRY_OPTION_PREFIX = "id-"
