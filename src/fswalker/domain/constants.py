from __future__ import annotations

"""
Domain Constants.

Centralizes the static values shared by the traversal engine, the derived
utilities and the configuration layer.
"""

APP_NAME = "fswalker"
APP_VERSION = "1.0.0"
CURRENT_CONFIG_VERSION = "1.0.0"

# Entries whose name starts with this marker never reach a visitor
HIDDEN_MARKER = "."

# Value that marks a file inside an in-memory nested structure
FILE_SENTINEL = ""

OUTPUT_FORMATS = ("text", "json")
