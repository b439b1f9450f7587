"""Listing settings with JSON persistence.

Settings live in ``~/.pi/listing.json``. Values given as overrides win over
the file, and ``None`` values never replace a setting.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pi.listing.provider import DEFAULT_PLACEHOLDER
from pi.listing.scrollbar import THUMB, TRACK

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".pi"
SETTINGS_FILE_NAME = "listing.json"


@dataclass
class ListingSettings:
    """Display and binding options shared by all listing modes."""

    max_height: int = 10
    placeholder: str = DEFAULT_PLACEHOLDER
    scrollbar_thumb: str = THUMB
    scrollbar_track: str = TRACK
    # mode -> key id -> builtin name
    keybindings: dict[str, dict[str, str]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ListingSettings:
        defaults = cls()
        keybindings = data.get("keybindings") or {}
        if not isinstance(keybindings, dict):
            raise ValueError("keybindings must be an object keyed by mode")
        return cls(
            max_height=int(data.get("maxHeight", defaults.max_height)),
            placeholder=str(data.get("placeholder", defaults.placeholder)),
            scrollbar_thumb=str(data.get("scrollbarThumb", defaults.scrollbar_thumb)),
            scrollbar_track=str(data.get("scrollbarTrack", defaults.scrollbar_track)),
            keybindings={
                str(mode): {str(k): str(v) for k, v in table.items()}
                for mode, table in keybindings.items()
                if isinstance(table, dict)
            },
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "maxHeight": self.max_height,
            "placeholder": self.placeholder,
            "scrollbarThumb": self.scrollbar_thumb,
            "scrollbarTrack": self.scrollbar_track,
            "keybindings": {mode: dict(t) for mode, t in self.keybindings.items()},
        }


def deep_merge_settings(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge *overrides* into *base*.

    Nested dicts are merged; any other value in *overrides* replaces the
    one in *base*. ``None`` values are skipped.
    """
    result = dict(base)
    for key, value in overrides.items():
        if value is None:
            continue
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge_settings(result[key], value)
        else:
            result[key] = value
    return result


def default_settings_path() -> str:
    return os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME, SETTINGS_FILE_NAME)


def _load_from_file(path: str) -> tuple[dict[str, Any], Exception | None]:
    """Load settings from a JSON file. Returns (settings, error)."""
    if not os.path.exists(path):
        return {}, None
    try:
        content = Path(path).read_text(encoding="utf-8")
        settings = json.loads(content)
    except (OSError, json.JSONDecodeError) as e:
        return {}, e
    if not isinstance(settings, dict):
        return {}, ValueError(f"{path}: expected a JSON object")
    return settings, None


def load_listing_settings(
    path: str | None = None,
    overrides: dict[str, Any] | None = None,
) -> tuple[ListingSettings, Exception | None]:
    """Read settings from *path* (default ``~/.pi/listing.json``).

    A missing file yields the defaults. A file that cannot be read or
    parsed also yields the defaults, and the error is returned alongside
    so the caller can report it.
    """
    path = path or default_settings_path()
    raw, error = _load_from_file(path)
    if error is not None:
        logger.warning("Ignoring listing settings in %s: %s", path, error)
    merged = deep_merge_settings(raw, overrides or {})
    try:
        return ListingSettings.from_dict(merged), error
    except (TypeError, ValueError) as e:
        logger.warning("Invalid listing settings in %s: %s", path, e)
        return ListingSettings(), e


def save_listing_settings(settings: ListingSettings, path: str | None = None) -> None:
    path = path or default_settings_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    Path(path).write_text(
        json.dumps(settings.to_dict(), indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
