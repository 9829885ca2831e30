"""
Display settings for attribute view rendering.

Everything is read from the environment so embedding applications can tune
rendering without touching call sites:

  ATTRVIEW_LANG   display language for relative durations (default ``en_US``)
  ATTRVIEW_TZ     IANA zone for absolute timestamps (default: local time)
  ATTRVIEW_EXTRA  pydantic extra-mode for wire models: allow|forbid|ignore
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

LOGGER = logging.getLogger(__name__)

DEFAULT_LANG = "en_US"


def _env_extra_mode(default: str = "ignore") -> str:
    """
    Determine the extra-mode from environment vars.

    ATTRVIEW_EXTRA: allow|forbid|ignore
    Convenience booleans: "true/1/on" -> forbid (strict), "false/0/off" -> ignore
    """
    raw = (os.getenv("ATTRVIEW_EXTRA") or default).strip().lower()

    if raw in {"allow", "forbid", "ignore"}:
        return raw

    if raw in {"1", "true", "yes", "on", "strict"}:
        return "forbid"
    if raw in {"0", "false", "no", "off", "lenient"}:
        return "ignore"

    return default


@dataclass(frozen=True)
class DisplaySettings:
    lang: str = DEFAULT_LANG
    # None means the host's local time zone
    timezone: Optional[str] = None

    @property
    def tzinfo(self) -> Optional[tzinfo]:
        if not self.timezone:
            return None
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            LOGGER.warning(
                "attrview.settings.bad_timezone tz=%s; using local time",
                self.timezone,
            )
            return None


def get_settings() -> DisplaySettings:
    """Read the display settings from the current environment."""
    return DisplaySettings(
        lang=(os.getenv("ATTRVIEW_LANG") or DEFAULT_LANG).strip(),
        timezone=(os.getenv("ATTRVIEW_TZ") or "").strip() or None,
    )


__all__ = ["DisplaySettings", "get_settings", "_env_extra_mode", "DEFAULT_LANG"]
