from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from plotta.config import DEFAULT_TZ

DateFormatter = Callable[[float, str], str]


def format_timestamp(ts: float, pattern: str, tz: Optional[ZoneInfo] = None) -> str:
  """Render a unix timestamp with a strftime pattern, e.g. ``"%Y-%m-%d"``."""
  zone = tz or ZoneInfo(DEFAULT_TZ)
  return datetime.fromtimestamp(float(ts), zone).strftime(pattern)


def make_formatter(tz: Optional[ZoneInfo] = None) -> DateFormatter:
  zone = tz or ZoneInfo(DEFAULT_TZ)

  def fmt(ts: float, pattern: str) -> str:
    return format_timestamp(ts, pattern, zone)

  return fmt
