"""Window presets for the analytics views.

A preset names a look-back period ending now: one week, or one, three or six
calendar months. Month arithmetic clamps to the last day of the target month
(31 March minus one month is 28/29 February).
"""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta
from typing import Tuple

from mindscape.core.utils.dates import now_local, to_local_naive

DEFAULT_PRESET = "1M"

WINDOW_PRESETS = {
    "1W": ("weeks", 1),
    "1M": ("months", 1),
    "3M": ("months", 3),
    "6M": ("months", 6),
}


def resolve_window(preset: str | None, now: datetime | None = None) -> Tuple[datetime, datetime]:
    """Return ``(start, end)`` for ``preset``; unknown or missing presets fall back to one month."""
    end = to_local_naive(now) if now else now_local()
    unit, amount = WINDOW_PRESETS.get((preset or "").strip().upper(), WINDOW_PRESETS[DEFAULT_PRESET])
    if unit == "weeks":
        return end - timedelta(weeks=amount), end
    return subtract_months(end, amount), end


def subtract_months(value: datetime, months: int) -> datetime:
    total = value.year * 12 + (value.month - 1) - months
    year, month = divmod(total, 12)
    month += 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


__all__ = ["DEFAULT_PRESET", "WINDOW_PRESETS", "resolve_window", "subtract_months"]
