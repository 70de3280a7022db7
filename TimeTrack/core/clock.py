"""
Wall-clock times for a single working day.

A ``Time`` is a minute-of-day (0..1439). Tokens are written the way people jot
them in notes: ``2``, ``1:30``, ``11:45``, ``9am``, ``4:15 PM`` or 24-hour
``14:30``. Bare 12-hour values are placed on the *working-day clock*: an hour
below ``day_start_hour`` is read as afternoon, so ``2`` is 14:00 while
``11:45`` stays in the morning.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict, Field

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR
DEFAULT_DAY_START_HOUR = 7

_TOKEN_RE = re.compile(
    r"^(?P<hour>\d{1,2})(?::(?P<minute>\d{2}))?(?:\s*(?P<meridiem>[ap])\.?(?:m\.?)?)?$",
    re.IGNORECASE,
)


class TimeParseError(ValueError):
    """Raised when a token cannot be read as a time of day."""


def check_day_start_hour(day_start_hour: int) -> int:
    if not 1 <= day_start_hour <= 12:
        raise ValueError(f"day_start_hour must be between 1 and 12, got {day_start_hour}")
    return day_start_hour


class Time(BaseModel):
    """A minute-of-day value."""

    model_config = ConfigDict(frozen=True)

    minutes: int = Field(..., ge=0, lt=MINUTES_PER_DAY, description="Minutes since midnight")

    @classmethod
    def parse(cls, token: str, day_start_hour: int = DEFAULT_DAY_START_HOUR) -> Time:
        check_day_start_hour(day_start_hour)
        raw = (token or "").strip()
        if not raw:
            raise TimeParseError("empty time")

        m = _TOKEN_RE.match(raw)
        if not m:
            raise TimeParseError(f"invalid time {raw!r}")

        hour = int(m.group("hour"))
        minute = int(m.group("minute") or 0)
        meridiem = (m.group("meridiem") or "").lower()

        if minute >= MINUTES_PER_HOUR:
            raise TimeParseError(f"invalid minutes in {raw!r}")
        if hour > 23:
            raise TimeParseError(f"invalid hour in {raw!r}")

        if meridiem:
            if not 1 <= hour <= 12:
                raise TimeParseError(f"invalid 12-hour time {raw!r}")
            hour = hour % 12 + (12 if meridiem == "p" else 0)
        elif 1 <= hour < day_start_hour:
            hour += 12

        return cls(minutes=hour * MINUTES_PER_HOUR + minute)

    @property
    def hour(self) -> int:
        return self.minutes // MINUTES_PER_HOUR

    @property
    def minute(self) -> int:
        return self.minutes % MINUTES_PER_HOUR

    def __str__(self) -> str:
        # 12-hour face without suffix, matching how entries are written
        return f"{self.hour % 12 or 12}:{self.minute:02d}"

    @staticmethod
    def format_duration_minutes(minutes: int) -> str:
        """
        Human-readable duration.

        ``0 -> "0 minutes"``, ``45 -> "45 minutes"``, ``60 -> "1 hour"``,
        ``90 -> "1 hour 30 minutes"``.
        """
        if minutes < 0:
            raise ValueError(f"duration must be non-negative, got {minutes}")
        hours, mins = divmod(minutes, MINUTES_PER_HOUR)
        parts = []
        if hours:
            parts.append(f"{hours} hour" + ("" if hours == 1 else "s"))
        if mins or not hours:
            parts.append(f"{mins} minute" + ("" if mins == 1 else "s"))
        return " ".join(parts)

    @staticmethod
    def format_duration_decimal(minutes: int) -> str:
        """Hours with two decimals, rounded half-up (``90 -> "1.50"``)."""
        if minutes < 0:
            raise ValueError(f"duration must be non-negative, got {minutes}")
        hours = Decimal(minutes) / Decimal(MINUTES_PER_HOUR)
        return str(hours.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
