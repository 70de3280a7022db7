from __future__ import annotations

import logging
from functools import lru_cache

from TimeTrack.core.aggregate import aggregate
from TimeTrack.core.clock import DEFAULT_DAY_START_HOUR
from TimeTrack.core.entries import parse_entries
from TimeTrack.models import Report

log = logging.getLogger(__name__)

REPORT_CACHE_SIZE = 8


def parse_time_tracking_data(text: str, day_start_hour: int = DEFAULT_DAY_START_HOUR) -> Report:
    """
    Parse free-form time-tracking notes into a Report.

    Never raises for string input: malformed lines, bad times, inverted
    intervals and overlaps all end up in ``Report.warnings``. A
    ``day_start_hour`` outside 1..12 is a caller error and raises ValueError.
    """
    parsed = parse_entries(text, day_start_hour=day_start_hour)
    report = aggregate(parsed.entries, parsed.warnings)
    log.debug(
        f"Parsed {len(report.entries)} entries into {len(report.projects)} projects "
        f"({report.total_minutes} min worked, {report.dead_time_minutes} min dead, "
        f"{len(report.warnings)} warnings)."
    )
    return report


@lru_cache(maxsize=REPORT_CACHE_SIZE)
def parse_time_tracking_data_cached(text: str, day_start_hour: int = DEFAULT_DAY_START_HOUR) -> Report:
    """Memoized ``parse_time_tracking_data`` for callers that re-parse on every keystroke."""
    return parse_time_tracking_data(text, day_start_hour=day_start_hour)
