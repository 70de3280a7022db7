"""
TimeTrack: turn free-form time-tracking notes into a daily summary.

The core is a pure function, ``parse_time_tracking_data(text) -> Report``.
"""
import logging

# Applications using this package configure their own logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

from TimeTrack.core.clock import Time, TimeParseError
from TimeTrack.core.parser import parse_time_tracking_data, parse_time_tracking_data_cached
from TimeTrack.models import Entry, Interval, ProjectSummary, Report

__all__ = [
    "Entry",
    "Interval",
    "ProjectSummary",
    "Report",
    "Time",
    "TimeParseError",
    "parse_time_tracking_data",
    "parse_time_tracking_data_cached",
]

VERSION = "0.1.0"
