"""
Line-oriented parser for time-tracking notes.

Input looks like::

    11:45-12:15 code1
    - Comment explaining what you did
    12:15-1:30 code2

Every line is classified on its own (blank, note, interval or unrecognized) so
one bad line never spoils the rest of the text. Problems become warning
strings prefixed with the 1-based line number.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from TimeTrack.core.clock import DEFAULT_DAY_START_HOUR, Time, TimeParseError, check_day_start_hour
from TimeTrack.models import Entry, Interval

log = logging.getLogger(__name__)

NOTE_MARKERS = ("-", "*", "•")

# "9 am", "4:15 p.m." written with a space before the suffix. On the end time a
# spaced suffix needs a label after it, so "1-3 pm" is a project called "pm".
_START_MERIDIEM = r"(?:\s+[ap]\.?m\.?(?=\s*-))?"
_END_MERIDIEM = r"(?:\s+[ap]\.?m\.?(?=\s+\S))?"
_INTERVAL_RE = re.compile(
    rf"^(?P<start>\d[^\s-]*{_START_MERIDIEM})\s*-\s*(?P<end>[^\s-]\S*{_END_MERIDIEM})(?:\s+(?P<label>.*\S))?\s*$",
    re.IGNORECASE,
)


@dataclass
class ParsedEntries:
    entries: List[Entry] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


@dataclass
class _OpenEntry:
    interval: Interval
    line_number: int
    notes: List[str] = field(default_factory=list)

    def close(self) -> Entry:
        return Entry(interval=self.interval, notes=self.notes, line_number=self.line_number)


def _note_text(line: str) -> Optional[str]:
    stripped = line.lstrip()
    for marker in NOTE_MARKERS:
        if stripped.startswith(marker):
            return stripped[len(marker):].strip()
    return None


def parse_entries(text: str, day_start_hour: int = DEFAULT_DAY_START_HOUR) -> ParsedEntries:
    check_day_start_hour(day_start_hour)
    result = ParsedEntries()
    current: Optional[_OpenEntry] = None

    def warn(line_number: int, message: str) -> None:
        msg = f"Line {line_number}: {message}"
        log.debug(msg)
        result.warnings.append(msg)

    def flush() -> None:
        nonlocal current
        if current is not None:
            result.entries.append(current.close())
            current = None

    for line_number, line in enumerate((text or "").splitlines(), start=1):
        if not line.strip():
            continue

        m = _INTERVAL_RE.match(line.strip())
        if m:
            flush()
            start_token, end_token, label = m.group("start"), m.group("end"), m.group("label")
            try:
                start = Time.parse(start_token, day_start_hour)
            except TimeParseError as e:
                warn(line_number, f"invalid start time in {line.strip()!r} ({e})")
                continue
            try:
                end = Time.parse(end_token, day_start_hour)
            except TimeParseError as e:
                warn(line_number, f"invalid end time in {line.strip()!r} ({e})")
                continue
            if not label:
                warn(line_number, f"time entry {line.strip()!r} has no project label")
                continue

            interval = Interval(start=start, end=end, label=label)
            if not interval.is_positive:
                warn(line_number, f"entry {interval} ends before or when it starts; counted as 0 minutes")
            log.debug(f"Line {line_number}: interval {interval}")
            current = _OpenEntry(interval=interval, line_number=line_number)
            continue

        note = _note_text(line)
        if note is not None:
            if not note:
                continue
            if current is None:
                warn(line_number, f"note {note!r} has no preceding time entry; ignored")
                continue
            current.notes.append(note)
            continue

        warn(line_number, f"unrecognized line {line.strip()!r}")

    flush()
    return result
