"""
Roll parsed entries up into a Report.

Dead time is measured only between entries that are adjacent in the input,
not across a global merge of all intervals. Entries are expected to be
written roughly in the order they happened.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from TimeTrack.models import Entry, ProjectSummary, Report

log = logging.getLogger(__name__)


def _group_by_project(entries: Sequence[Entry]) -> List[ProjectSummary]:
    totals: Dict[str, int] = {}
    notes: Dict[str, List[str]] = {}
    for entry in entries:
        label = entry.interval.label
        # dicts keep first-seen order of labels
        totals[label] = totals.get(label, 0) + entry.interval.duration_minutes
        notes.setdefault(label, []).extend(entry.notes)
    return [
        ProjectSummary(name=label, total_minutes=total, notes=notes[label])
        for label, total in totals.items()
    ]


def _dead_time(entries: Sequence[Entry], warnings: List[str]) -> int:
    dead = 0
    previous: Optional[Entry] = None
    for entry in entries:
        if not entry.interval.is_positive:
            continue
        if previous is not None:
            gap = entry.interval.start.minutes - previous.interval.end.minutes
            if gap > 0:
                dead += gap
            elif gap < 0:
                msg = f"Overlapping entries between {previous.interval} and {entry.interval}"
                log.debug(msg)
                warnings.append(msg)
        previous = entry
    return dead


def aggregate(entries: Sequence[Entry], warnings: Iterable[str] = ()) -> Report:
    all_warnings = list(warnings)
    projects = _group_by_project(entries)
    dead = _dead_time(entries, all_warnings)
    total = sum(entry.interval.duration_minutes for entry in entries)
    return Report(
        entries=list(entries),
        projects=projects,
        total_minutes=total,
        dead_time_minutes=dead,
        warnings=all_warnings,
    )
