from __future__ import annotations
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from TimeTrack.core.clock import Time

EMPTY_TIME_PLACEHOLDER = "--:--"


class Interval(BaseModel):
    """
    One logged stretch of work, e.g. ``12:15-1:30 code2``.
    """
    model_config = ConfigDict(frozen=True)

    start: Time
    end: Time
    label: str = Field(..., min_length=1, description="Project/activity key, case-sensitive")

    @property
    def is_positive(self) -> bool:
        return self.end.minutes > self.start.minutes

    @property
    def duration_minutes(self) -> int:
        # Inverted and empty intervals count as zero
        return max(0, self.end.minutes - self.start.minutes)

    def __str__(self) -> str:
        return f"{self.start}-{self.end} {self.label}"


class Entry(BaseModel):
    model_config = ConfigDict(frozen=True)

    interval: Interval
    notes: Tuple[str, ...] = ()
    line_number: int = Field(..., ge=1, description="1-based line of the interval in the input")


class ProjectSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    total_minutes: int = Field(0, ge=0)
    notes: Tuple[str, ...] = ()

    def clipboard_text(self, prefix: str = "- ") -> str:
        """Notes one per line, ready to paste into a time tracker's notes field."""
        return "\n".join(f"{prefix}{note}" for note in self.notes)


class Report(BaseModel):
    """
    Summary of one pass over the input text. Built fresh on every parse.
    """
    model_config = ConfigDict(frozen=True)

    entries: Tuple[Entry, ...] = ()
    projects: Tuple[ProjectSummary, ...] = ()
    total_minutes: int = Field(0, ge=0)
    dead_time_minutes: int = Field(0, ge=0)
    warnings: Tuple[str, ...] = ()

    def formatted_start_time(self) -> str:
        if not self.entries:
            return EMPTY_TIME_PLACEHOLDER
        return str(self.entries[0].interval.start)

    def formatted_end_time(self) -> str:
        if not self.entries:
            return EMPTY_TIME_PLACEHOLDER
        return str(self.entries[-1].interval.end)

    def formatted_total_minutes(self) -> str:
        return Time.format_duration_minutes(self.total_minutes)

    def formatted_total_decimal(self) -> str:
        return Time.format_duration_decimal(self.total_minutes)

    def formatted_dead_time_minutes(self) -> str:
        return Time.format_duration_minutes(self.dead_time_minutes)

    def formatted_dead_decimal(self) -> str:
        return Time.format_duration_decimal(self.dead_time_minutes)

    def project(self, name: str) -> ProjectSummary:
        for summary in self.projects:
            if summary.name == name:
                return summary
        raise KeyError(name)
