"""
Plain-text and JSON views of a Report.

Mirrors the "Time Summary" panel: overview, working time, dead time,
warnings, then one block per project with its notes.
"""

from __future__ import annotations

import json
from typing import List, Literal

from TimeTrack.config import Settings
from TimeTrack.core.clock import Time
from TimeTrack.models import Report

DeadTimeLevel = Literal["none", "moderate", "high"]

NO_DEAD_TIME_TEXT = "No dead time (gaps) found"
NO_PROJECTS_TEXT = "No projects found. Enter your time tracking data to see the breakdown."


def dead_time_level(minutes: int, alert_minutes: int = 90) -> DeadTimeLevel:
    if minutes <= 0:
        return "none"
    if minutes < alert_minutes:
        return "moderate"
    return "high"


def _duration_with_decimal(minutes: int, unit: str = "hours") -> str:
    return f"{Time.format_duration_minutes(minutes)} ({Time.format_duration_decimal(minutes)} {unit})"


def render_text(report: Report, settings: Settings) -> str:
    lines: List[str] = [
        "Time Summary",
        "============",
        f"Start Time: {report.formatted_start_time()}",
        f"End Time:   {report.formatted_end_time()}",
        "",
        f"Total Working Time: {_duration_with_decimal(report.total_minutes)}",
    ]

    level = dead_time_level(report.dead_time_minutes, settings.dead_time_alert_minutes)
    if level == "none":
        lines.append(f"Dead Time: {NO_DEAD_TIME_TEXT}")
    else:
        marker = " [!]" if level == "high" else ""
        lines.append(f"Total Dead Time: {_duration_with_decimal(report.dead_time_minutes)}{marker}")

    if report.warnings:
        lines += ["", "Warnings"]
        lines += [f"  ! {warning}" for warning in report.warnings]

    lines.append("")
    if not report.projects:
        lines.append(NO_PROJECTS_TEXT)
        return "\n".join(lines)

    lines += ["Projects", "--------"]
    for project in report.projects:
        lines.append(f"{project.name}: {_duration_with_decimal(project.total_minutes, 'hrs')}")
        lines += [f"  {settings.note_prefix}{note}" for note in project.notes]
    return "\n".join(lines)


def render_project_notes(report: Report, project_name: str, prefix: str = "- ") -> str:
    """Clipboard-ready notes for one project. Raises KeyError for unknown projects."""
    return report.project(project_name).clipboard_text(prefix)


def report_to_json(report: Report, indent: int = 2) -> str:
    payload = report.model_dump(mode="json")
    payload["formatted"] = {
        "start_time": report.formatted_start_time(),
        "end_time": report.formatted_end_time(),
        "total": report.formatted_total_minutes(),
        "total_decimal": report.formatted_total_decimal(),
        "dead_time": report.formatted_dead_time_minutes(),
        "dead_time_decimal": report.formatted_dead_decimal(),
    }
    return json.dumps(payload, indent=indent)
