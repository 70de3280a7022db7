# TimeTrack/cli.py

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv
from pydantic import ValidationError
load_dotenv()

from TimeTrack.config import Settings
from TimeTrack.core.parser import parse_time_tracking_data
from TimeTrack.models import Report
from TimeTrack.summary.report import render_project_notes, render_text, report_to_json

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(funcName)-25s | %(message)s"

log = logging.getLogger("TimeTrack.cli")


def _read_input(source: Optional[Path]) -> str:
    if source is None:
        return sys.stdin.read()
    return source.read_text(encoding="utf-8")


def _build_report(args_ns, current_settings: Settings) -> Report:
    text = _read_input(args_ns.file)
    report = parse_time_tracking_data(text, day_start_hour=current_settings.day_start_hour)
    log.info(
        f"Parsed {len(report.entries)} entries, {len(report.projects)} projects, "
        f"{len(report.warnings)} warnings."
    )
    return report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timetrack",
        description="TimeTrack: summarize free-form time-tracking notes"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging for all TimeTrack modules."
    )
    parser.add_argument(
        "--day-start-hour",
        type=int,
        default=None,
        help="Bare hours below this are read as afternoon (default: 7, or TIMETRACK_DAY_START_HOUR)."
    )
    subparsers = parser.add_subparsers(dest="command", title="Available Commands", required=True)

    # --- Summarize Subcommand ---
    parser_summarize = subparsers.add_parser("summarize", help="Print the time summary for a day's notes.")
    parser_summarize.add_argument("file", nargs="?", type=Path, default=None, help="Notes file (default: stdin).")
    parser_summarize.add_argument("--json", action="store_true", help="Print the report as JSON.")
    def handle_summarize(args_ns, current_settings: Settings) -> int:
        report = _build_report(args_ns, current_settings)
        print(report_to_json(report) if args_ns.json else render_text(report, current_settings))
        return 0
    parser_summarize.set_defaults(func=handle_summarize)

    # --- Notes Subcommand ---
    parser_notes = subparsers.add_parser("notes", help="Print one project's notes, ready to paste.")
    parser_notes.add_argument("project", help="Project label, case-sensitive.")
    parser_notes.add_argument("file", nargs="?", type=Path, default=None, help="Notes file (default: stdin).")
    parser_notes.add_argument("--prefix", default=None, help="Prefix for each note line (default: '- ').")
    def handle_notes(args_ns, current_settings: Settings) -> int:
        report = _build_report(args_ns, current_settings)
        prefix = args_ns.prefix if args_ns.prefix is not None else current_settings.note_prefix
        try:
            print(render_project_notes(report, args_ns.project, prefix))
        except KeyError:
            known = ", ".join(p.name for p in report.projects) or "none"
            log.error(f"Unknown project {args_ns.project!r}. Known projects: {known}")
            return 1
        return 0
    parser_notes.set_defaults(func=handle_notes)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides = {}
    if args.day_start_hour is not None:
        overrides["day_start_hour"] = args.day_start_hour
    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        parser.error(f"invalid settings: {e}")

    logging.basicConfig(format=LOG_FORMAT, level=settings.log_level.upper())

    if args.debug:
        logging.getLogger("TimeTrack").setLevel(logging.DEBUG)
        log.debug("Debug logging enabled via CLI.")

    try:
        return args.func(args, settings)
    except (OSError, UnicodeDecodeError) as e:
        log.error(f"Could not read input: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
