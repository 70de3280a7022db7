import pytest

from TimeTrack.core.aggregate import aggregate
from TimeTrack.core.clock import Time
from TimeTrack.models import Entry, Interval


def make_entry(start, end, label, notes=(), line_number=1):
    interval = Interval(start=Time(minutes=start), end=Time(minutes=end), label=label)
    return Entry(interval=interval, notes=list(notes), line_number=line_number)


def test_empty_entries_give_empty_report():
    report = aggregate([])
    assert report.entries == ()
    assert report.projects == ()
    assert report.total_minutes == 0
    assert report.dead_time_minutes == 0
    assert report.warnings == ()


def test_projects_grouped_in_first_seen_order():
    entries = [
        make_entry(540, 600, "b", ["b1"]),
        make_entry(600, 630, "a", ["a1"]),
        make_entry(630, 660, "b", ["b2", "b3"]),
    ]
    report = aggregate(entries)
    assert [p.name for p in report.projects] == ["b", "a"]
    assert report.project("b").total_minutes == 90
    assert report.project("b").notes == ("b1", "b2", "b3")
    assert report.project("a").total_minutes == 30
    assert report.total_minutes == 120


def test_labels_are_case_sensitive():
    report = aggregate([make_entry(540, 600, "Code"), make_entry(600, 660, "code")])
    assert [p.name for p in report.projects] == ["Code", "code"]


def test_dead_time_sums_positive_gaps_between_adjacent_entries():
    entries = [
        make_entry(540, 600, "a"),
        make_entry(615, 660, "b"),
        make_entry(700, 720, "a"),
    ]
    report = aggregate(entries)
    assert report.dead_time_minutes == 15 + 40
    assert report.warnings == ()


def test_overlap_is_warned_and_contributes_nothing():
    entries = [make_entry(780, 900, "a"), make_entry(840, 960, "b")]
    report = aggregate(entries)
    assert report.dead_time_minutes == 0
    assert report.warnings == ("Overlapping entries between 1:00-3:00 a and 2:00-4:00 b",)


def test_dead_time_is_adjacency_only():
    # Out-of-order input: no global merge, so the gap back to 9:00 is an overlap
    entries = [
        make_entry(600, 660, "a"),
        make_entry(540, 570, "b"),
        make_entry(700, 720, "c"),
    ]
    report = aggregate(entries)
    assert report.dead_time_minutes == 130
    assert len(report.warnings) == 1


def test_non_positive_interval_is_skipped_in_dead_time_chain():
    entries = [
        make_entry(780, 840, "a"),
        make_entry(960, 900, "b"),
        make_entry(1020, 1080, "c"),
    ]
    report = aggregate(entries)
    assert report.dead_time_minutes == 1020 - 840
    assert report.total_minutes == 120
    assert report.project("b").total_minutes == 0
    assert report.warnings == ()


def test_parser_warnings_come_first():
    entries = [make_entry(780, 900, "a"), make_entry(840, 960, "b")]
    report = aggregate(entries, ["Line 9: unrecognized line 'x'"])
    assert report.warnings[0] == "Line 9: unrecognized line 'x'"
    assert report.warnings[1].startswith("Overlapping entries")


def test_report_is_frozen():
    report = aggregate([make_entry(540, 600, "a")])
    with pytest.raises(ValueError):
        report.total_minutes = 5


def test_unknown_project_lookup_raises_key_error():
    report = aggregate([make_entry(540, 600, "a")])
    with pytest.raises(KeyError):
        report.project("missing")
