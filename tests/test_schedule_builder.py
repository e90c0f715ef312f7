from datetime import UTC, date, datetime, timedelta

from sprint_app.analytics.schedule import build_schedule
from sprint_app.core.dates import to_day_key
from sprint_app.core.models import SprintModel


def _sprint(**overrides) -> SprintModel:
    base = {"id": 1, "display_name": "Sprint 1", "state": "active"}
    base.update(overrides)
    return SprintModel(**base)


def test_overlapping_sprints_share_a_day():
    sprints = [
        _sprint(id=101, display_name="Alpha", planned_start=date(2024, 2, 1), planned_end=date(2024, 2, 5)),
        _sprint(
            id=202,
            display_name="Beta",
            state="overdue",
            planned_start=date(2024, 2, 4),
            planned_end=date(2024, 2, 8),
        ),
    ]
    schedule = build_schedule(sprints, date(2024, 2, 1), date(2024, 2, 10))
    feb4 = schedule["2024-02-04"]
    assert [e.id for e in feb4] == [101, 202]
    alpha, beta = feb4
    assert not alpha.is_start and not alpha.is_end
    assert beta.is_start and not beta.is_end
    assert beta.state == "overdue"
    assert schedule["2024-02-05"][0].is_end
    assert "2024-02-09" not in schedule


def test_input_order_is_preserved_per_day():
    sprints = [
        _sprint(id=9, display_name="Zulu", planned_start=date(2024, 2, 3), planned_end=date(2024, 2, 4)),
        _sprint(id=1, display_name="Alpha", planned_start=date(2024, 2, 1), planned_end=date(2024, 2, 4)),
    ]
    schedule = build_schedule(sprints, date(2024, 2, 1), date(2024, 2, 29))
    assert [e.id for e in schedule["2024-02-03"]] == [9, 1]
    assert list(schedule) == ["2024-02-01", "2024-02-02", "2024-02-03", "2024-02-04"]


def test_clipping_does_not_promote_boundaries():
    sprint = _sprint(id=303, display_name="Gamma", planned_start=date(2024, 3, 1), planned_end=date(2024, 3, 20))
    schedule = build_schedule([sprint], date(2024, 3, 10), date(2024, 3, 12))
    assert list(schedule) == ["2024-03-10", "2024-03-11", "2024-03-12"]
    for entries in schedule.values():
        assert len(entries) == 1
        assert entries[0].is_start is False
        assert entries[0].is_end is False
        assert entries[0].start_date == date(2024, 3, 1)
        assert entries[0].end_date == date(2024, 3, 20)


def test_boundaries_inside_range_are_flagged():
    sprint = _sprint(planned_start=date(2024, 3, 5), planned_end=date(2024, 3, 7))
    schedule = build_schedule([sprint], date(2024, 3, 1), date(2024, 3, 31))
    assert schedule["2024-03-05"][0].is_start
    assert not schedule["2024-03-06"][0].is_start and not schedule["2024-03-06"][0].is_end
    assert schedule["2024-03-07"][0].is_end


def test_plan_length_span_produces_fourteen_entries():
    sprint = _sprint(id=404, display_name="Delta", state="pending", planned_start=date(2024, 5, 1), plan_length="14d")
    schedule = build_schedule([sprint], date(2024, 5, 1), date(2024, 5, 31))
    entries = [e for day in schedule.values() for e in day if e.id == 404]
    assert len(entries) == 14
    assert all(e.end_date == date(2024, 5, 14) for e in entries)
    assert to_day_key(entries[-1].end_date) == "2024-05-14"
    assert entries[-1].is_end


def test_computed_end_beats_plan_length_in_schedule():
    sprint = _sprint(planned_start=date(2024, 5, 1), computed_end=date(2024, 5, 3), plan_length="14d")
    schedule = build_schedule([sprint], date(2024, 5, 1), date(2024, 5, 31))
    assert list(schedule) == ["2024-05-01", "2024-05-02", "2024-05-03"]


def test_actual_window_dimming_flags():
    sprint = _sprint(
        id=505,
        display_name="Epsilon",
        planned_start=date(2024, 10, 25),
        planned_end=date(2024, 11, 4),
        actual_start=date(2024, 10, 27),
        actual_end=date(2024, 10, 30),
    )
    schedule = build_schedule([sprint], date(2024, 10, 20), date(2024, 11, 5))

    planned_start = schedule["2024-10-25"][0]
    assert planned_start.is_start and planned_start.before_actual_start

    actual_start = schedule["2024-10-27"][0]
    assert actual_start.is_actual_start
    assert not actual_start.before_actual_start

    actual_end = schedule["2024-10-30"][0]
    assert actual_end.is_actual_end
    assert not actual_end.after_actual_end

    after = schedule["2024-10-31"][0]
    assert after.after_actual_end and not after.is_end

    later = schedule["2024-11-01"][0]
    assert later.after_actual_end and not later.is_end

    last = schedule["2024-11-04"][0]
    assert last.is_end and last.after_actual_end
    assert "2024-11-05" not in schedule


def test_without_actual_dates_no_dimming():
    sprint = _sprint(planned_start=date(2024, 6, 1), planned_end=date(2024, 6, 3))
    for entries in build_schedule([sprint], date(2024, 6, 1), date(2024, 6, 30)).values():
        entry = entries[0]
        assert not (entry.before_actual_start or entry.after_actual_end)
        assert not (entry.is_actual_start or entry.is_actual_end)
        assert entry.actual_start_date is None and entry.actual_end_date is None


def test_inverted_range_is_empty():
    sprint = _sprint(planned_start=date(2024, 6, 1), planned_end=date(2024, 6, 30))
    assert build_schedule([sprint], date(2024, 6, 10), date(2024, 6, 9)) == {}


def test_sprints_without_start_yield_empty_schedule():
    sprints = [
        _sprint(id=1, planned_end=date(2024, 6, 5)),
        _sprint(id=2, plan_length="2w", actual_start=date(2024, 6, 1)),
    ]
    assert build_schedule(sprints, date(2024, 6, 1), date(2024, 6, 30)) == {}
    assert build_schedule([], date(2024, 6, 1), date(2024, 6, 30)) == {}
    assert build_schedule(None, date(2024, 6, 1), date(2024, 6, 30)) == {}


def test_sprint_outside_range_is_dropped():
    sprints = [
        _sprint(id=1, planned_start=date(2024, 5, 1), planned_end=date(2024, 5, 31)),
        _sprint(id=2, planned_start=date(2024, 6, 3), planned_end=date(2024, 6, 4)),
    ]
    schedule = build_schedule(sprints, date(2024, 6, 1), date(2024, 6, 30))
    assert {e.id for day in schedule.values() for e in day} == {2}


def test_range_bounds_are_truncated_to_days():
    sprint = _sprint(planned_start=date(2024, 7, 1), planned_end=date(2024, 7, 10))
    schedule = build_schedule(
        [sprint],
        datetime(2024, 7, 3, 17, 45, tzinfo=UTC),
        datetime(2024, 7, 4, 8, 0, tzinfo=UTC),
        tz=UTC,
    )
    assert list(schedule) == ["2024-07-03", "2024-07-04"]


def test_single_day_window():
    sprint = _sprint(planned_start=date(2024, 8, 15))
    schedule = build_schedule([sprint], date(2024, 8, 1), date(2024, 8, 31))
    assert list(schedule) == ["2024-08-15"]
    entry = schedule["2024-08-15"][0]
    assert entry.is_start and entry.is_end


def test_inverted_window_is_clamped_not_dropped():
    sprint = _sprint(planned_start=date(2024, 8, 15), computed_end=date(2024, 8, 2))
    schedule = build_schedule([sprint], date(2024, 8, 1), date(2024, 8, 31))
    assert list(schedule) == ["2024-08-15"]


def test_state_and_label_are_carried_through():
    sprints = [
        _sprint(id=7, display_name="", label="S7", state="OVERDUE", planned_start=date(2024, 2, 2)),
        _sprint(id=8, display_name=None, state="custom-state", planned_start=date(2024, 2, 2)),
    ]
    entries = build_schedule(sprints, date(2024, 2, 1), date(2024, 2, 29))["2024-02-02"]
    assert [(e.label, e.state) for e in entries] == [("S7", "OVERDUE"), ("Sprint 8", "custom-state")]


def test_repeated_calls_are_identical():
    start = date(2024, 2, 1)
    sprints = [
        _sprint(id=i, planned_start=start + timedelta(days=i), plan_length=f"{i + 1}d", actual_start=start)
        for i in range(1, 6)
    ]
    first = build_schedule(sprints, date(2024, 2, 1), date(2024, 2, 15))
    second = build_schedule(sprints, date(2024, 2, 1), date(2024, 2, 15))
    assert first == second
    assert list(first) == list(second)


def test_oversized_plan_length_does_not_break_other_sprints():
    sprints = [
        _sprint(id=1, planned_start=date(2024, 2, 1), plan_length="9999999d"),
        _sprint(id=2, planned_start=date(2024, 2, 1), planned_end=date(2024, 2, 3)),
    ]
    schedule = build_schedule(sprints, date(2024, 2, 1), date(2024, 2, 3))
    assert [e.id for e in schedule["2024-02-01"]] == [1, 2]
    assert schedule["2024-02-01"][0].is_start and schedule["2024-02-01"][0].is_end
    assert [e.id for e in schedule["2024-02-03"]] == [2]


def test_window_ending_on_last_calendar_day():
    sprint = _sprint(planned_start=date(9999, 12, 30), planned_end=date.max)
    schedule = build_schedule([sprint], date(9999, 12, 30), date.max)
    assert list(schedule) == ["9999-12-30", "9999-12-31"]
    assert schedule["9999-12-31"][0].is_end
