"""Unit tests for hearing slot enumeration over working days."""

from datetime import date, datetime

import pytest

from app.services.scheduling.slot_planner import (
    court_room_label,
    is_working_day,
    plan_slots,
    working_days,
)

MONDAY = date(2025, 1, 6)
FRIDAY = date(2025, 1, 10)
SATURDAY = date(2025, 1, 4)
SUNDAY = date(2025, 1, 5)


@pytest.mark.unit
class TestWorkingDays:
    def test_weekends_are_not_working_days(self):
        assert not is_working_day(SATURDAY)
        assert not is_working_day(SUNDAY)
        assert is_working_day(MONDAY)
        assert is_working_day(FRIDAY)

    def test_friday_start_rolls_over_weekend(self):
        assert working_days(FRIDAY, 2) == [FRIDAY, date(2025, 1, 13)]


@pytest.mark.unit
class TestPlanSlots:
    def test_twelve_slots_per_working_day(self):
        slots = plan_slots(MONDAY, 1)
        assert len(slots) == 12
        assert all(s.date == MONDAY for s in slots)

    def test_intra_day_order_and_lunch_gap(self):
        times = [s.time for s in plan_slots(MONDAY, 1)]
        assert times == [
            "10:00 AM", "10:30 AM", "11:00 AM", "11:30 AM", "12:00 PM", "12:30 PM",
            "02:00 PM", "02:30 PM", "03:00 PM", "03:30 PM", "04:00 PM", "04:30 PM",
        ]

    def test_saturday_start_begins_on_monday(self):
        slots = plan_slots(SATURDAY, 1)
        assert {s.date for s in slots} == {MONDAY}

    def test_weekend_days_do_not_count_toward_horizon(self):
        slots = plan_slots(FRIDAY, 3)
        days = sorted({s.date for s in slots})
        assert days == [FRIDAY, date(2025, 1, 13), date(2025, 1, 14)]
        assert len(slots) == 36

    def test_chronological_then_intra_day_order(self):
        slots = plan_slots(MONDAY, 5)
        keys = [(s.date, s.slot_index) for s in slots]
        assert keys == sorted(keys)
        assert all(s.date.weekday() < 5 for s in slots)

    def test_time_of_day_is_truncated(self):
        slots = plan_slots(datetime(2025, 1, 6, 15, 45), 1)
        assert slots[0].date == MONDAY
        assert slots[0].time == "10:00 AM"

    def test_court_rooms_round_robin(self):
        slots = plan_slots(MONDAY, 1)
        assert [s.court_room_index for s in slots] == [0, 1, 2, 3] * 3
        assert court_room_label(slots[5].court_room_index) == "Court 2"

    @pytest.mark.edge_case
    @pytest.mark.parametrize("num_days", [0, -1])
    def test_non_positive_horizon_is_empty(self, num_days):
        assert plan_slots(MONDAY, num_days) == []
