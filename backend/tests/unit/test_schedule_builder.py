"""Unit tests for pairing the ranked backlog with planned slots."""

from datetime import date

import pytest

from app.db.models import CasePriority
from app.services.scheduling.schedule_builder import NO_CASES_MESSAGE, build_schedule

MONDAY = date(2025, 1, 6)
TUESDAY = date(2025, 1, 7)


@pytest.mark.unit
class TestBuildSchedule:
    def test_empty_backlog_is_not_an_error(self, now):
        proposal = build_schedule([], MONDAY, 7, now)

        assert proposal.items == []
        assert proposal.scheduled_cases == 0
        assert proposal.total_cases == 0
        assert proposal.unscheduled_count == 0
        assert proposal.message == NO_CASES_MESSAGE

    def test_fourteen_cases_over_two_days(self, case_builder, now):
        """Ages 1-14, nothing urgent, no documents: age alone decides the order."""
        cases = [case_builder(title=f"Civil suit {age}", age_days=age) for age in range(1, 15)]

        proposal = build_schedule(cases, MONDAY, 2, now)

        assert proposal.total_cases == 14
        assert proposal.scheduled_cases == 14
        assert proposal.unscheduled_count == 0

        dates = [item.date for item in proposal.items]
        assert dates.count(MONDAY) == 12
        assert dates.count(TUESDAY) == 2

        titles = [item.title for item in proposal.items]
        assert titles == [f"Civil suit {age}" for age in range(14, 0, -1)]

    def test_backlog_longer_than_horizon(self, case_builder, now):
        cases = [case_builder(age_days=i) for i in range(30)]

        proposal = build_schedule(cases, MONDAY, 2, now)

        assert proposal.scheduled_cases == 24
        assert proposal.total_cases == 30
        assert proposal.unscheduled_count == 6
        assert proposal.message is None

    def test_item_fields(self, case_builder, now):
        case = case_builder(title="Bail application", age_days=10, case_number="BA 12/2025")

        item = build_schedule([case], MONDAY, 1, now).items[0]

        assert item.case_id == str(case.id)
        assert item.case_number == "BA 12/2025"
        assert item.date == MONDAY
        assert item.time == "10:00 AM"
        assert item.court_room == "Court 1"
        assert item.estimated_duration == 30
        assert item.priority_score == 90.0
        assert item.priority == CasePriority.urgent

    def test_priority_buckets_follow_scores(self, case_builder, now):
        cases = [
            case_builder(title="Custody petition", age_days=1),  # 2 + 40 + 25 = 67
            case_builder(title="Interim order", age_days=12),    # 24 + 20 = 44
            case_builder(title="Recovery suit", age_days=5),     # 10
        ]

        items = build_schedule(cases, MONDAY, 1, now).items

        assert [i.priority for i in items] == [CasePriority.high, CasePriority.medium, CasePriority.low]
        assert [i.priority_score for i in items] == [67.0, 44.0, 10.0]

    def test_priority_score_rounded_to_one_decimal(self, case_builder, now):
        case = case_builder(age_days=1.234)
        assert build_schedule([case], MONDAY, 1, now).items[0].priority_score == 2.5

    def test_rooms_rotate_across_slots(self, case_builder, now):
        cases = [case_builder(age_days=20 - i) for i in range(6)]
        rooms = [i.court_room for i in build_schedule(cases, MONDAY, 1, now).items]
        assert rooms == ["Court 1", "Court 2", "Court 3", "Court 4", "Court 1", "Court 2"]

    def test_saturday_start(self, case_builder, now):
        proposal = build_schedule([case_builder(age_days=3)], date(2025, 1, 4), 1, now)
        assert proposal.items[0].date == MONDAY
