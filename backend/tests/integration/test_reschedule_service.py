"""Integration tests for moving a single case and archiving its old slot."""

import uuid
from datetime import date, datetime

import pytest

from app.db.models import CasePriority, CaseStatus
from app.services.scheduling.reschedule_service import reschedule_case
from app.utils.exceptions import CaseNotFoundError

MONDAY = date(2025, 1, 6)
FRIDAY = date(2025, 1, 10)
LATER = datetime(2025, 1, 8, 12, 0, 0)


@pytest.fixture
def scheduled_case(db_session, make_case, judge):
    case = make_case(title="Custody petition", age_days=4)
    case.scheduled_date = MONDAY
    case.scheduled_time = "10:00 AM"
    case.court_room = "Court 1"
    case.priority = CasePriority.high
    case.status = CaseStatus.scheduled
    case.estimated_duration = 45
    case.assigned_judge_id = judge.id
    db_session.commit()
    return case


@pytest.mark.integration
class TestRescheduleCase:
    def test_previous_slot_is_archived(self, db_session, scheduled_case):
        case = reschedule_case(
            db_session, scheduled_case.id, FRIDAY, "02:00 PM", "Court 3",
            reason="Counsel unavailable", now=LATER,
        )

        assert case.scheduled_date == FRIDAY
        assert case.scheduled_time == "02:00 PM"
        assert case.court_room == "Court 3"
        assert case.previous_hearings == [
            {"date": "2025-01-06", "notes": "Counsel unavailable", "duration": 45}
        ]
        assert case.updated_at == LATER

    def test_default_note(self, db_session, scheduled_case):
        case = reschedule_case(db_session, str(scheduled_case.id), FRIDAY, "02:00 PM", "Court 3")
        assert case.previous_hearings[-1]["notes"] == "Rescheduled"

    def test_history_grows_by_one_per_move(self, db_session, scheduled_case):
        reschedule_case(db_session, scheduled_case.id, FRIDAY, "02:00 PM", "Court 3")
        case = reschedule_case(db_session, scheduled_case.id, date(2025, 1, 13), "10:30 AM", "Court 2")

        assert [h["date"] for h in case.previous_hearings] == ["2025-01-06", "2025-01-10"]

    def test_priority_and_status_unchanged(self, db_session, scheduled_case, judge):
        case = reschedule_case(db_session, scheduled_case.id, FRIDAY, "02:00 PM", "Court 3")

        assert case.priority == CasePriority.high
        assert case.status == CaseStatus.scheduled
        assert case.assigned_judge_id == judge.id

    @pytest.mark.edge_case
    def test_never_scheduled_case_gets_no_history(self, db_session, make_case):
        case = make_case()

        moved = reschedule_case(db_session, case.id, FRIDAY, "11:00 AM", "Court 2")

        assert moved.previous_hearings == []
        assert moved.scheduled_date == FRIDAY
        assert moved.status == CaseStatus.pending

    @pytest.mark.edge_case
    @pytest.mark.parametrize("case_id", [uuid.uuid4(), "not-a-uuid"])
    def test_unknown_case(self, db_session, case_id):
        with pytest.raises(CaseNotFoundError) as exc:
            reschedule_case(db_session, case_id, FRIDAY, "11:00 AM", "Court 2")
        assert exc.value.status_code == 404
