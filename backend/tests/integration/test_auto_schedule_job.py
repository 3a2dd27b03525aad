"""Tests for the command-line auto-schedule job."""

from datetime import date

import pytest

from app.db.models import Case, CaseStatus
from jobs.auto_schedule_job import run_auto_schedule_job

MONDAY = date(2025, 1, 6)


@pytest.mark.integration
class TestAutoScheduleJob:
    def test_dry_run_reports_without_writing(self, db_session, make_case):
        case = make_case(title="Bail application")

        result = run_auto_schedule_job(MONDAY, 1)

        assert result["totalCases"] == 1
        assert result["scheduledCases"] == 1
        assert result["schedule"][0]["caseId"] == str(case.id)
        assert result["schedule"][0]["date"] == "2025-01-06"
        assert "applied" not in result

        db_session.expire_all()
        assert db_session.get(Case, case.id).scheduled_date is None

    def test_apply_writes_proposal(self, db_session, make_case, judge):
        case = make_case()

        result = run_auto_schedule_job(MONDAY, 1, apply=True, judge_id=str(judge.id))

        assert result["applied"] == 1
        assert result["skipped"] == []
        db_session.expire_all()
        stored = db_session.get(Case, case.id)
        assert stored.status == CaseStatus.scheduled
        assert stored.assigned_judge_id == judge.id

    def test_empty_backlog(self, db_session):
        result = run_auto_schedule_job(MONDAY, 3, apply=True, judge_id=None)
        assert result["scheduledCases"] == 0
        assert result["message"] == "No unscheduled cases found"

    @pytest.mark.edge_case
    def test_apply_requires_judge(self, db_session, make_case):
        make_case()
        with pytest.raises(ValueError):
            run_auto_schedule_job(MONDAY, 1, apply=True, judge_id="nobody")
