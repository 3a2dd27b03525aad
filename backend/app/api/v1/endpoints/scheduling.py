"""
api/v1/endpoints/scheduling.py

Hearing scheduling API.

Endpoints:
  GET  /api/v1/scheduling/auto-schedule          : propose a ranked hearing calendar
  POST /api/v1/scheduling/apply-schedule         : commit a reviewed proposal
  GET  /api/v1/scheduling/my-schedule            : caller's hearings grouped by day
  PUT  /api/v1/scheduling/reschedule/{case_id}   : move one case to a new slot
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.v1.deps import get_current_user
from app.core.config import settings
from app.db.database import get_db
from app.db.models import User
from app.db.schemas import (
    ApplyScheduleRequest,
    ApplyScheduleResponse,
    CaseResponse,
    MyScheduleResponse,
    RescheduleRequest,
    RescheduleResponse,
    ScheduleProposalResponse,
    SkippedScheduleItem,
)
from app.services.scheduling import apply_schedule, reschedule_case, schedule_service
from app.utils.exceptions import InvalidScheduleRequestError
from app.utils.helpers import parse_iso_date

logger = logging.getLogger(__name__)

router = APIRouter()


def _parse_date_param(value: Optional[str], name: str) -> Optional[date]:
    try:
        return parse_iso_date(value)
    except ValueError:
        raise InvalidScheduleRequestError(f"{name} must be an ISO date (YYYY-MM-DD)")


# ============================================================================
# Proposal
# ============================================================================

@router.get("/auto-schedule", response_model=ScheduleProposalResponse)
def auto_schedule(
    start_date:   Optional[str] = Query(None, alias="startDate"),
    days:         int           = Query(settings.SCHEDULE_DEFAULT_DAYS, le=settings.SCHEDULE_MAX_DAYS),
    current_user: User          = Depends(get_current_user),
    db:           Session       = Depends(get_db),
):
    """
    Ranks every unscheduled pending/processing case and pairs it with the
    next free slot in the daily time table. Nothing is saved.
    """
    start = _parse_date_param(start_date, "startDate")
    proposal = schedule_service.propose(db, start_date=start, days=days)

    return ScheduleProposalResponse(
        total_cases=proposal.total_cases,
        scheduled_cases=proposal.scheduled_cases,
        schedule=proposal.items,
        unscheduled_count=proposal.unscheduled_count,
        message=proposal.message,
    )


# ============================================================================
# Apply
# ============================================================================

@router.post("/apply-schedule", response_model=ApplyScheduleResponse)
def apply_proposed_schedule(
    req:          ApplyScheduleRequest,
    current_user: User    = Depends(get_current_user),
    db:           Session = Depends(get_db),
):
    """Writes each item to its case; items whose case is gone are skipped."""
    report = apply_schedule(db, req.schedule, acting_judge_id=current_user.id)

    return ApplyScheduleResponse(
        success=True,
        message=f"Successfully scheduled {report.applied_count} cases",
        scheduled_cases=[CaseResponse.model_validate(c) for c in report.updated_cases],
        skipped=[
            SkippedScheduleItem(case_id=o.case_id, reason=o.reason or "Skipped")
            for o in report.skipped
        ],
    )


# ============================================================================
# Calendar view
# ============================================================================

@router.get("/my-schedule", response_model=MyScheduleResponse)
def my_schedule(
    start_date:   Optional[str] = Query(None, alias="startDate"),
    end_date:     Optional[str] = Query(None, alias="endDate"),
    current_user: User          = Depends(get_current_user),
    db:           Session       = Depends(get_db),
):
    """
    Returns the caller's hearings between startDate and endDate (inclusive).
    Defaults to today through the next 30 days.
    """
    start = _parse_date_param(start_date, "startDate")
    end = _parse_date_param(end_date, "endDate")
    if start and end and end < start:
        raise InvalidScheduleRequestError("endDate must not be before startDate")

    grouped, total = schedule_service.my_schedule(
        db,
        judge_id=current_user.id,
        start_date=start,
        end_date=end,
        window_days=settings.MY_SCHEDULE_DEFAULT_WINDOW_DAYS,
    )

    return MyScheduleResponse(
        schedule={
            day: [CaseResponse.model_validate(c) for c in cases]
            for day, cases in grouped.items()
        },
        total_scheduled=total,
    )


# ============================================================================
# Reschedule
# ============================================================================

@router.put("/reschedule/{case_id}", response_model=RescheduleResponse)
def reschedule(
    case_id:      str,
    req:          RescheduleRequest,
    current_user: User    = Depends(get_current_user),
    db:           Session = Depends(get_db),
):
    """Moves a case to a new slot, archiving the current one into its history."""
    case = reschedule_case(
        db,
        case_id=case_id,
        new_date=req.scheduled_date,
        new_time=req.scheduled_time,
        new_court_room=req.court_room,
        reason=req.reason,
    )
    logger.info("Reschedule requested by %s for case %s", current_user.id, case_id)

    return RescheduleResponse(
        success=True,
        message="Case rescheduled successfully",
        case=CaseResponse.model_validate(case),
    )
