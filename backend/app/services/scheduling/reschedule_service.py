"""
services/scheduling/reschedule_service.py

Moves one case to a new hearing slot. The slot being replaced is archived
into previous_hearings first; priority and status are left alone.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.models import Case
from app.services.case_store import case_store
from app.utils.exceptions import CaseNotFoundError, UpstreamFailureError
from app.utils.helpers import format_date, utcnow

logger = logging.getLogger(__name__)

DEFAULT_RESCHEDULE_NOTE = "Rescheduled"
DEFAULT_HEARING_DURATION = 30


def reschedule_case(
    db:             Session,
    case_id:        str | UUID,
    new_date:       date,
    new_time:       str,
    new_court_room: str,
    reason:         Optional[str] = None,
    now:            Optional[datetime] = None,
) -> Case:
    case = case_store.get_case(db, case_id)
    if case is None:
        raise CaseNotFoundError(str(case_id))

    if case.scheduled_date:
        entry = {
            "date":     format_date(case.scheduled_date),
            "notes":    reason or DEFAULT_RESCHEDULE_NOTE,
            "duration": case.estimated_duration or DEFAULT_HEARING_DURATION,
        }
        # New list so the JSON column registers the change
        case.previous_hearings = [*(case.previous_hearings or []), entry]

    case.scheduled_date = new_date
    case.scheduled_time = new_time
    case.court_room     = new_court_room
    case.updated_at     = now or utcnow()

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Reschedule failed for case %s: %s", case_id, e)
        raise UpstreamFailureError("could not save rescheduled case") from e

    db.refresh(case)
    logger.info(
        "Case rescheduled: %s -> %s %s (%s), history=%d",
        case.case_number, format_date(new_date), new_time, new_court_room, len(case.previous_hearings or []),
    )
    return case
