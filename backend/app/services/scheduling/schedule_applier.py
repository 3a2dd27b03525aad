"""
services/scheduling/schedule_applier.py

Commits a reviewed proposal to the case records.

Every item is written inside its own SAVEPOINT. An item whose case is gone
(or whose write fails) is recorded as skipped and the batch carries on;
there is no rollback of items that already succeeded. Writing the same
proposal twice leaves the cases in the same final state.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.models import Case, CaseStatus
from app.db.schemas import ScheduleItem
from app.utils.helpers import parse_uuid
from app.utils.exceptions import EmptyScheduleError, UpstreamFailureError

logger = logging.getLogger(__name__)


class ApplyStatus(str, enum.Enum):
    applied = "applied"
    skipped = "skipped"


@dataclass
class ApplyOutcome:
    case_id: str
    status:  ApplyStatus
    reason:  Optional[str] = None
    case:    Optional[Case] = None


@dataclass
class ApplyReport:
    outcomes: List[ApplyOutcome] = field(default_factory=list)

    @property
    def applied(self) -> List[ApplyOutcome]:
        return [o for o in self.outcomes if o.status == ApplyStatus.applied]

    @property
    def skipped(self) -> List[ApplyOutcome]:
        return [o for o in self.outcomes if o.status == ApplyStatus.skipped]

    @property
    def applied_count(self) -> int:
        return len(self.applied)

    @property
    def updated_cases(self) -> List[Case]:
        return [o.case for o in self.applied if o.case is not None]


def apply_schedule(
    db: Session,
    items: Optional[Sequence[ScheduleItem]],
    acting_judge_id: UUID,
) -> ApplyReport:
    if not items:
        raise EmptyScheduleError()

    report = ApplyReport()
    for item in items:
        report.outcomes.append(_apply_item(db, item, acting_judge_id))

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Schedule commit failed: %s", e)
        raise UpstreamFailureError("could not commit schedule") from e

    for outcome in report.applied:
        db.refresh(outcome.case)

    if report.skipped:
        logger.warning(
            "Schedule applied with skips: %d applied, %d skipped (judge=%s)",
            report.applied_count, len(report.skipped), acting_judge_id,
        )
    else:
        logger.info("Schedule applied: %d cases (judge=%s)", report.applied_count, acting_judge_id)
    return report


def _apply_item(db: Session, item: ScheduleItem, acting_judge_id: UUID) -> ApplyOutcome:
    case_id = parse_uuid(item.case_id)
    if case_id is None:
        return ApplyOutcome(item.case_id, ApplyStatus.skipped, reason="Invalid case id")

    try:
        with db.begin_nested():
            case = db.query(Case).filter(Case.id == case_id).first()
            if case is None:
                return ApplyOutcome(item.case_id, ApplyStatus.skipped, reason="Case not found")

            case.scheduled_date     = item.date
            case.scheduled_time     = item.time
            case.court_room         = item.court_room
            case.priority           = item.priority
            case.estimated_duration = item.estimated_duration
            case.assigned_judge_id  = acting_judge_id
            case.status             = CaseStatus.scheduled
            db.flush()
    except SQLAlchemyError as e:
        logger.warning("Skipping schedule item for case %s: %s", item.case_id, e)
        return ApplyOutcome(item.case_id, ApplyStatus.skipped, reason=f"Update failed: {e.__class__.__name__}")

    return ApplyOutcome(item.case_id, ApplyStatus.applied, case=case)
