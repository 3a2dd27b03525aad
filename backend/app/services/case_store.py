from __future__ import annotations

import logging
from datetime import date
from typing import Iterator, List
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from app.db.models import SCHEDULABLE_STATUSES, Case
from app.utils.exceptions import UpstreamFailureError
from app.utils.helpers import parse_uuid

logger = logging.getLogger(__name__)


class CaseStore:
    """Read side of the case collaborator used by the scheduling core."""

    def get_case(self, db: Session, case_id: str | UUID) -> Case | None:
        parsed = parse_uuid(case_id)
        if parsed is None:
            return None
        try:
            return db.query(Case).filter(Case.id == parsed).first()
        except SQLAlchemyError as e:
            logger.error("Case lookup failed for %s: %s", case_id, e)
            raise UpstreamFailureError("could not read case") from e

    def list_unscheduled(self, db: Session) -> List[Case]:
        """Pending/processing cases with no hearing slot, oldest first."""
        try:
            return (
                db.query(Case)
                .options(selectinload(Case.documents))
                .filter(
                    Case.status.in_(SCHEDULABLE_STATUSES),
                    Case.scheduled_date.is_(None),
                )
                .order_by(Case.created_at.asc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Backlog query failed: %s", e)
            raise UpstreamFailureError("could not read unscheduled cases") from e

    def list_assigned_between(
        self,
        db: Session,
        judge_id: UUID,
        start: date,
        end: date,
    ) -> List[Case]:
        try:
            return (
                db.query(Case)
                .filter(
                    Case.assigned_judge_id == judge_id,
                    Case.scheduled_date.isnot(None),
                    Case.scheduled_date >= start,
                    Case.scheduled_date <= end,
                )
                .order_by(Case.scheduled_date.asc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Schedule query failed for judge %s: %s", judge_id, e)
            raise UpstreamFailureError("could not read schedule") from e

    def iter_related_candidates(self, db: Session, reference: Case) -> Iterator[Case]:
        """
        Other cases in storage default order (created_at ascending) that share
        at least one tag or one entity with the reference case.

        Tags and entities are JSON lists, so the membership test runs here
        rather than in SQL.
        """
        tags = set(reference.ipc_tags or [])
        entities = set(reference.entities or [])
        if not tags and not entities:
            return

        try:
            others = (
                db.query(Case)
                .filter(Case.id != reference.id)
                .order_by(Case.created_at.asc(), Case.case_number.asc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Related-case scan failed for %s: %s", reference.id, e)
            raise UpstreamFailureError("could not read related cases") from e

        for candidate in others:
            if tags.intersection(candidate.ipc_tags or []) or entities.intersection(candidate.entities or []):
                yield candidate


case_store = CaseStore()
