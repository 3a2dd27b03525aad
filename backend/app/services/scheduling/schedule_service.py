"""
services/scheduling/schedule_service.py

Storage-facing entry points used by the scheduling endpoints and the
auto-schedule job: load the backlog and build a proposal, and read back a
judge's calendar grouped by day.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from sqlalchemy.orm import Session

from app.db.models import Case
from app.services.case_store import case_store
from app.services.scheduling.policy import SchedulingPolicy, get_policy
from app.services.scheduling.schedule_builder import ScheduleProposal, build_schedule
from app.utils.helpers import format_date, utcnow

logger = logging.getLogger(__name__)


class ScheduleService:
    def propose(
        self,
        db: Session,
        start_date: Optional[date] = None,
        days: int = 7,
        now: Optional[datetime] = None,
        policy: Optional[SchedulingPolicy] = None,
    ) -> ScheduleProposal:
        now = now or utcnow()
        start = start_date or now.date()

        backlog = case_store.list_unscheduled(db)
        proposal = build_schedule(backlog, start, days, now, policy)

        logger.info(
            "Schedule proposed from %s for %d working days: %d eligible, %d placed, %d left over",
            format_date(start), days, proposal.total_cases, proposal.scheduled_cases, proposal.unscheduled_count,
        )
        return proposal

    def my_schedule(
        self,
        db: Session,
        judge_id: UUID,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        window_days: int = 30,
        today: Optional[date] = None,
        policy: Optional[SchedulingPolicy] = None,
    ) -> Tuple[Dict[str, List[Case]], int]:
        """
        Cases assigned to judge_id with a hearing in [start, end] inclusive,
        grouped by ISO date. Within a day, cases follow the time table order.
        """
        policy = policy or get_policy()
        today = today or utcnow().date()
        start = start_date or today
        end = end_date or (today + timedelta(days=window_days))

        cases = case_store.list_assigned_between(db, judge_id, start, end)
        cases.sort(key=lambda c: (c.scheduled_date, policy.time_slot_index(c.scheduled_time)))

        grouped: Dict[str, List[Case]] = OrderedDict()
        for case in cases:
            grouped.setdefault(format_date(case.scheduled_date), []).append(case)

        return grouped, len(cases)


schedule_service = ScheduleService()
