"""
services/scheduling/schedule_builder.py

Pairs the ranked backlog with planned slots.

    1. score every case, sort descending (stable)
    2. plan slots for num_days working days
    3. zip: one case per slot until either side runs out
    4. bucket each score into urgent / high / medium / low

The result is a proposal only; nothing is written here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, List, Optional, Sequence, Union

from app.db.schemas import ScheduleItem
from app.services.scheduling.policy import SchedulingPolicy, get_policy
from app.services.scheduling.priority_scorer import priority_bucket, rank_cases
from app.services.scheduling.slot_planner import court_room_label, plan_slots

NO_CASES_MESSAGE = "No unscheduled cases found"


@dataclass
class ScheduleProposal:
    items:       List[ScheduleItem] = field(default_factory=list)
    total_cases: int = 0
    message:     Optional[str] = None

    @property
    def scheduled_cases(self) -> int:
        return len(self.items)

    @property
    def unscheduled_count(self) -> int:
        return max(0, self.total_cases - self.scheduled_cases)


def build_schedule(
    cases: Sequence[Any],
    start_date: Union[date, datetime],
    num_days: int,
    now: datetime,
    policy: Optional[SchedulingPolicy] = None,
) -> ScheduleProposal:
    policy = policy or get_policy()

    if not cases:
        return ScheduleProposal(items=[], total_cases=0, message=NO_CASES_MESSAGE)

    ranked = rank_cases(cases, now, policy)
    slots = plan_slots(start_date, num_days, policy)

    items: List[ScheduleItem] = []
    for (case, score), slot in zip(ranked, slots):
        items.append(
            ScheduleItem(
                case_id=str(case.id),
                case_number=case.case_number,
                title=case.title,
                date=slot.date,
                time=slot.time,
                court_room=court_room_label(slot.court_room_index),
                priority=priority_bucket(score, policy),
                estimated_duration=policy.default_duration,
                priority_score=round(score, 1),
            )
        )

    return ScheduleProposal(items=items, total_cases=len(ranked))
