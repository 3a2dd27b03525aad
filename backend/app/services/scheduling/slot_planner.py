"""
services/scheduling/slot_planner.py

Enumerates hearing slots over a horizon of working days.

Each working day offers the policy's fixed time table (10:00 AM - 12:30 PM,
02:00 PM - 04:30 PM by default; the lunch gap is never offered). Rooms are
handed out round-robin by slot position. Nothing here checks whether a slot
is already taken.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import List, Optional, Union

from app.services.scheduling.policy import SchedulingPolicy, get_policy
from app.utils.helpers import to_date

WEEKEND = (5, 6)  # Saturday, Sunday


@dataclass(frozen=True)
class Slot:
    date:             date
    time:             str
    slot_index:       int
    court_room_index: int


def is_working_day(day: date) -> bool:
    return day.weekday() not in WEEKEND


def court_room_label(court_room_index: int) -> str:
    return f"Court {court_room_index + 1}"


def working_days(start_date: Union[date, datetime], num_days: int) -> List[date]:
    """The first `num_days` working days on or after start_date."""
    days: List[date] = []
    current = to_date(start_date)
    while len(days) < num_days:
        if is_working_day(current):
            days.append(current)
        current += timedelta(days=1)
    return days


def plan_slots(
    start_date: Union[date, datetime],
    num_days: int,
    policy: Optional[SchedulingPolicy] = None,
) -> List[Slot]:
    """
    Slots for `num_days` working days starting at start_date, in
    chronological then intra-day order.

    Weekend days are skipped and do not count toward num_days.
    """
    policy = policy or get_policy()
    if num_days <= 0:
        return []

    slots: List[Slot] = []
    for day in working_days(start_date, num_days):
        for slot_index, time_label in enumerate(policy.time_slots):
            slots.append(
                Slot(
                    date=day,
                    time=time_label,
                    slot_index=slot_index,
                    court_room_index=slot_index % policy.court_rooms,
                )
            )
    return slots
