"""
Hearing prioritization and auto-scheduling services.
"""
from .policy import SchedulingPolicy, get_policy, load_policy
from .priority_scorer import priority_bucket, rank_cases, score_breakdown, score_case
from .slot_planner import plan_slots
from .schedule_builder import ScheduleProposal, build_schedule
from .schedule_applier import ApplyReport, apply_schedule
from .reschedule_service import reschedule_case
from .schedule_service import schedule_service

__all__ = [
    "SchedulingPolicy",
    "get_policy",
    "load_policy",
    "priority_bucket",
    "rank_cases",
    "score_breakdown",
    "score_case",
    "plan_slots",
    "ScheduleProposal",
    "build_schedule",
    "ApplyReport",
    "apply_schedule",
    "reschedule_case",
    "schedule_service",
]
