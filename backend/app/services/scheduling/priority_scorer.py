"""
services/scheduling/priority_scorer.py

Additive urgency score for one case.

    age        min(days_since_created * 2, 50)
    severity   +40 flat when any severity lexicon rule matches
    complexity min(document_count * 5, 20)
    case type  +30 bail, +25 custody, +20 interim (all that match)

Each term is capped on its own and the terms are summed; there is no
normalization. The clock is passed in so scoring is repeatable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional, Sequence, Tuple

from app.db.models import CasePriority
from app.services.scheduling.policy import SchedulingPolicy, get_policy

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass
class PriorityBreakdown:
    age:        float
    severity:   float
    complexity: float
    case_type:  float
    matched_categories: List[str] = field(default_factory=list)

    @property
    def total(self) -> float:
        return self.age + self.severity + self.complexity + self.case_type


def days_since_created(case: Any, now: datetime) -> float:
    created_at = getattr(case, "created_at", None)
    if created_at is None:
        return 0.0
    # Compare naive UTC with naive UTC
    if created_at.tzinfo is not None and now.tzinfo is None:
        created_at = created_at.replace(tzinfo=None)
    elif created_at.tzinfo is None and now.tzinfo is not None:
        now = now.replace(tzinfo=None)
    return max((now - created_at).total_seconds() / SECONDS_PER_DAY, 0.0)


def score_breakdown(case: Any, now: datetime, policy: Optional[SchedulingPolicy] = None) -> PriorityBreakdown:
    policy = policy or get_policy()
    matched: List[str] = []

    age = min(days_since_created(case, now) * policy.age_points_per_day, policy.age_cap)

    severity = 0.0
    for rule in policy.severity_rules:
        if rule.matches(case):
            matched.append(rule.category)
            severity = max(severity, rule.score_delta)

    documents = getattr(case, "document_count", 0) or 0
    complexity = min(documents * policy.document_points, policy.document_cap)

    case_type = 0.0
    for rule in policy.case_type_rules:
        if rule.matches(case):
            matched.append(rule.category)
            case_type += rule.score_delta

    return PriorityBreakdown(
        age=age,
        severity=severity,
        complexity=complexity,
        case_type=case_type,
        matched_categories=matched,
    )


def score_case(case: Any, now: datetime, policy: Optional[SchedulingPolicy] = None) -> float:
    return score_breakdown(case, now, policy).total


def priority_bucket(score: float, policy: Optional[SchedulingPolicy] = None) -> CasePriority:
    thresholds = (policy or get_policy()).thresholds
    if score > thresholds.urgent:
        return CasePriority.urgent
    if score > thresholds.high:
        return CasePriority.high
    if score > thresholds.medium:
        return CasePriority.medium
    return CasePriority.low


def rank_cases(
    cases: Sequence[Any],
    now: datetime,
    policy: Optional[SchedulingPolicy] = None,
) -> List[Tuple[Any, float]]:
    """
    Score every case and order by score, highest first.
    sorted() is stable, so equal scores keep their input order.
    """
    policy = policy or get_policy()
    scored = [(case, score_case(case, now, policy)) for case in cases]
    return sorted(scored, key=lambda pair: pair[1], reverse=True)
