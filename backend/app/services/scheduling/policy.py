"""
services/scheduling/policy.py

Declarative hearing-prioritization policy.

The keyword lexicons, caps, bucket thresholds and the daily time table live
in policy.yaml next to this module (or the file named by
SCHEDULING_POLICY_PATH). The scorer and the slot planner only ever read a
SchedulingPolicy; they never hard-code terms.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

import yaml

from app.core.config import settings
from app.utils.exceptions import PolicyError

logger = logging.getLogger(__name__)

DEFAULT_POLICY_PATH = Path(__file__).with_name("policy.yaml")

MATCHABLE_FIELDS = ("ipc_tags", "title")


# ============================================================================
# Policy objects
# ============================================================================

@dataclass(frozen=True)
class LexiconRule:
    """One {category, matchTerms, scoreDelta} row of a keyword lexicon."""

    category:    str
    score_delta: float
    match_terms: Dict[str, Tuple[str, ...]]

    def matches(self, case: Any) -> bool:
        """True when any term is a case-insensitive substring of a listed field."""
        for field_name, terms in self.match_terms.items():
            for value in _field_values(case, field_name):
                haystack = value.lower()
                if any(term.lower() in haystack for term in terms):
                    return True
        return False


@dataclass(frozen=True)
class PriorityThresholds:
    urgent: float = 70
    high:   float = 50
    medium: float = 30


@dataclass(frozen=True)
class SchedulingPolicy:
    age_points_per_day:  float = 2
    age_cap:             float = 50
    document_points:     float = 5
    document_cap:        float = 20
    severity_rules:      Tuple[LexiconRule, ...] = ()
    case_type_rules:     Tuple[LexiconRule, ...] = ()
    thresholds:          PriorityThresholds = field(default_factory=PriorityThresholds)
    time_slots:          Tuple[str, ...] = ()
    court_rooms:         int = 4
    default_duration:    int = 30
    similar_limit:       int = 5

    @property
    def slots_per_day(self) -> int:
        return len(self.time_slots)

    def time_slot_index(self, label: Optional[str]) -> int:
        """Position of a slot label in the daily table; unknown labels sort last."""
        try:
            return self.time_slots.index(label)
        except ValueError:
            return len(self.time_slots)


# ============================================================================
# Loading
# ============================================================================

def load_policy(path: Optional[Path | str] = None) -> SchedulingPolicy:
    """Read and validate a policy YAML file."""
    policy_path = Path(path) if path else DEFAULT_POLICY_PATH
    try:
        with open(policy_path, "r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh) or {}
    except FileNotFoundError as e:
        raise PolicyError(f"Scheduling policy not found: {policy_path}") from e
    except yaml.YAMLError as e:
        raise PolicyError(f"Scheduling policy is not valid YAML: {e}") from e

    policy = policy_from_dict(raw)
    logger.info(
        "Scheduling policy loaded from %s (%d severity rules, %d case-type rules, %d slots/day)",
        policy_path, len(policy.severity_rules), len(policy.case_type_rules), policy.slots_per_day,
    )
    return policy


def policy_from_dict(raw: Dict[str, Any]) -> SchedulingPolicy:
    if not isinstance(raw, dict):
        raise PolicyError("Scheduling policy must be a mapping")

    age        = raw.get("age") or {}
    complexity = raw.get("complexity") or {}
    thresholds = raw.get("priority_thresholds") or {}
    slots      = raw.get("slots") or {}
    similarity = raw.get("similarity") or {}

    time_slots = tuple(str(t) for t in (slots.get("times") or []))
    if not time_slots:
        raise PolicyError("Scheduling policy must define at least one time slot")
    if len(set(time_slots)) != len(time_slots):
        raise PolicyError("Scheduling policy time slots must be unique")

    court_rooms = _positive_int(slots.get("court_rooms", 4), "slots.court_rooms")

    parsed_thresholds = PriorityThresholds(
        urgent=_number(thresholds.get("urgent", 70), "priority_thresholds.urgent"),
        high=_number(thresholds.get("high", 50), "priority_thresholds.high"),
        medium=_number(thresholds.get("medium", 30), "priority_thresholds.medium"),
    )
    if not parsed_thresholds.urgent >= parsed_thresholds.high >= parsed_thresholds.medium:
        raise PolicyError("priority_thresholds must satisfy urgent >= high >= medium")

    return SchedulingPolicy(
        age_points_per_day=_number(age.get("points_per_day", 2), "age.points_per_day"),
        age_cap=_number(age.get("cap", 50), "age.cap"),
        document_points=_number(complexity.get("points_per_document", 5), "complexity.points_per_document"),
        document_cap=_number(complexity.get("cap", 20), "complexity.cap"),
        severity_rules=tuple(_parse_rules(raw.get("severity"), "severity")),
        case_type_rules=tuple(_parse_rules(raw.get("case_type"), "case_type")),
        thresholds=parsed_thresholds,
        time_slots=time_slots,
        court_rooms=court_rooms,
        default_duration=_positive_int(slots.get("default_duration", 30), "slots.default_duration"),
        similar_limit=_positive_int(similarity.get("limit", 5), "similarity.limit"),
    )


@lru_cache(maxsize=1)
def get_policy() -> SchedulingPolicy:
    """Process-wide policy, loaded once from settings."""
    return load_policy(settings.SCHEDULING_POLICY_PATH or None)


# ============================================================================
# Internal helpers
# ============================================================================

def _parse_rules(entries: Optional[Iterable[Any]], section: str) -> List[LexiconRule]:
    rules: List[LexiconRule] = []
    for i, entry in enumerate(entries or []):
        where = f"{section}[{i}]"
        if not isinstance(entry, dict):
            raise PolicyError(f"{where} must be a mapping")

        category = str(entry.get("category") or "").strip()
        if not category:
            raise PolicyError(f"{where}.category is required")

        match = entry.get("match") or {}
        if not isinstance(match, dict) or not match:
            raise PolicyError(f"{where}.match must map fields to term lists")

        match_terms: Dict[str, Tuple[str, ...]] = {}
        for field_name, terms in match.items():
            if field_name not in MATCHABLE_FIELDS:
                raise PolicyError(f"{where}.match.{field_name}: unknown field (use {', '.join(MATCHABLE_FIELDS)})")
            cleaned = tuple(str(t).strip() for t in (terms or []) if str(t).strip())
            if not cleaned:
                raise PolicyError(f"{where}.match.{field_name} has no terms")
            match_terms[field_name] = cleaned

        rules.append(
            LexiconRule(
                category=category,
                score_delta=_number(entry.get("score_delta"), f"{where}.score_delta"),
                match_terms=match_terms,
            )
        )
    return rules


def _field_values(case: Any, field_name: str) -> List[str]:
    value = getattr(case, field_name, None)
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value if v]


def _number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PolicyError(f"{name} must be a number")
    if value < 0:
        raise PolicyError(f"{name} must not be negative")
    return value


def _positive_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise PolicyError(f"{name} must be a positive integer")
    return value
