"""
services/similarity_service.py

Related-case lookup for the case detail page.

Candidates are other cases sharing at least one IPC tag or one extracted
entity with the reference case. Only the first `similar_limit` candidates in
storage order are kept, and only then are they scored, so the result is the
best of those five rather than a global top five.

The score counts shared tags only; entity overlap makes a case a candidate
but does not raise its score.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import islice
from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from app.db.models import Case
from app.services.case_store import case_store
from app.services.scheduling.policy import SchedulingPolicy, get_policy
from app.utils.exceptions import CaseNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class SimilarCase:
    case:             Case
    similarity_score: float


def similarity_score(reference_tags: Iterable[str], candidate_tags: Iterable[str]) -> float:
    reference = list(reference_tags or [])
    candidate = list(candidate_tags or [])
    shared = sum(1 for tag in candidate if tag in reference)
    return round(shared / max(len(reference), 1) * 100, 1)


def find_similar_cases(
    db: Session,
    case_id: str | UUID,
    policy: Optional[SchedulingPolicy] = None,
) -> List[SimilarCase]:
    policy = policy or get_policy()

    reference = case_store.get_case(db, case_id)
    if reference is None:
        raise CaseNotFoundError(str(case_id))

    candidates = list(islice(case_store.iter_related_candidates(db, reference), policy.similar_limit))

    results = [
        SimilarCase(case=c, similarity_score=similarity_score(reference.ipc_tags, c.ipc_tags))
        for c in candidates
    ]
    results.sort(key=lambda r: r.similarity_score, reverse=True)

    logger.info("Similar cases for %s: %d found", reference.case_number, len(results))
    return results
