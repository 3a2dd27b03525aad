"""
Case read endpoints used by the case detail page
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.v1.deps import get_current_user
from app.db.database import get_db
from app.db.models import User
from app.db.schemas import (
    CaseResponse,
    CaseSummary,
    PriorityBreakdownResponse,
    SimilarCaseResponse,
)
from app.services.case_store import case_store
from app.services.scheduling import get_policy, priority_bucket, score_breakdown
from app.services.similarity_service import find_similar_cases
from app.utils.exceptions import CaseNotFoundError
from app.utils.helpers import utcnow

router = APIRouter()


@router.get("/{case_id}", response_model=CaseResponse)
def get_case(
    case_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    case = case_store.get_case(db, case_id)
    if not case:
        raise CaseNotFoundError(case_id)
    return CaseResponse.model_validate(case)


@router.get("/{case_id}/similar", response_model=List[SimilarCaseResponse])
def get_similar_cases(
    case_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Up to five related cases (shared IPC tags or entities), best match first
    """
    return [
        SimilarCaseResponse(
            **CaseSummary.model_validate(match.case).model_dump(),
            similarity_score=match.similarity_score,
        )
        for match in find_similar_cases(db, case_id)
    ]


@router.get("/{case_id}/priority", response_model=PriorityBreakdownResponse)
def get_case_priority(
    case_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Per-term breakdown of the scheduling score for one case
    """
    case = case_store.get_case(db, case_id)
    if not case:
        raise CaseNotFoundError(case_id)

    policy = get_policy()
    breakdown = score_breakdown(case, utcnow(), policy)

    return PriorityBreakdownResponse(
        case_id=case.id,
        case_number=case.case_number,
        age=round(breakdown.age, 1),
        severity=breakdown.severity,
        complexity=breakdown.complexity,
        case_type=breakdown.case_type,
        priority_score=round(breakdown.total, 1),
        priority=priority_bucket(breakdown.total, policy),
        matched_categories=breakdown.matched_categories,
    )
