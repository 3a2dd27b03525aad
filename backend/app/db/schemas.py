"""
Pydantic validation schemas

Field names are snake_case in Python and camelCase on the wire.
"""
import datetime as dt
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.db.models import CasePriority, CaseStatus
from app.utils.helpers import parse_iso_date


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ============================================================================
# Case Schemas
# ============================================================================

class HearingRecord(CamelModel):
    """One archived hearing slot"""
    date: Optional[dt.date] = None
    notes: str = "Rescheduled"
    duration: int = 30


class CaseSummary(CamelModel):
    id: UUID
    case_number: str
    title: str
    status: CaseStatus
    ipc_tags: List[str] = []
    created_at: dt.datetime


class CaseResponse(CaseSummary):
    description: Optional[str] = None
    entities: List[str] = []
    priority: Optional[CasePriority] = None
    scheduled_date: Optional[dt.date] = None
    scheduled_time: Optional[str] = None
    court_room: Optional[str] = None
    estimated_duration: int = 30
    assigned_judge_id: Optional[UUID] = None
    previous_hearings: List[HearingRecord] = []
    document_count: int = 0
    updated_at: dt.datetime


class SimilarCaseResponse(CaseSummary):
    similarity_score: float


class PriorityBreakdownResponse(CamelModel):
    case_id: UUID
    case_number: str
    age: float
    severity: float
    complexity: float
    case_type: float
    priority_score: float
    priority: CasePriority
    matched_categories: List[str] = []


# ============================================================================
# Scheduling Schemas
# ============================================================================

class ScheduleItem(CamelModel):
    """A proposed (not yet applied) case-to-slot assignment"""
    case_id: str
    case_number: Optional[str] = None
    title: Optional[str] = None
    date: dt.date
    time: str = Field(..., min_length=1)
    court_room: str = Field(..., min_length=1)
    priority: CasePriority = CasePriority.low
    estimated_duration: int = Field(30, gt=0)
    priority_score: float = 0.0

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Any:
        # Browsers send full ISO timestamps for dates
        if isinstance(v, str):
            return parse_iso_date(v)
        return v


class ScheduleProposalResponse(CamelModel):
    total_cases: int
    scheduled_cases: int
    schedule: List[ScheduleItem]
    unscheduled_count: int
    message: Optional[str] = None


class ApplyScheduleRequest(CamelModel):
    schedule: Optional[List[ScheduleItem]] = None


class SkippedScheduleItem(CamelModel):
    case_id: str
    reason: str


class ApplyScheduleResponse(CamelModel):
    success: bool
    message: str
    scheduled_cases: List[CaseResponse]
    skipped: List[SkippedScheduleItem] = []


class MyScheduleResponse(CamelModel):
    schedule: Dict[str, List[CaseResponse]]
    total_scheduled: int


class RescheduleRequest(CamelModel):
    scheduled_date: dt.date
    scheduled_time: str = Field(..., min_length=1)
    court_room: str = Field(..., min_length=1)
    reason: Optional[str] = None

    @field_validator("scheduled_date", mode="before")
    @classmethod
    def parse_scheduled_date(cls, v: Any) -> Any:
        if isinstance(v, str):
            return parse_iso_date(v)
        return v


class RescheduleResponse(CamelModel):
    success: bool
    message: str
    case: CaseResponse
