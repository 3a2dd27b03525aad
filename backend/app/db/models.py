"""
SQLAlchemy ORM Models

Column types are kept portable (Uuid, JSON with a JSONB variant) so the same
models run on PostgreSQL in production and SQLite in tests.
"""

from __future__ import annotations

import enum
import uuid
from datetime import datetime

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    Enum as SQLEnum,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    TIMESTAMP,
    Uuid,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from app.db.database import Base
from app.utils.helpers import utcnow

JSONList = JSON().with_variant(JSONB(), "postgresql")

# ============================================================================
# Enums
# ============================================================================

class UserRole(str, enum.Enum):
    """User roles"""
    judge = "judge"
    clerk = "clerk"
    admin = "admin"

class CaseStatus(str, enum.Enum):
    """Case status enum"""
    pending = "pending"
    processing = "processing"
    completed = "completed"
    closed = "closed"
    scheduled = "scheduled"

class CasePriority(str, enum.Enum):
    """Priority bucket derived from the scheduling score"""
    urgent = "urgent"
    high = "high"
    medium = "medium"
    low = "low"


# Cases eligible for auto-scheduling
SCHEDULABLE_STATUSES = (CaseStatus.pending, CaseStatus.processing)


# ============================================================================
# Models
# ============================================================================

class User(Base):
    """Judge / court staff account"""
    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    email = Column(String(255), unique=True, nullable=False, index=True)
    full_name = Column(String(255), nullable=False)
    role = Column(SQLEnum(UserRole), nullable=False, default=UserRole.judge)
    is_active = Column(Boolean, nullable=False, default=True)

    # Timestamps
    created_at = Column(TIMESTAMP, nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    assigned_cases = relationship(
        "Case", back_populates="assigned_judge", foreign_keys="Case.assigned_judge_id"
    )


class Case(Base):
    """Court case record"""
    __tablename__ = "cases"
    __table_args__ = (
        Index("ix_cases_judge_scheduled_date", "assigned_judge_id", "scheduled_date"),
        Index("ix_cases_status_scheduled_date", "status", "scheduled_date"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # Case Identification
    case_number = Column(String(100), unique=True, nullable=False)
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)

    # Status
    status = Column(SQLEnum(CaseStatus), nullable=False, default=CaseStatus.pending)

    # Extracted metadata (statute references, party/entity names)
    ipc_tags = Column(JSONList, nullable=False, default=list)
    entities = Column(JSONList, nullable=False, default=list)

    # Scheduling
    scheduled_date = Column(Date, nullable=True)
    scheduled_time = Column(String(20), nullable=True)
    court_room = Column(String(50), nullable=True)
    priority = Column(SQLEnum(CasePriority), nullable=True)
    estimated_duration = Column(Integer, nullable=False, default=30)
    assigned_judge_id = Column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    # Append-only: [{"date": "YYYY-MM-DD", "notes": str, "duration": int}]
    previous_hearings = Column(JSONList, nullable=False, default=list)

    # Ownership
    created_by_id = Column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )

    # Timestamps
    created_at = Column(TIMESTAMP, nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    assigned_judge = relationship(
        "User", back_populates="assigned_cases", foreign_keys=[assigned_judge_id]
    )
    created_by = relationship("User", foreign_keys=[created_by_id])
    documents = relationship(
        "Document", back_populates="case", cascade="all, delete-orphan", order_by="Document.created_at"
    )

    @property
    def document_count(self) -> int:
        return len(self.documents or [])

    def __repr__(self) -> str:
        return f"<Case {self.case_number} status={getattr(self.status, 'value', self.status)}>"


class Document(Base):
    """Case document metadata (binary storage lives elsewhere)"""
    __tablename__ = "documents"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    case_id = Column(Uuid(as_uuid=True), ForeignKey("cases.id", ondelete="CASCADE"), nullable=False)

    title = Column(String(255), nullable=False)
    file_name = Column(String(255), nullable=True)

    created_at = Column(TIMESTAMP, nullable=False, default=utcnow)

    case = relationship("Case", back_populates="documents")
