"""
Health and readiness checks: verify database connectivity and scheduling policy.
"""
from fastapi import APIRouter
from sqlalchemy import text

from app.core.logger import logger
from app.db.database import SessionLocal
from app.services.scheduling import get_policy

router = APIRouter()


def _check_database() -> tuple[str, str]:
    """Returns (status, detail). Status is 'ok' or 'error'."""
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
        return "ok", "Database reachable"
    except Exception as e:
        logger.exception("Database check failed")
        return "error", f"Database: {str(e)}"
    finally:
        db.close()


def _check_policy() -> tuple[str, str]:
    try:
        policy = get_policy()
        return "ok", (
            f"{len(policy.severity_rules)} severity rules, "
            f"{len(policy.case_type_rules)} case-type rules, "
            f"{policy.slots_per_day} slots/day"
        )
    except Exception as e:
        logger.exception("Policy check failed")
        return "error", f"Policy: {str(e)}"


@router.get("")
def health():
    return {"status": "healthy"}


@router.get("/ready")
def readiness():
    db_status, db_detail = _check_database()
    policy_status, policy_detail = _check_policy()
    overall = "ok" if db_status == policy_status == "ok" else "degraded"
    return {
        "status": overall,
        "database": {"status": db_status, "detail": db_detail},
        "schedulingPolicy": {"status": policy_status, "detail": policy_detail},
    }
