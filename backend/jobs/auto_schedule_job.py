from __future__ import annotations

import argparse
import json
import sys
from datetime import date, datetime

from app.core.logger import logger
from app.db.database import SessionLocal, init_db
from app.services.scheduling import apply_schedule, schedule_service
from app.utils.helpers import parse_uuid


def _parse_date_arg(value: str | None) -> date:
    if not value:
        return date.today()
    return datetime.strptime(value, "%Y-%m-%d").date()


def run_auto_schedule_job(start_date: date, days: int, apply: bool = False, judge_id: str | None = None) -> dict:
    db = SessionLocal()
    try:
        proposal = schedule_service.propose(db, start_date=start_date, days=days)
        result = {
            "startDate": start_date.isoformat(),
            "days": days,
            "totalCases": proposal.total_cases,
            "scheduledCases": proposal.scheduled_cases,
            "unscheduledCount": proposal.unscheduled_count,
            "schedule": [item.model_dump(mode="json", by_alias=True) for item in proposal.items],
        }
        if proposal.message:
            result["message"] = proposal.message

        if apply and proposal.items:
            acting_judge = parse_uuid(judge_id)
            if acting_judge is None:
                raise ValueError("--judge-id must be a UUID when --apply is given")
            report = apply_schedule(db, proposal.items, acting_judge_id=acting_judge)
            result["applied"] = report.applied_count
            result["skipped"] = [{"caseId": o.case_id, "reason": o.reason} for o in report.skipped]

        logger.info(
            "Auto-schedule job finished: start=%s days=%d placed=%d applied=%s",
            start_date, days, proposal.scheduled_cases, result.get("applied", 0),
        )
        return result
    finally:
        db.close()


def main() -> int:
    parser = argparse.ArgumentParser(description="Propose (and optionally apply) a hearing schedule")
    parser.add_argument("--start-date", dest="start_date", default=None, help="YYYY-MM-DD (default: today)")
    parser.add_argument("--days", type=int, default=7, help="Working days to plan")
    parser.add_argument("--apply", action="store_true", help="Write the proposal to the case records")
    parser.add_argument("--judge-id", dest="judge_id", default=None, help="Acting judge UUID (required with --apply)")
    args = parser.parse_args()

    if args.days < 1:
        parser.error("--days must be at least 1")
    if args.apply and parse_uuid(args.judge_id) is None:
        parser.error("--judge-id must be a UUID when --apply is given")

    init_db()
    result = run_auto_schedule_job(_parse_date_arg(args.start_date), args.days, args.apply, args.judge_id)
    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
