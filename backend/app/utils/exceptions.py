"""
Custom exception classes
"""
from fastapi import HTTPException


class CaseNotFoundError(HTTPException):
    """Raised when case doesn't exist"""
    def __init__(self, case_id: str):
        super().__init__(
            status_code=404,
            detail=f"Case {case_id} not found"
        )


class EmptyScheduleError(HTTPException):
    """Raised when apply-schedule is called without any items"""
    def __init__(self):
        super().__init__(
            status_code=400,
            detail="No schedule provided"
        )


class InvalidScheduleRequestError(HTTPException):
    """Raised when scheduling input is present but unusable"""
    def __init__(self, reason: str):
        super().__init__(
            status_code=400,
            detail=reason
        )


class UpstreamFailureError(HTTPException):
    """Raised when the case store cannot be read or written"""
    def __init__(self, reason: str = "Storage unavailable"):
        super().__init__(
            status_code=503,
            detail=f"Upstream failure: {reason}"
        )


class PolicyError(ValueError):
    """Raised when a scheduling policy file is malformed"""
