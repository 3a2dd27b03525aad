"""
Main API router aggregator
"""
from fastapi import APIRouter

from app.api.v1.endpoints import (
    cases,
    health,
    scheduling,
)

api_router = APIRouter()

# Include routers
api_router.include_router(cases.router, prefix="/cases", tags=["Cases"])
api_router.include_router(scheduling.router, prefix="/scheduling", tags=["Scheduling"])
api_router.include_router(health.router, prefix="/health", tags=["Health"])
