"""
FastAPI application entry point
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.api.v1.api import api_router
from app.core.logger import logger
from app.db.database import init_db
from app.middleware.correlation import CorrelationMiddleware
from app.services.scheduling import get_policy
from app.utils.exceptions import UpstreamFailureError

app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    openapi_url="/openapi.json" if settings.DEBUG else None,
)

# ── Routers ───────────────────────────────────────────────────────────────────
app.include_router(api_router, prefix="/api/v1")

# ── Correlation ID middleware (must be added before CORS) ─────────────────────
app.add_middleware(CorrelationMiddleware)

# ── CORS ──────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
    expose_headers=["X-Correlation-ID"],
)


# ── Errors ────────────────────────────────────────────────────────────────────

@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc)
    err = UpstreamFailureError(exc.__class__.__name__)
    return JSONResponse(status_code=err.status_code, content={"detail": err.detail})


@app.get("/")
def read_root():
    logger.info("Root endpoint accessed")
    return {"message": f"{settings.APP_NAME} API is running", "version": "1.0.0", "docs": "/docs"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}


@app.on_event("startup")
def on_startup():
    logger.info("Starting up: initializing DB...")
    init_db()
    # Fail fast on a broken policy file
    get_policy()
    logger.info("Startup complete")
