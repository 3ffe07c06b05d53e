"""
SmartAdmit - FastAPI Application

Main entry point for the backend API.
Provides college match scoring and SmartAdmit recommendations.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from smartadmit.config.settings import settings
from smartadmit.infrastructure.exceptions import (
    SmartAdmitError,
    ValidationError,
    NotFoundError,
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    logger.info(f"SmartAdmit Backend starting in {settings.environment} mode...")
    if not settings.college_scorecard_api_key:
        logger.warning("College Scorecard lookups disabled: no API key")
    
    yield
    
    logger.info("SmartAdmit Backend shutting down...")


app = FastAPI(
    title="SmartAdmit",
    description="College match scoring for admissions guidance",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
    docs_url=None if settings.is_production else "/docs",
)

# CORS configuration from Settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Exception Handlers
# ============================================================================

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Handle validation errors."""
    return JSONResponse(
        status_code=400,
        content=exc.to_dict(),
    )


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError):
    """Handle not found errors."""
    return JSONResponse(
        status_code=404,
        content=exc.to_dict(),
    )


@app.exception_handler(SmartAdmitError)
async def general_error_handler(request: Request, exc: SmartAdmitError):
    """Handle all other application errors."""
    logger.error(f"{exc.__class__.__name__}: {exc.message}")
    return JSONResponse(
        status_code=500,
        content=exc.to_dict(),
    )


# ============================================================================
# Health Check
# ============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "smartadmit"}


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "SmartAdmit API",
        "version": "1.0.0",
        "docs": "/docs",
    }


# ============================================================================
# Import and register routers
# ============================================================================

from smartadmit.api.routes import scoring, recommendations  # noqa: E402

app.include_router(scoring.router)
app.include_router(recommendations.router)
