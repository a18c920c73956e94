"""
PitchForge - FastAPI Application Entry Point.

Case study relevance scoring and solution pitch composition:
- Rank past engagements against a customer's project brief
- Compose a draft proposal citing the most relevant ones
- Track pitch edits and review status

Run with:
    uvicorn pitchforge.main:app --reload --port 8000
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pitchforge.api.routes import router
from pitchforge.core.config import get_settings
from pitchforge.core.exceptions import NotFoundError, ValidationError


# ===========================================
# Logging Configuration
# ===========================================

def setup_logging():
    """Configure application logging."""
    settings = get_settings()
    level = logging.DEBUG if settings.DEBUG else logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Avoid stacking handlers when the app is created more than once
    if not any(getattr(h, "_pitchforge", False) for h in root_logger.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        console_handler._pitchforge = True
        root_logger.addHandler(console_handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("MARKDOWN").setLevel(logging.WARNING)

    return logging.getLogger(__name__)


logger = setup_logging()


# ===========================================
# Application Lifespan
# ===========================================

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    logger.info("=" * 50)
    logger.info(f"{settings.APP_NAME} Starting Up")
    logger.info("=" * 50)
    logger.info(f"Environment: {'Development' if settings.DEBUG else 'Production'}")
    logger.info(f"Inclusion threshold: {settings.INCLUSION_THRESHOLD}")
    logger.info(f"Max cited case studies: {settings.MAX_CITED_CASE_STUDIES}")

    if settings.TITLE_SEED is not None:
        logger.info(f"Pitch titles seeded with {settings.TITLE_SEED}")

    yield

    logger.info(f"{settings.APP_NAME} shutting down...")


# ===========================================
# Error Handlers
# ===========================================

async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler for unhandled errors."""
    logger.error(f"Unhandled error: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": str(exc) if get_settings().DEBUG else "An error occurred"
        }
    )


# ===========================================
# FastAPI Application
# ===========================================

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        description="""
        Case study relevance scoring and solution pitch composition.

        ## Recommendations

        - `GET /briefs/{id}/recommendations` - Ranked case studies for a brief

        ## Pitches

        - `POST /briefs/{id}/pitches` - Compose a draft pitch
        - `PUT /pitches/{id}` - Save an edit (new version)
        - `POST /pitches/{id}/{action}` - submit / approve / reject / revise
        - `GET /pitches/{id}/export` - HTML export
        """,
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(router)

    @app.get("/", tags=["root"])
    async def root():
        """Root endpoint with API information."""
        return JSONResponse({
            "service": settings.APP_NAME,
            "version": "1.0.0",
            "status": "running",
            "endpoints": {
                "briefs": {
                    "create": "POST /briefs",
                    "recommendations": "GET /briefs/{brief_id}/recommendations",
                    "generate_pitch": "POST /briefs/{brief_id}/pitches"
                },
                "pitches": {
                    "get": "GET /pitches/{pitch_id}",
                    "edit": "PUT /pitches/{pitch_id}",
                    "action": "POST /pitches/{pitch_id}/{action}",
                    "export": "GET /pitches/{pitch_id}/export",
                    "stats": "GET /pitches/stats/overview"
                },
                "case_studies": {
                    "create": "POST /case-studies",
                    "list": "GET /case-studies",
                    "stats": "GET /case-studies/stats"
                },
                "health": "GET /health"
            }
        })

    return app


# Create app instance
app = create_app()


# ===========================================
# Main Entry Point
# ===========================================

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "pitchforge.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info"
    )
