"""
FastAPI application entry point.

Cue Card Answers API - serves speaking-test cue cards with sample answers
at several score bands, rendered into segments or exported as plain text.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cuecards.logging import configure_logging, get_logger
from cuecards.settings import get_settings
from cuecards.routers import public_router, views_router

settings = get_settings()
configure_logging(settings.LOG_LEVEL)

logger = get_logger(__name__)
for key in settings.validate():
    logger.warning(f"Setting {key} is missing or invalid; using defaults where possible")

# Create FastAPI app
app = FastAPI(
    title="Cue Card Answers API",
    description="""
API for browsing cue cards and their tiered sample answers.

## Features
- Browse topics and cards
- Score bands available per card
- Answers segmented by rhetorical role or by paragraph
- Copy-ready plain-text export, per question or for a whole card
- View sessions with time-boxed "copied" acknowledgments
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Include routers
app.include_router(public_router)
app.include_router(views_router)


@app.get("/", tags=["root"])
def root():
    """
    Root endpoint - API health check and info.
    """
    return {
        "name": "Cue Card Answers API",
        "version": "1.0.0",
        "status": "healthy",
        "docs": "/docs",
    }


@app.get("/health", tags=["root"])
def health_check():
    """
    Health check endpoint for monitoring.
    """
    return {"status": "ok"}
