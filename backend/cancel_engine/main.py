"""
Cancellation Engine - FastAPI Application

Main entry point for the Cancellation Engine backend.

Flow:
- LetterRequest → AI generator (Gemini) → letter
- on missing key / model failure → template generator → letter
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .routers import letters_router, suggestions_router, tones_router

VERSION = "1.0.0"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load settings and configure logging on startup."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.state.settings = settings
    if not settings.has_llm_credentials:
        logger.warning("No LLM API key configured; letters will use the local template.")
    yield


# Create FastAPI app
app = FastAPI(
    lifespan=lifespan,
    title="Cancellation Engine",
    description="""
    Cancellation Engine - Subscription Cancellation Letter Generator

    Collects user and subscription details and produces a ready-to-send
    cancellation letter.

    ## Generators
    1. **AI generator**: Gemini writes the letter from the request details
    2. **Template generator**: deterministic fallback, used when no API key
       is configured or the model call fails

    ## Tones
    Formal, Firm & Legalistic, Polite & Friendly, Direct & Concise
    """,
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(letters_router)
app.include_router(suggestions_router)
app.include_router(tones_router)


@app.get("/")
async def root():
    """Root endpoint - API information."""
    return {
        "name": "Cancellation Engine",
        "version": VERSION,
        "description": "Subscription Cancellation Letter Generator",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": VERSION}


# For running with: python -m cancel_engine.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8001)
