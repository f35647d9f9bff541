"""
Main application entry point - FastAPI app instance and configuration.
This is where the ASGI application is created and configured.
Run with: uvicorn contentai.main:app --reload
"""

import logging

from fastapi import Depends, FastAPI  # The FastAPI framework
from fastapi.middleware.cors import CORSMiddleware  # Cross-Origin Resource Sharing

from contentai.ai.router import RequestOrchestrator
from contentai.core.config import settings  # Application settings
from contentai.deps import get_orchestrator  # Orchestrator status for /health
from contentai.routers import content, voice  # Route handlers (endpoints)

# ---------------------------------------------------------------------------
# LOGGING
# ---------------------------------------------------------------------------
# LOG_LEVEL applies to every contentai.* logger; the structured AI logger
# installs its own stdout handler.
logging.basicConfig(
    level=logging.WARNING,
    format='[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logging.getLogger("contentai").setLevel(settings.LOG_LEVEL.upper())

# ---------------------------------------------------------------------------
# CREATE FASTAPI APPLICATION
# ---------------------------------------------------------------------------
# - docs_url: Swagger UI, visit http://localhost:8000/docs to try the endpoints
# - redoc_url: ReDoc, an alternative view of the same schema
app = FastAPI(
    title=settings.APP_NAME,  # "ContentAI Core"
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ---------------------------------------------------------------------------
# CORS MIDDLEWARE
# ---------------------------------------------------------------------------
# The web UI is served from a different origin than the API, so browsers
# need explicit permission to call it.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# REGISTER ROUTERS
# ---------------------------------------------------------------------------
# content.router: /content tools, catalogs, provider status and credentials
# voice.router: /voice command interpretation and execution
app.include_router(content.router)
app.include_router(voice.router)


# ---------------------------------------------------------------------------
# HEALTH CHECK ENDPOINT
# ---------------------------------------------------------------------------
@app.get("/health", tags=["health"])
def health_check(orchestrator: RequestOrchestrator = Depends(get_orchestrator)):
    """
    Simple health check endpoint.

    Does NOT call the AI provider (use GET /content/status for provider
    details). Reports whether content requests are live or simulated.

    Returns:
        {"status": "ok", "mode": "live" | "simulation"}
    """
    return {"status": "ok", "mode": orchestrator.mode}
