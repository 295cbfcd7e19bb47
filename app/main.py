# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Token Classifier API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --port 3000 --reload
#   python scripts/start_server.py
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.config import settings
from app.exceptions import (
    TokenClassifierException,
    token_classifier_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.routers import classify, health

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

CLASSIFY_PATH = "/classify"
LEGACY_CLASSIFY_PATH = "/bfhl"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs the effective configuration on startup and a line on shutdown.
    The classifier holds no resources, so there is nothing to open or close.
    """
    # Startup
    logger.info(f"Starting {settings.API_NAME} in {settings.ENVIRONMENT} mode on port {settings.PORT}")
    logger.info(f"Serving user_id={settings.identity.user_id}, deduplicate={settings.DEDUPLICATE_RESULTS}")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.API_NAME}")


# Create FastAPI application
app = FastAPI(
    title=settings.API_NAME,
    description="""
## Token Classification API

Send a list of mixed tokens and get them back sorted into numbers,
alphabets and special characters.

### What You Get

| Field | Meaning |
|-------|---------|
| **odd_numbers / even_numbers** | Numeric tokens, as sent, split by parity |
| **alphabets** | Letter-only tokens, upper-cased |
| **special_characters** | Everything else |
| **sum** | Total of the numeric tokens, as a string |
| **concat_string** | All letters reversed, in alternating caps |

### Quick Start

```bash
curl -X POST http://localhost:3000/classify \\
  -H "Content-Type: application/json" \\
  -d '{"data": ["a", "1", "334", "4", "R", "$"]}'
```
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Classify",
            "description": "Classify tokens into numbers, alphabets and special characters",
        },
        {
            "name": "Health",
            "description": "API health and liveness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(TokenClassifierException)
async def handle_token_classifier_exception(request: Request, exc: TokenClassifierException):
    """Handle custom Token Classifier exceptions."""
    return await token_classifier_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    return await unhandled_exception_handler(request, exc)


# =============================================================================
# Routers
# =============================================================================

# Classify endpoints
app.include_router(
    classify.router,
    prefix=CLASSIFY_PATH,
    tags=["Classify"]
)

# Legacy path for existing clients
app.include_router(
    classify.router,
    prefix=LEGACY_CLASSIFY_PATH,
    tags=["Classify"],
    include_in_schema=False,
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns the available routes.
    """
    return {
        "message": f"{settings.API_NAME} is running",
        "endpoints": {
            "post": CLASSIFY_PATH,
            "get": CLASSIFY_PATH,
        },
        "version": __version__,
        "docs": "/docs",
        "health": "/api/v1/health",
    }
