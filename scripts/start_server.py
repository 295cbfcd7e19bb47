#!/usr/bin/env python3
# =============================================================================
# scripts/start_server.py - API Server Entry Point
# =============================================================================
# Starts the Token Classifier API under uvicorn.
#
# Usage:
#   # Start server on $PORT (default 3000)
#   python scripts/start_server.py
#
#   # Or use uvicorn directly
#   uvicorn app.main:app --host 0.0.0.0 --port 3000
#
# Prerequisites:
#   - Environment variables set directly or via a .env file (all optional)
# =============================================================================

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import uvicorn

from app.config import settings


def main():
    """Start the API server."""
    print("=" * 60)
    print(settings.API_NAME)
    print("=" * 60)
    print()
    print(f"Listening on http://{settings.API_HOST}:{settings.PORT}")
    print("Press Ctrl+C to stop")
    print()

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
