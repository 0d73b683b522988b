#!/usr/bin/env python3
# =============================================================================
# scripts/run_server.py - API Server Entry Point
# =============================================================================
# Starts the Users API with uvicorn using API_HOST / API_PORT from settings.
#
# Usage:
#   python scripts/run_server.py
#
#   # Or use uvicorn directly
#   uvicorn app.main:app --reload --port 5000
# =============================================================================

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import uvicorn

from app.config import settings


def main():
    """Start the API server."""
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
