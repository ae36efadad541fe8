"""FastAPI REST API for drawer organizer design.

This module provides a REST API for editing layouts in sessions, pricing
and validating designs, exporting them, and collecting cart items.

Usage:
    uvicorn organizers.web:app --reload
"""

from organizers.web.app import app, create_app

__all__ = ["app", "create_app"]
