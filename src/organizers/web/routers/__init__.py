"""API routers for the REST API."""

from organizers.web.routers.cart import router as cart_router
from organizers.web.routers.designs import router as designs_router
from organizers.web.routers.sessions import router as sessions_router

__all__ = [
    "cart_router",
    "designs_router",
    "sessions_router",
]
