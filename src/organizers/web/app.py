"""FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from organizers.web.exceptions import register_exception_handlers
from organizers.web.routers import cart_router, designs_router, sessions_router

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def create_app(allowed_origins: list[str] | None = None) -> FastAPI:
    """Build the organizer API.

    Args:
        allowed_origins: Origins allowed by CORS. Defaults to any origin,
            since the layout editor UI is served separately.
    """
    app = FastAPI(
        title="Drawer Organizer API",
        description="Split drawers into compartments, then price, export and cart them",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for router in (sessions_router, designs_router, cart_router):
        app.include_router(router, prefix=API_PREFIX)
    logger.debug(f"Mounted {len(app.routes)} routes under {API_PREFIX}")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    return app


# Module-level instance for `uvicorn organizers.web.app:app`
app = create_app()
