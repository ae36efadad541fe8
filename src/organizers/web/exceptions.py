"""API errors and their JSON error responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from organizers.application.config import ConfigError


class SessionNotFoundError(Exception):
    """Raised when an editing session id is unknown."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}")


class CartItemNotFoundError(Exception):
    """Raised when a cart item id is unknown."""

    def __init__(self, item_id: str) -> None:
        self.item_id = item_id
        super().__init__(f"Cart item not found: {item_id}")


class UnsupportedFormatError(Exception):
    """Raised when no exporter is registered for a requested format."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(
            f"Unsupported format: {format_name}. Available: {', '.join(available)}"
        )


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")}
                    for d in exc.details
                ]
                or None,
            },
        )

    @app.exception_handler(SessionNotFoundError)
    async def session_not_found_handler(
        request: Request, exc: SessionNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"session_id": exc.session_id},
            },
        )

    @app.exception_handler(CartItemNotFoundError)
    async def cart_item_not_found_handler(
        request: Request, exc: CartItemNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"item_id": exc.item_id},
            },
        )

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(
        request: Request, exc: UnsupportedFormatError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "unsupported_format",
                "details": {"format": exc.format_name, "available": exc.available},
            },
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "invalid_value",
                "details": None,
            },
        )
