"""FastAPI application factory."""

import logging
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from tastr.api.auth import router as auth_router
from tastr.api.foods import router as foods_router
from tastr.api.orders import router as orders_router
from tastr.app_logging import configure_logging
from tastr.config import parse_cors_origins
from tastr.containers import AppContainer
from tastr.domain.errors import (
    ForbiddenError,
    InsufficientStockError,
    NotFoundError,
    StockConflictError,
    TokenError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Tastr API")
    app.state.container = container

    # Registered before CORS so error responses still carry CORS headers.
    @app.middleware("http")
    async def server_error(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception(
                "Unhandled error on %s %s", request.method, request.url.path
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"message": "Internal Server Error"},
            )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router)
    app.include_router(foods_router)
    app.include_router(orders_router)

    @app.exception_handler(TokenError)
    async def unauthorized(request: Request, exc: TokenError) -> JSONResponse:
        logger.info("Rejected session token: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": "Unauthorized Access"},
        )

    @app.exception_handler(ForbiddenError)
    async def forbidden(request: Request, exc: ForbiddenError) -> JSONResponse:
        logger.info("Forbidden: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"message": "Forbidden Access"},
        )

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": str(exc)},
        )

    @app.exception_handler(InsufficientStockError)
    @app.exception_handler(StockConflictError)
    async def conflict(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"message": str(exc)},
        )

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Liveness message."""
        return "Tastr Server Is Running..."

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
