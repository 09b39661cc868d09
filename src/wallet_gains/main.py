"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wallet_gains import __version__
from wallet_gains.api.routers import system_router, wallet_router
from wallet_gains.api.schemas import ErrorResponse
from wallet_gains.app_context import AppContext
from wallet_gains.config.logging_config import setup_logging
from wallet_gains.config.settings import get_settings
from wallet_gains.core.exceptions import AppError, InvalidAddressError, WalletGainsError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    app.state.context = AppContext(get_settings())
    yield
    # Shutdown
    await app.state.context.aclose()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Unrealized gains for Solana wallet token holdings",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

# Include routers
app.include_router(wallet_router)
app.include_router(system_router)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message).model_dump())


@app.exception_handler(InvalidAddressError)
async def invalid_address_handler(request: Request, exc: InvalidAddressError) -> JSONResponse:
    """Malformed wallet addresses are client errors."""
    return _error(400, exc.message)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors; never leaks internal detail."""
    reason = exc.reason if isinstance(exc, WalletGainsError) else exc.message
    logger.error("%s %s failed: %s", request.method, request.url.path, reason)
    return _error(500, WalletGainsError.USER_MESSAGE)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(500, WalletGainsError.USER_MESSAGE)


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": __version__,
        "docs": "/docs",
    }
