"""API routers package."""

from wallet_gains.api.routers.wallet import router as wallet_router
from wallet_gains.api.routers.system import router as system_router

__all__ = [
    "wallet_router",
    "system_router",
]
