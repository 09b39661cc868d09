"""Dependency injection for FastAPI."""

from fastapi import Depends, Request

from wallet_gains.app_context import AppContext
from wallet_gains.cache import CacheSet
from wallet_gains.services import GainsCalculator


def get_app_context(request: Request) -> AppContext:
    """Provide the process-wide AppContext created at startup."""
    return request.app.state.context


def get_gains_calculator(context: AppContext = Depends(get_app_context)) -> GainsCalculator:
    """Provide GainsCalculator instance."""
    return context.gains_calculator


def get_caches(context: AppContext = Depends(get_app_context)) -> CacheSet:
    """Provide the shared CacheSet."""
    return context.caches
