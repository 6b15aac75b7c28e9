"""Routes package."""

from .relay import router as relay_router
from .resolve import router as resolve_router
from .health import router as health_router
from .app import router as app_router

__all__ = [
    'relay_router',
    'resolve_router',
    'health_router',
    'app_router',
]
