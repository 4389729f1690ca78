"""API router package for endpoint composition."""

from .app_info import api_create_app_info_router
from .health import api_create_health_router

__all__ = ["api_create_app_info_router", "api_create_health_router"]
