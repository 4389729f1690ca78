"""FastAPI application factory for the app info service."""

from fastapi import FastAPI

from appinfo.config import AppSettings
from appinfo.service import AppInfoServicePort

from .routers import api_create_app_info_router, api_create_health_router


def create_api_application(settings: AppSettings, app_info_service: AppInfoServicePort) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        app_info_service: Service selected at startup for the configured version.

    Returns:
        FastAPI: Framework application instance with all routers mounted.

    Raises:
        ValueError: Raised when a router dependency is invalid.
    """

    application = FastAPI(
        title="Canary App Info",
        version=str(app_info_service.service_version()),
        description=f"environment={settings.environment_name}",
    )
    application.include_router(api_create_health_router(app_info_service=app_info_service))
    application.include_router(api_create_app_info_router(app_info_service=app_info_service))
    return application
