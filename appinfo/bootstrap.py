"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from appinfo.api import create_api_application
from appinfo.config import AppSettings
from appinfo.service import service_create_app_info_service


def bootstrap_create_application(settings: AppSettings) -> FastAPI:
    """Assemble the runtime application for validated settings.

    The app info service variant is chosen here, once, for the lifetime of
    the process.

    Args:
        settings: Validated runtime settings.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        AppInfoVersionError: Raised when the configured version is not recognized.
    """

    app_info_service = service_create_app_info_service(version=settings.app_version)
    return create_api_application(settings=settings, app_info_service=app_info_service)
