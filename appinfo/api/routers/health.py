"""Health endpoint router composition for liveness probes."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from appinfo.service import AppInfoServicePort


def api_create_health_router(app_info_service: AppInfoServicePort) -> APIRouter:
    """Create health-check router reporting the active service variant.

    The probe never calls the app info service, so the broken variant still
    reports healthy and keeps receiving traffic during a canary.

    Args:
        app_info_service: Service selected at startup.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when app_info_service is invalid.
    """

    if app_info_service is None:
        raise ValueError("app_info_service must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        payload = {
            "status": "ok",
            "version": app_info_service.service_version(),
            "variant": app_info_service.service_variant_name(),
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
