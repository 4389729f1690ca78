"""App info router composition for the versioned pod metadata endpoint."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from appinfo.domain import AppInfo
from appinfo.service import AppInfoError, AppInfoServicePort

API_JSON_MEDIA_TYPE = "application/json; charset=utf-8"

logger = logging.getLogger(__name__)


def api_create_app_info_router(app_info_service: AppInfoServicePort) -> APIRouter:
    """Create router exposing `/v1/appinfo`.

    Args:
        app_info_service: Service selected at startup for the configured version.

    Returns:
        APIRouter: Router exposing the app info endpoint.

    Raises:
        ValueError: Raised when app_info_service is invalid.
    """

    if app_info_service is None:
        raise ValueError("app_info_service must not be None")

    router = APIRouter(prefix="/v1", tags=["appinfo"])

    @router.get("/appinfo")
    def api_get_app_info(request: Request) -> JSONResponse:
        """Return pod metadata from the active app info service.

        Args:
            request: Incoming request, used for access logging only.

        Returns:
            JSONResponse: App info payload, or `{"error": ...}` with HTTP 500.
        """

        api_log_request(request)

        started_at = time.perf_counter()
        try:
            app_info = app_info_service.service_get_app_info()
        except AppInfoError as error:
            partial_info = error.partial_info
            logger.warning(
                "method=GetAppInfo err=%r took=%.6fs partial_pod_name=%r partial_namespace=%r",
                str(error),
                time.perf_counter() - started_at,
                "" if partial_info is None else partial_info.pod_name,
                "" if partial_info is None else partial_info.namespace,
            )
            return JSONResponse(
                content={"error": str(error)},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                media_type=API_JSON_MEDIA_TYPE,
            )

        logger.info("method=GetAppInfo err=None took=%.6fs", time.perf_counter() - started_at)
        return JSONResponse(
            content=api_serialize_app_info(app_info),
            status_code=status.HTTP_200_OK,
            media_type=API_JSON_MEDIA_TYPE,
        )

    return router


def api_log_request(request: Request) -> None:
    """Log request metadata for one inbound request.

    Args:
        request: Incoming request.

    Returns:
        None: Writes one log record as side effect.
    """

    client = request.client
    remote_address = "" if client is None else f"{client.host}:{client.port}"
    request_uri = request.url.path
    if request.url.query:
        request_uri = f"{request_uri}?{request.url.query}"

    logger.info(
        "Received Message at %s Method=%s Path=%s Host=%s RemoteAddr=%s RequestURI=%s",
        datetime.now(timezone.utc).isoformat(),
        request.method,
        request.url.path,
        request.headers.get("host", ""),
        remote_address,
        request_uri,
    )


def api_serialize_app_info(app_info: AppInfo) -> dict[str, object]:
    """Serialize one app info record to JSON payload.

    Args:
        app_info: Typed app info record.

    Returns:
        dict[str, object]: JSON-serializable payload keyed the way canary tooling expects.
    """

    return {
        "PodName": app_info.pod_name,
        "AppName": app_info.app_name,
        "Namespace": app_info.namespace,
        "Release": app_info.release,
        "Labels": dict(app_info.labels),
    }


__all__ = ["api_create_app_info_router", "api_log_request", "api_serialize_app_info"]
