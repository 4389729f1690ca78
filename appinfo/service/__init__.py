"""Service layer package for versioned pod metadata retrieval."""

from .app_info import (
    SERVICE_LABELS_PATH,
    SERVICE_POD_NAME_ENV,
    SERVICE_POD_NAMESPACE_ENV,
    BaselineAppInfoService,
    BrokenAppInfoService,
    NamespaceAppInfoService,
    service_create_app_info_service,
)
from .errors import AppInfoError, AppInfoLabelFileError, AppInfoSimulatedFailureError, AppInfoVersionError
from .interfaces import AppInfoServicePort

__all__ = [
    "AppInfoError",
    "AppInfoLabelFileError",
    "AppInfoServicePort",
    "AppInfoSimulatedFailureError",
    "AppInfoVersionError",
    "BaselineAppInfoService",
    "BrokenAppInfoService",
    "NamespaceAppInfoService",
    "SERVICE_LABELS_PATH",
    "SERVICE_POD_NAME_ENV",
    "SERVICE_POD_NAMESPACE_ENV",
    "service_create_app_info_service",
]
