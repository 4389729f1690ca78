"""App info service variants and version-based selection.

Three interchangeable implementations of `AppInfoServicePort` exist so a
canary rollout can be observed going wrong and then fixed:

1. baseline: reports pod name and labels but never the namespace;
2. broken: always fails;
3. namespace: baseline with the missing namespace fixed.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final, Mapping

from appinfo.domain import (
    AppInfo,
    LabelAccumulator,
    domain_label_apply_line,
    domain_label_build_app_info,
)

from .errors import AppInfoLabelFileError, AppInfoSimulatedFailureError, AppInfoVersionError
from .interfaces import AppInfoServicePort

# Populated by the podinfo downward API volume defined in the deployment.
SERVICE_LABELS_PATH: Final[Path] = Path("/etc/labels")
SERVICE_POD_NAME_ENV: Final[str] = "MY_POD_NAME"
SERVICE_POD_NAMESPACE_ENV: Final[str] = "MY_POD_NAMESPACE"
SERVICE_BROKEN_MESSAGE: Final[str] = "something went wrong"


class _LabelFileAppInfoService:
    """Shared label-file reading for the baseline and namespace variants.

    The label file is read fresh on every call so label changes made to the
    running pod show up without a restart.
    """

    _version: int = 0
    _variant_name: str = ""

    def __init__(
        self,
        labels_path: Path | str = SERVICE_LABELS_PATH,
        environ: Mapping[str, str] | None = None,
    ):
        """Initialize label-file backed service.

        Args:
            labels_path: Path of the mounted label file.
            environ: Environment mapping. Defaults to the live process environment.
        """

        self._labels_path = Path(labels_path)
        self._environ = os.environ if environ is None else environ

    def service_version(self) -> int:
        return self._version

    def service_variant_name(self) -> str:
        return self._variant_name

    def service_get_app_info(self) -> AppInfo:
        """Read pod identity and labels into a new `AppInfo` record.

        Returns:
            AppInfo: Pod metadata read during this call.

        Raises:
            AppInfoLabelFileError: Raised when the label file cannot be opened or read.
                `partial_info` carries whatever was known at the point of failure.
        """

        pod_name, namespace = self._service_read_identity()
        accumulator = LabelAccumulator()

        try:
            label_file = open(self._labels_path, encoding="utf-8", errors="replace", newline="\n")
        except OSError as error:
            raise AppInfoLabelFileError(
                f"open {self._labels_path}: {error.strerror or error}",
                partial_info=domain_label_build_app_info(accumulator, pod_name=pod_name, namespace=namespace),
            ) from error

        with label_file:
            try:
                for line in label_file:
                    domain_label_apply_line(line, accumulator)
            except OSError as error:
                raise AppInfoLabelFileError(
                    f"read {self._labels_path}: {error.strerror or error}",
                    partial_info=domain_label_build_app_info(accumulator, pod_name=pod_name, namespace=namespace),
                ) from error

        return domain_label_build_app_info(accumulator, pod_name=pod_name, namespace=namespace)

    def _service_read_identity(self) -> tuple[str, str]:
        """Return pod name and namespace for the record being built."""

        raise NotImplementedError


class BaselineAppInfoService(_LabelFileAppInfoService):
    """Version 1 service. Reports labels but leaves the namespace empty."""

    _version = 1
    _variant_name = "baseline"

    def _service_read_identity(self) -> tuple[str, str]:
        return self._environ.get(SERVICE_POD_NAME_ENV, ""), ""


class NamespaceAppInfoService(_LabelFileAppInfoService):
    """Version 3 service. Baseline behavior with the namespace populated."""

    _version = 3
    _variant_name = "namespace"

    def _service_read_identity(self) -> tuple[str, str]:
        return (
            self._environ.get(SERVICE_POD_NAME_ENV, ""),
            self._environ.get(SERVICE_POD_NAMESPACE_ENV, ""),
        )


class BrokenAppInfoService:
    """Version 2 service. Every call fails."""

    def service_version(self) -> int:
        return 2

    def service_variant_name(self) -> str:
        return "broken"

    def service_get_app_info(self) -> AppInfo:
        """Fail unconditionally.

        Returns:
            AppInfo: This method does not return.

        Raises:
            AppInfoSimulatedFailureError: Always raised.
        """

        raise AppInfoSimulatedFailureError(SERVICE_BROKEN_MESSAGE)


def service_create_app_info_service(
    version: int,
    labels_path: Path | str = SERVICE_LABELS_PATH,
    environ: Mapping[str, str] | None = None,
) -> AppInfoServicePort:
    """Select the app info service implementation for a version.

    Args:
        version: Requested service version, one of 1, 2 or 3.
        labels_path: Path of the mounted label file.
        environ: Environment mapping. Defaults to the live process environment.

    Returns:
        AppInfoServicePort: Service implementation for the version.

    Raises:
        AppInfoVersionError: Raised when the version is not recognized.
    """

    if version == 1:
        return BaselineAppInfoService(labels_path=labels_path, environ=environ)
    if version == 2:
        return BrokenAppInfoService()
    if version == 3:
        return NamespaceAppInfoService(labels_path=labels_path, environ=environ)
    raise AppInfoVersionError(version)
