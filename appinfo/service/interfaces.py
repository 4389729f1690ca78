"""Typed interfaces for app info services."""

from typing import Protocol

from appinfo.domain import AppInfo


class AppInfoServicePort(Protocol):
    """Port definition for pod metadata retrieval."""

    def service_version(self) -> int:
        """Return the version number this service was selected by.

        Returns:
            int: Service version.

        Raises:
            RuntimeError: Raised when version metadata is unavailable.
        """

    def service_variant_name(self) -> str:
        """Return a short label for the active behavior variant.

        Returns:
            str: Variant label.

        Raises:
            RuntimeError: Raised when variant metadata is unavailable.
        """

    def service_get_app_info(self) -> AppInfo:
        """Return runtime information about the running pod.

        Returns:
            AppInfo: Freshly read pod metadata.

        Raises:
            AppInfoError: Raised when metadata cannot be produced.
        """
