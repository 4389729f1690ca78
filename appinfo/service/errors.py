"""Project-native typed exceptions for app info service failures."""

from __future__ import annotations

from appinfo.domain import AppInfo


class AppInfoError(RuntimeError):
    """Base exception for app info service failures.

    Attributes:
        partial_info: Fields already known when the failure happened, if any.
    """

    def __init__(self, message: str, partial_info: AppInfo | None = None):
        super().__init__(message)
        self.partial_info = partial_info


class AppInfoVersionError(AppInfoError, ValueError):
    """Unrecognized service version requested at construction time."""

    def __init__(self, version: int):
        super().__init__(message=f"unknown version request: {version}")
        self.version = version


class AppInfoLabelFileError(AppInfoError):
    """Label file could not be opened or read."""


class AppInfoSimulatedFailureError(AppInfoError):
    """Deliberate failure raised by the broken service variant."""
