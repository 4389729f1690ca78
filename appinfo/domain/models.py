"""Typed domain models shared across runtime layers.

This module provides the pod metadata contract returned by app info services
and rendered by the API layer.
"""

from dataclasses import dataclass, field
from typing import Mapping


@dataclass(frozen=True)
class AppInfo:
    """Runtime information about the running pod.

    Attributes:
        pod_name: Name of the pod, taken from the downward API environment.
        app_name: Value of the `app` label.
        namespace: Namespace the pod runs in. Empty unless the active service populates it.
        release: Value of the `release` label. Used to differentiate stable vs canary.
        labels: All other label key/values on the pod.
    """

    pod_name: str = ""
    app_name: str = ""
    namespace: str = ""
    release: str = ""
    labels: Mapping[str, str] = field(default_factory=dict)
