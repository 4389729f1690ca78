"""Label file parsing helpers.

The label file is produced by the Kubernetes downward API and holds one
`key=value` pair per line, with values usually wrapped in double quotes.
Parsing is split into a per-line step so callers reading from a file can keep
whatever was accumulated when a read fails part way through.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType

from .models import AppInfo

DOMAIN_LABEL_APP_KEY = "app"
DOMAIN_LABEL_RELEASE_KEY = "release"


@dataclass
class LabelAccumulator:
    """Mutable parse state for one pass over a label document.

    Attributes:
        app_name: Last seen `app` label value.
        release: Last seen `release` label value.
        labels: Every other label, last occurrence wins.
    """

    app_name: str = ""
    release: str = ""
    labels: dict[str, str] = field(default_factory=dict)


def domain_label_apply_line(line: str, accumulator: LabelAccumulator) -> None:
    """Apply one label line to the accumulator.

    Lines without `=` or with a blank key are ignored. The value is trimmed
    and every double quote in it is removed.

    Args:
        line: Raw line, with or without its trailing newline.
        accumulator: Parse state updated in place.

    Returns:
        None: The accumulator is updated as side effect.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    key, separator, raw_value = line.partition("=")
    if not separator:
        return

    key = key.strip()
    if not key:
        return

    value = raw_value.strip().replace('"', "")
    if key == DOMAIN_LABEL_APP_KEY:
        accumulator.app_name = value
    elif key == DOMAIN_LABEL_RELEASE_KEY:
        accumulator.release = value
    else:
        accumulator.labels[key] = value


def domain_label_parse_text(text: str) -> LabelAccumulator:
    """Parse an in-memory label document.

    Args:
        text: Label document. Lines are split on `\\n` only.

    Returns:
        LabelAccumulator: Parsed label state.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    accumulator = LabelAccumulator()
    for line in text.split("\n"):
        domain_label_apply_line(line, accumulator)
    return accumulator


def domain_label_build_app_info(
    accumulator: LabelAccumulator,
    pod_name: str = "",
    namespace: str = "",
) -> AppInfo:
    """Freeze parsed label state and pod identity into an `AppInfo` record.

    Args:
        accumulator: Parsed label state.
        pod_name: Pod name from the environment.
        namespace: Pod namespace, empty when not reported.

    Returns:
        AppInfo: Immutable record with a read-only copy of the labels.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return AppInfo(
        pod_name=pod_name,
        app_name=accumulator.app_name,
        namespace=namespace,
        release=accumulator.release,
        labels=MappingProxyType(dict(accumulator.labels)),
    )
