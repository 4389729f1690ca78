"""Domain models and label parsing used across application layer boundaries."""

from .label_parsing import (
    LabelAccumulator,
    domain_label_apply_line,
    domain_label_build_app_info,
    domain_label_parse_text,
)
from .models import AppInfo

__all__ = [
    "AppInfo",
    "LabelAccumulator",
    "domain_label_apply_line",
    "domain_label_build_app_info",
    "domain_label_parse_text",
]
