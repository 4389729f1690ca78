"""Tests for label line parsing rules."""

from types import MappingProxyType

from appinfo.domain import (
    LabelAccumulator,
    domain_label_apply_line,
    domain_label_build_app_info,
    domain_label_parse_text,
)


def test_domain_label_promotes_app_and_release_to_named_fields() -> None:
    """Keep `app` and `release` out of the generic label map.

    Returns:
        None: Assertions validate parse output.

    Raises:
        AssertionError: Raised when promoted keys leak into labels.
    """

    accumulator = domain_label_parse_text('app="billing"\nrelease="v2"\ntier=gold\n')

    assert accumulator.app_name == "billing"
    assert accumulator.release == "v2"
    assert accumulator.labels == {"tier": "gold"}


def test_domain_label_strips_whitespace_and_every_double_quote() -> None:
    """Remove surrounding whitespace and all quote characters from values.

    Returns:
        None: Assertions validate value normalization.

    Raises:
        AssertionError: Raised when value normalization differs.
    """

    accumulator = domain_label_parse_text('  team =  "pay"m"ents"  \r\nrole="a=b"')

    assert accumulator.labels == {"team": "payments", "role": "a=b"}


def test_domain_label_ignores_lines_without_separator_or_key() -> None:
    """Skip lines lacking `=` and lines whose key is blank.

    Returns:
        None: Assertions validate ignored lines.

    Raises:
        AssertionError: Raised when ignored lines contribute to the result.
    """

    accumulator = LabelAccumulator()
    for line in ("just-text\n", "   =value\n", "\n", "=\n", ""):
        domain_label_apply_line(line, accumulator)

    assert accumulator == LabelAccumulator()


def test_domain_label_allows_empty_value() -> None:
    """Store an empty string when nothing follows the separator.

    Returns:
        None: Assertions validate empty values.

    Raises:
        AssertionError: Raised when empty values are dropped.
    """

    accumulator = domain_label_parse_text("flag=\nrelease=")

    assert accumulator.labels == {"flag": ""}
    assert accumulator.release == ""


def test_domain_label_last_occurrence_wins_for_repeated_keys() -> None:
    """Overwrite earlier values when a key repeats.

    Returns:
        None: Assertions validate overwrite order.

    Raises:
        AssertionError: Raised when an earlier value survives.
    """

    accumulator = domain_label_parse_text("tier=bronze\napp=one\ntier=gold\napp=two\nrelease=a\nrelease=b")

    assert accumulator.labels == {"tier": "gold"}
    assert accumulator.app_name == "two"
    assert accumulator.release == "b"


def test_domain_label_build_app_info_freezes_labels() -> None:
    """Copy labels into a read-only mapping detached from the accumulator.

    Returns:
        None: Assertions validate immutability.

    Raises:
        AssertionError: Raised when the record shares mutable state.
    """

    accumulator = domain_label_parse_text("tier=gold")
    app_info = domain_label_build_app_info(accumulator, pod_name="pod-1", namespace="prod")
    accumulator.labels["tier"] = "changed"

    assert isinstance(app_info.labels, MappingProxyType)
    assert app_info.labels == {"tier": "gold"}
    assert app_info.pod_name == "pod-1"
    assert app_info.namespace == "prod"
