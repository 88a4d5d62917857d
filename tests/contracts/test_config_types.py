from __future__ import annotations

import pytest
from pydantic import ValidationError

from stm_annotations.contracts.annotation import AnnotationKind
from stm_annotations.contracts.config import ScanConfig


def test_scan_config_defaults() -> None:
    config = ScanConfig()

    assert config.hint is AnnotationKind.UNKNOWN
    assert config.strict is False
    assert config.skip_ignored is False
    assert config.output_format == "json"


def test_scan_config_coerces_hint_from_marker_text() -> None:
    assert ScanConfig(hint="@").hint is AnnotationKind.BEHAVIOR


def test_scan_config_rejects_unknown_output_format() -> None:
    with pytest.raises(ValidationError):
        ScanConfig(output_format="yaml")


def test_scan_config_rejects_extra_fields() -> None:
    with pytest.raises(ValidationError):
        ScanConfig(verbose=True)


def test_scan_config_is_frozen() -> None:
    config = ScanConfig()

    with pytest.raises(ValidationError):
        config.strict = True  # type: ignore[misc]
