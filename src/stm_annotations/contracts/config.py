"""Configuration contracts."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from stm_annotations.contracts.annotation import AnnotationKind


class ScanConfig(BaseModel):
    hint: AnnotationKind = AnnotationKind.UNKNOWN
    strict: bool = False
    skip_ignored: bool = False
    output_format: Literal["json", "table"] = "json"

    model_config = {"frozen": True, "extra": "forbid"}
