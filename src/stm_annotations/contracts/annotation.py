"""Annotation kinds and the records produced for each kind."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter


class AnnotationKind(StrEnum):
    HEADER = "header"
    SCENARIO = "scenarios"
    BEHAVIOR = "@"
    UNKNOWN = "unknown"

    @classmethod
    def from_marker(cls, text: str) -> AnnotationKind:
        """Map marker text to a known kind, or ``UNKNOWN``.

        Matching is case-sensitive and ``"unknown"`` itself is not a valid marker.
        """
        for kind in (cls.HEADER, cls.SCENARIO, cls.BEHAVIOR):
            if text == kind.value:
                return kind
        return cls.UNKNOWN


class HeaderRecord(BaseModel):
    """Metadata for a whole test file or suite."""

    kind: Literal["header"] = "header"
    test_type: str = ""
    system: str = ""
    ignore: bool = False

    model_config = {"frozen": True}


class ScenarioRecord(BaseModel):
    """Behaviors exercised by one test scenario.

    An annotation without a ``behaviors`` field yields ``("",)``, not ``()``.
    """

    kind: Literal["scenarios"] = "scenarios"
    behaviors: tuple[str, ...] = ("",)
    ignore: bool = False

    model_config = {"frozen": True}


class BehaviorRecord(BaseModel):
    kind: Literal["@"] = "@"
    ignore: bool = False

    model_config = {"frozen": True}


AnnotationRecord = Annotated[HeaderRecord | ScenarioRecord | BehaviorRecord, Field(discriminator="kind")]

ANNOTATION_RECORD_ADAPTER: TypeAdapter[AnnotationRecord] = TypeAdapter(AnnotationRecord)
