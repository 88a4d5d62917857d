"""Classify ``stm:`` annotation lines and extract their fields."""

from __future__ import annotations

import logging
import re

from stm_annotations.contracts.annotation import (
    AnnotationKind,
    AnnotationRecord,
    BehaviorRecord,
    HeaderRecord,
    ScenarioRecord,
)
from stm_annotations.contracts.exceptions import NoMarkerError, UnknownKindError

logger = logging.getLogger(__name__)

MARKER_PATTERN = re.compile(r"stm:([A-Za-z@]+);")

# key=value[,value]*[;], ASCII whitespace only
_FIELD_TEMPLATE = r"{key}=(([A-Za-z0-9]+\s?(,?\s?))+);?"


def find_field(text: str, key: str) -> str:
    """Return the raw value of the first ``key=...`` field in ``text``.

    Missing keys give ``""``; this never raises. The captured value may keep a
    trailing separator (``"a, "``) when more text follows it on the line.
    """
    match = re.search(_FIELD_TEMPLATE.format(key=re.escape(key)), text, flags=re.ASCII)
    if match is None:
        return ""
    return match.group(1)


def is_ignored(raw_value: str) -> bool:
    return raw_value != "" and raw_value != "false"


def split_behaviors(raw_value: str) -> tuple[str, ...]:
    return tuple(behavior.strip() for behavior in raw_value.split(","))


def detect_kind(text: str) -> AnnotationKind:
    """Return the kind named by the first ``stm:<kind>;`` marker.

    Raises:
        NoMarkerError: No marker in ``text``.
        UnknownKindError: The marker names an unrecognized kind.
    """
    match = MARKER_PATTERN.search(text)
    if match is None:
        raise NoMarkerError(f"no stm marker in: {text!r}")

    kind_text = match.group(1)
    kind = AnnotationKind.from_marker(kind_text)
    if kind is AnnotationKind.UNKNOWN:
        raise UnknownKindError(f"unknown annotation kind: {kind_text!r}", kind_text=kind_text)
    return kind


class AnnotationParser:
    """Turn a single annotation line into a typed record.

    The parser holds no state, so one instance can be shared across threads.
    """

    def parse(self, text: str, hint: AnnotationKind = AnnotationKind.UNKNOWN) -> AnnotationRecord:
        """Parse ``text`` into the record for the kind its marker declares.

        ``hint`` is what the caller expects to find. It is informational only:
        the marker in ``text`` always decides which record comes back.
        """
        kind = detect_kind(text)
        logger.debug("detected %s annotation", kind.value)
        if hint != AnnotationKind.UNKNOWN and hint != kind:
            logger.debug("hint %r differs from detected kind %r", str(hint), kind.value)

        if kind is AnnotationKind.HEADER:
            return self._parse_header(text)
        if kind is AnnotationKind.SCENARIO:
            return self._parse_scenario(text)
        return self._parse_behavior(text)

    @staticmethod
    def _parse_header(text: str) -> HeaderRecord:
        return HeaderRecord(
            test_type=find_field(text, "type"),
            system=find_field(text, "system"),
            ignore=is_ignored(find_field(text, "ignore")),
        )

    @staticmethod
    def _parse_scenario(text: str) -> ScenarioRecord:
        return ScenarioRecord(
            behaviors=split_behaviors(find_field(text, "behaviors")),
            ignore=is_ignored(find_field(text, "ignore")),
        )

    @staticmethod
    def _parse_behavior(text: str) -> BehaviorRecord:
        # A behavior line carries its flag under the marker itself: "stm:@; @=true;"
        return BehaviorRecord(ignore=is_ignored(find_field(text, AnnotationKind.BEHAVIOR.value)))


def parse_annotation(text: str, hint: AnnotationKind = AnnotationKind.UNKNOWN) -> AnnotationRecord:
    return AnnotationParser().parse(text, hint)
