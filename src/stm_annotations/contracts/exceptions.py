"""Exception hierarchy for stm-annotations."""

from __future__ import annotations


class StmAnnotationsError(Exception):
    """Base exception for all stm-annotations errors."""


class ConfigError(StmAnnotationsError):
    """Configuration loading or validation failure."""


class AnnotationParseError(StmAnnotationsError):
    """Annotation line could not be classified."""


class NoMarkerError(AnnotationParseError):
    """Input contains no ``stm:<kind>;`` marker."""


class UnknownKindError(AnnotationParseError):
    """Marker is present but names a kind the parser does not know."""

    def __init__(self, message: str, *, kind_text: str) -> None:
        super().__init__(message)
        self.kind_text = kind_text
