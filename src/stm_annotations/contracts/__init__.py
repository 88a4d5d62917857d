"""Public contracts for stm-annotations."""

from stm_annotations.contracts.annotation import (
    ANNOTATION_RECORD_ADAPTER,
    AnnotationKind,
    AnnotationRecord,
    BehaviorRecord,
    HeaderRecord,
    ScenarioRecord,
)
from stm_annotations.contracts.config import ScanConfig
from stm_annotations.contracts.exceptions import (
    AnnotationParseError,
    ConfigError,
    NoMarkerError,
    StmAnnotationsError,
    UnknownKindError,
)

__all__ = [
    "ANNOTATION_RECORD_ADAPTER",
    "AnnotationKind",
    "AnnotationParseError",
    "AnnotationRecord",
    "BehaviorRecord",
    "ConfigError",
    "HeaderRecord",
    "NoMarkerError",
    "ScanConfig",
    "ScenarioRecord",
    "StmAnnotationsError",
    "UnknownKindError",
]
