"""Public API surface for stm-annotations."""

__version__ = "0.1.0"

from stm_annotations.config import load_config
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
from stm_annotations.parser import AnnotationParser, detect_kind, find_field, parse_annotation
from stm_annotations.scan import ScannedAnnotation, scan_file, scan_lines

__all__ = [
    "ANNOTATION_RECORD_ADAPTER",
    "AnnotationKind",
    "AnnotationParseError",
    "AnnotationParser",
    "AnnotationRecord",
    "BehaviorRecord",
    "ConfigError",
    "HeaderRecord",
    "NoMarkerError",
    "ScanConfig",
    "ScannedAnnotation",
    "ScenarioRecord",
    "StmAnnotationsError",
    "UnknownKindError",
    "__version__",
    "detect_kind",
    "find_field",
    "load_config",
    "parse_annotation",
    "scan_file",
    "scan_lines",
]
