"""Feed lines of text through the annotation parser."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from pydantic import BaseModel

from stm_annotations.contracts.annotation import AnnotationRecord
from stm_annotations.contracts.config import ScanConfig
from stm_annotations.contracts.exceptions import NoMarkerError, UnknownKindError
from stm_annotations.parser import AnnotationParser

logger = logging.getLogger(__name__)


class ScannedAnnotation(BaseModel):
    source: str
    line_number: int
    record: AnnotationRecord

    model_config = {"frozen": True}


def scan_lines(
    lines: Iterable[str],
    *,
    source: str = "<stdin>",
    config: ScanConfig | None = None,
    parser: AnnotationParser | None = None,
) -> Iterator[ScannedAnnotation]:
    """Yield a ScannedAnnotation for every line that parses.

    Lines without a marker are skipped. Lines with an unknown kind are skipped
    with a warning, or raise ``UnknownKindError`` when ``config.strict`` is set.
    """
    config = config or ScanConfig()
    parser = parser or AnnotationParser()

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")
        try:
            record = parser.parse(line, config.hint)
        except NoMarkerError:
            logger.debug("%s:%d: no marker, skipped", source, line_number)
            continue
        except UnknownKindError as exc:
            if config.strict:
                raise
            logger.warning("%s:%d: skipped unknown annotation kind %r", source, line_number, exc.kind_text)
            continue

        if config.skip_ignored and record.ignore:
            logger.debug("%s:%d: ignored %s annotation skipped", source, line_number, record.kind)
            continue
        yield ScannedAnnotation(source=source, line_number=line_number, record=record)


def scan_file(path: str | Path, *, config: ScanConfig | None = None) -> list[ScannedAnnotation]:
    file_path = Path(path)
    with file_path.open(encoding="utf-8") as handle:
        return list(scan_lines(handle, source=str(file_path), config=config))
