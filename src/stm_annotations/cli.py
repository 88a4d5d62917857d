"""Command-line interface for stm-annotations."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from importlib.metadata import PackageNotFoundError, version

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stm_annotations.config import load_config
from stm_annotations.contracts.annotation import HeaderRecord, ScenarioRecord
from stm_annotations.contracts.config import ScanConfig
from stm_annotations.contracts.exceptions import AnnotationParseError, ConfigError
from stm_annotations.scan import ScannedAnnotation, scan_file, scan_lines


def _package_version() -> str:
    try:
        return version("stm-annotations")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stm-annotations")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)
    parse_parser = subparsers.add_parser("parse", help="Parse stm annotations from files or stdin")
    parse_parser.add_argument("files", nargs="*", help="Files to read; '-' or none reads stdin")
    parse_parser.add_argument("--config", default=None, help="Path to a JSON scan config")
    parse_parser.add_argument("--strict", action="store_true", default=None, help="Fail on unknown annotation kinds")
    parse_parser.add_argument("--skip-ignored", action="store_true", default=None, help="Drop annotations marked ignore")
    parse_parser.add_argument("--format", dest="output_format", choices=["json", "table"], default=None)
    parse_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


def _resolve_config(args: argparse.Namespace) -> ScanConfig:
    config = load_config(args.config) if args.config else ScanConfig()
    overrides = {
        name: getattr(args, name)
        for name in ("strict", "skip_ignored", "output_format")
        if getattr(args, name) is not None
    }
    return config.model_copy(update=overrides)


def _collect(files: Sequence[str], config: ScanConfig) -> list[ScannedAnnotation]:
    if not files:
        files = ["-"]
    results: list[ScannedAnnotation] = []
    for name in files:
        if name == "-":
            results.extend(scan_lines(sys.stdin, config=config))
        else:
            results.extend(scan_file(name, config=config))
    return results


def _record_summary(scanned: ScannedAnnotation) -> str:
    record = scanned.record
    if isinstance(record, HeaderRecord):
        return f"type={record.test_type} system={record.system}"
    if isinstance(record, ScenarioRecord):
        return "behaviors=" + ", ".join(record.behaviors)
    return ""


def _format_json(results: Sequence[ScannedAnnotation]) -> str:
    lines = [
        json.dumps(
            {
                "source": scanned.source,
                "line": scanned.line_number,
                "record": scanned.record.model_dump(mode="json"),
            }
        )
        for scanned in results
    ]
    return "\n".join(lines)


def _render_table(results: Sequence[ScannedAnnotation], console: Console) -> None:
    table = Table(title="stm annotations")
    table.add_column("Source")
    table.add_column("Line", justify="right")
    table.add_column("Kind")
    table.add_column("Ignore")
    table.add_column("Fields")
    for scanned in results:
        table.add_row(
            escape(scanned.source),
            str(scanned.line_number),
            str(scanned.record.kind),
            "yes" if scanned.record.ignore else "no",
            escape(_record_summary(scanned)),
        )
    console.print(table)


def _run_parse(args: argparse.Namespace) -> None:
    config = _resolve_config(args)
    results = _collect(args.files, config)
    if config.output_format == "table":
        _render_table(results, Console())
        return
    output = _format_json(results)
    if output:
        print(output)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        _run_parse(args)
        return 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except AnnotationParseError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
