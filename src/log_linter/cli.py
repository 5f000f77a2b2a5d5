from __future__ import annotations

import argparse
import json
import logging
import sys
from collections import defaultdict
from pathlib import Path

from log_linter.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    load_config,
    load_config_or_default,
    write_default_config,
)
from log_linter.fixes import fix_file
from log_linter.models import Finding
from log_linter.reporting import build_summary, format_finding, write_reports
from log_linter.scanner import DEFAULT_EXCLUDE_DIRS, DEFAULT_MAX_FILE_SIZE_BYTES, scan_paths

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="log-linter",
        description="Check logging call messages for casing, language, punctuation and sensitive keywords",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser("check", help="Check Python files or directories")
    check_parser.add_argument("paths", nargs="+", help="Files or directories to check")
    check_parser.add_argument(
        "--config",
        default=None,
        help=f"Config JSON path (default: {CONFIG_FILE_NAME} in the working directory)",
    )
    check_parser.add_argument("--fix", action="store_true", help="Apply suggested fixes in place")
    check_parser.add_argument("--format", choices=["text", "json"], default="text")
    check_parser.add_argument("--output-dir", default=None, help="Also write findings.json and findings.csv here")
    check_parser.add_argument("--max-file-size-bytes", type=int, default=DEFAULT_MAX_FILE_SIZE_BYTES)
    check_parser.add_argument(
        "--exclude-dirs",
        default=",".join(sorted(DEFAULT_EXCLUDE_DIRS)),
        help="Comma-separated directory names to skip",
    )

    init_parser = subparsers.add_parser("init-config", help="Write the default config file")
    init_parser.add_argument("--path", default=CONFIG_FILE_NAME)
    init_parser.add_argument("--force", action="store_true", help="Overwrite an existing file")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "init-config":
        try:
            path = write_default_config(args.path, force=args.force)
        except ConfigError as exc:
            parser.error(str(exc))
            return 2
        print(json.dumps({"config_path": str(path.resolve()), "status": "written"}, indent=2))
        return 0

    if args.command == "check":
        return _run_check(parser, args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _run_check(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    if args.config:
        try:
            config = load_config(args.config)
        except ConfigError as exc:
            parser.error(str(exc))
            return 2
    else:
        config = load_config_or_default(Path.cwd())

    missing = [item for item in args.paths if not Path(item).exists()]
    if missing:
        parser.error(f"Path not found: {', '.join(missing)}")
        return 2

    exclude = {item.strip() for item in args.exclude_dirs.split(",") if item.strip()}
    sink = _print_finding if args.format == "text" else None

    result = scan_paths(
        args.paths,
        config,
        max_file_size_bytes=int(args.max_file_size_bytes),
        exclude_dirs=exclude,
        sink=sink,
    )

    if args.fix:
        _apply_fixes(result.findings)

    if args.format == "json":
        print(json.dumps(build_summary(result.findings, files_scanned=result.files_scanned), indent=2, ensure_ascii=False))

    if args.output_dir:
        write_reports(args.output_dir, result.findings, files_scanned=result.files_scanned)

    return 1 if result.findings else 0


def _print_finding(finding: Finding) -> None:
    print(format_finding(finding), flush=True)


def _apply_fixes(findings: list[Finding]) -> None:
    by_file: dict[str, list[Finding]] = defaultdict(list)
    for finding in findings:
        if finding.fix is not None:
            by_file[finding.file_path].append(finding)

    for file_path, items in by_file.items():
        outcome = fix_file(file_path, items)
        if outcome.skipped:
            logger.warning(
                "%s: %d overlapping fixes skipped, run again to apply them",
                file_path,
                outcome.skipped,
            )


if __name__ == "__main__":
    raise SystemExit(main())
