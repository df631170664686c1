from __future__ import annotations

import argparse
import sys
import zipfile
from pathlib import Path

from dotenv import load_dotenv

from compliance_report.config.loader import ConfigError, load_config, resolve_config_path
from compliance_report.logging.init import log_summary, set_debug, setup_logging
from compliance_report.models.config_models import ClassificationConfig
from compliance_report.services.orchestrator import ProcessingError, default_output_path, process_file
from compliance_report.services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env (may set COMPLIANCE_REPORT_CONFIG)
- Resolve and load the keyword/code config, apply --keyword/--code additions
- Read the first sheet of INPUT, build the report, write the processed workbook
- Print the SUMMARY line
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1

INSPECT_ROWS = 5


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env using python-dotenv (missing file is not an error)."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Compliance export -> processed status report")
    p.add_argument("input", type=Path, help="Source workbook (first sheet is read)")
    p.add_argument("-o", "--output", type=Path, default=None, help="Output workbook (default: Processed_<input>.xlsx)")
    p.add_argument("-c", "--config", type=Path, default=None, help="YAML config with high_risk_keywords / approved_codes")
    p.add_argument("--keyword", action="append", default=[], help="Extra high risk keyword (repeatable)")
    p.add_argument("--code", action="append", default=[], help="Extra approved CTR code (repeatable)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print the first rows' fixed columns then exit")
    return p.parse_args(argv)


def _build_config(args: argparse.Namespace) -> ClassificationConfig:
    path = resolve_config_path(args.config)
    cfg = load_config(path) if path is not None else ClassificationConfig.defaults()
    return cfg.extended(high_risk_keywords=args.keyword, approved_codes=args.code)


def _inspect_data(input_path: Path) -> int:
    from compliance_report.excel.cells import SOURCE_COLUMNS, get_cell
    from compliance_report.excel.reader import read_first_sheet, read_sheet_names

    print(f"FILE: {input_path.name}")
    try:
        sheets = read_sheet_names(input_path)
        rows = read_first_sheet(input_path)
    except (ProcessingError, ValueError, OSError, ImportError, zipfile.BadZipFile) as e:
        print(f"  read_error: {e}")
        return EXIT_FATAL
    print(f"  SHEET: {sheets[0] if sheets else '-'} rows={len(rows)} (other sheets ignored: {sheets[1:]})")
    for i, row in enumerate(rows[:INSPECT_ROWS], start=1):
        resolved = {name: get_cell(row, idx) for name, idx in vars(SOURCE_COLUMNS).items()}
        print(f"    row{i} cells={len(row)} {resolved}")
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # NOTE: 空リストを渡された場合に sys.argv が混入しないよう None のときのみ読む
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    if args.inspect_data:
        return _inspect_data(args.input)

    try:
        cfg = _build_config(args)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL
    logger.info(
        f"config: {len(cfg.high_risk_keywords)} high risk keywords, {len(cfg.approved_codes)} approved codes"
    )

    output = args.output or default_output_path(args.input)
    logger.info(f"Processing {args.input} -> {output}")
    try:
        result = process_file(args.input, cfg, output_path=output)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    # render_summary_line は "SUMMARY " 付きで返すため接頭辞を除去して渡す
    summary_line = render_summary_line(result)
    log_summary(summary_line[len("SUMMARY "):])
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
