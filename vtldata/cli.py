"""Command line interface for vtldata."""
from __future__ import annotations

import argparse
import json
import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv

from vtldata.catalog import CatalogError
from vtldata.core import DatasetRegistry, package_version
from vtldata.loader import load_catalog_into
from vtldata.parsing import DatasetParseError, parse_dataset
from vtldata.settings import Settings

logger = logging.getLogger(__name__)


def load_environment() -> None:
    """Read ``ENV_FILE`` and ``./.env`` without overriding set variables."""

    if env_file := os.getenv("ENV_FILE"):
        load_dotenv(Path(env_file), override=False)
    load_dotenv(Path(".env"), override=False)


def configure_logging(level: str | None = None) -> None:
    """Configure logging using YAML/INI files or basic configuration."""

    config_candidates = []
    if config_env := os.getenv("LOGGING_CONFIG"):
        config_candidates.append(Path(config_env))
    config_candidates.extend(
        Path(name) for name in ("logging.yaml", "logging.yml", "logging.ini")
    )

    for config_path in config_candidates:
        if not config_path.exists():
            continue
        suffix = config_path.suffix.lower()
        try:
            if suffix in {".ini", ".cfg"}:
                logging.config.fileConfig(config_path, disable_existing_loggers=False)
            elif suffix in {".yaml", ".yml"}:
                with config_path.open("r", encoding="utf-8") as handle:
                    logging.config.dictConfig(yaml.safe_load(handle) or {})
            else:
                print(
                    f"Skipping unsupported logging config {config_path}. Using default logging configuration.",
                    file=sys.stderr,
                )
                continue
            return
        except (OSError, ValueError, TypeError, yaml.YAMLError) as exc:
            print(
                f"Failed to load logging config {config_path}: {exc}. Falling back to basic logging.",
                file=sys.stderr,
            )
            break

    logging.basicConfig(
        level=(level or os.getenv("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _read_source(path: str, encoding: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding=encoding)


def command_parse(args: argparse.Namespace, settings: Settings) -> int:
    name = args.name or ("stdin" if args.file == "-" else Path(args.file).stem)
    try:
        text = _read_source(args.file, args.encoding or settings.encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    try:
        dataset = parse_dataset(text, name)
    except DatasetParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    logger.info(
        "Parsed dataset '%s' with %d column(s) and %d row(s)",
        dataset.name,
        dataset.column_count,
        dataset.row_count,
    )
    print(json.dumps(dataset.to_dict(), indent=args.indent))
    return 0


def command_load(args: argparse.Namespace, settings: Settings) -> int:
    catalog = Path(args.catalog) if args.catalog else settings.catalog_path
    strict = args.strict or settings.strict
    registry = DatasetRegistry()
    try:
        results = load_catalog_into(catalog, registry, encoding=settings.encoding, strict=strict)
    except (CatalogError, DatasetParseError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Datasets in {catalog}:")
    for result in results:
        if result.description:
            print(f"# {result.description}")
        if result.status == "success":
            print(f"- {result.name}: {result.column_count} column(s), {result.row_count} row(s)")
        elif result.status == "skipped":
            print(f"- {result.name}: skipped (no content)")
        else:
            print(f"- {result.name}: failed ({result.error})")
    return 0 if all(result.ok for result in results) else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vtldata", description="Parse inline VTL example datasets."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {package_version()}")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    parser_parse = subparsers.add_parser("parse", help="Parse a dataset block and print it as JSON")
    parser_parse.add_argument("file", help="Text file holding the dataset block, or '-' for stdin.")
    parser_parse.add_argument("--name", help="Dataset name (defaults to the file stem).")
    parser_parse.add_argument("--encoding", help="Encoding of the input file.")
    parser_parse.add_argument("--indent", type=int, default=2, help="JSON indentation.")
    parser_parse.set_defaults(func=command_parse)

    parser_load = subparsers.add_parser("load", help="Load every dataset listed in a catalog")
    parser_load.add_argument("catalog", nargs="?", help="Catalog YAML file (defaults to VTLDATA_CATALOG).")
    parser_load.add_argument(
        "--strict", action="store_true", help="Stop at the first dataset that fails to parse."
    )
    parser_load.set_defaults(func=command_load)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_environment()
    settings = Settings.load()
    configure_logging(settings.log_level)
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args, settings)


if __name__ == "__main__":  # pragma: no cover - entry point for CLI usage
    raise SystemExit(main())
