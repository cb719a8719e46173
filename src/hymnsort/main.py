#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import find_dotenv, load_dotenv

from hymnsort.app import detect_duplicates, reconcile_snapshot
from hymnsort.common import configure_logging
from hymnsort.config import ConfigurationError, ReconcileConfig, get_reconcile_config, parse_sources

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile hymn identities across sources")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output, including every applied patch",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    reconcile = commands.add_parser("reconcile", help="Patch, close and audit a hymn snapshot")
    reconcile.add_argument("input", type=Path, help="Snapshot JSON produced by the converters")
    reconcile.add_argument("--output", type=Path, help="Where to write the reconciled snapshot")
    reconcile.add_argument("--report", type=Path, help="Where to write the error report")
    reconcile.add_argument(
        "--source",
        action="append",
        dest="sources",
        help="Source whose patches to apply, in merge order (repeatable)",
    )

    duplicates = commands.add_parser("duplicates", help="Report near-duplicate English hymns")
    duplicates.add_argument("input", type=Path, help="Snapshot JSON to scan")
    duplicates.add_argument("--output", type=Path, help="Where to write the duplicate report")

    return parser.parse_args(list(argv))


def _build_config(args: argparse.Namespace) -> ReconcileConfig:
    config = get_reconcile_config()
    if args.sources:
        return ReconcileConfig(sources=parse_sources(args.sources), policy=config.policy)
    return config


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    parsed_args: argparse.Namespace
    config: ReconcileConfig | None = None
    try:
        parsed_args = _parse_args(argv if argv is not None else sys.argv[1:])
        if parsed_args.command == "reconcile":
            config = _build_config(parsed_args)
    except (ValueError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
    try:
        if parsed_args.command == "reconcile":
            reconcile_snapshot(
                parsed_args.input,
                output_path=parsed_args.output,
                report_path=parsed_args.report,
                config=config,
            )
        else:
            detect_duplicates(parsed_args.input, output_path=parsed_args.output)

    except Exception as e:  # noqa: BLE001
        logging.getLogger(__name__).exception("Run failed")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run(argv: Sequence[str] | None = None) -> None:
    """Console script entry point: read `.env` from the working directory, then run."""
    load_dotenv(find_dotenv(usecwd=True))
    signal(SIGINT, sigint_handler)
    main(argv)


if __name__ == "__main__":
    run()
