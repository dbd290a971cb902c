#!/usr/bin/env python3
"""Selenoid lifecycle CLI."""

from __future__ import annotations

import argparse
import logging
import sys

from selenoid_launcher.commands import complete, prepare
from selenoid_launcher.core.config import LauncherSettings
from selenoid_launcher.core.exceptions import SevereServiceError
from selenoid_launcher.core.logging_config import setup_logging
from selenoid_launcher.core.runner import CommandRunner, RunnerError

logger = logging.getLogger("selenoid_launcher.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="selenoid-launcher",
        description="Start and stop the Selenoid gateway container around a test run",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print docker commands without executing them",
    )
    parser.add_argument("--log-config", help="Logging YAML path (overrides LOG_CONFIG_PATH)")
    parser.add_argument("--log-level", help="Log level (overrides LOG_LEVEL)")

    subparsers = parser.add_subparsers(dest="command", required=True)
    prepare.register_parser(subparsers)
    complete.register_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 2

    try:
        settings = LauncherSettings()
        setup_logging(
            args.log_config or settings.LOG_CONFIG_PATH or None,
            args.log_level or settings.LOG_LEVEL,
        )
        timeout = args.timeout if args.timeout is not None else settings.SELENOID_COMMAND_TIMEOUT
        runner = CommandRunner(dry_run=bool(args.dry_run), timeout=timeout)
        return int(args.func(args, settings, runner))
    except SevereServiceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except RunnerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
