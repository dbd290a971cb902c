"""CLI parser for removing Selenoid after a test run."""

from __future__ import annotations

import argparse

from selenoid_launcher.core.config import LauncherSettings, merge_options
from selenoid_launcher.core.lifecycle import LifecycleController
from selenoid_launcher.core.runner import CommandRunner


def register_parser(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("complete", help="Remove the Selenoid container")
    parser.add_argument("-n", "--container-name", help="Selenoid container name")
    parser.add_argument("--timeout", type=float, help="Per docker invocation timeout (seconds)")
    parser.set_defaults(func=run)


def run(args: argparse.Namespace, settings: LauncherSettings, runner: CommandRunner) -> int:
    config = merge_options(
        settings.launch_options(),
        customSelenoidContainerName=args.container_name,
        commandTimeout=args.timeout,
    )
    LifecycleController(config, runner, docker_bin=settings.DOCKER_BIN).complete()
    return 0
