"""CLI parser for starting Selenoid before a test run."""

from __future__ import annotations

import argparse
import logging

from selenoid_launcher.core.config import LauncherSettings, merge_options
from selenoid_launcher.core.lifecycle import LifecycleController
from selenoid_launcher.core.runner import CommandRunner

logger = logging.getLogger("selenoid_launcher.cli")


def register_parser(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser(
        "prepare",
        help="Stop any stale Selenoid, pull missing images and start a fresh container",
    )
    parser.add_argument("-b", "--browsers-config", help="Path to browsers.json")
    parser.add_argument("-n", "--container-name", help="Selenoid container name")
    parser.add_argument("--selenoid-version", help="aerokube/selenoid image tag")
    parser.add_argument("-p", "--port", type=int, help="Host port published for Selenoid")
    parser.add_argument(
        "--skip-auto-pull",
        action="store_true",
        default=None,
        help="Do not pre-pull browser and Selenoid images",
    )
    parser.add_argument(
        "--no-terminate-on-error",
        dest="terminate_on_error",
        action="store_false",
        default=None,
        help="Keep going (exit 0) when Selenoid cannot be started",
    )
    parser.add_argument(
        "--docker-arg",
        action="append",
        help="Extra 'docker run' argument placed before the image (repeatable)",
    )
    parser.add_argument(
        "--selenoid-arg",
        action="append",
        help="Extra Selenoid argument placed after the image (repeatable)",
    )
    parser.add_argument("--timeout", type=float, help="Per docker invocation timeout (seconds)")
    parser.set_defaults(func=run)


def run(args: argparse.Namespace, settings: LauncherSettings, runner: CommandRunner) -> int:
    config = merge_options(
        settings.launch_options(),
        pathToBrowsersConfig=args.browsers_config,
        customSelenoidContainerName=args.container_name,
        selenoidVersion=args.selenoid_version,
        port=args.port,
        skipAutoPullImages=args.skip_auto_pull,
        terminateWdioOnError=args.terminate_on_error,
        dockerArgs=args.docker_arg,
        selenoidArgs=args.selenoid_arg,
        commandTimeout=args.timeout,
    )
    controller = LifecycleController(config, runner, docker_bin=settings.DOCKER_BIN)
    report = controller.prepare()
    if report.degraded:
        logger.warning("Selenoid prepared in degraded mode")
    return 0
