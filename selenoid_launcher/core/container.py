"""Stop/run operations for the Selenoid gateway container."""

from __future__ import annotations

import logging

from .config import (
    DOCKER_SOCKET_TARGET,
    SELENOID_CONFIG_DIR,
    SELENOID_CONTAINER_PORT,
    LaunchConfig,
)
from .exceptions import SevereServiceError
from .paths import ResolvedPaths
from .results import StepResult
from .runner import CommandRunner, RunnerError

logger = logging.getLogger("selenoid_launcher.container")

NO_SUCH_CONTAINER = "no such container"


def build_run_args(config: LaunchConfig, paths: ResolvedPaths) -> list[str]:
    """Arguments following the runtime executable for launching Selenoid."""
    return [
        "run",
        "-d",
        "--name",
        config.container_name,
        "-p",
        f"{config.port}:{SELENOID_CONTAINER_PORT}",
        "-v",
        f"{paths.docker_socket}:{DOCKER_SOCKET_TARGET}",
        "-v",
        f"{paths.browsers_config_dir}/:{SELENOID_CONFIG_DIR}:ro",
        *config.docker_args,
        config.image,
        *config.selenoid_args,
    ]


class ContainerOperator:
    def __init__(self, runner: CommandRunner, docker_bin: str = "docker") -> None:
        self._runner = runner
        self._docker = docker_bin

    def stop(self, container_name: str) -> StepResult:
        """
        Force-remove *container_name*.

        Never raises. A missing container is the normal state between runs and
        counts as success.
        """
        logger.info("Stopping any running selenoid containers")
        try:
            result = self._runner.run(
                [self._docker, "rm", "-f", container_name], capture_output=True
            )
        except RunnerError as exc:
            if NO_SUCH_CONTAINER in str(exc).lower():
                logger.debug("Container %s is not running", container_name)
                return StepResult.success("stop", skipped=True)
            logger.error("Failed to remove container %s: %s", container_name, exc)
            return StepResult.degraded("stop", str(exc))
        return StepResult.success("stop", result.stdout)

    def run(self, config: LaunchConfig, paths: ResolvedPaths) -> StepResult:
        """
        Launch Selenoid detached.

        In strict mode (terminate_on_error) a failed launch raises
        SevereServiceError; otherwise the failure is logged and returned.
        """
        logger.info("Starting Selenoid Container")
        try:
            result = self._runner.run(
                [self._docker, *build_run_args(config, paths)], capture_output=True
            )
        except RunnerError as exc:
            message = f"Unable to start selenoid container \n{exc}"
            logger.error(message)
            if config.terminate_on_error:
                raise SevereServiceError(message, StepResult.fatal("run", str(exc))) from exc
            return StepResult.degraded("run", str(exc))
        return StepResult.success("run", result.stdout)
