"""Local image inventory and idempotent pulls."""

from __future__ import annotations

import logging

from .results import StepResult
from .runner import CommandRunner, RunnerError

logger = logging.getLogger("selenoid_launcher.images")


class ImageInventory:
    """Answers "is this image already local?" and pulls the ones that are not."""

    def __init__(self, runner: CommandRunner, docker_bin: str = "docker") -> None:
        self._runner = runner
        self._docker = docker_bin

    def exists(self, image_ref: str) -> bool:
        """
        True if *image_ref* is present locally.

        Fails open: if the query itself fails the image is reported as present
        so the pull is skipped; the run step surfaces a truly missing image.
        """
        try:
            result = self._runner.run(
                [self._docker, "images", "--quiet", "--filter", f"reference={image_ref}"],
                capture_output=True,
            )
        except RunnerError as exc:
            logger.warning("Unable to query local images for %s, skipping pull: %s", image_ref, exc)
            return True
        return bool(result.stdout.strip())

    def pull(self, image_ref: str) -> StepResult:
        step = f"pull:{image_ref}"
        logger.info("Pulling image %s", image_ref)
        try:
            result = self._runner.run([self._docker, "pull", image_ref], stream_output=True)
        except RunnerError as exc:
            logger.error("Failed to pull image %s: %s", image_ref, exc)
            return StepResult.degraded(step, str(exc))
        return StepResult.success(step, result.stdout)

    def ensure(self, image_ref: str) -> StepResult:
        """Pull *image_ref* only when the existence check reports it missing."""
        if self.exists(image_ref):
            logger.info("Image %s already present, skipping pull", image_ref)
            return StepResult.success(f"pull:{image_ref}", skipped=True)
        return self.pull(image_ref)
