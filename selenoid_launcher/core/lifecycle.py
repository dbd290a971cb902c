"""
Selenoid lifecycle orchestration.

prepare: stop stale container -> verify manifest -> existence-gated pulls -> run
complete: stop

Strict mode (terminate_on_error) turns a missing manifest or a failed launch
into SevereServiceError. Every other failure is logged, recorded as a degraded
step and the sequence continues.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import LaunchConfig
from .container import ContainerOperator
from .exceptions import ManifestError, SevereServiceError
from .images import ImageInventory
from .manifest import load_browser_manifest
from .paths import ResolvedPaths, resolve_paths
from .results import LifecycleReport, StepResult
from .runner import CommandRunner

logger = logging.getLogger("selenoid_launcher.lifecycle")


class LifecycleController:
    def __init__(
        self,
        config: LaunchConfig,
        runner: Optional[CommandRunner] = None,
        *,
        docker_bin: str = "docker",
        platform: Optional[str] = None,
        cwd: Optional[str] = None,
    ) -> None:
        self.config = config
        self.runner = runner or CommandRunner(timeout=config.command_timeout)
        self.paths: ResolvedPaths = resolve_paths(
            config.browsers_config_path,
            platform or sys.platform,
            cwd or os.getcwd(),
        )
        self.images = ImageInventory(self.runner, docker_bin)
        self.containers = ContainerOperator(self.runner, docker_bin)

    def prepare(self) -> LifecycleReport:
        report = LifecycleReport(phase="prepare")

        if self.config.stop_existing_selenoid:
            report.add(self.containers.stop(self.config.container_name))

        manifest_present = report.add(self._verify_browsers_config()).ok

        if self.config.skip_auto_pull_images:
            logger.info("Skipping image pulls (skipAutoPullImages is set)")
        else:
            for image in self._required_images(report, manifest_present):
                report.add(self.images.ensure(image))

        report.add(self.containers.run(self.config, self.paths))
        self._log_summary(report)
        return report

    def complete(self) -> LifecycleReport:
        report = LifecycleReport(phase="complete")
        report.add(self.containers.stop(self.config.container_name))
        self._log_summary(report)
        return report

    def _verify_browsers_config(self) -> StepResult:
        if Path(self.paths.host_browsers_config).is_file():
            return StepResult.success("verify-browsers-config")

        message = f"Unable to find browsers.json at {self.config.browsers_config_path}"
        logger.error(message)
        if self.config.terminate_on_error:
            raise SevereServiceError(message, StepResult.fatal("verify-browsers-config", message))
        return StepResult.degraded("verify-browsers-config", message)

    def _required_images(self, report: LifecycleReport, manifest_present: bool) -> List[str]:
        """Browser images from the manifest followed by the Selenoid image."""
        images: List[str] = []
        if manifest_present:
            try:
                manifest = load_browser_manifest(self.paths.host_browsers_config)
            except ManifestError as exc:
                logger.error("%s", exc)
                report.add(StepResult.degraded("load-browsers-config", str(exc)))
            else:
                images.extend(manifest.image_references())

        images.append(self.config.image)
        # A version can be listed under more than one browser.
        return list(dict.fromkeys(images))

    @staticmethod
    def _log_summary(report: LifecycleReport) -> None:
        if report.ok:
            logger.info("Selenoid %s finished", report.phase)
            return
        logger.warning(
            "Selenoid %s finished with %d degraded step(s): %s",
            report.phase,
            len(report.failed_steps),
            ", ".join(step.step for step in report.failed_steps),
        )
