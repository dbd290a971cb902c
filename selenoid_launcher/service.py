"""
Test-runner hook adapter.

Exposes the two lifecycle hooks a test runner calls: on_prepare before any
test executes and on_complete after all tests finish. Hook context arguments
are accepted and ignored.
"""

from typing import Any, Mapping, Optional

from .core.config import merge_options
from .core.lifecycle import LifecycleController
from .core.results import LifecycleReport
from .core.runner import CommandRunner


class SelenoidStandaloneService:
    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        runner: Optional[CommandRunner] = None,
        **controller_kwargs: Any,
    ):
        self.config = merge_options(options)
        self.controller = LifecycleController(self.config, runner, **controller_kwargs)

    def on_prepare(self, config: Any = None, capabilities: Any = None) -> LifecycleReport:
        return self.controller.prepare()

    def on_complete(
        self, exit_code: Any = None, config: Any = None, capabilities: Any = None
    ) -> LifecycleReport:
        return self.controller.complete()
