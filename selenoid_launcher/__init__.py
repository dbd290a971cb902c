"""Selenoid gateway lifecycle management for browser test runs."""

__version__ = "0.1.0"

from .core.config import LaunchConfig, merge_options
from .core.exceptions import ManifestError, SevereServiceError
from .core.lifecycle import LifecycleController
from .core.results import LifecycleReport, StepResult, StepStatus
from .service import SelenoidStandaloneService

__all__ = [
    "LaunchConfig",
    "LifecycleController",
    "LifecycleReport",
    "ManifestError",
    "SelenoidStandaloneService",
    "SevereServiceError",
    "StepResult",
    "StepStatus",
    "merge_options",
    "__version__",
]
