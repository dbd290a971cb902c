"""
Launcher exception types.

SevereServiceError is the only exception that escapes prepare/complete; it
signals the calling test run must be aborted.
"""

from typing import Optional

from .results import StepResult


class LauncherError(Exception):
    """Base class for launcher errors."""


class SevereServiceError(LauncherError, RuntimeError):
    """Fatal, run-aborting failure raised only in strict mode."""

    def __init__(self, message: str, result: Optional[StepResult] = None):
        super().__init__(message)
        self.result = result


class ManifestError(LauncherError, ValueError):
    """Browser manifest could not be read or has an unexpected shape."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Invalid browsers config at {path}: {reason}")
        self.path = path
        self.reason = reason
