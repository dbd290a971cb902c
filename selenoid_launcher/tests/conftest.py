from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from selenoid_launcher.core.runner import CompletedCommand, RunnerError

BROWSERS = {
    "chrome": {
        "default": "120.0",
        "versions": {
            "120.0": {"image": "selenoid/chrome:120.0", "port": 4444, "path": "/"},
            "119.0": {"image": "selenoid/chrome:119.0", "port": 4444, "path": "/"},
        },
    },
    "firefox": {
        "default": "121.0",
        "versions": {
            "121.0": {"image": "selenoid/firefox:121.0", "port": 4444, "path": "/wd/hub"},
        },
    },
}


@dataclass
class FakeRunner:
    """Records docker invocations; outputs/failures are keyed by command prefix."""

    outputs: dict[str, str] = field(default_factory=dict)
    failures: dict[str, str] = field(default_factory=dict)
    dry_run: bool = False

    def __post_init__(self) -> None:
        self.commands: list[list[str]] = []
        self.messages: list[str] = []

    def emit(self, message: str) -> None:
        self.messages.append(message)

    def run(
        self,
        cmd,
        *,
        capture_output: bool = False,
        check: bool = True,
        stream_output: bool = False,
    ) -> CompletedCommand:
        del capture_output, check, stream_output
        command = [str(token) for token in cmd]
        self.commands.append(command)
        rendered = " ".join(command)
        for prefix, detail in self.failures.items():
            if rendered.startswith(prefix):
                raise RunnerError(
                    f"command failed with exit code 1: $ {rendered}\n{detail}",
                    returncode=1,
                    detail=detail,
                )
        for prefix, stdout in self.outputs.items():
            if rendered.startswith(prefix):
                return CompletedCommand(tuple(command), 0, stdout, "")
        return CompletedCommand(tuple(command), 0, "", "")

    def rendered(self) -> list[str]:
        return [" ".join(command) for command in self.commands]

    def calls(self, verb: str) -> list[list[str]]:
        return [command for command in self.commands if len(command) > 1 and command[1] == verb]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def browsers_json(tmp_path: Path) -> Path:
    path = tmp_path / "browsers.json"
    path.write_text(json.dumps(BROWSERS), encoding="utf-8")
    return path
