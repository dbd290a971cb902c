"""Command execution helpers for container runtime invocations."""

from __future__ import annotations

import logging
import shlex
import subprocess
import threading
from dataclasses import dataclass
from typing import Callable, Sequence

logger = logging.getLogger("selenoid_launcher.runner")


@dataclass(frozen=True)
class CompletedCommand:
    """Normalized command execution result."""

    cmd: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""


class RunnerError(RuntimeError):
    """Raised when a command execution fails."""

    def __init__(self, message: str, *, returncode: int | None = None, detail: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.detail = detail


class CommandRunner:
    """Thin subprocess wrapper with dry-run support and deterministic logging."""

    def __init__(
        self,
        *,
        dry_run: bool = False,
        timeout: float | None = None,
        printer: Callable[[str], None] | None = None,
    ) -> None:
        self.dry_run = dry_run
        self.timeout = timeout
        self._printer = printer or logger.info

    def format_cmd(self, cmd: Sequence[str]) -> str:
        return "$ " + " ".join(shlex.quote(str(token)) for token in cmd)

    def emit(self, message: str) -> None:
        self._printer(message)

    def run(
        self,
        cmd: Sequence[str],
        *,
        capture_output: bool = False,
        check: bool = True,
        stream_output: bool = False,
    ) -> CompletedCommand:
        rendered = self.format_cmd(cmd)
        tokens = [str(token) for token in cmd]
        if self.dry_run:
            self.emit(f"[dry-run] {rendered}")
            return CompletedCommand(tuple(tokens), 0, "", "")

        logger.debug(rendered)
        if stream_output:
            return self._run_streaming(tokens, rendered, check=check)

        try:
            completed = subprocess.run(
                tokens,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE if capture_output else None,
                stderr=subprocess.PIPE if capture_output else None,
                text=True,
                check=False,
                errors="replace",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as exc:
            raise RunnerError(f"command timed out after {exc.timeout}s: {rendered}") from exc
        except OSError as exc:
            raise RunnerError(f"unable to execute {tokens[0]}: {exc}", detail=str(exc)) from exc

        if check and completed.returncode != 0:
            stderr = (completed.stderr or "").strip()
            stdout = (completed.stdout or "").strip()
            detail = stderr or stdout
            if detail:
                raise RunnerError(
                    f"command failed with exit code {completed.returncode}: {rendered}\n{detail}",
                    returncode=completed.returncode,
                    detail=detail,
                )
            raise RunnerError(
                f"command failed with exit code {completed.returncode}: {rendered}",
                returncode=completed.returncode,
            )

        return CompletedCommand(
            tuple(tokens),
            completed.returncode,
            completed.stdout or "",
            completed.stderr or "",
        )

    def _run_streaming(self, tokens: list[str], rendered: str, *, check: bool) -> CompletedCommand:
        self.emit(rendered)
        try:
            proc = subprocess.Popen(
                tokens,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                bufsize=1,
                errors="replace",
            )
        except OSError as exc:
            raise RunnerError(f"unable to execute {tokens[0]}: {exc}", detail=str(exc)) from exc

        assert proc.stdout is not None
        captured: list[str] = []

        def _pump() -> None:
            for raw_line in proc.stdout:
                line = raw_line.rstrip("\n")
                captured.append(line)
                self.emit(line)

        # The deadline must hold even while the command is silent, so output
        # is drained off the waiting thread.
        reader = threading.Thread(target=_pump, name="runner-stream", daemon=True)
        reader.start()
        try:
            rc = proc.wait(timeout=self.timeout)
        except subprocess.TimeoutExpired as exc:
            raise RunnerError(f"command timed out after {exc.timeout}s: {rendered}") from exc
        finally:
            if proc.poll() is None:
                proc.kill()
                proc.wait()
            reader.join(timeout=5)
            proc.stdout.close()

        stdout = "\n".join(captured)
        if check and rc != 0:
            detail = stdout.strip().splitlines()[-1] if stdout.strip() else ""
            raise RunnerError(
                f"command failed with exit code {rc}: {rendered}"
                + (f"\n{detail}" if detail else ""),
                returncode=rc,
                detail=detail,
            )
        return CompletedCommand(tuple(tokens), rc, stdout, "")
