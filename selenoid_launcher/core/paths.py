"""Host path resolution for the gateway container mounts."""

from __future__ import annotations

import ntpath
import posixpath
import re
from dataclasses import dataclass

WINDOWS_DOCKER_SOCKET = "//var/run/docker.sock"
POSIX_DOCKER_SOCKET = "/var/run/docker.sock"

_DRIVE_LETTER = re.compile(r"^([A-Za-z]):")


@dataclass(frozen=True)
class ResolvedPaths:
    docker_socket: str
    # Mount-ready manifest path (forward slashes on every platform).
    browsers_config: str
    # Native absolute path, used for existence checks on the host.
    host_browsers_config: str

    @property
    def browsers_config_dir(self) -> str:
        return posixpath.dirname(self.browsers_config)


def is_windows(platform: str) -> bool:
    # cygwin and msys report POSIX working directories, so they take the POSIX branch.
    return platform == "win32"


def resolve_paths(raw_browsers_config: str, platform: str, cwd: str) -> ResolvedPaths:
    """
    Resolve the docker socket and browser manifest paths for *platform*.

    Pure function: the filesystem is never touched. Container mount syntax
    needs POSIX-style paths, so on Windows hosts the drive letter is lowered
    and backslashes become forward slashes.
    """
    if is_windows(platform):
        host_path = ntpath.normpath(ntpath.join(cwd, raw_browsers_config))
        mount_path = _DRIVE_LETTER.sub(lambda m: m.group(1).lower() + ":", host_path)
        return ResolvedPaths(
            docker_socket=WINDOWS_DOCKER_SOCKET,
            browsers_config=mount_path.replace("\\", "/"),
            host_browsers_config=host_path,
        )

    host_path = posixpath.normpath(posixpath.join(cwd, raw_browsers_config))
    return ResolvedPaths(
        docker_socket=POSIX_DOCKER_SOCKET,
        browsers_config=host_path,
        host_browsers_config=host_path,
    )
