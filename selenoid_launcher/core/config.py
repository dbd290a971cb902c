"""
Launcher configuration.

LaunchConfig is the immutable option set a controller is built from.
LauncherSettings loads the same options (plus logging/runtime settings) from
environment variables via pydantic-settings.
"""

from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SELENOID_IMAGE_REPOSITORY = "aerokube/selenoid"
SELENOID_CONTAINER_PORT = 4444
DOCKER_SOCKET_TARGET = "/var/run/docker.sock"
SELENOID_CONFIG_DIR = "/etc/selenoid/"


class LaunchConfig(BaseModel):
    """
    Options for one gateway lifecycle.

    Accepts both the hook option names (pathToBrowsersConfig, ...) and the
    field names. Instances are frozen.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    browsers_config_path: str = Field(default="./browsers.json", alias="pathToBrowsersConfig")
    skip_auto_pull_images: bool = Field(default=False, alias="skipAutoPullImages")
    stop_existing_selenoid: bool = Field(default=True, alias="stopExistingSelenoid")
    container_name: str = Field(
        default="wdio_selenoid", min_length=1, alias="customSelenoidContainerName"
    )
    terminate_on_error: bool = Field(default=True, alias="terminateWdioOnError")
    selenoid_version: str = Field(default="latest-release", min_length=1, alias="selenoidVersion")
    port: int = Field(default=4444, ge=1, le=65535, alias="port")
    docker_args: Tuple[str, ...] = Field(default=(), alias="dockerArgs")
    selenoid_args: Tuple[str, ...] = Field(default=(), alias="selenoidArgs")
    command_timeout: Optional[float] = Field(default=None, gt=0, alias="commandTimeout")

    @property
    def image(self) -> str:
        return f"{SELENOID_IMAGE_REPOSITORY}:{self.selenoid_version}"


def merge_options(options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> LaunchConfig:
    """
    Build a LaunchConfig from user options, applying defaults for unset keys.

    None values are treated as unset. Neither argument is mutated.
    """
    merged: Dict[str, Any] = {}
    for source in (options or {}, overrides):
        merged.update({key: value for key, value in source.items() if value is not None})
    return LaunchConfig.model_validate(merged)


class LauncherSettings(BaseSettings):
    """
    Environment-driven settings for the command-line entry point.
    """

    LOG_LEVEL: str = Field(default="INFO", description="Log level")
    LOG_CONFIG_PATH: str = Field(default="", description="Logging YAML path (bundled if empty)")
    DOCKER_BIN: str = Field(default="docker", description="Container runtime executable")

    SELENOID_BROWSERS_CONFIG: str = Field(
        default="./browsers.json", description="Browser manifest path"
    )
    SELENOID_CONTAINER_NAME: str = Field(
        default="wdio_selenoid", description="Gateway container name"
    )
    SELENOID_VERSION: str = Field(default="latest-release", description="Selenoid image tag")
    SELENOID_PORT: int = Field(default=4444, description="Host port published for Selenoid")
    SELENOID_SKIP_AUTO_PULL: bool = Field(default=False, description="Skip image pre-pulls")
    SELENOID_TERMINATE_ON_ERROR: bool = Field(
        default=True, description="Abort the run when Selenoid cannot be started"
    )
    SELENOID_COMMAND_TIMEOUT: Optional[float] = Field(
        default=None, description="Per runtime invocation timeout (seconds)"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    def launch_options(self) -> Dict[str, Any]:
        return {
            "pathToBrowsersConfig": self.SELENOID_BROWSERS_CONFIG,
            "customSelenoidContainerName": self.SELENOID_CONTAINER_NAME,
            "selenoidVersion": self.SELENOID_VERSION,
            "port": self.SELENOID_PORT,
            "skipAutoPullImages": self.SELENOID_SKIP_AUTO_PULL,
            "terminateWdioOnError": self.SELENOID_TERMINATE_ON_ERROR,
            "commandTimeout": self.SELENOID_COMMAND_TIMEOUT,
        }
