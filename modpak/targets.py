from __future__ import annotations

import dataclasses
import pathlib
from typing import Any

from modpak.errors import ConfigError
from modpak.pak import DEFAULT_MAX_PAK_SIZE

# prod and dev run the same build steps; only the banner label differs.
ENVIRONMENTS: list[dict[str, Any]] = [
    {
        "env_id": "prod",
        "label": "production",
    },
    {
        "env_id": "dev",
        "label": "development",
    },
]

VERSIONS: list[str] = ["main", "lorem-ipsum"]

DEFAULT_ENVIRONMENT = "dev"
DEFAULT_VERSION = "main"

SOURCE_DIR_NAME = "src"
MANIFEST_NAME = "mod.manifest"
STAGING_DIR_NAME = "temp_build"
DATA_DIR_NAME = "Data"


def environment_ids() -> list[str]:
    return [environment["env_id"] for environment in ENVIRONMENTS]


def get_environment(env_id: str) -> dict[str, Any]:
    for environment in ENVIRONMENTS:
        if environment["env_id"] == env_id:
            return environment
    raise ConfigError(
        f"Invalid --env value '{env_id}'. Must be one of: {', '.join(environment_ids())}"
    )


def get_version(version: str) -> str:
    if version not in VERSIONS:
        raise ConfigError(
            f"Invalid --version value '{version}'. Must be one of: {', '.join(VERSIONS)}"
        )
    return version


@dataclasses.dataclass(frozen=True)
class BuildConfig:
    environment: str
    version: str
    root: pathlib.Path
    max_pak_size: int = DEFAULT_MAX_PAK_SIZE
    zip_tool: str = "zip"
    archiver: str | None = None

    @property
    def source_dir(self) -> pathlib.Path:
        return self.root / SOURCE_DIR_NAME

    @property
    def manifest_path(self) -> pathlib.Path:
        return self.source_dir / MANIFEST_NAME

    @property
    def staging_dir(self) -> pathlib.Path:
        return self.root / STAGING_DIR_NAME

    @property
    def data_dir(self) -> pathlib.Path:
        return self.staging_dir / DATA_DIR_NAME

    @property
    def label(self) -> str:
        return get_environment(self.environment)["label"]
