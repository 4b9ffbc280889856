from __future__ import annotations

import pathlib
import shutil

from modpak.errors import BuildError

NON_PRODUCTION_DIRS = (
    pathlib.PurePosixPath('Data/Scripts'),
    pathlib.PurePosixPath('Data/Libs'),
)


def clean_build_directory(staging_dir: pathlib.Path) -> None:
    if staging_dir.exists():
        shutil.rmtree(staging_dir)
    staging_dir.mkdir(parents=True, exist_ok=True)


def prepare_build(source_dir: pathlib.Path, staging_dir: pathlib.Path) -> None:
    if not source_dir.is_dir():
        raise BuildError(f'Source directory not found: {source_dir}')
    shutil.copytree(source_dir, staging_dir, dirs_exist_ok=True)


def remove_non_production_files(staging_dir: pathlib.Path) -> list[pathlib.Path]:
    removed: list[pathlib.Path] = []
    for rel_path in NON_PRODUCTION_DIRS:
        target = staging_dir.joinpath(*rel_path.parts)
        if target.is_dir():
            shutil.rmtree(target)
            removed.append(target)
    return removed
