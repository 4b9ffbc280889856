from __future__ import annotations

import pathlib
import shutil

from modpak.commands import format_command, log, run_command
from modpak.errors import PackToolFailure

ARCHIVER_NAMES = ('7zz', '7z', '7za')


def bundled_archiver(root: pathlib.Path) -> pathlib.Path:
    return root / 'node_modules' / '7z-bin' / 'linux' / '7zzs'


def find_archiver(root: pathlib.Path, override: str | None = None) -> str:
    if override:
        return override

    bundled = bundled_archiver(root)
    if bundled.is_file():
        return str(bundled)

    for name in ARCHIVER_NAMES:
        found = shutil.which(name)
        if found:
            return found
    raise PackToolFailure('7-Zip binary not found; install 7-Zip or pass --archiver')


def final_archive_path(root: pathlib.Path, output_name: str, mod_version: str) -> pathlib.Path:
    return root / f'{output_name}_{mod_version}.zip'


def bundle_mod(
    staging_dir: pathlib.Path,
    root: pathlib.Path,
    output_name: str,
    mod_version: str,
    archiver: str,
) -> pathlib.Path:
    final_path = final_archive_path(root, output_name, mod_version)
    if final_path.exists():
        final_path.unlink()

    # 7-Zip expands the wildcard itself, so entries are stored relative to staging_dir
    command = [archiver, 'a', str(final_path), f'{staging_dir}/*']
    log(f'Zipping final mod: {format_command(command)}')
    run_command(command)

    if not final_path.is_file():
        raise PackToolFailure(f"Failed to create '{final_path}'.")

    if staging_dir.exists():
        shutil.rmtree(staging_dir)

    log(f'Built {output_name} mod: {final_path}')
    print(f'ZIP_FILE:{final_path}', flush=True)
    return final_path
