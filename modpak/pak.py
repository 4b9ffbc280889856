"""Pack a data tree into one or more size-bounded .pak archives.

Files are assigned to parts greedily in traversal order: a part is closed as
soon as the next file would push it over the size limit. A file larger than
the limit on its own becomes a single-file part and is never split. The whole
plan is computed before anything is written, so part names follow directly
from the number of parts: one part keeps the plain name, several parts are
all suffixed ``-part0``, ``-part1``, ...
"""

from __future__ import annotations

import os
import pathlib
from typing import NamedTuple

from modpak.commands import format_command, log, run_command
from modpak.errors import NoFilesError, PackToolFailure

PAK_SUFFIX = '.pak'
DEFAULT_MAX_PAK_SIZE = 2 * 1024 * 1024 * 1024

# -9: maximum compression, -X: no extra file attributes
ZIP_FLAGS = ('-9', '-X')


class PakPart(NamedTuple):
    index: int
    path: pathlib.Path
    files: list[pathlib.Path]
    size: int


def collect_files(root: pathlib.Path) -> list[pathlib.Path]:
    """Depth-first listing of files under root, in directory order, without .pak files."""
    files: list[pathlib.Path] = []
    with os.scandir(root) as entries:
        for entry in entries:
            path = pathlib.Path(entry.path)
            if entry.is_dir():
                files.extend(collect_files(path))
            elif not entry.name.lower().endswith(PAK_SUFFIX):
                files.append(path)
    return files


def part_path(output_path: pathlib.Path, index: int) -> pathlib.Path:
    return output_path.with_name(f'{output_path.stem}-part{index}{output_path.suffix}')


def plan_parts(
    sized_files: list[tuple[pathlib.Path, int]],
    output_path: pathlib.Path,
    max_size: int,
) -> list[PakPart]:
    groups: list[list[tuple[pathlib.Path, int]]] = []
    current: list[tuple[pathlib.Path, int]] = []
    current_size = 0

    for path, size in sized_files:
        if current and current_size + size > max_size:
            groups.append(current)
            current = []
            current_size = 0
        current.append((path, size))
        current_size += size
    if current:
        groups.append(current)

    split = len(groups) > 1
    parts: list[PakPart] = []
    for index, group in enumerate(groups):
        parts.append(
            PakPart(
                index=index,
                path=part_path(output_path, index) if split else output_path,
                files=[path for path, _ in group],
                size=sum(size for _, size in group),
            )
        )
    return parts


def write_part(part: PakPart, source_dir: pathlib.Path, zip_tool: str) -> None:
    rel_paths = [path.relative_to(source_dir).as_posix() for path in part.files]
    if part.path.exists():
        part.path.unlink()

    command = [zip_tool, *ZIP_FLAGS, str(part.path), '-@']
    log(f'Creating pak part {part.index} ({len(rel_paths)} files, {part.size} bytes): {format_command(command)}')
    run_command(command, cwd=source_dir, stdin_text=''.join(f'{rel}\n' for rel in rel_paths))

    if not part.path.is_file():
        raise PackToolFailure(f"Failed to create '{part.path}'.")


def pack_directory(
    source_dir: pathlib.Path,
    output_path: pathlib.Path,
    max_size: int = DEFAULT_MAX_PAK_SIZE,
    zip_tool: str = 'zip',
) -> list[pathlib.Path]:
    source_dir = source_dir.resolve()
    output_path = output_path.resolve()

    files = collect_files(source_dir)
    if not files:
        raise NoFilesError(f"No files found in '{source_dir}' to pack.")

    sized_files = [(path, path.stat().st_size) for path in files]
    parts = plan_parts(sized_files, output_path, max_size)
    # split builds ship only -partN paks, never a leftover plain one
    if len(parts) > 1 and output_path.exists():
        output_path.unlink()
    for part in parts:
        write_part(part, source_dir, zip_tool)

    log(f'Packed {len(files)} files from {source_dir} into {len(parts)} pak(s)')
    return [part.path for part in parts]
