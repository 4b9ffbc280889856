from __future__ import annotations

import pathlib
import shlex
import subprocess

from modpak.errors import PackToolFailure

LOG_PREFIX = '[modpak]'


def log(message: str) -> None:
    print(f'{LOG_PREFIX} {message}', flush=True)


def format_command(command: list[str]) -> str:
    return shlex.join(command)


def run_command(command: list[str], cwd: pathlib.Path | None = None, stdin_text: str | None = None) -> None:
    """Run an external tool to completion, turning any failure into PackToolFailure."""
    try:
        subprocess.run(command, cwd=cwd, input=stdin_text, text=True, check=True)
    except FileNotFoundError as exc:
        raise PackToolFailure(f'Command not found: {command[0]} ({format_command(command)})') from exc
    except PermissionError as exc:
        raise PackToolFailure(f'Command not executable: {command[0]} ({format_command(command)})') from exc
    except subprocess.CalledProcessError as exc:
        raise PackToolFailure(
            f'Command failed with exit code {exc.returncode}: {format_command(command)}'
        ) from exc
