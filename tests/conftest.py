from __future__ import annotations

import pathlib
import zipfile

import pytest


class FakeZip:
    """Stands in for `zip -9 -X <out> -@`, reading names from stdin."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.names: dict[pathlib.Path, list[str]] = {}

    def __call__(self, command, cwd=None, stdin_text=None):
        self.calls.append(list(command))
        output = pathlib.Path(command[-2])
        names = [line for line in (stdin_text or '').splitlines() if line]
        with zipfile.ZipFile(output, 'w', compression=zipfile.ZIP_DEFLATED) as archive:
            for name in names:
                archive.write(pathlib.Path(cwd) / name, name)
        self.names[output] = names


class FakeSevenZip:
    """Stands in for `7z a <out> <dir>/*`."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []

    def __call__(self, command, cwd=None, stdin_text=None):
        self.calls.append(list(command))
        output = pathlib.Path(command[2])
        source = pathlib.Path(command[3]).parent
        with zipfile.ZipFile(output, 'w', compression=zipfile.ZIP_DEFLATED) as archive:
            for path in sorted(source.rglob('*')):
                if path.is_file():
                    archive.write(path, path.relative_to(source).as_posix())


def write_file(path: pathlib.Path, size: int) -> pathlib.Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b'x' * size)
    return path


@pytest.fixture
def fake_zip(monkeypatch):
    fake = FakeZip()
    monkeypatch.setattr('modpak.pak.run_command', fake)
    return fake


@pytest.fixture
def fake_7z(monkeypatch):
    fake = FakeSevenZip()
    monkeypatch.setattr('modpak.bundle.run_command', fake)
    return fake


MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<kcd_mod>
  <info>
    <name>Lorem Mod</name>
    <modid>loremmod</modid>
    <description>Test mod</description>
    <version>1.2.0</version>
  </info>
</kcd_mod>
"""


@pytest.fixture
def project(tmp_path):
    root = tmp_path / 'project'
    src = root / 'src'
    write_file(src / 'Data' / 'Objects' / 'sword.cgf', 40)
    write_file(src / 'Data' / 'Textures' / 'sword.dds', 30)
    write_file(src / 'Data' / 'Scripts' / 'init.lua', 10)
    write_file(src / 'Data' / 'Libs' / 'tables.xml', 10)
    write_file(src / 'Localization' / 'english_xml.pak', 5)
    (src / 'mod.manifest').write_text(MANIFEST, encoding='utf-8')
    return root
