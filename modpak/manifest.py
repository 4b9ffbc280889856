from __future__ import annotations

import pathlib
import re
from typing import NamedTuple

from modpak.errors import ManifestError

MODID_RE = re.compile(r'<modid>(.+?)</modid>')
VERSION_RE = re.compile(r'<version>(.+?)</version>')
NAME_RE = re.compile(r'<name>(.+?)</name>')


class Manifest(NamedTuple):
    identifier: str
    version: str
    name: str


def first_match(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    return match.group(1) if match else None


def parse_manifest(text: str) -> Manifest:
    identifier = first_match(MODID_RE, text)
    version = first_match(VERSION_RE, text)
    name = first_match(NAME_RE, text)
    if not identifier or not version or not name:
        raise ManifestError('Missing required fields in mod.manifest.')
    return Manifest(identifier, version, name)


def read_manifest(path: pathlib.Path) -> Manifest:
    if not path.is_file():
        raise ManifestError(f'mod.manifest not found: {path}')
    return parse_manifest(path.read_text(encoding='utf-8'))
