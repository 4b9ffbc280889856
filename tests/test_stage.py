from __future__ import annotations

import pytest

from conftest import write_file
from modpak.errors import BuildError
from modpak.stage import clean_build_directory, prepare_build, remove_non_production_files


def test_clean_build_directory_recreates_empty(tmp_path):
    staging = tmp_path / 'temp_build'
    write_file(staging / 'stale' / 'file.bin', 4)

    clean_build_directory(staging)

    assert staging.is_dir()
    assert list(staging.iterdir()) == []


def test_clean_build_directory_when_absent(tmp_path):
    staging = tmp_path / 'temp_build'

    clean_build_directory(staging)
    clean_build_directory(staging)

    assert staging.is_dir()


def test_prepare_build_copies_tree(tmp_path):
    source = tmp_path / 'src'
    staging = tmp_path / 'temp_build'
    write_file(source / 'Data' / 'Objects' / 'a.cgf', 7)
    write_file(source / 'mod.manifest', 3)
    clean_build_directory(staging)

    prepare_build(source, staging)

    assert (staging / 'Data' / 'Objects' / 'a.cgf').read_bytes() == b'x' * 7
    assert (staging / 'mod.manifest').is_file()


def test_prepare_build_missing_source(tmp_path):
    with pytest.raises(BuildError, match='Source directory not found'):
        prepare_build(tmp_path / 'src', tmp_path / 'temp_build')


def test_remove_non_production_files(tmp_path):
    write_file(tmp_path / 'Data' / 'Scripts' / 'init.lua', 1)
    write_file(tmp_path / 'Data' / 'Libs' / 'UI' / 'menu.xml', 1)
    write_file(tmp_path / 'Data' / 'mod.pak', 1)

    removed = remove_non_production_files(tmp_path)

    assert removed == [tmp_path / 'Data' / 'Scripts', tmp_path / 'Data' / 'Libs']
    assert sorted(path.name for path in (tmp_path / 'Data').iterdir()) == ['mod.pak']


def test_remove_non_production_files_when_absent(tmp_path):
    write_file(tmp_path / 'Data' / 'mod.pak', 1)

    assert remove_non_production_files(tmp_path) == []
    assert (tmp_path / 'Data' / 'mod.pak').is_file()
