#!/usr/bin/env python3

from __future__ import annotations

import argparse
import os
import pathlib
import sys
from typing import Mapping, Sequence

if __package__ is None or __package__ == '':
    sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))

from modpak.bundle import bundle_mod, find_archiver
from modpak.commands import log
from modpak.errors import ConfigError
from modpak.manifest import read_manifest
from modpak.pak import DEFAULT_MAX_PAK_SIZE, PAK_SUFFIX, pack_directory
from modpak.stage import clean_build_directory, prepare_build, remove_non_production_files
from modpak.targets import (
    DEFAULT_ENVIRONMENT,
    DEFAULT_VERSION,
    VERSIONS,
    BuildConfig,
    environment_ids,
    get_environment,
    get_version,
)


class BuildArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f'{self.prog}: error: {message}\n')


def build_parser() -> argparse.ArgumentParser:
    parser = BuildArgumentParser(
        prog='modpak-build',
        description='Stage the mod sources, pack Data into .pak archives and bundle a release zip.',
    )
    parser.add_argument(
        '--env',
        default='',
        help=f"Build environment: {'|'.join(environment_ids())} (env MODE, default: {DEFAULT_ENVIRONMENT})",
    )
    parser.add_argument(
        '--version',
        default='',
        help=f"Build version: {'|'.join(VERSIONS)} (env VERSION, default: {DEFAULT_VERSION})",
    )
    parser.add_argument('--root', default='.', help='Project root holding src/ (default: current directory)')
    parser.add_argument(
        '--max-pak-size',
        type=int,
        default=DEFAULT_MAX_PAK_SIZE,
        help='Maximum uncompressed bytes per pak part (default: 2 GiB)',
    )
    parser.add_argument('--zip-tool', default='zip', help='Compression tool used to write paks')
    parser.add_argument('--archiver', default='', help='7-Zip binary for the final bundle (env SEVEN_ZIP)')
    return parser


def resolve_config(args: argparse.Namespace, environ: Mapping[str, str]) -> BuildConfig:
    environment = args.env or environ.get('MODE') or DEFAULT_ENVIRONMENT
    version = args.version or environ.get('VERSION') or DEFAULT_VERSION
    get_environment(environment)
    get_version(version)

    if args.max_pak_size <= 0:
        raise ConfigError(f'Invalid --max-pak-size value {args.max_pak_size}. Must be a positive byte count')

    return BuildConfig(
        environment=environment,
        version=version,
        root=pathlib.Path(args.root).resolve(),
        max_pak_size=args.max_pak_size,
        zip_tool=args.zip_tool,
        archiver=args.archiver or environ.get('SEVEN_ZIP') or None,
    )


def run_build(config: BuildConfig) -> pathlib.Path:
    log(f'Building {config.label} version ({config.version})...')

    manifest = read_manifest(config.manifest_path)
    archiver = find_archiver(config.root, config.archiver)

    clean_build_directory(config.staging_dir)
    prepare_build(config.source_dir, config.staging_dir)

    pak_path = config.data_dir / f'{manifest.identifier}{PAK_SUFFIX}'
    pack_directory(config.data_dir, pak_path, config.max_pak_size, config.zip_tool)
    for removed in remove_non_production_files(config.staging_dir):
        log(f'Removed non-production directory {removed}')

    return bundle_mod(
        config.staging_dir,
        config.root,
        f'{manifest.name}_{config.version}',
        manifest.version,
        archiver,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = resolve_config(args, os.environ)
    try:
        run_build(config)
    except OSError as exc:
        print(f'Build failed: {exc}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
