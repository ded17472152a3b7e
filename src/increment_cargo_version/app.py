"""Orchestration of a version bump across manifest and lock file."""

import argparse
import re
from collections.abc import Callable
from dataclasses import dataclass

from increment_cargo_version.config import Config, ConfigError, get_config_path, load_config
from increment_cargo_version.diagnostics import ConsoleSink, DiagnosticSink, NullSink
from increment_cargo_version.manifest import convert_file, detect_version, write_lines
from increment_cargo_version.version import increment_build_number

# Maps the current version to the version to write
VersionSource = Callable[[str], str]


@dataclass
class VersionChange:
    """Outcome of a version bump."""

    old: str
    new: str
    manifest_lines: int = 0
    lock_lines: int = 0


def incremented(sink: DiagnosticSink | None = None) -> VersionSource:
    """Version source that increments the patch field of the current version."""

    def source(current: str) -> str:
        return increment_build_number(current, sink)

    return source


def given(version: str) -> VersionSource:
    """Version source that ignores the current version and uses a fixed one."""

    def source(current: str) -> str:
        return version

    return source


def increment_version(
    config: Config,
    source: VersionSource | None = None,
    sink: DiagnosticSink | None = None,
) -> VersionChange | None:
    """Bump the version in the manifest and the lock file.

    Args:
        config: Paths of the manifest and lock file.
        source: Strategy producing the new version. Defaults to incrementing.
        sink: Diagnostic sink for progress output.

    Returns:
        The applied change, or None if the manifest declares no version.

    Raises:
        OSError: If a file cannot be read or written.
    """
    sink = sink or NullSink()
    source = source or incremented(sink)

    version = detect_version(config.manifest_path, sink)
    if version is None:
        sink.info(f"No version line found in {config.manifest_path}.")
        return None

    new_version = source(version)

    # Both files are read before either is written
    manifest_lines, manifest_affected = convert_file(
        config.manifest_path, version, new_version, sink
    )
    lock_lines, lock_affected = convert_file(config.lock_path, version, new_version, sink)

    write_lines(config.manifest_path, manifest_lines)
    write_lines(config.lock_path, lock_lines)

    return VersionChange(
        old=version,
        new=new_version,
        manifest_lines=manifest_affected,
        lock_lines=lock_affected,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the optional version argument."""
    parser = argparse.ArgumentParser(
        prog="increment-cargo-version",
        description="Increment the patch version in Cargo.toml and Cargo.lock.",
    )
    parser.add_argument(
        "version",
        nargs="?",
        help="write this version instead of incrementing the current one",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, sink: DiagnosticSink | None = None) -> int:
    """Entry point for the command line tool.

    Returns:
        Process exit code.
    """
    args = parse_args(argv)
    sink = sink or ConsoleSink()

    try:
        config = load_config(get_config_path())
        source = given(args.version) if args.version else incremented(sink)
        change = increment_version(config, source, sink)
    except (ConfigError, OSError, ValueError, re.error) as e:
        sink.error(str(e))
        return 1

    if change is not None:
        sink.info(f"{change.old} -> {change.new}")
    return 0
