"""Version string detection, increment and substitution."""

import re

from increment_cargo_version.diagnostics import DiagnosticSink, NullSink

VERSION_LINE_PATTERN = r'^\s*version\s*=\s*"([^"]*)"'
BUILD_NUMBER_PATTERN = r"\A([0-9]+)\.([0-9]+)\.([0-9]+)\Z"


def matches(text: str, expression: str, sink: DiagnosticSink | None = None) -> list[str]:
    """Capture groups from the first match of expression in text.

    Args:
        text: String to search.
        expression: Regular expression containing capture groups.
        sink: Receives a note for every match attempt.

    Returns:
        Captured group values in order, without the whole match.
        Empty list if the expression does not match.

    Raises:
        re.error: If the expression is malformed.
    """
    sink = sink or NullSink()
    pattern = re.compile(expression)

    match = pattern.search(text)
    if match is None:
        sink.info(f"NOT MATCHED for expression [{expression}].")
        return []

    sink.info(f"MATCHED for expression [{expression}].")
    return [group or "" for group in match.groups()]


def is_version_line(line: str) -> bool:
    """Return True if the line starts with the `version` token."""
    return line.strip().startswith("version")


def read_version_string(line: str, sink: DiagnosticSink | None = None) -> str | None:
    """Read the quoted value of a `version = "..."` line.

    Args:
        line: A single manifest line.
        sink: Diagnostic sink passed to the regex match.

    Returns:
        The quoted value, or None if the line holds no (non-empty) version.
    """
    if not is_version_line(line):
        return None

    result = matches(line, VERSION_LINE_PATTERN, sink)
    if len(result) != 1 or not result[0]:
        return None

    return result[0]


def increment_build_number(version: str, sink: DiagnosticSink | None = None) -> str:
    """Increment the third (patch) field of an `A.B.C` version.

    The first two fields are kept as written. Input that is not three
    dot-separated digit groups is returned unchanged.

    Raises:
        ValueError: If the patch field cannot be parsed as an integer.
    """
    result = matches(version, BUILD_NUMBER_PATTERN, sink)
    if len(result) != 3:
        return version

    major, minor, patch = result
    return f"{major}.{minor}.{int(patch) + 1}"


def quoted(value: str) -> str:
    """Wrap a value in double quotes."""
    return f'"{value}"'


def convert_line(line: str, version: str, new_version: str) -> str:
    """Replace every quoted occurrence of version with new_version."""
    return line.replace(quoted(version), quoted(new_version))
