"""Reading and rewriting version lines in manifest and lock files."""

from pathlib import Path

from increment_cargo_version.diagnostics import DiagnosticSink, NullSink
from increment_cargo_version.version import convert_line, is_version_line, read_version_string


def read_lines(path: Path) -> list[str]:
    """Read a UTF-8 file as lines split on LF only.

    A trailing CR is removed from each line so CRLF files read the same as LF
    files. Other line-break characters (U+2028, NEL, form feed) are content.

    Raises:
        OSError: If the file cannot be read.
    """
    with path.open(encoding="utf-8", newline="") as f:
        text = f.read()

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def write_lines(path: Path, lines: list[str]) -> None:
    """Overwrite a file with lines joined by LF plus a trailing LF."""
    path.write_text("\n".join(lines) + "\n", encoding="utf-8", newline="")


def detect_version(path: Path, sink: DiagnosticSink | None = None) -> str | None:
    """Find the version declared by the first version line of a file.

    Args:
        path: Manifest file to scan.
        sink: Diagnostic sink for match attempts.

    Returns:
        The version string, or None if no line declares one.

    Raises:
        OSError: If the file cannot be read.
    """
    for line in read_lines(path):
        version = read_version_string(line, sink)
        if version is not None:
            return version
    return None


def convert_lines(
    lines: list[str], version: str, new_version: str, sink: DiagnosticSink | None = None
) -> tuple[list[str], int]:
    """Substitute the version on every version line.

    Returns:
        The converted lines and the number of lines that changed.
    """
    sink = sink or NullSink()
    converted = []
    affected = 0

    for line in lines:
        if is_version_line(line):
            new_line = convert_line(line, version, new_version)
            if new_line != line:
                affected += 1
                sink.info(f"AFFECTED LINE:\n        SRC [{line}]\n        NEW [{new_line}]")
            line = new_line
        converted.append(line)

    return converted, affected


def convert_file(
    path: Path, version: str, new_version: str, sink: DiagnosticSink | None = None
) -> tuple[list[str], int]:
    """Read a file and return its converted lines without writing anything.

    Raises:
        OSError: If the file cannot be read.
    """
    return convert_lines(read_lines(path), version, new_version, sink)


def update_file_version(
    path: Path, version: str, new_version: str, sink: DiagnosticSink | None = None
) -> int:
    """Rewrite a file in place, replacing version with new_version.

    Args:
        path: File to rewrite.
        version: Version currently in the file.
        new_version: Version to write.
        sink: Diagnostic sink for affected lines.

    Returns:
        Number of lines that changed.

    Raises:
        OSError: If the file cannot be read or written.
    """
    converted, affected = convert_file(path, version, new_version, sink)
    write_lines(path, converted)
    return affected
