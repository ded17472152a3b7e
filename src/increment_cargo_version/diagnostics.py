"""Operator-facing diagnostic output."""

from typing import Protocol


class DiagnosticSink(Protocol):
    """Receives informational and error messages from the core functions."""

    def info(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class ConsoleSink:
    """Prints tagged messages to stdout."""

    def info(self, message: str) -> None:
        print(f"[INFO] {message}")

    def error(self, message: str) -> None:
        print(f"[ERROR] {message}")


class NullSink:
    """Discards all messages."""

    def info(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass
