"""Scan diagnostics: error kinds, structured records, and the report sink."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TextIO


class ErrorKind(Enum):
    UNTERMINATED_STRING = auto()
    UNTERMINATED_BLOCK_COMMENT = auto()
    UNEXPECTED_CHARACTER = auto()


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One reported error: 1-based line and column plus the message."""

    kind: ErrorKind | None
    line: int
    column: int
    message: str
    where: str = ""

    def __str__(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"

    def format(self, source: str, filename: str = "<script>") -> str:
        # Only "\n" ends a line, matching the scanner's line count.
        lines = source.split("\n")
        line_idx = self.line - 1
        col = max(1, self.column)

        # Build the source line (drop the "\r" of a CRLF ending)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].removesuffix("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)

        line_num = str(self.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )


class ErrorReporter:
    """Collects diagnostics for one top-level run.

    A fresh reporter per file run or per interactive line replaces a shared
    "had error" flag. When *stream* is given every report is also written
    to it as a single line.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream
        self.diagnostics: list[Diagnostic] = []

    @property
    def had_error(self) -> bool:
        return bool(self.diagnostics)

    def report(
        self,
        line: int,
        where: str,
        message: str,
        *,
        kind: ErrorKind | None = None,
        column: int = 0,
    ) -> Diagnostic:
        diagnostic = Diagnostic(kind, line, column, message, where)
        self.diagnostics.append(diagnostic)
        if self.stream is not None:
            print(diagnostic, file=self.stream)
        return diagnostic

    def error(self, kind: ErrorKind, line: int, column: int, message: str) -> Diagnostic:
        return self.report(line, "", message, kind=kind, column=column)

    def reset(self) -> None:
        self.diagnostics.clear()
