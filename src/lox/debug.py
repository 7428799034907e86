"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from lox.tokens import Token


def dump_tokens(tokens: Sequence[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one aligned row per token to *file*: line, type, lexeme, literal."""
    if not tokens:
        file.write("(no tokens)\n")
        return
    type_width = max(len(t.type.name) for t in tokens)
    line_width = len(str(max(t.line for t in tokens)))
    for tok in tokens:
        row = f"{tok.line:>{line_width}}  {tok.type.name:<{type_width}}  {tok.lexeme!r}"
        if tok.literal is not None:
            row += f"  {tok.literal!r}"
        file.write(row + "\n")
