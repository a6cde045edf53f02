"""Text and bit-matrix puzzles: typeset quotes and parity checks."""

from __future__ import annotations

from collections.abc import Sequence


def convert_quotes(text: str) -> str:
    """Replace straight double quotes with alternating `` and '' quotes."""
    parts = text.split('"')
    pieces = [parts[0]]
    for index, part in enumerate(parts[1:]):
        pieces.append("``" if index % 2 == 0 else "''")
        pieces.append(part)
    return "".join(pieces)


def _odd_lines(lines) -> list[int]:
    return [index for index, line in enumerate(lines) if sum(line) % 2]


def check_parity(matrix: Sequence[Sequence[int]]) -> str:
    """Tell whether a square bit matrix has even parity, one fixable bit, or is corrupt."""
    odd_rows = _odd_lines(matrix)
    odd_cols = _odd_lines(zip(*matrix))
    if len(odd_rows) > 1 or len(odd_cols) > 1:
        return "Corrupt"
    if odd_rows and odd_cols:
        return f"Change bit ({odd_rows[0] + 1},{odd_cols[0] + 1})"
    return "OK"