"""Command line: solve a judge problem from its input text."""

from __future__ import annotations

import argparse
import itertools
import sys
from collections.abc import Callable

from judgekit.arithmetic import count_carries, format_carries, format_factorization
from judgekit.dynamic import lotto_combinations, smallest_window
from judgekit.graphs import best_starter, shortest_path


class _EndOfInput(ValueError):
    """The input ran out before a value that was needed."""


class _Reader:
    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def ints(self, count: int) -> list[int]:
        values = list(itertools.islice(self._tokens, count))
        if len(values) < count:
            raise _EndOfInput("unexpected end of input")
        try:
            return [int(v) for v in values]
        except ValueError as exc:
            raise ValueError(f"expected an integer: {exc}") from None

    def int(self) -> int:
        return self.ints(1)[0]


def _carries(reader: _Reader) -> list[str]:
    lines = []
    while True:
        try:
            a, b = reader.ints(2)
        except _EndOfInput:
            break
        if a == 0 and b == 0:
            break
        lines.append(format_carries(count_carries(a, b)))
    return lines


def _traffic(reader: _Reader) -> list[str]:
    lines = []
    for case in range(1, reader.int() + 1):
        n, m, source, target = reader.ints(4)
        edges = [tuple(reader.ints(3)) for _ in range(m)]
        length = shortest_path(n, edges, source, target)
        answer = "unreachable" if length is None else length
        lines.append(f"Case #{case}: {answer}")
    return lines


def _windows(reader: _Reader) -> list[str]:
    lines = []
    for case in range(1, reader.int() + 1):
        n, m, k = reader.ints(3)
        width = smallest_window(n, m, k)
        answer = "sequence nai" if width is None else width
        lines.append(f"Case {case}: {answer}")
    return lines


def _lotto(reader: _Reader) -> list[str]:
    lines: list[str] = []
    first = True
    while True:
        try:
            k = reader.int()
        except _EndOfInput:
            break
        if k <= 0:
            break
        numbers = reader.ints(k)
        if not first:
            lines.append("")
        first = False
        lines.extend(" ".join(map(str, combo)) for combo in lotto_combinations(numbers))
    return lines


def _factors(reader: _Reader) -> list[str]:
    lines = []
    while True:
        try:
            n = reader.int()
        except _EndOfInput:
            break
        if n == 0:
            break
        lines.append(format_factorization(n))
    return lines


def _mails(reader: _Reader) -> list[str]:
    lines = []
    for case in range(1, reader.int() + 1):
        n = reader.int()
        links = [tuple(reader.ints(2)) for _ in range(n)]
        lines.append(f"Case {case}: {best_starter(links)}")
    return lines


PROBLEMS: dict[str, Callable[[_Reader], list[str]]] = {
    "10035": _carries,
    "10986": _traffic,
    "11536": _windows,
    "441": _lotto,
    "583": _factors,
    "12442": _mails,
}


def solve(problem: str, text: str) -> str:
    """Answer the judge problem ``problem`` for the input ``text``."""
    try:
        handler = PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    return "".join(line + "\n" for line in handler(_Reader(text)))


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print the answers."""
    parser = argparse.ArgumentParser(
        prog="judgekit", description="Solve an online-judge problem."
    )
    parser.add_argument("problem", choices=sorted(PROBLEMS), help="problem number")
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)
    try:
        if args.input is None:
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        output = solve(args.problem, text)
    except (OSError, ValueError) as exc:
        print(f"judgekit: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0