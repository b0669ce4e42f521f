"""Nearest greater and smaller neighbours computed with a monotonic stack."""

from __future__ import annotations

import argparse
import operator
import sys
from collections.abc import Callable, Iterable, Sequence

MISSING = -1

EXAMPLE = (10, 4, 2, 20, 40, 12, 30)


def _nearest(
    values: Iterable[int],
    beats: Callable[[int, int], bool],
    *,
    from_right: bool,
) -> list[int]:
    items = list(values)
    result = [MISSING] * len(items)
    order = reversed(range(len(items))) if from_right else range(len(items))
    stack: list[int] = []
    for i in order:
        value = items[i]
        while stack and not beats(stack[-1], value):
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(value)
    return result


def next_greater(values: Iterable[int]) -> list[int]:
    """For each value, the first strictly greater value to its right, or -1."""
    return _nearest(values, operator.gt, from_right=True)


def next_smaller(values: Iterable[int]) -> list[int]:
    """For each value, the first strictly smaller value to its right, or -1."""
    return _nearest(values, operator.lt, from_right=True)


def previous_greater(values: Iterable[int]) -> list[int]:
    """For each value, the nearest strictly greater value to its left, or -1."""
    return _nearest(values, operator.gt, from_right=False)


def previous_smaller(values: Iterable[int]) -> list[int]:
    """For each value, the nearest strictly smaller value to its left, or -1."""
    return _nearest(values, operator.lt, from_right=False)


KINDS: dict[str, Callable[[Iterable[int]], list[int]]] = {
    "next-greater": next_greater,
    "next-smaller": next_smaller,
    "previous-greater": previous_greater,
    "previous-smaller": previous_smaller,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Print the chosen nearest-neighbour answer for the given or example values."""
    parser = argparse.ArgumentParser(
        description="Find the nearest greater or smaller element for each value."
    )
    parser.add_argument("kind", choices=list(KINDS), help="which neighbour to find")
    parser.add_argument(
        "values",
        nargs="*",
        type=int,
        help="integers to examine (default: %s)" % " ".join(map(str, EXAMPLE)),
    )
    args = parser.parse_args(argv)
    values = args.values or list(EXAMPLE)
    print(" ".join(str(x) for x in KINDS[args.kind](values)))
    return 0


if __name__ == "__main__":
    sys.exit(main())