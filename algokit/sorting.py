"""Elementary comparison sorts and a small command that sorts numbers read from stdin."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of values using bubble sort."""
    items = list(values)
    n = len(items)
    for _ in range(n - 1):
        for j in range(n - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of values using selection sort."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of values using insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j - 1] > items[j]:
            items[j - 1], items[j] = items[j], items[j - 1]
            j -= 1
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of values using a stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of values using quicksort with a last-element pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return items


ALGORITHMS: dict[str, Callable[[Iterable[Any]], list[Any]]] = {
    "bubble": bubble_sort,
    "selection": selection_sort,
    "insertion": insertion_sort,
    "merge": merge_sort,
    "quick": quick_sort,
}


def _read_numbers(parser: argparse.ArgumentParser, text: str) -> list[int]:
    tokens = text.split()
    if not tokens:
        parser.error("expected the number of elements")
    try:
        count = int(tokens[0])
        numbers = [int(token) for token in tokens[1:]]
    except ValueError as exc:
        parser.error(f"invalid integer: {exc}")
    if count < 0:
        parser.error("the number of elements must not be negative")
    if len(numbers) < count:
        parser.error(f"expected {count} elements, got {len(numbers)}")
    return numbers[:count]


def main(argv: Sequence[str] | None = None) -> int:
    """Read a count and that many integers from stdin and print them sorted."""
    parser = argparse.ArgumentParser(description="Sort integers read from standard input.")
    parser.add_argument(
        "-a",
        "--algorithm",
        choices=sorted(ALGORITHMS),
        default="bubble",
        help="sorting algorithm to use (default: bubble)",
    )
    args = parser.parse_args(argv)

    print("Enter number of elements: ", end="")
    text = sys.stdin.read()
    numbers = _read_numbers(parser, text)
    print(f"Enter {len(numbers)} elements: ")
    result = ALGORITHMS[args.algorithm](numbers)
    print("Sorted array: " + " ".join(str(value) for value in result))
    return 0


if __name__ == "__main__":
    sys.exit(main())