"""0/1 knapsack by dynamic programming and fractional knapsack by greed."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, TextIO

MAX_ITEMS = 100
MAX_WEIGHT = 100


@dataclass(frozen=True)
class KnapsackResult:
    """Best total profit and the chosen 1-based item numbers, last item first."""

    max_profit: int
    selected: tuple[int, ...]


@dataclass(frozen=True)
class Item:
    """An item that may be taken whole or in part."""

    value: int
    weight: int

    @property
    def ratio(self) -> float:
        return self.value / self.weight


def knapsack_01(
    weights: Sequence[int], profits: Sequence[int], capacity: int
) -> KnapsackResult:
    """Solve the 0/1 knapsack problem and trace back the items taken."""
    weights = list(weights)
    profits = list(profits)
    if len(weights) != len(profits):
        raise ValueError("weights and profits must have the same length")
    if len(weights) > MAX_ITEMS:
        raise ValueError(f"at most {MAX_ITEMS} items are supported")
    if not 0 <= capacity <= MAX_WEIGHT:
        raise ValueError(f"capacity must lie between 0 and {MAX_WEIGHT}")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")

    table = [[0] * (capacity + 1)]
    for weight, profit in zip(weights, profits):
        previous = table[-1]
        row = [0]
        for w in range(1, capacity + 1):
            if weight <= w:
                row.append(max(profit + previous[w - weight], previous[w]))
            else:
                row.append(previous[w])
        table.append(row)

    selected = []
    i, k = len(weights), capacity
    while i > 0 and k > 0:
        if table[i][k] != table[i - 1][k]:
            selected.append(i)
            k -= weights[i - 1]
        i -= 1
    return KnapsackResult(table[-1][capacity], tuple(selected))


def fractional_knapsack(capacity: float, items: Iterable[Item]) -> float:
    """Greatest value reachable when items may be split, best ratio first."""
    items = list(items)
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(item.weight <= 0 for item in items):
        raise ValueError("item weights must be positive")

    remaining = capacity
    total = 0.0
    for item in sorted(items, key=lambda it: it.ratio, reverse=True):
        if remaining >= item.weight:
            remaining -= item.weight
            total += item.value
        else:
            total += item.value * (remaining / item.weight)
            break
    return total


def _int_tokens(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _take(tokens: Iterator[int]) -> int:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _run_01(tokens: Iterator[int]) -> int:
    print("Enter number of items: ", end="")
    n = _take(tokens)
    if n < 0:
        raise ValueError("number of items must not be negative")
    if n == 0:
        print("No items available. Maximum Profit: 0")
        return 0

    print("Enter knapsack capacity: ", end="")
    capacity = _take(tokens)
    if capacity == 0:
        print("Knapsack has zero capacity. Maximum Profit: 0")
        return 0

    print("Enter item weights: ", end="")
    weights = [_take(tokens) for _ in range(n)]
    print("Enter item profits: ", end="")
    profits = [_take(tokens) for _ in range(n)]

    result = knapsack_01(weights, profits, capacity)
    print(f"Maximum Profit: {result.max_profit}")
    print("Selected items: " + "".join(f"{i} " for i in result.selected))
    return 0


def _run_fractional(tokens: Iterator[int]) -> int:
    print("Enter number of items and knapsack capacity: ", end="")
    n = _take(tokens)
    capacity = _take(tokens)
    if n < 0:
        raise ValueError("number of items must not be negative")
    print("Enter value and weight of each item:")
    items = [Item(_take(tokens), _take(tokens)) for _ in range(n)]
    print(f"Maximum value in knapsack = {fractional_knapsack(capacity, items):g}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve a knapsack problem read from stdin.")
    parser.add_argument(
        "mode", nargs="?", default="01", choices=("01", "fractional"),
        help="0/1 knapsack (default) or fractional knapsack",
    )
    args = parser.parse_args(argv)
    tokens = _int_tokens(sys.stdin)
    try:
        if args.mode == "fractional":
            return _run_fractional(tokens)
        return _run_01(tokens)
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())