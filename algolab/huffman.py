"""Huffman code construction from symbol frequencies."""

from __future__ import annotations

import heapq
import sys
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence


@dataclass
class _Node:
    freq: int
    symbol: Optional[str] = None
    left: Optional[_Node] = None
    right: Optional[_Node] = None


def huffman_codes(frequencies: Mapping[str, int]) -> dict[str, str]:
    """Build Huffman codes; the result lists symbols in tree preorder."""
    if not frequencies:
        raise ValueError("at least one symbol is required")

    heap = [(freq, order, _Node(freq, symbol)) for order, (symbol, freq) in enumerate(frequencies.items())]
    heapq.heapify(heap)
    counter = len(heap)
    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        total = left_freq + right_freq
        heapq.heappush(heap, (total, counter, _Node(total, None, left, right)))
        counter += 1

    codes: dict[str, str] = {}
    stack = [(heap[0][2], "")]
    while stack:
        node, code = stack.pop()
        if node.symbol is not None:
            codes[node.symbol] = code
        if node.right is not None:
            stack.append((node.right, code + "1"))
        if node.left is not None:
            stack.append((node.left, code + "0"))
    return codes


def main(argv: Sequence[str] | None = None) -> int:
    tokens = (token for line in sys.stdin for token in line.split())
    frequencies: dict[str, int] = {}
    try:
        print("Enter number of characters: ", end="")
        count = int(next(tokens))
        print("Enter each character and its frequency:")
        for _ in range(count):
            symbol = next(tokens)
            if len(symbol) != 1:
                raise ValueError(f"expected a single character, got {symbol!r}")
            frequencies[symbol] = int(next(tokens))
        codes = huffman_codes(frequencies)
    except StopIteration:
        print("\nerror: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    print("Huffman Codes:")
    for symbol, code in codes.items():
        print(f"{symbol}: {code}")
    return 0


if __name__ == "__main__":
    sys.exit(main())