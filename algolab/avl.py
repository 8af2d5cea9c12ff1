"""A dictionary of words and meanings kept in a self-balancing AVL tree."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence


@dataclass
class _Node:
    word: str
    meaning: str
    left: Optional[_Node] = None
    right: Optional[_Node] = None
    height: int = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node else 0


def _balance_factor(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _refresh(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _rebalance(node: _Node) -> _Node:
    factor = _balance_factor(node)
    if factor > 1:
        if _balance_factor(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor < -1:
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    _refresh(node)
    return node


class AVLTree:
    """Words with their meanings, ordered by word; duplicates are ignored."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def insert(self, word: str, meaning: str) -> bool:
        """Add a word; return False if it was already present."""
        added = False

        def place(node: Optional[_Node]) -> _Node:
            nonlocal added
            if node is None:
                added = True
                return _Node(word, meaning)
            if word < node.word:
                node.left = place(node.left)
            elif word > node.word:
                node.right = place(node.right)
            else:
                return node
            _refresh(node)
            return _rebalance(node)

        self._root = place(self._root)
        if added:
            self._size += 1
        return added

    def lookup(self, word: str) -> str:
        """Return the meaning of a word, raising KeyError if it is absent."""
        node = self._root
        while node is not None:
            if word < node.word:
                node = node.left
            elif word > node.word:
                node = node.right
            else:
                return node.meaning
        raise KeyError(word)

    def inorder(self) -> Iterator[tuple[str, str, int]]:
        """Yield (word, meaning, balance factor) in word order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.word, node.meaning, _balance_factor(node)
            node = node.right

    def root_balance(self) -> int:
        return _balance_factor(self._root)

    def height(self) -> int:
        return _height(self._root)

    def __len__(self) -> int:
        return self._size


def main(argv: Sequence[str] | None = None) -> int:
    lines = iter(sys.stdin)
    tree = AVLTree()
    while True:
        print("Enter word: ", end="")
        line = next(lines, None)
        if line is None:
            break
        parts = line.split(maxsplit=1)
        if not parts:
            continue
        word = parts[0]
        if len(parts) > 1:
            meaning = parts[1].rstrip("\n")
        else:
            print("Enter meaning: ", end="")
            meaning = next(lines, "").rstrip("\n")
        tree.insert(word, meaning)
        print("Do you want to enter more words? (y/n): ", end="")
        answer = next(lines, "").strip()
        if not answer.startswith("y"):
            break

    print("\nDictionary (Inorder Traversal with Balance Factor):")
    for word, meaning, factor in tree.inorder():
        print(f"{word} : {meaning} (Balance Factor: {factor})")
    print(f"\nBalance factor of root: {tree.root_balance()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())