"""Friendship network with breadth-first and depth-first traversal."""

from __future__ import annotations

import sys
from collections import deque
from typing import Iterator, Sequence, TextIO


class SocialGraph:
    """Undirected graph of users numbered from 0."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of users must not be negative")
        self.vertices = vertices
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, user: int) -> None:
        if not 0 <= user < self.vertices:
            raise ValueError(f"user {user} is not in the network")

    def add_edge(self, u: int, v: int) -> None:
        """Record a friendship between two users."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def bfs(self, start: int) -> list[int]:
        """Users reachable from start, in breadth-first order."""
        self._check(start)
        visited = [False] * self.vertices
        visited[start] = True
        queue = deque([start])
        order = []
        while queue:
            user = queue.popleft()
            order.append(user)
            for friend in self._adjacency[user]:
                if not visited[friend]:
                    visited[friend] = True
                    queue.append(friend)
        return order

    def dfs(self, start: int) -> list[int]:
        """Users reachable from start, in depth-first order."""
        self._check(start)
        visited = [False] * self.vertices
        visited[start] = True
        order = [start]
        stack = [iter(self._adjacency[start])]
        while stack:
            for friend in stack[-1]:
                if not visited[friend]:
                    visited[friend] = True
                    order.append(friend)
                    stack.append(iter(self._adjacency[friend]))
                    break
            else:
                stack.pop()
        return order


def _int_tokens(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _take(tokens: Iterator[int]) -> int:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def main(argv: Sequence[str] | None = None) -> int:
    tokens = _int_tokens(sys.stdin)
    try:
        print("Enter the number of users in the network: ", end="")
        graph = SocialGraph(_take(tokens))
        print("Enter the number of friendships: ", end="")
        connections = _take(tokens)
        print(
            "Enter each friendship as two space-separated user IDs "
            f"(0 to {graph.vertices - 1}):"
        )
        for _ in range(connections):
            graph.add_edge(_take(tokens), _take(tokens))
        print("Enter the starting user ID for traversal: ", end="")
        start = _take(tokens)
        bfs_order = graph.bfs(start)
        dfs_order = graph.dfs(start)
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    print(f"BFS Traversal starting from user {start}: " + "".join(f"{u} " for u in bfs_order))
    print(f"DFS Traversal starting from user {start}: " + "".join(f"{u} " for u in dfs_order))
    return 0


if __name__ == "__main__":
    sys.exit(main())