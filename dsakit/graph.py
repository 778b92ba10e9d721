"""Undirected graph kept as adjacency lists, with breadth- and depth-first traversals."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator


class Graph:
    """Graph over the vertices ``0 .. vertex_count - 1``."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self.adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u)
        self._check(v)
        self.adjacency[u].append(v)
        self.adjacency[v].append(u)

    def adjacency_lines(self) -> list[str]:
        """One descriptive line per vertex listing its neighbours in insertion order."""
        return [
            f"Adjacency list of vertex {vertex} is as :- {vertex} "
            + "".join(f"-> {neighbour}" for neighbour in neighbours)
            for vertex, neighbours in enumerate(self.adjacency)
        ]

    def bfs(self, source: int) -> list[int]:
        """Vertices reachable from ``source`` in breadth-first order."""
        self._check(source)
        visited = [False] * self.vertex_count
        visited[source] = True
        queue = deque([source])
        order: list[int] = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self.adjacency[vertex]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
        return order

    def dfs_recursive(self, source: int) -> list[int]:
        """Depth-first preorder, descending into the first unvisited neighbour each time."""
        self._check(source)
        visited = [False] * self.vertex_count
        visited[source] = True
        order = [source]
        pending: list[Iterator[int]] = [iter(self.adjacency[source])]
        while pending:
            for neighbour in pending[-1]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    order.append(neighbour)
                    pending.append(iter(self.adjacency[neighbour]))
                    break
            else:
                pending.pop()
        return order

    def dfs_stack(self, source: int) -> list[int]:
        """Stack-driven traversal that marks vertices as visited when pushed."""
        self._check(source)
        visited = [False] * self.vertex_count
        visited[source] = True
        stack = [source]
        order: list[int] = []
        while stack:
            vertex = stack.pop()
            order.append(vertex)
            for neighbour in self.adjacency[vertex]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append(neighbour)
        return order


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Read a graph from standard input and print its traversals from vertex 0."""
    argparse.ArgumentParser(
        description="Build an undirected graph interactively and traverse it."
    ).parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter No. of Vertices : ", end="")
        graph = Graph(int(next(tokens)))
        answer = "y"
        while answer == "y":
            print("Enter the two edges for connection : ", end="")
            u = int(next(tokens))
            v = int(next(tokens))
            graph.add_edge(u, v)
            print("Do you want to enter more edges press(y) : ", end="")
            answer = next(tokens, "n")
    except StopIteration:
        print("\nunexpected end of input", file=sys.stderr)
        return 1
    except (ValueError, IndexError) as error:
        print(f"\n{error}", file=sys.stderr)
        return 1

    print("Graph Connections Are !!!")
    for line in graph.adjacency_lines():
        print(line)
    print("BFS Traversal is : " + "->".join(map(str, graph.bfs(0))))
    print("DFS using recursion : " + " ".join(map(str, graph.dfs_recursive(0))))
    print("DFS using Stack : " + " ".join(map(str, graph.dfs_stack(0))))
    return 0


if __name__ == "__main__":
    sys.exit(main())