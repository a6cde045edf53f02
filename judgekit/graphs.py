"""Graph puzzles: shortest paths, spanning forests, chains and connected regions."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Hashable, Iterable, Mapping, Sequence

NO_ROAD = 1 << 60

Edge = tuple[int, int, int]


class DisjointSet:
    """Union-find over hashable elements, with path compression."""

    def __init__(self, elements: Iterable[Hashable] = ()) -> None:
        self._parent: dict[Hashable, Hashable] = {e: e for e in elements}

    def find(self, x: Hashable) -> Hashable:
        """Return the representative of the set holding ``x``."""
        parent = self._parent
        parent.setdefault(x, x)
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: Hashable, y: Hashable) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if they were already one."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False
        self._parent[root_x] = root_y
        return True


def _check_node(node: int, first: int, last: int) -> None:
    if not first <= node <= last:
        raise ValueError(f"node {node} is outside {first}..{last}")


def _adjacency(
    nodes: range, edges: Iterable[Edge], directed: bool
) -> dict[int, list[tuple[int, int]]]:
    graph: dict[int, list[tuple[int, int]]] = {node: [] for node in nodes}
    for u, v, w in edges:
        if u not in graph or v not in graph:
            raise ValueError(f"edge ({u}, {v}) leaves the graph")
        graph[u].append((v, w))
        if not directed:
            graph[v].append((u, w))
    return graph


def kth_shortest_path(
    n: int, edges: Iterable[Edge], source: int, target: int, k: int
) -> int | None:
    """Length of the ``k``-th shortest walk from ``source`` to ``target``.

    Nodes are numbered ``1..n`` and edges ``(u, v, w)`` are directed.
    Returns None when fewer than ``k`` walks exist.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    _check_node(source, 1, n)
    _check_node(target, 1, n)
    graph = _adjacency(range(1, n + 1), edges, directed=True)
    popped: Counter[int] = Counter()
    heap = [(0, source)]
    while heap:
        length, node = heapq.heappop(heap)
        if popped[node] >= k:
            continue
        popped[node] += 1
        if node == target and popped[node] == k:
            return length
        for nxt, weight in graph[node]:
            heapq.heappush(heap, (length + weight, nxt))
    return None


def shortest_path(
    n: int, edges: Iterable[Edge], source: int, target: int
) -> int | None:
    """Length of the shortest path between two of the nodes ``0..n-1``.

    Edges ``(u, v, w)`` are undirected. Returns None when ``target`` is unreachable.
    """
    _check_node(source, 0, n - 1)
    _check_node(target, 0, n - 1)
    graph = _adjacency(range(n), edges, directed=False)
    dist = {source: 0}
    heap = [(0, source)]
    while heap:
        length, node = heapq.heappop(heap)
        if length > dist[node]:
            continue
        for nxt, weight in graph[node]:
            candidate = length + weight
            if candidate < dist.get(nxt, candidate + 1):
                dist[nxt] = candidate
                heapq.heappush(heap, (candidate, nxt))
    return dist.get(target)


def max_saving(n: int, edges: Sequence[Edge]) -> int:
    """Cheapest total weight of edges to remove so that no cycle is left.

    Nodes are numbered ``1..n``; what stays is a maximum spanning forest.
    """
    for u, v, _ in edges:
        _check_node(u, 1, n)
        _check_node(v, 1, n)
    forest = DisjointSet(range(1, n + 1))
    total = sum(w for _, _, w in edges)
    kept = sum(
        w
        for u, v, w in sorted(edges, key=lambda edge: edge[2], reverse=True)
        if forest.union(u, v)
    )
    return total - kept


def best_starter(links: Mapping[int, int] | Iterable[tuple[int, int]]) -> int:
    """Pick the start whose chain of forwarded mails reaches the most people.

    Every person forwards to exactly one other; ties go to the smallest start.
    """
    successor = dict(links)
    if not successor:
        raise ValueError("there are no links")
    for sender, receiver in successor.items():
        if receiver not in successor:
            raise ValueError(f"{sender} forwards to unknown {receiver}")
    reached: set[int] = set()
    best = None
    best_size = 0
    for start in sorted(successor):
        if start in reached:
            continue
        seen = {start}
        node = successor[start]
        while node not in seen:
            seen.add(node)
            reached.add(node)
            node = successor[node]
        if len(seen) > best_size:
            best, best_size = start, len(seen)
    return best


def destruction_sum(dist: Sequence[Sequence[int]], order: Sequence[int]) -> int:
    """Sum all-pairs shortest distances before each destruction in ``order``.

    ``dist`` is a square matrix with ``NO_ROAD`` where there is no direct road.
    Cities are rebuilt in reverse order and unreachable pairs are left out.
    """
    size = len(dist)
    if any(len(row) != size for row in dist):
        raise ValueError("the distance matrix must be square")
    d = [list(row) for row in dist]
    alive: set[int] = set()
    total = 0
    for city in reversed(order):
        _check_node(city, 0, size - 1)
        alive.add(city)
        through = d[city]
        for row in d:
            to_city = row[city]
            if to_city >= NO_ROAD:
                continue
            for j, onward in enumerate(through):
                if onward < NO_ROAD and to_city + onward < row[j]:
                    row[j] = to_city + onward
        total += sum(
            d[i][j] for i in alive for j in alive if d[i][j] < NO_ROAD
        )
    return total


def count_oil_deposits(grid: Sequence[str]) -> int:
    """Count the groups of ``@`` cells joined horizontally, vertically or diagonally."""
    pending = {
        (i, j)
        for i, row in enumerate(grid)
        for j, cell in enumerate(row)
        if cell == "@"
    }
    deposits = 0
    while pending:
        deposits += 1
        stack = [pending.pop()]
        while stack:
            i, j = stack.pop()
            for di in (-1, 0, 1):
                for dj in (-1, 0, 1):
                    cell = (i + di, j + dj)
                    if cell in pending:
                        pending.remove(cell)
                        stack.append(cell)
    return deposits