import time
from collections import deque
from typing import List, NamedTuple, Optional

import numpy as np

from grid_builder import OPEN, Coordinate, Grid

# Fixed expansion order, so ties between shortest paths always resolve the same way
MOVES = ((1, 0), (-1, 0), (0, 1), (0, -1))

NO_PARENT = -1


class SearchNode(NamedTuple):
    position: Coordinate
    moves: int
    parent: int  # index into the visited list, NO_PARENT for the entry


class SearchResult(NamedTuple):
    node: Optional[SearchNode]      # None means the exit is unreachable
    visited: List[SearchNode]
    expanded: int
    elapsed_us: int

    @property
    def found(self) -> bool:
        return self.node is not None


def search(grid: Grid) -> SearchResult:
    """Breadth-first search from ``grid.entry`` to ``grid.exit``.

    Nodes are appended to ``visited`` as they are dequeued; each node's
    ``parent`` is the index of its predecessor in that list. A cell is
    marked reached when it is enqueued, so it is enqueued at most once.
    """
    begin = time.perf_counter()
    reached = np.zeros((grid.height, grid.width), dtype=bool)
    visited: List[SearchNode] = []
    expanded = 0

    ex, ey = grid.entry
    reached[ey, ex] = True
    queue = deque([SearchNode(grid.entry, 1, NO_PARENT)])
    goal = None
    while queue:
        node = queue.popleft()
        visited.append(node)
        if node.position == grid.exit:
            goal = node
            break
        x, y = node.position
        for dx, dy in MOVES:
            nxt = (x + dx, y + dy)
            if not grid.in_bounds(nxt) or reached[nxt[1], nxt[0]]:
                continue
            if grid.classification_at(nxt) != OPEN:
                continue
            reached[nxt[1], nxt[0]] = True
            expanded += 1
            queue.append(SearchNode(nxt, node.moves + 1, len(visited) - 1))

    elapsed_us = int((time.perf_counter() - begin) * 1_000_000)
    return SearchResult(goal, visited, expanded, elapsed_us)


def reconstruct_path(visited: List[SearchNode], node: SearchNode) -> List[Coordinate]:
    """Walk parent indices back from ``node``; result runs exit -> entry, entry excluded."""
    path = []
    while node.parent != NO_PARENT:
        path.append(node.position)
        node = visited[node.parent]
    return path


def find_path(grid: Grid) -> Optional[List[Coordinate]]:
    """Cells stepped on from entry to exit (entry excluded), or None if unreachable."""
    result = search(grid)
    if not result.found:
        return None
    path = reconstruct_path(result.visited, result.node)
    path.reverse()
    return path
