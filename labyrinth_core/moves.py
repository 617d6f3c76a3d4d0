from __future__ import annotations

from collections import deque
from typing import Dict, FrozenSet, List, Optional

from .board import Board, Coord, in_bounds
from .tiles import DIRECTIONS, DX, DY, connections, opposite


def direction_between(x1: int, y1: int, x2: int, y2: int) -> Optional[int]:
    """Direction index from (x1, y1) to a 4-adjacent (x2, y2), else None."""
    for d in DIRECTIONS:
        if x1 + DX[d] == x2 and y1 + DY[d] == y2:
            return d
    return None


def can_move(board: Board, x1: int, y1: int, x2: int, y2: int) -> bool:
    """True when the cells are adjacent and both tiles open onto the shared edge."""
    if not (in_bounds(x1, y1) and in_bounds(x2, y2)):
        return False
    d = direction_between(x1, y1, x2, y2)
    if d is None:
        return False
    if not connections(board.tile_at(x1, y1))[d]:
        return False
    return connections(board.tile_at(x2, y2))[opposite(d)]


def neighbors(board: Board, coord: Coord) -> List[Coord]:
    """Cells connected to coord by a passable edge."""
    x, y = coord
    out: List[Coord] = []
    for d in DIRECTIONS:
        nx, ny = x + DX[d], y + DY[d]
        if can_move(board, x, y, nx, ny):
            out.append((nx, ny))
    return out


def reachable_from(board: Board, x: int, y: int) -> FrozenSet[Coord]:
    """
    Connected component containing (x, y), start cell included.
    Breadth First Search over passable edges; bounded by the 49 grid cells.
    """
    board.tile_at(x, y)  # bounds check
    start = (x, y)
    visited = {start}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        for nxt in neighbors(board, cur):
            if nxt not in visited:
                visited.add(nxt)
                queue.append(nxt)
    return frozenset(visited)


def find_path(board: Board, start: Coord, dest: Coord) -> Optional[List[Coord]]:
    """Finds one shortest path of connected cells from start to dest."""
    board.tile_at(*start)
    board.tile_at(*dest)
    came_from: Dict[Coord, Optional[Coord]] = {start: None}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        if cur == dest:
            path: List[Coord] = []
            node: Optional[Coord] = cur
            while node is not None:
                path.append(node)
                node = came_from[node]
            path.reverse()
            return path
        for nxt in neighbors(board, cur):
            if nxt not in came_from:
                came_from[nxt] = cur
                queue.append(nxt)
    return None
