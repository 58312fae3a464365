# tests/conftest.py
from collections import deque
from typing import List, Set, Tuple

import pytest

from mazegrid.core.model import Model
from mazegrid.core.types import Matrix, State


class RecordingListener:
    def __init__(self):
        self.resets: List[Matrix] = []
        self.updates: List[Tuple[int, int, State]] = []

    def on_reset(self, snapshot: Matrix) -> None:
        self.resets.append(snapshot)

    def on_update(self, x: int, y: int, state: State) -> None:
        self.updates.append((x, y, state))


def framed_grid(size: int) -> Matrix:
    """Walls on the outer frame only."""
    return [[State.WALL if x in (0, size - 1) or y in (0, size - 1) else State.UNVISITED_CELL
             for y in range(size)] for x in range(size)]


def passage_cells(model: Model) -> Set[Tuple[int, int]]:
    return {(x, y) for x in range(model.size) for y in range(model.size)
            if model.get(x, y) != State.WALL}


def passage_edges(cells: Set[Tuple[int, int]]) -> int:
    return sum(1 for (x, y) in cells for n in ((x + 1, y), (x, y + 1)) if n in cells)


def is_connected(cells: Set[Tuple[int, int]]) -> bool:
    if not cells:
        return True
    start = next(iter(cells))
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for n in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if n in cells and n not in seen:
                seen.add(n)
                queue.append(n)
    return len(seen) == len(cells)


@pytest.fixture
def model():
    return Model()


@pytest.fixture
def listener(model):
    rec = RecordingListener()
    model.add_listener(rec)
    return rec
