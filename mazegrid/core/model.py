# mazegrid/core/model.py
#!/usr/bin/env python3
"""
Grid model shared by generators, solvers and the view.

The model owns the matrix. Everything else writes through `regenerate` or
`update_model`, and every write is fanned out synchronously to listeners in
registration order.
"""

import copy
import logging
from typing import List, Optional

from mazegrid.core.types import Indices, Matrix, ModelListener, State, TRANSIENT_STATES

logger = logging.getLogger(__name__)


class Model:
    def __init__(self):
        self.matrix: Matrix = []
        self.begin: Optional[Indices] = None
        self.end: Optional[Indices] = None
        self.listeners: List[ModelListener] = []

    # -------------------- read access --------------------

    @property
    def size(self) -> int:
        return len(self.matrix)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, x: int, y: int) -> Optional[State]:
        if not self.in_bounds(x, y):
            return None
        return self.matrix[x][y]

    def snapshot(self) -> Matrix:
        return copy.deepcopy(self.matrix)

    # -------------------- mutation --------------------

    def regenerate(self, matrix: Matrix) -> None:
        """Replace the whole matrix and send every listener its own copy."""
        self.matrix = [list(column) for column in matrix]
        # begin/end are not searched for; stale ones are forgotten
        if self.begin and self.get(self.begin.x, self.begin.y) != State.BEGIN:
            self.begin = None
        if self.end and self.get(self.end.x, self.end.y) != State.END:
            self.end = None
        logger.debug("regenerated %dx%d grid", self.size, self.size)
        for listener in self.listeners:
            listener.on_reset(self.snapshot())

    def update_model(self, x: int, y: int, state: State) -> None:
        if not self.matrix or not self.in_bounds(x, y):
            return
        if self.matrix[x][y] in (State.BEGIN, State.END):
            return
        self.matrix[x][y] = state
        if state == State.END:
            if self.end:
                self._demote(self.end)
            self.end = Indices(x, y)
        if state == State.BEGIN:
            if self.begin:
                self._demote(self.begin)
            self.begin = Indices(x, y)
        self._notify(x, y, state)

    def clear_marks(self) -> None:
        """Turn every visited/frontier/path cell back into an unvisited one."""
        for x in range(self.size):
            for y in range(self.size):
                if self.matrix[x][y] in TRANSIENT_STATES:
                    self.update_model(x, y, State.UNVISITED_CELL)

    def _demote(self, cell: Indices) -> None:
        self.matrix[cell.x][cell.y] = State.UNVISITED_CELL
        self._notify(cell.x, cell.y, State.UNVISITED_CELL)

    def _notify(self, x: int, y: int, state: State) -> None:
        for listener in self.listeners:
            listener.on_update(x, y, state)

    # -------------------- listeners --------------------

    def add_listener(self, listener: ModelListener) -> None:
        self.listeners.append(listener)

    def remove_listener(self, listener: ModelListener) -> None:
        if listener in self.listeners:
            self.listeners.remove(listener)
