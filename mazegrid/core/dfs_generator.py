# mazegrid/core/dfs_generator.py
#!/usr/bin/env python3
"""
Depth-first (recursive backtracking) maze carving.

Passages live on odd coordinates; the even cells between them are walls that
get knocked out when two passages are joined. The recursion is unrolled into
an explicit stack so large mazes do not hit the interpreter recursion limit.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Set, Tuple

from mazegrid.core.model import Model
from mazegrid.core.types import State
from mazegrid.core.wall_generator import WallGenerator

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]  # (x, y)

STEPS: List[Cell] = [(0, -2), (2, 0), (0, 2), (-2, 0)]


@dataclass
class RecursiveDFSGenerator:
    name: str = "DFS"
    rng: random.Random = field(default_factory=random.Random)
    carved: int = 0

    def create(self, size: int, model: Model) -> None:
        model.regenerate(WallGenerator().create(size))
        self.carved = 0
        if size < 3:
            return

        start = (1, 1)
        visited: Set[Cell] = {start}
        stack: List[Cell] = [start]
        self._carve(model, start)

        while stack:
            cx, cy = stack[-1]
            options = self._unvisited_neighbors(size, (cx, cy), visited)
            if not options:
                stack.pop()  # dead end, backtrack
                continue
            nx, ny = self.rng.choice(options)
            self._carve(model, ((cx + nx) // 2, (cy + ny) // 2))
            self._carve(model, (nx, ny))
            visited.add((nx, ny))
            stack.append((nx, ny))

        logger.info("%s carved %d cells on a %dx%d grid", self.name, self.carved, size, size)

    def _unvisited_neighbors(self, size: int, c: Cell, visited: Set[Cell]) -> List[Cell]:
        x, y = c
        out: List[Cell] = []
        for dx, dy in STEPS:
            n = (x + dx, y + dy)
            if 0 < n[0] < size - 1 and 0 < n[1] < size - 1 and n not in visited:
                out.append(n)
        return out

    def _carve(self, model: Model, c: Cell) -> None:
        model.update_model(c[0], c[1], State.UNVISITED_CELL)
        self.carved += 1
