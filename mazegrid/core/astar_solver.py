# mazegrid/core/astar_solver.py
#!/usr/bin/env python3
"""
A* maze solver.

Heuristic:
- Manhattan distance to the model's END cell (admissible and consistent on a
  4-connected grid with unit steps).

Tie-breaking in the PQ:
- (f, h, -g, seq, cell): lower f, then lower h, then deeper g, then FIFO by seq.
"""

import heapq
import logging
from dataclasses import dataclass, field
from math import inf
from typing import Dict, List, Optional, Set, Tuple

from mazegrid.core.model import Model
from mazegrid.core.types import Indices, SolveResult, State

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]  # (x, y)


@dataclass
class AStarSolver:
    model: Model
    name: str = "A*"

    # Internal state
    open_pq: List[Tuple[int, int, int, int, Cell]] = field(default_factory=list)  # (f, h, -g, seq, cell)
    open_set: Set[Cell] = field(default_factory=set)
    closed_set: Set[Cell] = field(default_factory=set)
    g: Dict[Cell, int] = field(default_factory=dict)
    parent: Dict[Cell, Cell] = field(default_factory=dict)
    popped_count: int = 0
    goal_cell: Optional[Cell] = None
    seq: int = 0  # monotonic counter for PQ stability

    def reset(self) -> None:
        self.open_pq.clear()
        self.open_set.clear()
        self.closed_set.clear()
        self.g.clear()
        self.parent.clear()
        self.popped_count = 0
        self.seq = 0
        end = self.model.end
        self.goal_cell = (end.x, end.y) if end else None

    def solve(self, start_x: int, start_y: int) -> SolveResult:
        self.reset()
        s = (start_x, start_y)
        if self.goal_cell is None:
            logger.warning("%s: the grid has no END cell", self.name)
            return SolveResult(status="no_path", metrics=self._metrics())
        if self.model.get(*s) in (None, State.WALL):
            logger.warning("%s: start %s is not a passable cell", self.name, s)
            return SolveResult(status="no_path", metrics=self._metrics())

        self.g[s] = 0
        h0 = self._h(s)
        heapq.heappush(self.open_pq, (h0, h0, 0, self._bump(), s))
        self.open_set.add(s)

        while self.open_pq:
            _, _, neg_g_u, _, u = heapq.heappop(self.open_pq)
            # Ignore stale pops
            if u in self.closed_set or -neg_g_u != self.g.get(u, inf):
                continue

            self.popped_count += 1
            self.open_set.discard(u)
            self.closed_set.add(u)

            if u == self.goal_cell:
                path = self._reconstruct_path(u)
                logger.info("%s found a path of %d cells after %d expansions",
                            self.name, len(path), self.popped_count)
                return SolveResult(status="done", path=path,
                                   metrics=self._metrics(path_len=len(path)))

            self.model.update_model(u[0], u[1], State.VISITED)

            for v in self._neighbors4(u):
                alt = self.g[u] + 1
                if alt < self.g.get(v, inf):
                    self.g[v] = alt
                    self.parent[v] = u
                    h_v = self._h(v)
                    heapq.heappush(self.open_pq, (alt + h_v, h_v, -alt, self._bump(), v))
                    if v not in self.closed_set and v not in self.open_set:
                        self.open_set.add(v)
                        self.model.update_model(v[0], v[1], State.FRONTIER)

        logger.info("%s: no path from %s after %d expansions", self.name, s, self.popped_count)
        return SolveResult(status="no_path", metrics=self._metrics())

    # -------------------- helpers --------------------

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def _neighbors4(self, c: Cell) -> List[Cell]:
        x, y = c
        out: List[Cell] = []
        for n in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            state = self.model.get(*n)
            if state is not None and state != State.WALL:
                out.append(n)
        return out

    def _h(self, c: Cell) -> int:
        (x, y) = c
        (gx, gy) = self.goal_cell
        return abs(gx - x) + abs(gy - y)

    def _reconstruct_path(self, end: Cell) -> List[Indices]:
        path: List[Indices] = []
        cur: Optional[Cell] = end
        while cur is not None:
            self.model.update_model(cur[0], cur[1], State.PATH)
            path.append(Indices(*cur))
            cur = self.parent.get(cur)
        path.reverse()
        return path

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.closed_set),
            "path_len": path_len,
        }
