# mazegrid/core/bfs_solver.py
#!/usr/bin/env python3
"""
Breadth-first maze solver.

Explores the non-wall cells level by level from the start and stops when the
END cell is dequeued. On an unweighted grid the first time END comes off the
queue it has been reached by a minimum-edge path.

Every discovery is written back to the model (FRONTIER when queued, VISITED
when expanded, PATH for the final route) so listeners can animate the run.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Set, Tuple

from mazegrid.core.model import Model
from mazegrid.core.types import Indices, SolveResult, State

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]  # (x, y)


@dataclass
class BFSSolver:
    model: Model
    name: str = "BFS"

    # Internal state
    queue: Deque[Cell] = field(default_factory=deque)
    seen: Set[Cell] = field(default_factory=set)
    closed_set: Set[Cell] = field(default_factory=set)
    parent: Dict[Cell, Cell] = field(default_factory=dict)
    popped_count: int = 0

    def reset(self) -> None:
        self.queue.clear()
        self.seen.clear()
        self.closed_set.clear()
        self.parent.clear()
        self.popped_count = 0

    def solve(self, start_x: int, start_y: int) -> SolveResult:
        self.reset()
        s = (start_x, start_y)
        if self.model.get(*s) in (None, State.WALL):
            logger.warning("%s: start %s is not a passable cell", self.name, s)
            return SolveResult(status="no_path", metrics=self._metrics())

        self.queue.append(s)
        self.seen.add(s)

        while self.queue:
            u = self.queue.popleft()
            self.popped_count += 1
            self.closed_set.add(u)

            if self.model.get(*u) == State.END:
                path = self._reconstruct_path(u)
                logger.info("%s found a path of %d cells after %d expansions",
                            self.name, len(path), self.popped_count)
                return SolveResult(status="done", path=path,
                                   metrics=self._metrics(path_len=len(path)))

            self.model.update_model(u[0], u[1], State.VISITED)

            for v in self._neighbors4(u):
                if v in self.seen:
                    continue
                self.seen.add(v)
                self.parent[v] = u
                self.queue.append(v)
                self.model.update_model(v[0], v[1], State.FRONTIER)

        logger.info("%s: no path from %s after %d expansions", self.name, s, self.popped_count)
        return SolveResult(status="no_path", metrics=self._metrics())

    # -------------------- helpers --------------------

    def _neighbors4(self, c: Cell) -> List[Cell]:
        x, y = c
        out: List[Cell] = []
        for n in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            state = self.model.get(*n)
            if state is not None and state != State.WALL:
                out.append(n)
        return out

    def _reconstruct_path(self, end: Cell) -> List[Indices]:
        """Walk predecessors from END back to the start, marking each cell."""
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
            "open_size": len(self.queue),
            "closed_count": len(self.closed_set),
            "path_len": path_len,
        }
