# mazegrid/app/controller.py
#!/usr/bin/env python3
"""
Maze controller: turns user intent (tile selection, painting, generate and
solve requests) into calls on the model. It knows nothing about the input
device; the viewer feeds it mouse and keyboard events.
"""

import logging
import random
from typing import Optional, Union

from mazegrid.core.astar_solver import AStarSolver
from mazegrid.core.bfs_solver import BFSSolver
from mazegrid.core.dfs_generator import RecursiveDFSGenerator
from mazegrid.core.kruskal_generator import RandomizedKruskal
from mazegrid.core.model import Model
from mazegrid.core.types import SolveResult, State

logger = logging.getLogger(__name__)

Generator = Union[RecursiveDFSGenerator, RandomizedKruskal]
Solver = Union[BFSSolver, AStarSolver]

GENERATOR_LABELS = ("dfs", "kruskal")
SOLVER_LABELS = ("bfs", "astar")


def make_generator(label: str, rng: random.Random) -> Optional[Generator]:
    if label == "dfs":
        return RecursiveDFSGenerator(rng=rng)
    elif label == "kruskal":
        return RandomizedKruskal(rng=rng)
    return None


def make_solver(label: str, model: Model) -> Optional[Solver]:
    if label == "bfs":
        return BFSSolver(model)
    elif label == "astar":
        return AStarSolver(model)
    return None


class MazeController:
    def __init__(self, size: int, model: Model, *, generator: str = "dfs",
                 solver: str = "bfs", seed: Optional[int] = None):
        self.size = 2 * size + 1
        self.model = model
        self.rng = random.Random(seed)
        self.dragging = False
        self.selected_state = State.UNVISITED_CELL
        self.generator_label = generator if generator in GENERATOR_LABELS else "dfs"
        self.solver_label = solver if solver in SOLVER_LABELS else "bfs"
        self.last_result: Optional[SolveResult] = None

    # ---------- algorithms ----------

    def generate(self, label: Optional[str] = None) -> None:
        label = label or self.generator_label
        generator = make_generator(label, self.rng)
        if generator is None:
            logger.warning("Unknown generator %r", label)
            return
        self.generator_label = label
        self.last_result = None
        generator.create(self.size, self.model)
        self.init_state(1, 1, State.BEGIN)
        self.init_state(self.size - 2, self.size - 2, State.END)

    def solve(self, label: Optional[str] = None) -> Optional[SolveResult]:
        label = label or self.solver_label
        solver = make_solver(label, self.model)
        if solver is None:
            logger.warning("Unknown solver %r", label)
            return None
        self.solver_label = label
        if not self.model.begin:
            logger.info("Nothing to solve: no begin cell placed")
            return None
        self.model.clear_marks()
        begin = self.model.begin
        self.last_result = solver.solve(begin.x, begin.y)
        return self.last_result

    def clear(self) -> None:
        self.model.clear_marks()
        self.last_result = None

    # ---------- painting ----------

    def select_state(self, label: str) -> None:
        state = State.from_label(label)
        if state is None:
            logger.warning("Unknown tile %r", label)
            return
        self.selected_state = state

    def press(self, x: int, y: int) -> None:
        self.dragging = True
        self.toggle_state(x, y, force=True)

    def release(self) -> None:
        self.dragging = False

    def drag_over(self, x: int, y: int) -> None:
        self.toggle_state(x, y)

    def toggle_state(self, x: int, y: int, force: bool = False) -> None:
        if not self.dragging and not force:
            return
        state = self.model.get(x, y)
        if state is None or state in (State.BEGIN, State.END):
            return
        if state != self.selected_state:
            self.change_state(x, y, self.selected_state)

    def init_state(self, x: int, y: int, state: State) -> None:
        if self.model.in_bounds(x, y):
            self.model.update_model(x, y, state)

    def change_state(self, x: int, y: int, state: State) -> None:
        if self.model.in_bounds(x, y) and state != self.model.get(x, y):
            self.model.update_model(x, y, state)
