# mazegrid/core/kruskal_generator.py
#!/usr/bin/env python3
"""
Randomized Kruskal maze carving.

Each carve-able (odd, odd) cell starts as its own set. Wall edges between
neighbouring carve-able cells are shuffled and taken in order; an edge is
opened only when it joins two different sets, so no cycle can form and the
final passages are a spanning tree of the carve lattice.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from mazegrid.core.model import Model
from mazegrid.core.types import State
from mazegrid.core.wall_generator import WallGenerator

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]  # (x, y)
Edge = Tuple[Cell, Cell, Cell]  # (a, wall, b)


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self):
        self.parent: Dict[Cell, Cell] = {}
        self.rank: Dict[Cell, int] = {}

    def add(self, c: Cell) -> None:
        if c not in self.parent:
            self.parent[c] = c
            self.rank[c] = 0

    def find(self, c: Cell) -> Cell:
        root = c
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[c] != root:
            self.parent[c], c = root, self.parent[c]
        return root

    def union(self, a: Cell, b: Cell) -> bool:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1
        return True


@dataclass
class RandomizedKruskal:
    name: str = "Kruskal"
    rng: random.Random = field(default_factory=random.Random)
    joined: int = 0
    skipped: int = 0

    def create(self, size: int, model: Model) -> None:
        model.regenerate(WallGenerator().create(size))
        self.joined = 0
        self.skipped = 0

        cells = [(x, y) for x in range(1, size - 1, 2) for y in range(1, size - 1, 2)]
        sets = DisjointSet()
        for c in cells:
            sets.add(c)

        edges = self._edges(size)
        self.rng.shuffle(edges)

        for a, wall, b in edges:
            if not sets.union(a, b):
                self.skipped += 1
                continue
            for c in (a, wall, b):
                if model.get(*c) == State.WALL:
                    model.update_model(c[0], c[1], State.UNVISITED_CELL)
            self.joined += 1

        # lone cells (a 3x3 grid has no edges at all)
        for c in cells:
            if model.get(*c) == State.WALL:
                model.update_model(c[0], c[1], State.UNVISITED_CELL)

        logger.info("%s joined %d edges, skipped %d on a %dx%d grid",
                    self.name, self.joined, self.skipped, size, size)

    def _edges(self, size: int) -> List[Edge]:
        out: List[Edge] = []
        for x in range(1, size - 1, 2):
            for y in range(1, size - 1, 2):
                if x + 2 < size - 1:
                    out.append(((x, y), (x + 1, y), (x + 2, y)))
                if y + 2 < size - 1:
                    out.append(((x, y), (x, y + 1), (x, y + 2)))
        return out
