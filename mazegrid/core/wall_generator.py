# mazegrid/core/wall_generator.py
#!/usr/bin/env python3
from mazegrid.core.types import Matrix, State


class WallGenerator:
    """Batch generator: a size x size matrix made only of walls."""

    def create(self, size: int) -> Matrix:
        return [[State.WALL for _ in range(size)] for _ in range(max(0, size))]
