# mazegrid/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Dict, Any, Protocol


class State(Enum):
    WALL = "maze-wall"
    UNVISITED_CELL = "maze-unvisited"
    BEGIN = "maze-begin"
    END = "maze-end"
    VISITED = "maze-visited"
    FRONTIER = "maze-frontier"
    PATH = "maze-path"

    @classmethod
    def from_label(cls, label: str) -> Optional["State"]:
        """Resolve a tile key ("wall", "maze-wall", "WALL") to a member."""
        if not label:
            return None
        key = label.strip().lower()
        if not key.startswith("maze-"):
            key = "maze-" + key
        for s in cls:
            if s.value == key or s.name.lower() == label.strip().lower():
                return s
        return None


# search/generation markers that a fresh solve wipes
TRANSIENT_STATES = (State.VISITED, State.FRONTIER, State.PATH)

Matrix = List[List[State]]  # [x][y]


@dataclass(frozen=True)
class Indices:
    x: int
    y: int


class ModelListener(Protocol):
    def on_reset(self, snapshot: Matrix) -> None: ...

    def on_update(self, x: int, y: int, state: State) -> None: ...


@dataclass
class SolveResult:
    status: str                   # "done" | "no_path"
    path: Optional[List[Indices]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.status == "done"
