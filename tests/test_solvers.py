# tests/test_solvers.py
import random

import pytest

from mazegrid.core.astar_solver import AStarSolver
from mazegrid.core.bfs_solver import BFSSolver
from mazegrid.core.dfs_generator import RecursiveDFSGenerator
from mazegrid.core.kruskal_generator import RandomizedKruskal
from mazegrid.core.model import Model
from mazegrid.core.types import Indices, State

from conftest import RecordingListener, framed_grid

SOLVERS = [BFSSolver, AStarSolver]


def open_room(size, begin, end):
    model = Model()
    model.regenerate(framed_grid(size))
    model.update_model(*begin, State.BEGIN)
    model.update_model(*end, State.END)
    return model


def maze(generator_cls, size, seed):
    model = Model()
    generator_cls(rng=random.Random(seed)).create(size, model)
    model.update_model(1, 1, State.BEGIN)
    model.update_model(size - 2, size - 2, State.END)
    return model


def assert_valid_path(model, path):
    assert path[0] == model.begin
    assert path[-1] == model.end
    for a, b in zip(path, path[1:]):
        assert abs(a.x - b.x) + abs(a.y - b.y) == 1
    for c in path:
        assert model.get(c.x, c.y) != State.WALL


@pytest.mark.parametrize("solver_cls", SOLVERS)
@pytest.mark.parametrize("begin,end", [((1, 1), (7, 7)), ((2, 6), (6, 1)), ((4, 4), (5, 4))])
def test_open_room_path_length_is_manhattan(solver_cls, begin, end):
    model = open_room(9, begin, end)
    result = solver_cls(model).solve(*begin)

    assert result.found
    assert len(result.path) - 1 == abs(begin[0] - end[0]) + abs(begin[1] - end[1])
    assert result.metrics["path_len"] == len(result.path)
    assert_valid_path(model, result.path)


@pytest.mark.parametrize("generator_cls", [RecursiveDFSGenerator, RandomizedKruskal])
@pytest.mark.parametrize("seed", range(6))
def test_astar_and_bfs_agree_on_path_length(generator_cls, seed):
    bfs_model = maze(generator_cls, 21, seed)
    astar_model = maze(generator_cls, 21, seed)

    bfs = BFSSolver(bfs_model).solve(1, 1)
    astar = AStarSolver(astar_model).solve(1, 1)

    assert bfs.found and astar.found
    assert len(bfs.path) == len(astar.path)
    assert astar.metrics["popped"] <= bfs.metrics["popped"]
    assert_valid_path(bfs_model, bfs.path)
    assert_valid_path(astar_model, astar.path)


@pytest.mark.parametrize("solver_cls", SOLVERS)
def test_path_cells_are_marked(solver_cls):
    model = open_room(7, (1, 1), (5, 1))
    result = solver_cls(model).solve(1, 1)

    for c in result.path[1:-1]:
        assert model.get(c.x, c.y) == State.PATH
    assert model.get(1, 1) == State.BEGIN
    assert model.get(5, 1) == State.END


@pytest.mark.parametrize("solver_cls", SOLVERS)
def test_unreachable_end_marks_no_path(solver_cls):
    model = open_room(9, (1, 1), (7, 7))
    for y in range(9):
        model.update_model(4, y, State.WALL)
    rec = RecordingListener()
    model.add_listener(rec)

    result = solver_cls(model).solve(1, 1)

    assert result.status == "no_path"
    assert result.path is None
    assert all(state != State.PATH for _, _, state in rec.updates)
    assert all(x < 4 for x, _, _ in rec.updates)
    assert model.get(7, 7) == State.END


@pytest.mark.parametrize("solver_cls", SOLVERS)
def test_start_on_wall_finds_nothing(solver_cls):
    model = open_room(7, (1, 1), (5, 5))
    rec = RecordingListener()
    model.add_listener(rec)

    result = solver_cls(model).solve(0, 0)

    assert result.status == "no_path"
    assert rec.updates == []


def test_astar_without_end_finds_nothing():
    model = Model()
    model.regenerate(framed_grid(6))
    model.update_model(1, 1, State.BEGIN)
    assert AStarSolver(model).solve(1, 1).status == "no_path"


def test_bfs_without_end_explores_everything():
    model = Model()
    model.regenerate(framed_grid(6))
    model.update_model(1, 1, State.BEGIN)

    result = BFSSolver(model).solve(1, 1)

    assert result.status == "no_path"
    assert result.metrics["closed_count"] == 16


@pytest.mark.parametrize("solver_cls", SOLVERS)
def test_solver_marks_search_progress(solver_cls):
    model = open_room(9, (1, 1), (7, 7))
    rec = RecordingListener()
    model.add_listener(rec)

    solver_cls(model).solve(1, 1)

    states = [state for _, _, state in rec.updates]
    assert State.VISITED in states
    assert State.FRONTIER in states
    assert states[-1] == State.PATH
    touched = {(x, y) for x, y, _ in rec.updates}
    assert (1, 1) not in touched
    assert (7, 7) not in touched


@pytest.mark.parametrize("solver_cls", SOLVERS)
def test_solver_can_run_again_over_its_own_marks(solver_cls):
    model = open_room(9, (1, 1), (7, 3))
    first = solver_cls(model).solve(1, 1)
    second = solver_cls(model).solve(1, 1)
    assert len(first.path) == len(second.path) == 9


def test_bfs_path_runs_begin_to_end():
    model = open_room(5, (1, 1), (3, 1))
    result = BFSSolver(model).solve(1, 1)
    assert result.path == [Indices(1, 1), Indices(2, 1), Indices(3, 1)]
