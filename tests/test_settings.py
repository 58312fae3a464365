# tests/test_settings.py
from mazegrid.app.settings import DEFAULT_SIZE, DEFAULT_STEPS_PER_SEC, Settings, resolve_settings


def test_defaults():
    assert resolve_settings(environ={}, argv=[]) == Settings()


def test_environment_overrides_defaults():
    s = resolve_settings(environ={"MAZE_SIZE": "20", "MAZE_SEED": "7",
                                  "MAZE_GENERATOR": "Kruskal", "MAZE_LOG_LEVEL": "debug"},
                         argv=[])
    assert s.size == 20
    assert s.seed == 7
    assert s.generator == "kruskal"
    assert s.log_level == "DEBUG"


def test_argv_overrides_environment():
    s = resolve_settings(environ={"MAZE_SIZE": "20", "MAZE_SOLVER": "bfs"},
                         argv=["--size=9", "--solver=astar", "--speed=50", "--unknown=1", "positional"])
    assert s.size == 9
    assert s.solver == "astar"
    assert s.steps_per_sec == 50


def test_bad_numbers_fall_back_to_defaults(caplog):
    s = resolve_settings(environ={"MAZE_SIZE": "big"}, argv=["--speed=0", "--seed=x"])
    assert s.size == DEFAULT_SIZE
    assert s.steps_per_sec == DEFAULT_STEPS_PER_SEC
    assert s.seed is None
    assert "not an integer" in caplog.text
