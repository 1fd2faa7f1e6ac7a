from pathlib import Path

import pytest

from grid_pathfinder.errors import GridConfigurationError
from grid_pathfinder.scenarios.base_scenario import BaseScenario
from grid_pathfinder.scenarios.map_scenario import MapScenario
from grid_pathfinder.scenarios.wall_scenarios import SCENARIOS, WallScenario, get_scenario
from grid_pathfinder.search.astar import find_path


MAPS_DIR = Path(__file__).resolve().parents[2] / "maps"


def _disabled(grid):
    return {c.coord for c in grid.iter_cells() if c.disabled}


def test_base_scenario_is_abstract():
    with pytest.raises(TypeError):
        BaseScenario()


def test_wall_scenario_layout():
    grid, start, target = WallScenario().build()
    assert grid.size == (7, 5)
    assert (start, target) == ((1, 2), (5, 2))
    assert _disabled(grid) == {(3, 1), (3, 2), (3, 3)}


def test_builds_are_independent():
    first, _, _ = get_scenario("wall").build()
    second, _, _ = get_scenario("wall").build()
    assert first is not second
    assert first.cells[0][0] is not second.cells[0][0]


@pytest.mark.parametrize("name", sorted(SCENARIOS))
def test_registry_entries_have_names(name):
    assert get_scenario(name.upper()).get_name()


def test_unknown_scenario():
    with pytest.raises(GridConfigurationError):
        get_scenario("nope")


def test_wall_map_matches_builtin():
    scenario = MapScenario(MAPS_DIR / "wall.yaml")
    grid, start, target = scenario.build()
    builtin, b_start, b_target = WallScenario().build()
    assert scenario.get_name() == "wall"
    assert grid.size == builtin.size
    assert (start, target) == (b_start, b_target)
    assert _disabled(grid) == _disabled(builtin)


def test_maze_map_has_a_route():
    grid, start, target = MapScenario(MAPS_DIR / "maze.yaml").build()
    result = find_path(grid, start, target)
    assert result.found
    assert not any(grid.cell_at(*c).disabled for c in result.path)


def test_custom_blocked_characters_and_default_name(tmp_path):
    path = tmp_path / "tiny.yaml"
    path.write_text('rows: [".X", ".."]\nstart: [0, 0]\ntarget: [1, 1]\nblocked: X\n')
    scenario = MapScenario(path)
    grid, _, _ = scenario.build()
    assert scenario.get_name() == "tiny"
    assert _disabled(grid) == {(1, 0)}


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "start: [0, 0]\ntarget: [1, 0]\n",
        'rows: [".."]\ntarget: [1, 0]\n',
        'rows: [".."]\nstart: [0]\ntarget: [1, 0]\n',
        'rows: [".."]\nstart: [a, 0]\ntarget: [1, 0]\n',
        "rows: [\n",
    ],
)
def test_malformed_map_files(tmp_path, text):
    path = tmp_path / "bad.yaml"
    path.write_text(text)
    with pytest.raises(GridConfigurationError):
        MapScenario(path)


def test_missing_map_file(tmp_path):
    with pytest.raises(GridConfigurationError):
        MapScenario(tmp_path / "absent.yaml")


def test_ragged_rows_fail_on_build(tmp_path):
    path = tmp_path / "ragged.yaml"
    path.write_text('rows: ["...", ".."]\nstart: [0, 0]\ntarget: [1, 1]\n')
    with pytest.raises(GridConfigurationError):
        MapScenario(path).build()
