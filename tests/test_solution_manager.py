"""
Test script for the solve flow around the core solver

Covers:
1. SolutionManager state machine (stabilise -> solve -> cache)
2. Settings persistence
3. Debug image rendering
4. Command line entry point

Usage:
    pytest tests/test_solution_manager.py
"""

import json
import sys
from pathlib import Path

from PIL import Image

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import main as cli
from breach_solver import settings as settings_module
from breach_solver.debug import render_solution_image, save_debug_image
from breach_solver.settings import DEFAULT_SETTINGS, load_settings, save_settings
from breach_solver.solution_manager import SolutionManager, SolutionState
from breach_solver.solver import Grid, Position, Solution


ROWS = [
    ["1C", "55", "BD"],
    ["E9", "1C", "55"],
    ["BD", "E9", "1C"],
]
TARGET_LINES = ["1C E9", "55 1C"]

PUZZLE_TEXT = """\
1C 55 BD
E9 1C 55
BD E9 1C

1C E9
55 1C
"""


def grid_cells(rows):
    return {(r, c): token for r, row in enumerate(rows) for c, token in enumerate(row)}


def test_solution_manager_flow():
    """Readings stabilise, the puzzle is solved once, then readings are ignored."""
    print("\n" + "="*60)
    print("TEST: SolutionManager")
    print("="*60)

    manager = SolutionManager(buffer_size=3, confidence_threshold=3)
    assert manager.state == SolutionState.WAITING_STABLE
    print(f"  Initial state: {manager.get_state_string()}")

    noisy = [row[:] for row in ROWS]
    noisy[0][0] = "IC"   # corrected to 1C before tracking

    for i in range(2):
        assert not manager.update_grid(3, grid_cells(noisy if i == 0 else ROWS))
        assert not manager.update_targets(TARGET_LINES)
    assert manager.state == SolutionState.WAITING_STABLE

    manager.update_grid(3, grid_cells(ROWS))
    solved = manager.update_targets(["1c e9", "55 IC"])

    print(f"  State: {manager.get_state_string()}")
    assert solved
    assert manager.state == SolutionState.SOLVED
    assert manager.grid.cells[0][0] == "1C"
    assert manager.grid.targets == (("1C", "E9"), ("55", "1C"))
    assert manager.result is not None and manager.result.has_solutions
    assert manager.best_solution is not None

    for solution in manager.solutions:
        assert solution.length == 3

    # Readings after solving do not change anything
    result = manager.result
    assert manager.update_grid(3, grid_cells(ROWS))
    assert manager.result is result

    manager.reset()
    assert manager.state == SolutionState.WAITING_STABLE
    assert manager.result is None
    assert manager.solutions == []
    print("  [PASS] SolutionManager")


def test_solution_manager_infeasible():
    """Unreachable buffer size ends in FAILED with an error message."""
    manager = SolutionManager(buffer_size=8, confidence_threshold=1)
    manager.update_grid(3, grid_cells(ROWS))
    assert not manager.update_targets(TARGET_LINES)

    assert manager.state == SolutionState.FAILED
    assert manager.error
    assert manager.best_solution is None
    assert manager.get_state_string() == "Failed"


def test_solution_manager_invalid_buffer():
    """Non-positive buffer ends in FAILED once, instead of retrying every frame."""
    manager = SolutionManager(buffer_size=0, confidence_threshold=1)
    manager.update_grid(2, grid_cells([["1C", "BD"], ["E9", "55"]]))
    assert not manager.update_targets(["1C BD"])

    assert manager.state == SolutionState.FAILED
    assert "Buffer size" in manager.error
    assert manager.result is None

    assert not manager.update_targets(["1C BD"])
    assert manager.state == SolutionState.FAILED


def test_solution_manager_blank_target_line():
    """Blank target readings are dropped before the puzzle is built."""
    manager = SolutionManager(buffer_size=2, confidence_threshold=1)
    manager.update_grid(2, grid_cells([["1C", "BD"], ["E9", "55"]]))
    assert manager.update_targets(["1C E9", "   "])

    assert manager.state == SolutionState.SOLVED
    assert manager.grid.targets == (("1C", "E9"),)
    assert manager.best_solution.path == (Position(0, 0), Position(0, 1))


def test_solution_manager_strategy():
    """Strategy can be switched before solving."""
    manager = SolutionManager(buffer_size=3, confidence_threshold=1)
    assert manager.strategy_name == "sequential"
    manager.set_strategy("parallel")
    assert manager.strategy_name == "parallel"

    manager.update_grid(3, grid_cells(ROWS))
    assert manager.update_targets(TARGET_LINES)
    assert manager.result.metrics.strategy_name == "parallel"


def test_settings_round_trip(tmp_path, monkeypatch):
    """Missing or broken files give defaults; saved values are merged back."""
    monkeypatch.setattr(settings_module, "SETTINGS_FILE", tmp_path / "config.json")

    assert load_settings() == DEFAULT_SETTINGS

    saved = dict(DEFAULT_SETTINGS, buffer_size=6)
    save_settings(saved)
    assert load_settings()["buffer_size"] == 6

    (tmp_path / "config.json").write_text("{not json", encoding="utf-8")
    assert load_settings() == DEFAULT_SETTINGS

    (tmp_path / "config.json").write_text(json.dumps({"step_budget": 50}), encoding="utf-8")
    loaded = load_settings()
    assert loaded["step_budget"] == 50
    assert loaded["strategy_name"] == DEFAULT_SETTINGS["strategy_name"]


def test_debug_image(tmp_path):
    """Rendered image covers the grid; saved file is a PNG."""
    grid = Grid.from_rows(ROWS, [["1C", "E9"]])
    solution = Solution.create([Position(0, 0), Position(0, 1), Position(1, 1)], {0})

    image = render_solution_image(grid, solution)
    assert image.mode == "RGB"
    assert image.size[1] > 3 * 48

    output = save_debug_image(grid, solution, str(tmp_path / "out" / "solution.png"))
    assert output.exists()
    with Image.open(output) as saved:
        assert saved.format == "PNG"

    blank = render_solution_image(grid, None)
    assert blank.size == image.size


def test_cli_solves_puzzle(tmp_path, monkeypatch, capsys):
    """CLI prints one line per solution and saves a debug image on request."""
    monkeypatch.chdir(tmp_path)
    puzzle = tmp_path / "puzzle.txt"
    puzzle.write_text(PUZZLE_TEXT, encoding="utf-8")

    code = cli.run(cli.parse_args([str(puzzle), "--buffer", "3", "--debug"]))
    out = capsys.readouterr().out

    assert code == cli.EXIT_OK
    lines = [line for line in out.splitlines() if line.strip()]
    assert lines
    for line in lines:
        assert ": (" in line
    assert list((tmp_path / "debug").glob("debug_*.png"))
    assert not (tmp_path / "config.json").exists()


def test_cli_exit_codes(tmp_path, monkeypatch):
    """Infeasible buffers, bad files and budget stops map to exit codes."""
    monkeypatch.chdir(tmp_path)
    puzzle = tmp_path / "puzzle.txt"
    puzzle.write_text(PUZZLE_TEXT, encoding="utf-8")

    assert cli.run(cli.parse_args([str(puzzle), "--buffer", "10"])) == cli.EXIT_INFEASIBLE
    assert cli.run(cli.parse_args([str(tmp_path / "missing.txt")])) == cli.EXIT_BAD_INPUT
    assert cli.run(cli.parse_args([])) == cli.EXIT_BAD_INPUT

    no_match = tmp_path / "no_match.txt"
    no_match.write_text("AA BB\nCC DD\n\nZZ\n", encoding="utf-8")
    assert cli.run(cli.parse_args([str(no_match), "--buffer", "2", "--steps", "1"])) == cli.EXIT_STOPPED

    assert cli.run(cli.parse_args([str(puzzle), "--buffer", "3", "--save-settings"])) == cli.EXIT_OK
    saved = json.loads((tmp_path / "config.json").read_text(encoding="utf-8"))
    assert saved["buffer_size"] == 3


def test_cli_list_strategies(capsys):
    assert cli.run(cli.parse_args(["--list-strategies"])) == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "sequential" in out
    assert "parallel" in out
