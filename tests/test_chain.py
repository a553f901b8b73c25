"""
Test script for path enumeration

Checks build/advance against an independent depth-first enumeration:
1. Every valid path is produced exactly once, in the same order
2. All produced paths satisfy the path invariants
3. Infeasible seeds and oversized lengths are reported

Usage:
    python tests/test_chain.py
    pytest tests/test_chain.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from breach_solver.solver import (
    Position,
    PathLengthError,
    advance,
    build,
    build_from,
    is_last_available,
    is_valid_path,
    iter_paths,
)


def brute_force_paths(seed, size, length):
    """All valid paths from seed by plain recursion, ascending free coordinate."""
    results = []

    def extend(path):
        if len(path) == length:
            results.append(tuple(path))
            return
        last = path[-1]
        for k in range(size):
            if len(path) % 2 == 1:
                candidate = Position(column=last.column, row=k)
            else:
                candidate = Position(column=k, row=last.row)
            if candidate in path:
                continue
            path.append(candidate)
            extend(path)
            path.pop()

    extend([seed])
    return results


def test_small_grid_paths():
    """Hand-checked enumerations on 2x2 and 3x3 grids."""
    print("\n" + "="*60)
    print("TEST: Small Grid Paths")
    print("="*60)

    # 2x2, length 2: straight down from each seed
    assert build(Position(0, 0), 2, 2) == (Position(0, 0), Position(0, 1))
    assert build(Position(1, 0), 2, 2) == (Position(1, 0), Position(1, 1))
    assert advance(build(Position(0, 0), 2, 2), 2) is None

    # 2x2, length 4 uses every cell
    full = build(Position(0, 0), 2, 4)
    print(f"  2x2 full path: {[str(p) for p in full]}")
    assert full == (Position(0, 0), Position(0, 1), Position(1, 1), Position(1, 0))

    # 3x3, length 3 from (0,0): two rows below, two columns across each
    paths = list(iter_paths(Position(0, 0), 3, 3))
    print(f"  3x3 length 3 paths: {len(paths)}")
    assert paths == [
        (Position(0, 0), Position(0, 1), Position(1, 1)),
        (Position(0, 0), Position(0, 1), Position(2, 1)),
        (Position(0, 0), Position(0, 2), Position(1, 2)),
        (Position(0, 0), Position(0, 2), Position(2, 2)),
    ]

    print("  [PASS] Small grid paths")


@pytest.mark.parametrize("size,length", [
    (3, 2), (3, 4), (3, 5), (3, 7), (4, 5), (4, 6), (5, 4),
])
def test_matches_brute_force(size, length):
    """Odometer enumeration equals recursive enumeration for every seed."""
    for column in range(size):
        seed = Position(column, 0)
        expected = brute_force_paths(seed, size, length)
        produced = list(iter_paths(seed, size, length))

        assert produced == expected, f"seed {column}, size {size}, length {length}"
        assert len(set(produced)) == len(produced)
        for path in produced:
            assert len(path) == length
            assert is_valid_path(path, size)


def test_enumeration_report():
    """Print path counts for a few configurations."""
    print("\n" + "="*60)
    print("TEST: Enumeration Counts")
    print("="*60)

    for size, length in [(4, 4), (5, 6), (6, 6)]:
        count = sum(1 for _ in iter_paths(Position(0, 0), size, length))
        expected = len(brute_force_paths(Position(0, 0), size, length))
        print(f"  {size}x{size}, length {length}: {count} paths from (0,0)")
        assert count == expected

    print("  [PASS] Enumeration counts")


def test_infeasible_seed():
    """3x3 grids cannot hold 8 or 9 alternating cells."""
    print("\n" + "="*60)
    print("TEST: Infeasible Seed")
    print("="*60)

    # Steps (0,1), (2,3), (4,5), (6,7) share a column; 3 columns cannot hold 4 pairs
    for length in (8, 9):
        for column in range(3):
            assert build(Position(column, 0), 3, length) is None
            assert brute_force_paths(Position(column, 0), 3, length) == []

    assert list(iter_paths(Position(0, 0), 3, 8)) == []
    print("  [PASS] Infeasible seeds return None")


def test_length_exceeds_cells():
    """Lengths beyond size*size fail up front."""
    with pytest.raises(PathLengthError):
        build(Position(0, 0), 2, 5)
    with pytest.raises(PathLengthError):
        list(iter_paths(Position(0, 0), 3, 10))
    with pytest.raises(ValueError):
        build(Position(0, 0), 3, 0)


def test_length_one():
    """A single-cell path is its own seed and has no successor."""
    path = build(Position(2, 0), 4, 1)
    assert path == (Position(2, 0),)
    assert advance(path, 4) is None


def test_build_from_prefix():
    """Building from a prefix continues the enumeration from there."""
    prefix = (Position(0, 0), Position(0, 2))
    path = build_from(prefix, 3, 3)
    assert path == (Position(0, 0), Position(0, 2), Position(1, 2))


def test_last_available():
    """Collision check covers the whole prefix, not just the previous node."""
    assert is_last_available([Position(0, 0)])
    assert is_last_available([Position(0, 0), Position(0, 1), Position(1, 1)])
    assert not is_last_available([Position(0, 0), Position(0, 1), Position(1, 1), Position(1, 0),
                                  Position(0, 0)])


def test_path_validation():
    """is_valid_path rejects each broken invariant."""
    assert is_valid_path((Position(0, 0), Position(0, 2), Position(2, 2)), 3)
    assert not is_valid_path((Position(0, 1), Position(0, 2)), 3)                   # not top row
    assert not is_valid_path((Position(0, 0), Position(1, 0)), 3)                   # horizontal first
    assert not is_valid_path((Position(0, 0), Position(0, 1), Position(1, 2)), 3)   # row changed
    assert not is_valid_path((Position(0, 0), Position(0, 3)), 3)                   # off grid
    assert not is_valid_path((), 3)


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# PATH ENUMERATION TESTS")
    print("#"*60)

    results = []
    for name, func in [
        ("Small Grid Paths", test_small_grid_paths),
        ("Enumeration Counts", test_enumeration_report),
        ("Infeasible Seed", test_infeasible_seed),
        ("Length Exceeds Cells", test_length_exceeds_cells),
        ("Length One", test_length_one),
        ("Build From Prefix", test_build_from_prefix),
        ("Last Available", test_last_available),
        ("Path Validation", test_path_validation),
    ]:
        try:
            func()
            results.append((name, True))
        except AssertionError as e:
            print(f"  [FAIL] {name}: {e}")
            results.append((name, False))

    print("\n" + "="*60)
    print("SUMMARY")
    print("="*60)

    all_passed = True
    for name, passed in results:
        status = "PASS" if passed else "FAIL"
        print(f"  {name}: [{status}]")
        if not passed:
            all_passed = False

    print()
    if all_passed:
        print("All tests PASSED!")
        return 0
    else:
        print("Some tests FAILED!")
        return 1


if __name__ == "__main__":
    sys.exit(main())
