"""
Hierarchy Level Tests

Verifies:
  ✓ Level validity predicate (base * 2^k only)
  ✓ Level depth and level listing
  ✓ Half split / join inverse
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pairbit.core import InvalidHierarchicalLevel
from pairbit.kernel import (
    is_valid_hierarchical_level,
    level_depth,
    hierarchy_levels,
    split_halves,
    join_halves,
)


def test_valid_levels_base_4():
    for t in (4, 8, 16, 32, 4 << 20):
        assert is_valid_hierarchical_level(t, 4), t
    for t in (0, 5, 6, 12, 2, 24, 48, -4):
        assert not is_valid_hierarchical_level(t, 4), t

    print("✓ {4,8,16,32} valid; {0,5,6,12} invalid at base 4")


def test_valid_levels_odd_base():
    assert [t for t in range(0, 50) if is_valid_hierarchical_level(t, 3)] == [3, 6, 12, 24, 48]
    assert [t for t in range(0, 17) if is_valid_hierarchical_level(t, 1)] == [1, 2, 4, 8, 16]

    print("✓ Odd and unit bases")


def test_level_depth_and_listing():
    assert level_depth(4, 4) == 0
    assert level_depth(32, 4) == 3
    assert hierarchy_levels(2, 3) == [2, 4, 8, 16]
    assert hierarchy_levels(5, 0) == [5]
    assert hierarchy_levels(5, -1) == []

    with pytest.raises(InvalidHierarchicalLevel) as exc:
        level_depth(12, 4)
    assert exc.value.details() == {"target_n_bits": 12, "base_n_bits": 4}

    with pytest.raises(InvalidHierarchicalLevel):
        level_depth(2, 4)

    print("✓ Depth and listing")


def test_split_join_inverse():
    assert split_halves(0b0011, 4) == (0b00, 0b11)
    assert split_halves(0b1100_0101, 8) == (0b1100, 0b0101)

    for n_bits in (2, 4, 8):
        half = n_bits // 2
        for x in range(1 << n_bits):
            upper, lower = split_halves(x, n_bits)
            assert upper < (1 << half) and lower < (1 << half)
            assert join_halves(upper, lower, half) == x

    print("✓ join(split(x)) == x")
