"""
Initial Pattern Tests

Verifies:
  ✓ Validation gate (width, emptiness, range)
  ✓ Deterministic choice of reported offender
  ✓ Set semantics (duplicates collapse, order irrelevant)
  ✓ Construction from paired entities
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pairbit.core import (
    NonPositiveNBits,
    EmptySBaseValues,
    ValueExceedsNBaseBits,
    InvalidHierarchicalLevel,
    NegativeValue,
)
from pairbit.kernel import InitialPattern, PairedEntity


def test_value_exceeds_base_bits():
    with pytest.raises(ValueExceedsNBaseBits) as exc:
        InitialPattern.new({0, 1, 4}, 2)

    assert exc.value.details() == {"value": 4, "n_bits": 2, "max_val": 3}

    print("✓ {0,1,4} at 2 bits rejected: value=4, max_val=3")


def test_first_offender_is_smallest():
    with pytest.raises(ValueExceedsNBaseBits) as exc:
        InitialPattern.new([9, 5, 4, 1], 2)
    assert exc.value.value == 4

    print("✓ Smallest out-of-range value reported")


def test_empty_and_width_guards():
    with pytest.raises(EmptySBaseValues):
        InitialPattern.new(set(), 4)

    with pytest.raises(NonPositiveNBits) as exc:
        InitialPattern.new({0}, 0)
    assert exc.value.n_bits == 0

    # Width is checked before emptiness
    with pytest.raises(NonPositiveNBits):
        InitialPattern.new(set(), 0)

    with pytest.raises(NegativeValue):
        InitialPattern.new({-2, 1}, 4)

    print("✓ Width, emptiness and sign guards")


def test_set_semantics():
    a = InitialPattern.new([3, 3, 0], 2)
    b = InitialPattern.new({0, 3}, 2)

    assert len(a) == 2
    assert a.ordered_values == (0, 3)
    assert a == b
    assert a.contains(3)
    assert not a.contains(1)
    assert a.s_base_values == frozenset({0, 3})

    print("✓ Duplicates collapse; equal sets give equal patterns")


def test_from_paired_entities_uses_canonical_x():
    pattern = InitialPattern.from_paired_entities([
        PairedEntity.new(12, 4),
        PairedEntity.new(0, 4),
        PairedEntity.new_canonical_from_x(5, 4),
    ])

    assert pattern.n_base_bits == 4
    assert pattern.ordered_values == (0, 3, 5)

    print("✓ Pattern built from canonical x of each entity")


def test_from_paired_entities_mixed_widths():
    with pytest.raises(InvalidHierarchicalLevel) as exc:
        InitialPattern.from_paired_entities([
            PairedEntity.new(1, 4),
            PairedEntity.new(1, 8),
        ])
    assert exc.value.details() == {"target_n_bits": 8, "base_n_bits": 4}

    with pytest.raises(EmptySBaseValues):
        InitialPattern.from_paired_entities([])

    print("✓ Mixed widths and empty input rejected")
