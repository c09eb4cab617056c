"""
Kernel Component: Initial Pattern (S_base)

The validated, immutable seed set of base-width values. Construction is
the sole validation gate: every later query assumes the invariants below.

Invariants:
  - n_base_bits >= 1
  - s_base_values is non-empty
  - every member is in [0, 2^n_base_bits)
"""

from dataclasses import dataclass, field
from typing import Iterable

from ..core.errors import (
    NonPositiveNBits,
    EmptySBaseValues,
    ValueExceedsNBaseBits,
    InvalidHierarchicalLevel,
    NegativeValue,
)
from .entity import PairedEntity
from .levels import all_ones


@dataclass(frozen=True)
class InitialPattern:
    s_base_values: frozenset[int]
    n_base_bits: int
    ordered_values: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "ordered_values", tuple(sorted(self.s_base_values)))

    @classmethod
    def new(cls, s_base_values: Iterable[int], n_base_bits: int) -> "InitialPattern":
        """
        Validate and freeze a base pattern.

        Args:
            s_base_values: Base values (duplicates collapse; order irrelevant).
            n_base_bits: Base width (positive).

        Returns:
            InitialPattern: Immutable pattern.

        Raises:
            NonPositiveNBits: If n_base_bits <= 0.
            EmptySBaseValues: If no values are given.
            NegativeValue: If a value is negative.
            ValueExceedsNBaseBits: For the smallest value >= 2^n_base_bits.

        Example:
            >>> InitialPattern.new({0, 1, 4}, 2)
            Traceback (most recent call last):
            ...
            pairbit.core.errors.ValueExceedsNBaseBits: S_base value 4 does not fit within n_base_bits 2. Maximum representable value is 3.
        """
        if n_base_bits <= 0:
            raise NonPositiveNBits(n_base_bits)

        values = frozenset(s_base_values)
        if not values:
            raise EmptySBaseValues()

        max_val = all_ones(n_base_bits)
        # Ascending scan so the reported offender does not depend on hash order
        for v in sorted(values):
            if v < 0:
                raise NegativeValue(v)
            if v > max_val:
                raise ValueExceedsNBaseBits(v, n_base_bits, max_val)

        return cls(values, n_base_bits)

    @classmethod
    def from_paired_entities(cls, entities: Iterable[PairedEntity]) -> "InitialPattern":
        """
        Build a pattern from the canonical x of each paired entity.

        All entities must share one width; an entity of another width raises
        InvalidHierarchicalLevel(entity.n_bits, first_width).
        """
        entities = list(entities)
        if not entities:
            raise EmptySBaseValues()

        n_base_bits = entities[0].n_bits
        values = set()
        for e in entities:
            if e.n_bits != n_base_bits:
                raise InvalidHierarchicalLevel(e.n_bits, n_base_bits)
            values.add(min(e.x, e.x_prime))

        return cls.new(values, n_base_bits)

    def contains(self, value: int) -> bool:
        return value in self.s_base_values

    def __len__(self) -> int:
        return len(self.s_base_values)
