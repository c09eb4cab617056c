"""
Kernel Component: Propagator

Applies the hierarchical propagation rule over one InitialPattern:

    x is a member at width T  <=>  T == n_base_bits and x in S_base
                               or  upper(x) and lower(x) are members at T/2

Operations:
  - is_member: recursive descent over bit halves
  - decompose_to_base: pre-order leaves, upper half before lower half
  - compose_from_base: exact inverse of decompose_to_base
  - generate_random_s_n_member: structure-respecting sampling
  - count_members / iter_members: size and enumeration of S_T

Every public operation validates its inputs before recursing; the
recursive helpers are total and never raise. Recursion depth is
log2(T / n_base_bits).
"""

import itertools
from typing import Iterator

from ..core.errors import (
    InvalidHierarchicalLevel,
    NotAMember,
    InvalidBaseComponent,
    InvalidComponentCount,
    ValueExceedsNBaseBits,
    EmptySBaseForRandomGeneration,
)
from .pattern import InitialPattern
from .levels import (
    all_ones,
    check_value_fits,
    is_power_of_two,
    is_valid_hierarchical_level,
    split_halves,
    join_halves,
)


class Propagator:
    """
    Read-only query object over one InitialPattern.

    Holds no mutable state, so one instance may be shared across threads.
    """

    def __init__(self, initial_pattern: InitialPattern):
        self._pattern = initial_pattern

    @property
    def initial_pattern(self) -> InitialPattern:
        return self._pattern

    @property
    def n_base_bits(self) -> int:
        return self._pattern.n_base_bits

    def __repr__(self) -> str:
        return (
            f"Propagator(n_base_bits={self._pattern.n_base_bits}, "
            f"|S_base|={len(self._pattern)})"
        )

    # ========================================================================
    # Levels
    # ========================================================================

    def is_valid_hierarchical_level(self, target_n_bits: int) -> bool:
        """True iff target_n_bits == n_base_bits * 2^k for some k >= 0."""
        return is_valid_hierarchical_level(target_n_bits, self._pattern.n_base_bits)

    def _require_level(self, target_n_bits: int) -> None:
        if not self.is_valid_hierarchical_level(target_n_bits):
            raise InvalidHierarchicalLevel(target_n_bits, self._pattern.n_base_bits)

    # ========================================================================
    # Membership
    # ========================================================================

    def is_member(self, x_target: int, n_target_bits: int) -> bool:
        """
        Test whether x_target belongs to the selected set at n_target_bits.

        Args:
            x_target: Unsigned value.
            n_target_bits: Width T (must be a hierarchy level).

        Returns:
            bool: Membership.

        Raises:
            InvalidHierarchicalLevel: If T <= 0, or T is not a level.
            NegativeValue: If x_target < 0.
            ValueTooLargeForNBits: If x_target >= 2^T.

        Example (S_base = {0, 3}, n_base_bits = 2):
            >>> p.is_member(0b0011, 4)   # halves 0, 3
            True
            >>> p.is_member(0b0001, 4)   # halves 0, 1
            False
        """
        if n_target_bits <= 0:
            raise InvalidHierarchicalLevel(n_target_bits, self._pattern.n_base_bits)
        check_value_fits(x_target, n_target_bits)
        self._require_level(n_target_bits)

        return self._is_member_recursive(x_target, n_target_bits)

    def _is_member_recursive(self, x: int, n_bits: int) -> bool:
        if n_bits == self._pattern.n_base_bits:
            return x in self._pattern.s_base_values

        upper, lower = split_halves(x, n_bits)
        half = n_bits // 2
        return (
            self._is_member_recursive(upper, half)
            and self._is_member_recursive(lower, half)
        )

    # ========================================================================
    # Decomposition
    # ========================================================================

    def decompose_to_base(self, x_target: int, n_target_bits: int) -> list[int]:
        """
        Split a member into its base-level leaves.

        Leaves are collected pre-order, upper half before lower half at every
        level, so the result has exactly T / n_base_bits entries and
        compose_from_base(result) == (x_target, n_target_bits).

        Raises:
            Every error of is_member, and
            NotAMember: If x_target is not in the selected set.

        Example (S_base = {0, 3}, n_base_bits = 2):
            >>> p.decompose_to_base(3, 4)
            [0, 3]
        """
        if not self.is_member(x_target, n_target_bits):
            raise NotAMember(x_target)

        components: list[int] = []
        self._decompose_recursive_collect(x_target, n_target_bits, components)
        return components

    def _decompose_recursive_collect(self, x: int, n_bits: int, out: list[int]) -> None:
        if n_bits == self._pattern.n_base_bits:
            out.append(x)
            return

        upper, lower = split_halves(x, n_bits)
        half = n_bits // 2
        self._decompose_recursive_collect(upper, half, out)
        self._decompose_recursive_collect(lower, half, out)

    # ========================================================================
    # Composition
    # ========================================================================

    def compose_from_base(self, s_base_components: list[int]) -> tuple[int, int]:
        """
        Rebuild a member and its width from an ordered leaf sequence.

        Args:
            s_base_components: Leaves in decomposition order.

        Returns:
            tuple[int, int]: (composed_value, composed_width).

        Raises:
            InvalidComponentCount: If the length is 0 or not a power of two.
            InvalidBaseComponent: For the first leaf not in S_base.
            ValueExceedsNBaseBits: If a leaf does not fit n_base_bits.

        Example (S_base = {0, 3}, n_base_bits = 2):
            >>> p.compose_from_base([0, 3])
            (3, 4)
        """
        components = list(s_base_components)
        if not is_power_of_two(len(components)):
            raise InvalidComponentCount(len(components))

        n_base_bits = self._pattern.n_base_bits
        max_val = all_ones(n_base_bits)
        for comp in components:
            if comp not in self._pattern.s_base_values:
                raise InvalidBaseComponent(comp)
            if comp > max_val:
                raise ValueExceedsNBaseBits(comp, n_base_bits, max_val)

        return self._compose_recursive(components, 0, len(components))

    def _compose_recursive(self, components: list[int], start: int, stop: int) -> tuple[int, int]:
        if stop - start == 1:
            return components[start], self._pattern.n_base_bits

        mid = (start + stop) // 2
        upper, upper_bits = self._compose_recursive(components, start, mid)
        lower, _ = self._compose_recursive(components, mid, stop)
        return join_halves(upper, lower, upper_bits), upper_bits * 2

    # ========================================================================
    # Sampling
    # ========================================================================

    def generate_random_s_n_member(self, target_n_bits: int, source) -> int:
        """
        Draw a member of the selected set at target_n_bits.

        The base case picks ordered_values[source.randrange(|S_base|)];
        each level draws its upper half, then its lower half. Identical
        sources and call sequences give identical results.

        Args:
            target_n_bits: Width T (must be a hierarchy level).
            source: Object with randrange(n); owned by the caller.

        Returns:
            int: A value v with is_member(v, T) == True.

        Raises:
            InvalidHierarchicalLevel: If T is not a level.
            EmptySBaseForRandomGeneration: If S_base is empty.
        """
        self._require_level(target_n_bits)
        if not self._pattern.ordered_values:
            raise EmptySBaseForRandomGeneration()

        return self._generate_random_recursive(target_n_bits, source)

    def _generate_random_recursive(self, n_bits: int, source) -> int:
        values = self._pattern.ordered_values
        if n_bits == self._pattern.n_base_bits:
            return values[source.randrange(len(values))]

        half = n_bits // 2
        upper = self._generate_random_recursive(half, source)
        lower = self._generate_random_recursive(half, source)
        return join_halves(upper, lower, half)

    # ========================================================================
    # Size & enumeration
    # ========================================================================

    def count_members(self, target_n_bits: int) -> int:
        """
        |S_T| = |S_base| ^ (T / n_base_bits).

        Raises:
            InvalidHierarchicalLevel: If T is not a level.
        """
        self._require_level(target_n_bits)
        return len(self._pattern) ** (target_n_bits // self._pattern.n_base_bits)

    def iter_members(self, target_n_bits: int) -> Iterator[int]:
        """
        Iterator over every member of S_T in ascending order.

        Ascending leaf tuples compose to ascending values because the first
        leaf occupies the most significant bits. The set grows as
        |S_base|^(T/n_base_bits); use on small levels only.

        Raises:
            InvalidHierarchicalLevel: If T is not a level.
        """
        self._require_level(target_n_bits)
        leaves = target_n_bits // self._pattern.n_base_bits
        return (
            self._compose_recursive(list(combo), 0, leaves)[0]
            for combo in itertools.product(self._pattern.ordered_values, repeat=leaves)
        )
