"""
Kernel Component: Hierarchy Levels & Half Splitting

A hierarchy level is a width T = n_base_bits * 2^k (k >= 0). Values at
level T split into an upper and lower half of T/2 bits each; joining the
halves is the exact inverse.

Value representation:
  - Python int, unsigned, with T least-significant bits
  - upper = x >> (T/2), lower = x & (2^(T/2) - 1)
"""

from ..core.errors import InvalidHierarchicalLevel, NegativeValue, ValueTooLargeForNBits


def all_ones(n_bits: int) -> int:
    """Return 2^n_bits - 1 (a run of n_bits ones)."""
    return (1 << n_bits) - 1


def check_value_fits(x: int, n_bits: int) -> None:
    """
    Guard: x must be an unsigned value below 2^n_bits.

    Raises:
        NegativeValue: If x < 0.
        ValueTooLargeForNBits: If x >= 2^n_bits.
    """
    if x < 0:
        raise NegativeValue(x)
    if x >> n_bits:
        raise ValueTooLargeForNBits(x, n_bits)


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def is_valid_hierarchical_level(target_n_bits: int, base_n_bits: int) -> bool:
    """
    True iff target_n_bits == base_n_bits * 2^k for some k >= 0.

    Args:
        target_n_bits: Candidate width.
        base_n_bits: Width of the base pattern (positive).

    Returns:
        bool: Level validity. Zero, negative and too-small widths are invalid.

    Examples:
        >>> [t for t in (0, 4, 5, 6, 8, 12, 16, 32) if is_valid_hierarchical_level(t, 4)]
        [4, 8, 16, 32]
    """
    if base_n_bits <= 0 or target_n_bits < base_n_bits:
        return False
    if target_n_bits == base_n_bits:
        return True
    if target_n_bits % base_n_bits != 0:
        return False
    return is_power_of_two(target_n_bits // base_n_bits)


def level_depth(target_n_bits: int, base_n_bits: int) -> int:
    """
    Return k such that target_n_bits == base_n_bits * 2^k.

    Raises:
        InvalidHierarchicalLevel: If target_n_bits is not a valid level.
    """
    if not is_valid_hierarchical_level(target_n_bits, base_n_bits):
        raise InvalidHierarchicalLevel(target_n_bits, base_n_bits)
    return (target_n_bits // base_n_bits).bit_length() - 1


def hierarchy_levels(base_n_bits: int, max_depth: int) -> list[int]:
    """Widths base_n_bits * 2^k for k in 0..max_depth (inclusive)."""
    if max_depth < 0:
        return []
    return [base_n_bits << k for k in range(max_depth + 1)]


def split_halves(x: int, n_bits: int) -> tuple[int, int]:
    """
    Split an n_bits value into (upper, lower) halves of n_bits/2 each.

    Invariant:
        join_halves(*split_halves(x, n), n // 2) == x for every x < 2^n.
    """
    half = n_bits // 2
    return x >> half, x & all_ones(half)


def join_halves(upper: int, lower: int, half_bits: int) -> int:
    """Concatenate two half_bits values: (upper << half_bits) | lower."""
    return (upper << half_bits) | lower
