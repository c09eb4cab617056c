"""
Kernel Component: Paired Entities

An N-bit paired entity is a value x together with its bitwise complement
x' = (2^N - 1) - x, so x + x' == 2^N - 1 always holds.

Canonical form keeps the numerically smaller of the two as x. The tie
case keeps the input value as x; it cannot arise for N >= 1 because a
value and its complement always differ in the top bit.
"""

from dataclasses import dataclass

from ..core.errors import NonPositiveNBits, NonComplementaryPair
from .levels import all_ones, check_value_fits


def complement(value: int, n_bits: int) -> int:
    """Bitwise complement of an n_bits value (no validation)."""
    return all_ones(n_bits) - value


@dataclass(frozen=True)
class PairedEntity:
    """
    Immutable (x, x_prime, n_bits) triple.

    Construct through the classmethods; they validate width and range and
    compute the complement. Direct construction bypasses validation.
    """
    x: int
    x_prime: int
    n_bits: int

    @classmethod
    def new(cls, x: int, n_bits: int) -> "PairedEntity":
        """
        Pair x with its complement, keeping the given order.

        Args:
            x: Unsigned value.
            n_bits: Width N (positive).

        Returns:
            PairedEntity: (x, 2^N - 1 - x, N), not canonicalized.

        Raises:
            NonPositiveNBits: If n_bits <= 0.
            NegativeValue: If x < 0.
            ValueTooLargeForNBits: If x >= 2^n_bits.
        """
        _check_width(n_bits)
        check_value_fits(x, n_bits)
        return cls(x, complement(x, n_bits), n_bits)

    @classmethod
    def new_canonical_from_x(cls, value: int, n_bits: int) -> "PairedEntity":
        """
        Pair value with its complement in canonical order (smaller first).

        Canonicalizing a value and canonicalizing its complement produce
        equal entities.

        Raises:
            NonPositiveNBits: If n_bits <= 0.
            NegativeValue: If value < 0.
            ValueTooLargeForNBits: If value >= 2^n_bits.
        """
        _check_width(n_bits)
        check_value_fits(value, n_bits)
        other = complement(value, n_bits)
        if value <= other:
            return cls(value, other, n_bits)
        return cls(other, value, n_bits)

    @classmethod
    def new_from_pair_assert_canonical(
        cls,
        val1: int,
        val2_supposed_complement: int,
        n_bits: int
    ) -> "PairedEntity":
        """
        Build a canonical entity from two values asserted to be complements.

        Args:
            val1: One N-bit value.
            val2_supposed_complement: The value claimed to be its complement.
            n_bits: Width N.

        Returns:
            PairedEntity: Canonical ordering of the pair.

        Raises:
            NonPositiveNBits: If n_bits <= 0.
            NegativeValue / ValueTooLargeForNBits: For val1, then val2.
            NonComplementaryPair: If val1 + val2 != 2^N - 1.

        Example:
            >>> PairedEntity.new_from_pair_assert_canonical(12, 3, 4)
            PairedEntity(x=3, x_prime=12, n_bits=4)
        """
        _check_width(n_bits)
        check_value_fits(val1, n_bits)
        check_value_fits(val2_supposed_complement, n_bits)

        if val1 + val2_supposed_complement != all_ones(n_bits):
            raise NonComplementaryPair(val1, val2_supposed_complement, n_bits)

        if val1 <= val2_supposed_complement:
            return cls(val1, val2_supposed_complement, n_bits)
        return cls(val2_supposed_complement, val1, n_bits)

    @property
    def is_canonical(self) -> bool:
        return self.x <= self.x_prime

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.x, self.x_prime, self.n_bits)


def _check_width(n_bits: int) -> None:
    if n_bits <= 0:
        raise NonPositiveNBits(n_bits)
