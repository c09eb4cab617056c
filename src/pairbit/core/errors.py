"""
Core Component: Hierarchy Errors

Closed set of error kinds raised by the kernel. Every error carries the
offending values as attributes so callers (and the session layer) can
report the kind and its values without parsing messages.

Errors are only raised at the entry of a public operation; recursive
steps never raise.
"""

from typing import Any


class HierarchyError(Exception):
    """Base class for all hierarchy errors."""

    def __init__(self, message: str):
        super().__init__(message)

    @property
    def kind(self) -> str:
        return type(self).__name__

    def details(self) -> dict[str, Any]:
        """Attributes carried by this error (offending values)."""
        return {}


class NonPositiveNBits(HierarchyError):
    """A bit-width argument was zero (or negative)."""

    def __init__(self, n_bits: int):
        self.n_bits = n_bits
        super().__init__(f"N-bits value ({n_bits}) must be positive.")

    def details(self) -> dict[str, Any]:
        return {"n_bits": self.n_bits}


class EmptySBaseValues(HierarchyError):
    """The base value set of an InitialPattern was empty."""

    def __init__(self):
        super().__init__("S_base values set cannot be empty.")


class ValueExceedsNBaseBits(HierarchyError):
    """A base-pattern element does not fit its declared width."""

    def __init__(self, value: int, n_bits: int, max_val: int):
        self.value = value
        self.n_bits = n_bits
        self.max_val = max_val
        super().__init__(
            f"S_base value {value} does not fit within n_base_bits {n_bits}. "
            f"Maximum representable value is {max_val}."
        )

    def details(self) -> dict[str, Any]:
        return {"value": self.value, "n_bits": self.n_bits, "max_val": self.max_val}


class InvalidHierarchicalLevel(HierarchyError):
    """Target width is not base_n_bits * 2^k (covers zero and too-small widths)."""

    def __init__(self, target_n_bits: int, base_n_bits: int):
        self.target_n_bits = target_n_bits
        self.base_n_bits = base_n_bits
        super().__init__(
            f"Target N-bits ({target_n_bits}) is not a valid hierarchical level "
            f"from base N-bits ({base_n_bits}). Must be base_n_bits * 2^k for "
            f"some integer k >= 0."
        )

    def details(self) -> dict[str, Any]:
        return {"target_n_bits": self.target_n_bits, "base_n_bits": self.base_n_bits}


class ValueTooLargeForNBits(HierarchyError):
    """A queried value does not fit the width it is claimed to have."""

    def __init__(self, value: int, n_bits: int):
        self.value = value
        self.n_bits = n_bits
        super().__init__(
            f"Value {value} is too large for n_bits {n_bits}. "
            f"Value must be < 2^{n_bits}."
        )

    def details(self) -> dict[str, Any]:
        return {"value": self.value, "n_bits": self.n_bits}


class NegativeValue(HierarchyError):
    """A value that must be unsigned was negative."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Value {value} is negative; values must be unsigned.")

    def details(self) -> dict[str, Any]:
        return {"value": self.value}


class NotAMember(HierarchyError):
    """Decomposition requested on a value outside the selected set."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(
            f"Value {value} is not a member of the selected set S_N "
            f"for the given N-bits and initial pattern."
        )

    def details(self) -> dict[str, Any]:
        return {"value": self.value}


class InvalidBaseComponent(HierarchyError):
    """Composition input not drawn from the base set."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Base component {value} is not a member of the S_base pattern.")

    def details(self) -> dict[str, Any]:
        return {"value": self.value}


class InvalidComponentCount(HierarchyError):
    """Composition input length is zero or not a power of two."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"Number of base components ({count}) must be a non-zero power of 2 "
            f"(1, 2, 4, 8, ...)."
        )

    def details(self) -> dict[str, Any]:
        return {"count": self.count}


class NonComplementaryPair(HierarchyError):
    """Asserted pair does not sum to 2^n_bits - 1."""

    def __init__(self, val1: int, val2_complement: int, n_bits: int):
        self.val1 = val1
        self.val2_complement = val2_complement
        self.n_bits = n_bits
        super().__init__(
            f"Values {val1} and {val2_complement} are not N-bit complements for "
            f"n_bits = {n_bits}. Their sum should be 2^{n_bits} - 1."
        )

    def details(self) -> dict[str, Any]:
        return {
            "val1": self.val1,
            "val2_complement": self.val2_complement,
            "n_bits": self.n_bits,
        }


class EmptySBaseForRandomGeneration(HierarchyError):
    """Sampling requested from an empty base set."""

    def __init__(self):
        super().__init__(
            "Cannot generate random member: S_base pattern is empty."
        )
