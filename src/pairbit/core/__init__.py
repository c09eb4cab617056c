"""
Core foundation: errors, receipts, hashing, serialization, parameter registry.
"""

from .errors import (
    HierarchyError,
    NonPositiveNBits,
    EmptySBaseValues,
    ValueExceedsNBaseBits,
    InvalidHierarchicalLevel,
    ValueTooLargeForNBits,
    NegativeValue,
    NotAMember,
    InvalidBaseComponent,
    InvalidComponentCount,
    NonComplementaryPair,
    EmptySBaseForRandomGeneration,
)
from .registry import param_registry, RegistryError
from .hashing import blake3_hash
from .bytesio import (
    serialize_value,
    serialize_pattern,
    serialize_leaves,
    SerializationError
)
from .receipts import (
    Receipts,
    assert_double_run_equal,
    ReceiptError,
    DeterminismError
)

__all__ = [
    # Errors
    "HierarchyError",
    "NonPositiveNBits",
    "EmptySBaseValues",
    "ValueExceedsNBaseBits",
    "InvalidHierarchicalLevel",
    "ValueTooLargeForNBits",
    "NegativeValue",
    "NotAMember",
    "InvalidBaseComponent",
    "InvalidComponentCount",
    "NonComplementaryPair",
    "EmptySBaseForRandomGeneration",

    # Registry
    "param_registry",
    "RegistryError",

    # Hashing
    "blake3_hash",

    # Serialization
    "serialize_value",
    "serialize_pattern",
    "serialize_leaves",
    "SerializationError",

    # Receipts
    "Receipts",
    "assert_double_run_equal",
    "ReceiptError",
    "DeterminismError",
]
