"""
pairbit: fractal hierarchies of complement-pair bit patterns

A validated base set of N0-bit values seeds, for every width N0 * 2^k, a
selected set whose members split into halves that are themselves members.
"""

__version__ = "0.1.0"

from .core import (
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
from .kernel import (
    PairedEntity,
    InitialPattern,
    Propagator,
    LcgSource,
)
from .session import Session, ParseError, SessionNotConfigured

__all__ = [
    "PairedEntity",
    "InitialPattern",
    "Propagator",
    "LcgSource",
    "Session",
    "ParseError",
    "SessionNotConfigured",

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
]
