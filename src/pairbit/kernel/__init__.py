"""
Kernel: paired entities, base patterns, and hierarchical propagation.

Components:
  - entity: PairedEntity (value + bitwise complement at a fixed width)
  - pattern: InitialPattern (validated S_base)
  - levels: level validity, half split/join
  - propagator: membership, decomposition, composition, sampling
  - sources: explicit seedable randomness
"""

from .entity import PairedEntity, complement
from .pattern import InitialPattern
from .levels import (
    is_valid_hierarchical_level,
    level_depth,
    hierarchy_levels,
    split_halves,
    join_halves
)
from .propagator import Propagator
from .sources import LcgSource

__all__ = [
    # Entities & patterns
    "PairedEntity",
    "complement",
    "InitialPattern",

    # Levels
    "is_valid_hierarchical_level",
    "level_depth",
    "hierarchy_levels",
    "split_halves",
    "join_halves",

    # Propagation
    "Propagator",
    "LcgSource",

    # Receipts
    "propagator_receipts",
]


def propagator_receipts(
    propagator: Propagator,
    levels: list[int],
    seed: int,
    section_label: str = "hierarchy"
):
    """
    Record a reproducible run of the propagator over the given widths.

    For every width: its validity, and for valid widths one seeded sample
    with its membership, decomposition hash and composition round-trip.
    Samples share one LcgSource(seed), drawn in the order of `levels`.

    Args:
        propagator: Propagator under test.
        levels: Widths to record (valid or not).
        seed: LcgSource seed.
        section_label: Receipt section name.

    Returns:
        Receipts: Builder (call .digest() for the hashed record).
    """
    from ..core import Receipts

    pattern = propagator.initial_pattern
    n_base_bits = pattern.n_base_bits

    receipts = Receipts(section_label)

    receipts.put_pattern("pattern", pattern.s_base_values, n_base_bits)
    receipts.put("seed", seed)

    level_table = [
        {"n_bits": t, "valid": propagator.is_valid_hierarchical_level(t)}
        for t in levels
    ]
    receipts.put("levels", level_table)

    source = LcgSource(seed)
    samples = []
    for entry in level_table:
        if not entry["valid"]:
            continue
        t = entry["n_bits"]

        value = propagator.generate_random_s_n_member(t, source)
        member = propagator.is_member(value, t)
        leaves = propagator.decompose_to_base(value, t)
        recomposed = propagator.compose_from_base(leaves)

        samples.append({
            "n_bits": t,
            "value": str(value),
            "value_hash": Receipts.value_digest(value, t),
            "is_member": member,
            "leaf_count": len(leaves),
            "leaves_hash": Receipts.leaves_digest(leaves, n_base_bits),
            "roundtrip_ok": recomposed == (value, t),
        })

    receipts.put("samples", samples)
    receipts.put("all_roundtrip_ok", all(s["roundtrip_ok"] for s in samples))

    return receipts
