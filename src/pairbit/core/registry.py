"""
Core Component: Parameter Registry

Frozen constants for deterministic hierarchy operation.
Every convention the kernel relies on (leaf order, canonical tie-break,
sampling order, generator constants) is named here with its exact value,
and the registry is hashed into every receipt.

No randomness, no environment leakage, no optionals.
"""

FORMAT_VERSION = "1.0"

# 32-bit LCG used by seeded sessions: seed = seed * A + C (mod 2^32)
LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MODULUS = 1 << 32

# Initial session seed counter
DEFAULT_SEED = 12345


def param_registry() -> dict:
    """
    Returns a frozen mapping of all global constants used by the kernel.

    Keys and values are JSON-serializable primitives or lists/dicts.

    Returns:
        dict: Parameter mapping with exact keys and values.

    Raises:
        RegistryError: If any required key is missing (internal consistency check).
    """
    registry = {
        "format_version": FORMAT_VERSION,
        "endianness": "BE",  # big-endian byte order in serialized values

        # Decomposition emits leaves pre-order; composition is its inverse
        "leaf_order": "pre-order-upper-first",

        # Canonical pair keeps the smaller value as x; ties keep the input value
        "canonical_tie_break": "smaller-first-keep-value",

        # Base case of sampling indexes into the ascending base values
        "sampling_order": "ascending-int",

        "lcg": {
            "multiplier": LCG_MULTIPLIER,
            "increment": LCG_INCREMENT,
            "modulus": LCG_MODULUS,
            "zero_seed_replacement": 1,
        },
        "default_seed": DEFAULT_SEED,

        "hash_algo": "BLAKE3",

        # Byte frame tags for serialization (ASCII 4-byte tags)
        "byte_frame_tags": {
            "VALUE": "VAL1",
            "PATTERN": "PAT1",
            "LEAVES": "LVS1",
        },
    }

    required_keys = {
        "format_version", "endianness", "leaf_order", "canonical_tie_break",
        "sampling_order", "lcg", "default_seed", "hash_algo", "byte_frame_tags",
    }

    actual_keys = set(registry.keys())
    if actual_keys != required_keys:
        missing = required_keys - actual_keys
        extra = actual_keys - required_keys
        raise RegistryError(
            f"param_registry() key mismatch. Missing: {missing}, Extra: {extra}"
        )

    return registry


class RegistryError(Exception):
    """Raised when param_registry() has missing or unexpected keys."""
    pass
