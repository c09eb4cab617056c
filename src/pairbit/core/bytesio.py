"""
Core Component: Byte Serialization (Big-Endian)

Stable, deterministic byte encodings of values, base patterns and leaf
sequences. Used for hashing into receipts only; nothing is persisted.

Frame layout (frozen):
  - 4 ASCII bytes tag
  - 4 bytes width (uint32, big-endian)
  - [4 bytes count (uint32, big-endian)] for sequences
  - Payload: each value as ceil(width/8) big-endian bytes
"""

import math
from typing import Iterable

_MAX_U32 = (1 << 32) - 1


def value_bytes(x: int, n_bits: int) -> bytes:
    """
    Encode one value as exactly ceil(n_bits/8) big-endian bytes.

    Raises:
        SerializationError: If x is negative or does not fit n_bits.
    """
    if x < 0:
        raise SerializationError(f"Negative value {x} cannot be serialized")
    if x >> n_bits:
        raise SerializationError(f"Value {x} does not fit in {n_bits} bits")
    return x.to_bytes(math.ceil(n_bits / 8), byteorder='big')


def serialize_value(x: int, n_bits: int) -> bytes:
    """
    Encode a single N-bit value.

    Format (exact):
      - b"VAL1"
      - 4 bytes n_bits (uint32, big-endian)
      - ceil(n_bits/8) bytes of x (big-endian)

    Args:
        x: Unsigned value.
        n_bits: Width the value is claimed to have.

    Returns:
        bytes: Deterministic serialization.

    Raises:
        SerializationError: If n_bits is out of range or x does not fit.
    """
    _check_width(n_bits)

    stream = bytearray()
    stream.extend(b"VAL1")
    stream.extend(n_bits.to_bytes(4, byteorder='big'))
    stream.extend(value_bytes(x, n_bits))
    return bytes(stream)


def serialize_pattern(s_base_values: Iterable[int], n_base_bits: int) -> bytes:
    """
    Encode a base pattern. Values are emitted in ascending order, so two
    equal sets always serialize identically.

    Format (exact):
      - b"PAT1"
      - 4 bytes n_base_bits (uint32, big-endian)
      - 4 bytes K (number of values, uint32, big-endian)
      - K values, ascending, ceil(n_base_bits/8) bytes each

    Raises:
        SerializationError: If width/count out of range or a value does not fit.
    """
    _check_width(n_base_bits)
    ordered = sorted(set(s_base_values))
    return _serialize_sequence(b"PAT1", ordered, n_base_bits)


def serialize_leaves(leaves: list[int], n_base_bits: int) -> bytes:
    """
    Encode a decomposition (ordered leaf sequence). Order is preserved.

    Format (exact):
      - b"LVS1"
      - 4 bytes n_base_bits (uint32, big-endian)
      - 4 bytes K (number of leaves, uint32, big-endian)
      - K leaves in sequence order, ceil(n_base_bits/8) bytes each

    Raises:
        SerializationError: If width/count out of range or a leaf does not fit.
    """
    _check_width(n_base_bits)
    return _serialize_sequence(b"LVS1", list(leaves), n_base_bits)


def _serialize_sequence(tag: bytes, values: list[int], n_bits: int) -> bytes:
    if len(values) > _MAX_U32:
        raise SerializationError(f"Too many values: {len(values)}")

    stream = bytearray()
    stream.extend(tag)
    stream.extend(n_bits.to_bytes(4, byteorder='big'))
    stream.extend(len(values).to_bytes(4, byteorder='big'))
    for v in values:
        stream.extend(value_bytes(v, n_bits))
    return bytes(stream)


def _check_width(n_bits: int) -> None:
    if n_bits <= 0 or n_bits > _MAX_U32:
        raise SerializationError(f"Width out of range: {n_bits}")


class SerializationError(Exception):
    """Raised when serialization encounters an invalid width or value."""
    pass
