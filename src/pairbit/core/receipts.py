"""
Core Component: Hierarchy Run Receipts

A receipt is an ordered record of one run over a base pattern: integer,
bool and string facts, plus BLAKE3 digests of the values, patterns and
leaf sequences involved. Every digest is bound to the parameter registry
hash, so two receipts agree only when produced under the same conventions.

Payload values are JSON-safe and integer-only: int, bool, str, None, and
lists/tuples/dicts of those. Floats never occur in hierarchy arithmetic
and are rejected.
"""

import json
from typing import Any, Callable, Iterable

from .registry import param_registry, FORMAT_VERSION
from .hashing import blake3_hash
from .bytesio import serialize_value, serialize_pattern, serialize_leaves


class Receipts:
    """
    Ordered, section-scoped record of one hierarchy run.

    digest() returns:
      {
        "section", "format_version", "param_registry_hash",
        "payload": {key: value, ...} in insertion order,
        "section_hash": BLAKE3 of the stable JSON of all of the above
      }
    """

    def __init__(self, section: str):
        self.section = section
        self.payload: dict[str, Any] = {}

    def put(self, key: str, value: Any) -> None:
        """
        Record one fact under a unique key.

        Raises:
            ReceiptError: If key was already recorded or value is not JSON-safe.
        """
        if key in self.payload:
            raise ReceiptError(f"Duplicate key in receipts: '{key}'")
        _check_value(value, key)
        self.payload[key] = value

    def put_pattern(self, key: str, s_base_values: Iterable[int], n_base_bits: int) -> None:
        """Record a base pattern as its width, size and PAT1 digest."""
        values = set(s_base_values)
        self.put(key, {
            "n_base_bits": n_base_bits,
            "size": len(values),
            "hash": blake3_hash(serialize_pattern(values, n_base_bits)),
        })

    @staticmethod
    def value_digest(x: int, n_bits: int) -> str:
        """BLAKE3 of the VAL1 frame of an n_bits value."""
        return blake3_hash(serialize_value(x, n_bits))

    @staticmethod
    def leaves_digest(leaves: list[int], n_base_bits: int) -> str:
        """BLAKE3 of the LVS1 frame of a decomposition (order-sensitive)."""
        return blake3_hash(serialize_leaves(leaves, n_base_bits))

    def digest(self) -> dict:
        body = {
            "section": self.section,
            "format_version": FORMAT_VERSION,
            "param_registry_hash": blake3_hash(_stable_json_bytes(param_registry())),
            "payload": dict(self.payload),
        }
        return {**body, "section_hash": blake3_hash(_stable_json_bytes(body))}


def assert_double_run_equal(build: Callable[[], Receipts]) -> None:
    """
    Build the receipts twice and require identical section hashes.

    Raises:
        DeterminismError: Naming the earliest payload key that differs.
    """
    first = build().digest()
    second = build().digest()
    if first["section_hash"] == second["section_hash"]:
        return

    a, b = first["payload"], second["payload"]
    keys = list(a) + [k for k in b if k not in a]
    differing = next(
        (k for k in keys if a.get(k, "<MISSING>") != b.get(k, "<MISSING>")),
        None
    )
    raise DeterminismError(
        section=first["section"],
        first_differing_key=differing,
        value_a=a.get(differing, "<MISSING>") if differing else None,
        value_b=b.get(differing, "<MISSING>") if differing else None,
        hash_a=first["section_hash"],
        hash_b=second["section_hash"],
    )


def _stable_json_bytes(obj: Any) -> bytes:
    """Sorted keys, compact separators, UTF-8."""
    return json.dumps(
        obj, sort_keys=True, ensure_ascii=False, separators=(',', ':')
    ).encode('utf-8')


def _check_value(value: Any, path: str) -> None:
    if value is None or isinstance(value, (bool, int, str)):
        return
    if isinstance(value, (list, tuple)):
        for i, item in enumerate(value):
            _check_value(item, f"{path}[{i}]")
        return
    if isinstance(value, dict):
        for k, v in value.items():
            if not isinstance(k, str):
                raise ReceiptError(f"Non-string dict key {k!r} at '{path}'")
            _check_value(v, f"{path}.{k}")
        return
    raise ReceiptError(
        f"Invalid type in receipts at '{path}': {type(value).__name__}. "
        f"Allowed: int, bool, str, None, list, tuple, dict."
    )


class ReceiptError(Exception):
    """Raised on a duplicate key or a value that is not JSON-safe."""
    pass


class DeterminismError(Exception):
    """Raised when two builds of the same receipts hash differently."""

    def __init__(
        self,
        section: str,
        first_differing_key: str | None,
        value_a: Any,
        value_b: Any,
        hash_a: str,
        hash_b: str
    ):
        self.section = section
        self.first_differing_key = first_differing_key
        self.value_a = value_a
        self.value_b = value_b
        self.hash_a = hash_a
        self.hash_b = hash_b
        super().__init__(
            f"Double-run hash mismatch in section '{section}': "
            f"key '{first_differing_key}' was {value_a!r} then {value_b!r} "
            f"({hash_a[:16]} != {hash_b[:16]})"
        )
