"""
Session: caller-owned handle for text-based callers.

Holds one configured Propagator and a seed counter. All values cross this
boundary as decimal strings; the kernel only ever sees ints. There is no
module-level session: each caller creates and owns its own, and a session
must not be shared between threads without external locking (the seed
counter is mutable).
"""

import logging
from typing import Iterable

from .core.registry import DEFAULT_SEED, LCG_MODULUS
from .kernel import InitialPattern, PairedEntity, Propagator, LcgSource, propagator_receipts

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """Raised when a decimal string cannot be read as an unsigned integer."""

    def __init__(self, text: str, what: str):
        self.text = text
        self.what = what
        super().__init__(f"Invalid unsigned integer for {what}: '{text}'")


class SessionNotConfigured(RuntimeError):
    """Raised when a session is queried before configure()."""

    def __init__(self):
        super().__init__("Session not configured. Call configure() first.")


def parse_unsigned(text: str, what: str = "value") -> int:
    """
    Parse a decimal string as an unsigned integer.

    Surrounding whitespace is ignored. Signs, underscores, and non-decimal
    digits are rejected.

    Raises:
        ParseError: If text is not a plain decimal number.
    """
    stripped = str(text).strip()
    if not stripped or not stripped.isascii() or not stripped.isdigit():
        raise ParseError(str(text), what)
    return int(stripped)


def parse_value_list(values: str | Iterable[str], what: str = "value") -> list[int]:
    """
    Parse a comma-separated string or a list of strings, keeping order and
    duplicates. Blank entries are skipped.

    Raises:
        ParseError: If an entry is not a plain decimal number.
    """
    items = values.split(",") if isinstance(values, str) else list(values)
    return [parse_unsigned(item, what) for item in items if str(item).strip()]


def parse_base_values(values: str | Iterable[str]) -> set[int]:
    """Base values as a set; same input forms as parse_value_list."""
    return set(parse_value_list(values, "s_base value"))


class Session:
    """
    Text-facing wrapper around one Propagator.

    Errors from the kernel propagate unchanged as HierarchyError subclasses,
    so callers can report err.kind and err.details() losslessly.
    """

    def __init__(self, seed: int = DEFAULT_SEED):
        self._propagator: Propagator | None = None
        self.seed = seed % LCG_MODULUS

    @property
    def propagator(self) -> Propagator:
        if self._propagator is None:
            raise SessionNotConfigured()
        return self._propagator

    @property
    def configured(self) -> bool:
        return self._propagator is not None

    def configure(self, s_base_values: str | Iterable[str], n_base_bits: int) -> None:
        """
        Validate a base pattern and install a fresh Propagator.

        On failure the previous configuration (if any) is kept.

        Raises:
            ParseError: If a base value is not a decimal number.
            HierarchyError: If InitialPattern validation fails.
        """
        values = parse_base_values(s_base_values)
        pattern = InitialPattern.new(values, n_base_bits)
        self._propagator = Propagator(pattern)
        logger.debug(
            "configured pattern: n_base_bits=%d, |S_base|=%d",
            n_base_bits, len(pattern)
        )

    def is_member(self, x_target: str, n_target_bits: int) -> bool:
        x = parse_unsigned(x_target, "x_target")
        return self.propagator.is_member(x, n_target_bits)

    def decompose(self, x_target: str, n_target_bits: int) -> list[str]:
        x = parse_unsigned(x_target, "x_target")
        leaves = self.propagator.decompose_to_base(x, n_target_bits)
        return [str(leaf) for leaf in leaves]

    def compose(self, components: str | Iterable[str]) -> dict:
        """
        Components as a comma-separated string or a list of strings, in
        decomposition order. Returns {"value": decimal string, "n_bits": width}.
        """
        parsed = parse_value_list(components, "component")
        value, n_bits = self.propagator.compose_from_base(parsed)
        return {"value": str(value), "n_bits": n_bits}

    def random_member(self, n_target_bits: int, seed_offset: int = 0) -> str:
        """
        Sample a member with a fresh LcgSource.

        The session seed counter advances by seed_offset (mod 2^32) before
        each draw, so the same sequence of calls on two new sessions yields
        the same sequence of values.
        """
        propagator = self.propagator
        self.seed = (self.seed + seed_offset) % LCG_MODULUS
        logger.debug("sampling n_bits=%d with seed=%d", n_target_bits, self.seed)
        value = propagator.generate_random_s_n_member(n_target_bits, LcgSource(self.seed))
        return str(value)

    def receipts(self, levels: list[int], seed: int | None = None) -> dict:
        """Hashed run record for the configured pattern (see propagator_receipts)."""
        run_seed = self.seed if seed is None else seed
        return propagator_receipts(self.propagator, levels, run_seed).digest()


def create_paired_entity(x: str, n_bits: int) -> dict:
    """
    Pair a decimal value with its complement (non-canonical order).

    Returns:
        dict: {"x": str, "x_prime": str, "n_bits": int}
    """
    entity = PairedEntity.new(parse_unsigned(x, "x"), n_bits)
    return {"x": str(entity.x), "x_prime": str(entity.x_prime), "n_bits": entity.n_bits}
