"""
Session Tests

Verifies:
  ✓ Decimal-string round trips for every query
  ✓ Parse errors and unconfigured use
  ✓ Kernel errors surface with kind and offending values
  ✓ Seed counter reproducibility across fresh sessions
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pairbit.core import (
    HierarchyError,
    NotAMember,
    EmptySBaseValues,
    ValueExceedsNBaseBits,
    InvalidHierarchicalLevel,
    ValueTooLargeForNBits,
    InvalidComponentCount,
)
from pairbit.session import (
    Session,
    ParseError,
    SessionNotConfigured,
    create_paired_entity,
    parse_unsigned,
    parse_base_values,
    parse_value_list,
)


@pytest.fixture
def session():
    s = Session()
    s.configure("0, 3", 2)
    return s


def test_queries_as_decimal_strings(session):
    assert session.is_member("3", 4) is True
    assert session.is_member("1", 4) is False
    assert session.decompose("3", 4) == ["0", "3"]
    assert session.decompose("60", 8) == ["0", "3", "3", "0"]
    assert session.compose(["0", "3"]) == {"value": "3", "n_bits": 4}

    print("✓ is_member / decompose / compose over decimal strings")


def test_compose_accepts_csv_string(session):
    """A string is split on commas like configure(), never per character."""
    assert session.compose("0,3") == {"value": "3", "n_bits": 4}
    assert session.compose("0, 3, 3, 0") == {"value": "60", "n_bits": 8}
    assert session.compose("03") == {"value": "3", "n_bits": 2}

    # Order and duplicates are kept, so three leaves stay three leaves
    with pytest.raises(InvalidComponentCount) as exc:
        session.compose("0,3,0")
    assert exc.value.count == 3

    with pytest.raises(ParseError):
        session.compose("0;3")

    print("✓ compose splits CSV strings")


def test_big_decimal_values():
    s = Session()
    s.configure(["1"], 1)
    x = str((1 << 256) - 1)
    assert s.is_member(x, 256)
    assert s.compose(s.decompose(x, 256)) == {"value": x, "n_bits": 256}

    print("✓ 256-bit decimal strings")


def test_parse_rules():
    assert parse_unsigned(" 42 ") == 42
    assert parse_base_values("0,,3, ") == {0, 3}
    assert parse_base_values(["5", " 6"]) == {5, 6}
    assert parse_value_list("3, 0,,3") == [3, 0, 3]

    for bad in ("", "-1", "+1", "1_0", "0x10", "abc", "1.5", "٣"):
        with pytest.raises(ParseError):
            parse_unsigned(bad)

    with pytest.raises(ParseError) as exc:
        Session().configure("0,x", 2)
    assert exc.value.text == "x"

    print("✓ Only plain decimal digits accepted")


def test_unconfigured_session():
    s = Session()
    assert not s.configured
    with pytest.raises(SessionNotConfigured):
        s.is_member("0", 2)
    with pytest.raises(SessionNotConfigured):
        s.random_member(2)

    print("✓ Queries before configure() fail")


def test_configure_errors_keep_previous(session):
    with pytest.raises(EmptySBaseValues):
        session.configure(" , ", 2)
    with pytest.raises(ValueExceedsNBaseBits) as exc:
        session.configure("0,1,4", 2)
    assert exc.value.details() == {"value": 4, "n_bits": 2, "max_val": 3}

    assert session.is_member("3", 4)

    print("✓ Failed configure keeps the previous pattern")


def test_kernel_errors_surface_losslessly(session):
    with pytest.raises(NotAMember) as exc:
        session.decompose("1", 4)
    assert exc.value.kind == "NotAMember"
    assert exc.value.details() == {"value": 1}

    with pytest.raises(InvalidHierarchicalLevel):
        session.is_member("0", 6)

    with pytest.raises(HierarchyError):
        session.compose(["0", "3", "0"])

    print("✓ Error kind + values reach the caller")


def test_random_member_seed_counter():
    a = Session()
    b = Session()
    a.configure("0,3", 2)
    b.configure("3,0", 2)
    assert a.seed == 12345

    offsets = [0, 1, 1, 7, 1 << 33]
    seq_a = [a.random_member(16, off) for off in offsets]
    seq_b = [b.random_member(16, off) for off in offsets]

    assert seq_a == seq_b
    assert a.seed == (12345 + 9 + (1 << 33)) % (1 << 32)
    for v in seq_a:
        assert a.is_member(v, 16)

    print("✓ Fresh sessions replay identical samples")


def test_receipts(session):
    digest = session.receipts([2, 4, 6, 8])
    payload = digest["payload"]

    assert [e["valid"] for e in payload["levels"]] == [True, True, False, True]
    assert [s["n_bits"] for s in payload["samples"]] == [2, 4, 8]
    assert all(s["is_member"] for s in payload["samples"])
    assert payload["all_roundtrip_ok"] is True
    assert session.receipts([2, 4, 6, 8]) == digest

    print("✓ Session receipts are reproducible")


def test_create_paired_entity():
    assert create_paired_entity("5", 4) == {"x": "5", "x_prime": "10", "n_bits": 4}
    assert create_paired_entity("12", 4) == {"x": "12", "x_prime": "3", "n_bits": 4}
    with pytest.raises(ValueTooLargeForNBits):
        create_paired_entity("16", 4)

    print("✓ Paired entity as decimal strings")
