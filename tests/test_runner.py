"""
CLI Runner Tests

Verifies JSON output and exit codes of every subcommand.
"""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pairbit.runner import main

BASE = ["--base", "0,3", "--base-bits", "2"]


def test_member(capsys):
    assert main(["member", "3", "4", *BASE]) == 0
    assert json.loads(capsys.readouterr().out) == {"is_member": True}

    assert main(["member", "1", "4", *BASE]) == 0
    assert json.loads(capsys.readouterr().out) == {"is_member": False}

    print("✓ member")


def test_decompose_and_compose(capsys):
    assert main(["decompose", "60", "8", *BASE]) == 0
    assert json.loads(capsys.readouterr().out) == {"components": ["0", "3", "3", "0"]}

    assert main(["compose", "0", "3", "3", "0", *BASE]) == 0
    assert json.loads(capsys.readouterr().out) == {"value": "60", "n_bits": 8}

    print("✓ decompose / compose")


def test_hierarchy_error_exit_code(capsys):
    assert main(["decompose", "1", "4", *BASE]) == 1
    err = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert err["error"] == "NotAMember"
    assert err["details"] == {"value": "1"}

    assert main(["compose", "0", "3", "0", *BASE]) == 1
    err = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert err["error"] == "InvalidComponentCount"
    assert err["details"] == {"count": 3}

    assert main(["member", "0", "6", *BASE]) == 1
    err = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert err["details"] == {"target_n_bits": 6, "base_n_bits": 2}

    print("✓ Hierarchy errors exit 1 with kind + details")


def test_parse_error_exit_code(capsys):
    assert main(["member", "abc", "4", *BASE]) == 1
    err = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert err["error"] == "ParseError"

    assert main(["member", "0", "4", "--base", "0,4", "--base-bits", "2"]) == 1
    err = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert err["error"] == "ValueExceedsNBaseBits"
    # Values as decimal strings, widths as ints, as in success output
    assert err["details"] == {"value": "4", "n_bits": 2, "max_val": "3"}

    print("✓ Parse and configure errors exit 1")


def test_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["member"])
    assert exc.value.code == 2

    print("✓ Usage errors exit 2")


def test_random_reproducible(capsys):
    assert main(["random", "16", *BASE, "--seed", "7"]) == 0
    first = json.loads(capsys.readouterr().out)["value"]
    assert main(["random", "16", *BASE, "--seed", "7"]) == 0
    second = json.loads(capsys.readouterr().out)["value"]

    assert first == second
    assert main(["member", first, "16", *BASE]) == 0
    assert json.loads(capsys.readouterr().out) == {"is_member": True}

    print("✓ random is reproducible and closed")


def test_pair(capsys):
    assert main(["pair", "12", "4"]) == 0
    assert json.loads(capsys.readouterr().out) == {"x": "12", "x_prime": "3", "n_bits": 4}

    assert main(["pair", "12", "4", "--canonical"]) == 0
    assert json.loads(capsys.readouterr().out) == {"x": "3", "x_prime": "12", "n_bits": 4}

    print("✓ pair")


def test_receipts_determinism_check(capsys):
    assert main(["receipts", *BASE, "--max-depth", "4", "--determinism-check"]) == 0
    digest = json.loads(capsys.readouterr().out)

    assert digest["determinism.double_run_ok"] is True
    assert digest["payload"]["all_roundtrip_ok"] is True
    assert [e["n_bits"] for e in digest["payload"]["levels"]] == [2, 4, 8, 16, 32]

    print("✓ receipts with determinism check")
