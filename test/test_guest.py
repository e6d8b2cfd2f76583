#!/usr/bin/env python3
"""
Test the guest predicate routine.

Covers the four reference scenarios plus the properties every guest of this
shape must hold:
- a journal exists only on success, and always encodes the predefined value
- decode and predicate failures are indistinguishable to the caller
- repeated runs on the same input commit byte-identical journals
"""

import sys

import zkpredicate
from zkpredicate import guest, serialization
from zkpredicate.env import GuestEnv
from zkpredicate.exceptions import DecodeFault, PredicateFault


def test_scenario_match():
    """12345 is accepted and committed."""
    print("Scenario 1: input 12345...")

    outcome = guest.run(serialization.uint256_input(12345))
    assert outcome.ok
    assert outcome.exit_kind is guest.ExitKind.HALTED
    assert outcome.exit_code == 0
    assert outcome.journal == serialization.to_uint256(12345)
    assert serialization.from_uint256(outcome.journal) == zkpredicate.PREDEFINED_NUMBER
    print(f"   ✓ Committed {outcome.journal_hex}")


def test_scenario_mismatch():
    """12344 aborts with no journal."""
    print("Scenario 2: input 12344...")

    outcome = guest.run(serialization.uint256_input(12344))
    assert not outcome.ok
    assert outcome.journal is None
    assert outcome.journal_hex is None
    assert outcome.exit_code == guest.ABORT_EXIT_CODE
    print("   ✓ Aborted, no journal")


def test_scenario_empty():
    """Empty input is a decode abort."""
    print("Scenario 3: empty input...")

    outcome = guest.run(b"")
    assert outcome == guest.Outcome.aborted()
    print("   ✓ Aborted, no journal")


def test_scenario_zero():
    """0 aborts."""
    print("Scenario 4: input 0...")

    outcome = guest.run(serialization.uint256_input(0))
    assert outcome == guest.Outcome.aborted()
    print("   ✓ Aborted, no journal")


def test_wrong_length_aborts():
    """31 and 33 byte buffers abort even when they carry the right digits."""
    print("Testing wrong-length inputs...")

    word = serialization.to_uint256(12345)
    for bad in (word[1:], word + b"\x00", b"\x00" + word):
        outcome = guest.run(bad)
        assert not outcome.ok
        assert outcome.journal is None
        print(f"   ✓ {len(bad)}-byte input aborted")


def test_faults_are_indistinguishable():
    """Decode and predicate failures produce equal outcomes."""
    print("Testing fault indistinguishability...")

    decode_failure = guest.run(b"\x01\x02")
    predicate_failure = guest.run(serialization.uint256_input(1))
    assert decode_failure == predicate_failure
    assert decode_failure.to_cbor() == predicate_failure.to_cbor()
    print("   ✓ Outcomes are identical")


def test_main_raises_specific_faults():
    """Inside the routine each fault keeps its own type."""
    print("Testing main() fault types...")

    env = GuestEnv(b"\x00" * 31)
    try:
        guest.main(env)
    except DecodeFault:
        print("   ✓ Short input raises DecodeFault")
    else:
        raise AssertionError("main() should raise DecodeFault")
    assert not env.committed

    env = GuestEnv(serialization.uint256_input(12344))
    try:
        guest.main(env)
    except PredicateFault as e:
        assert "12344" not in str(e)
        assert "12345" not in str(e)
        print("   ✓ Mismatch raises PredicateFault without leaking values")
    else:
        raise AssertionError("main() should raise PredicateFault")
    assert not env.committed


def test_main_commits_once():
    """A successful run commits exactly once."""
    print("Testing main() commit...")

    env = GuestEnv(serialization.uint256_input(12345))
    guest.main(env)
    assert env.committed
    assert env.journal == serialization.to_uint256(12345)
    print("   ✓ Journal committed")


def test_injected_expected_value():
    """The predefined value is injected, not hard-wired."""
    print("Testing custom expected values...")

    big = 2**255 + 1
    outcome = guest.run(serialization.uint256_input(big), expected=big)
    assert outcome.ok
    assert serialization.from_uint256(outcome.journal) == big
    print("   ✓ Large expected value accepted")

    assert not guest.run(serialization.uint256_input(12345), expected=big).ok
    print("   ✓ Default value rejected under another expected value")


def test_idempotence():
    """Independent runs on the same input commit identical bytes."""
    print("Testing idempotence...")

    input_data = serialization.uint256_input(12345)
    journals = {guest.run(input_data).journal for _ in range(5)}
    assert len(journals) == 1
    print("   ✓ 5 runs, 1 distinct journal")


def test_committed_value_always_matches():
    """Across a spread of inputs, every journal encodes the expected value."""
    print("Testing commitment invariant...")

    candidates = [0, 1, 12344, 12345, 12346, 2**64, 2**256 - 1]
    for value in candidates:
        outcome = guest.run(serialization.uint256_input(value))
        if outcome.ok:
            assert serialization.from_uint256(outcome.journal) == 12345
        else:
            assert outcome.journal is None
        assert outcome.ok == (value == 12345)
    print(f"   ✓ Checked {len(candidates)} inputs")


def test_check_is_pure_equality():
    assert guest.check(5, 5)
    assert not guest.check(5, 6)


def main():
    """Run guest routine tests."""
    print("\n" + "╔" + "=" * 58 + "╗")
    print("║" + " " * 17 + "Guest Routine Test Suite" + " " * 17 + "║")
    print("╚" + "=" * 58 + "╝")

    tests = [
        test_scenario_match,
        test_scenario_mismatch,
        test_scenario_empty,
        test_scenario_zero,
        test_wrong_length_aborts,
        test_faults_are_indistinguishable,
        test_main_raises_specific_faults,
        test_main_commits_once,
        test_injected_expected_value,
        test_idempotence,
        test_committed_value_always_matches,
        test_check_is_pure_equality,
    ]
    failed = 0
    for test in tests:
        try:
            test()
        except AssertionError as e:
            print(f"   ❌ {test.__name__} failed: {e}")
            failed += 1

    print("\n" + "=" * 60)
    if failed == 0:
        print("✅ All guest routine tests passed!")
        return 0
    print(f"❌ {failed} test(s) failed")
    return 1


if __name__ == "__main__":
    sys.exit(main())
