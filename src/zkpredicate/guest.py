"""
The guest predicate routine.

A guest reads untrusted bytes, decodes them under a fixed schema, evaluates
a pure predicate and, only if it holds, commits a public value to the
journal. Every failure is an abort. The caller sees a single aborted outcome
and cannot learn whether decoding or the predicate failed.
"""

import io
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import cbor2

from zkpredicate import serialization
from zkpredicate.config import PREDEFINED_NUMBER
from zkpredicate.env import GuestEnv
from zkpredicate.exceptions import GuestFault, PredicateFault, SerializationError


# Exit code of a panicking Rust guest
ABORT_EXIT_CODE = 101


class ExitKind(Enum):
    HALTED = "halted"
    ABORTED = "aborted"


@dataclass(frozen=True)
class Outcome:
    """
    Result of one guest execution.

    A halted outcome always carries the journal; an aborted one never does.
    """

    exit_kind: ExitKind
    journal: Optional[bytes] = None

    def __post_init__(self):
        if self.exit_kind is ExitKind.HALTED and self.journal is None:
            raise ValueError("Halted outcome requires a journal")
        if self.exit_kind is ExitKind.ABORTED and self.journal is not None:
            raise ValueError("Aborted outcome cannot carry a journal")

    @classmethod
    def halted(cls, journal: bytes) -> "Outcome":
        return cls(ExitKind.HALTED, bytes(journal))

    @classmethod
    def aborted(cls) -> "Outcome":
        return cls(ExitKind.ABORTED)

    @property
    def ok(self) -> bool:
        return self.exit_kind is ExitKind.HALTED

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else ABORT_EXIT_CODE

    @property
    def journal_hex(self) -> Optional[str]:
        return self.journal.hex() if self.journal is not None else None

    def to_cbor(self) -> bytes:
        """Encode as a canonical CBOR array: [exit_kind, journal or null]."""
        return cbor2.dumps([self.exit_kind.value, self.journal], canonical=True)

    @classmethod
    def from_cbor(cls, data: bytes) -> "Outcome":
        """
        Decode an outcome produced by to_cbor().

        Raises:
            SerializationError: If data is not exactly one valid encoded outcome
        """
        decoder = cbor2.CBORDecoder(io.BytesIO(data))
        try:
            payload = decoder.decode()
        except cbor2.CBORDecodeError as e:
            raise SerializationError(f"Invalid CBOR outcome: {e}")

        # Exactly one item: a second decode must hit end of input
        try:
            decoder.decode()
        except cbor2.CBORDecodeEOF:
            pass
        except cbor2.CBORDecodeError:
            raise SerializationError("Trailing bytes after CBOR outcome")
        else:
            raise SerializationError("Trailing bytes after CBOR outcome")

        if not isinstance(payload, list) or len(payload) != 2:
            raise SerializationError("Outcome must be a 2-element CBOR array")
        kind, journal = payload
        try:
            exit_kind = ExitKind(kind)
        except ValueError:
            raise SerializationError(f"Unknown exit kind: {kind!r}")
        if journal is not None and not isinstance(journal, bytes):
            raise SerializationError("Outcome journal must be a byte string")

        try:
            return cls(exit_kind, journal)
        except ValueError as e:
            raise SerializationError(str(e))


def check(value: int, expected: int) -> bool:
    return value == expected


def main(env: GuestEnv, expected: int = PREDEFINED_NUMBER) -> None:
    """
    Run the routine against env.

    Raises:
        DecodeFault: If the input is not one canonical uint256 word
        PredicateFault: If the decoded value is not equal to expected
    """
    input_bytes = env.read_to_end()

    value = serialization.from_uint256(input_bytes)

    if not check(value, expected):
        raise PredicateFault("Input does not match the predefined value")

    env.commit_slice(serialization.to_uint256(value))


def run(input_data: bytes, expected: int = PREDEFINED_NUMBER) -> Outcome:
    """
    Execute the guest on input_data and report a two-valued outcome.

    Args:
        input_data: Raw bytes for the input channel
        expected: The predefined value; defaults to PREDEFINED_NUMBER

    Returns:
        Outcome.halted(journal) on success, Outcome.aborted() otherwise

    Example:
        outcome = run(serialization.uint256_input(12345))
        assert outcome.ok
    """
    env = GuestEnv(input_data)
    try:
        main(env, expected)
    except GuestFault:
        return Outcome.aborted()
    return Outcome.halted(env.journal)
