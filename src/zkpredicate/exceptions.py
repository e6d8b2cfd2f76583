"""
Custom exception hierarchy for zkpredicate.

Faults raised inside the guest routine all derive from GuestFault. They are
caught at the guest boundary and collapsed into a single aborted outcome, so
nothing outside an execution can tell which one occurred.
"""


class GuestError(Exception):
    """Base exception for all zkpredicate errors."""
    pass


class SerializationError(GuestError):
    """
    Raised when serialization/deserialization fails.

    This indicates:
    - Size mismatches (e.g., expected 32 bytes, got different)
    - Invalid format for the expected type
    """
    pass


class GuestFault(GuestError):
    """
    Base class for faults that abort a guest execution.

    A fault is never reported to the host as such. The execution simply
    produces no journal.
    """
    pass


class DecodeFault(GuestFault, SerializationError):
    """Raised when the input bytes are not a canonical uint256 encoding."""
    pass


class PredicateFault(GuestFault):
    """Raised when the decoded value does not satisfy the predicate."""
    pass


class JournalError(GuestFault):
    """Raised when the guest tries to commit to the journal more than once."""
    pass


class ConfigError(GuestError):
    """
    Raised when the guest configuration is invalid.

    This indicates:
    - Missing or unreadable config file
    - Malformed TOML
    - Missing, ill-typed or out-of-range expected value
    """
    pass


class VerificationError(GuestError):
    """
    Raised when a journal cannot be checked.

    This indicates:
    - The execution aborted, so there is no journal
    - The journal is not a canonical uint256 encoding
    """
    pass


class ExecutionError(GuestError):
    """Raised when the host cannot launch or finish a guest process."""
    pass
