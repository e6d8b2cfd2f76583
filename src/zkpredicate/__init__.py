from zkpredicate import serialization
from zkpredicate.config import (
    PREDEFINED_NUMBER,
    GuestConfig,
    load_config,
)
from zkpredicate.env import GuestEnv, read_input
from zkpredicate.guest import (
    ABORT_EXIT_CODE,
    ExitKind,
    Outcome,
    check,
    run,
)
from zkpredicate.host import dry_run, decode_journal
from zkpredicate.exceptions import (
    GuestError,
    SerializationError,
    GuestFault,
    DecodeFault,
    PredicateFault,
    JournalError,
    ConfigError,
    VerificationError,
    ExecutionError,
)

__all__ = [
    # Core API functions
    "run",
    "check",
    "load_config",

    # Host functions
    "dry_run",
    "decode_journal",

    # Modules and classes
    "serialization",
    "GuestEnv",
    "GuestConfig",
    "Outcome",
    "ExitKind",
    "read_input",

    # Constants
    "PREDEFINED_NUMBER",
    "ABORT_EXIT_CODE",

    # Exceptions
    "GuestError",
    "SerializationError",
    "GuestFault",
    "DecodeFault",
    "PredicateFault",
    "JournalError",
    "ConfigError",
    "VerificationError",
    "ExecutionError",
]
