"""
Host-side helpers for executing the guest in an isolated process.

These do not generate proofs. They run the guest the way a prover would
drive it, one process per execution, and report the outcome.
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import Optional

from zkpredicate import serialization
from zkpredicate.config import CONFIG_ENV_VAR
from zkpredicate.exceptions import DecodeFault, ExecutionError, VerificationError
from zkpredicate.guest import ABORT_EXIT_CODE, Outcome


def dry_run(
    input_data: bytes,
    config_path: Optional[str | Path] = None,
    timeout: Optional[float] = None,
) -> Outcome:
    """
    Execute the guest in a child process and return its outcome.

    Args:
        input_data: Bytes fed to the guest's stdin (any bytes-like or list of ints)
        config_path: Optional TOML config passed to the guest via $ZKPREDICATE_CONFIG.
                     When None the guest runs with the built-in default, even if
                     the caller has $ZKPREDICATE_CONFIG set.
        timeout: Seconds to wait before giving up

    Returns:
        Outcome of the execution. Anything the guest wrote to stdout before
        aborting is discarded.

    Raises:
        ExecutionError: If the guest cannot be launched, times out, or exits
                        for a reason other than an abort (e.g. bad config)
    """
    env = dict(os.environ)
    # The child only sees the config it is given, never the caller's
    env.pop(CONFIG_ENV_VAR, None)
    if config_path is not None:
        env[CONFIG_ENV_VAR] = str(Path(config_path).resolve())

    cmd = [sys.executable, "-m", "zkpredicate"]

    try:
        result = subprocess.run(
            cmd,
            input=serialization.raw_bytes(input_data),
            capture_output=True,
            env=env,
            timeout=timeout,
            check=False
        )
    except FileNotFoundError:
        raise ExecutionError(f"Python interpreter not found: {sys.executable}")
    except subprocess.TimeoutExpired:
        raise ExecutionError(f"Guest did not finish within {timeout} seconds")
    except subprocess.SubprocessError as e:
        raise ExecutionError(f"Failed to run guest: {e}")

    if result.returncode == 0:
        return Outcome.halted(result.stdout)
    if result.returncode == ABORT_EXIT_CODE:
        return Outcome.aborted()

    error_msg = f"Guest process failed with exit code {result.returncode}"
    if result.stderr:
        # Show last 10 lines of error
        stderr_lines = result.stderr.decode("utf-8", "replace").strip().split('\n')
        relevant_errors = '\n'.join(stderr_lines[-10:])
        error_msg += f"\n\n{relevant_errors}"
    raise ExecutionError(error_msg)


def decode_journal(outcome: Outcome) -> int:
    """
    Decode the uint256 committed by a halted execution.

    Raises:
        VerificationError: If the execution aborted or the journal is malformed
    """
    if not outcome.ok:
        raise VerificationError("Execution aborted; there is no journal")
    try:
        return serialization.from_uint256(outcome.journal)
    except DecodeFault as e:
        raise VerificationError(f"Journal is not a uint256: {e}")
