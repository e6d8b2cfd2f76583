"""
Process entry point: ``python -m zkpredicate``.

Reads the input channel (stdin) to completion, runs the guest and writes the
journal to stdout. An abort writes nothing to stdout and exits with the same
status whatever the cause.
"""

import sys

from zkpredicate import guest
from zkpredicate.config import load_config
from zkpredicate.env import read_input
from zkpredicate.exceptions import ConfigError


CONFIG_EXIT_CODE = 2


def main() -> int:
    try:
        config = load_config()
    except ConfigError as e:
        print(f"config error: {e}", file=sys.stderr)
        return CONFIG_EXIT_CODE

    input_data = read_input(sys.stdin.buffer)
    outcome = guest.run(input_data, config.expected)

    if not outcome.ok:
        print("guest aborted", file=sys.stderr)
        return outcome.exit_code

    sys.stdout.buffer.write(outcome.journal)
    sys.stdout.buffer.flush()
    return outcome.exit_code


if __name__ == "__main__":
    sys.exit(main())
