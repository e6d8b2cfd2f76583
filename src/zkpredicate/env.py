"""
Guest environment: the input channel and the journal.

The input is read to completion before the routine starts and held in
memory. The journal accepts exactly one commit.
"""

from typing import BinaryIO, Optional

from zkpredicate.exceptions import JournalError


def read_input(stream: BinaryIO) -> bytes:
    """Block until the stream reaches end-of-input and return everything read."""
    chunks = []
    while True:
        chunk = stream.read()
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)


class GuestEnv:
    """Channels available to one guest execution."""

    def __init__(self, input_data: bytes = b""):
        self._input = bytes(input_data)
        self._journal: Optional[bytes] = None

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> "GuestEnv":
        return cls(read_input(stream))

    def read_to_end(self) -> bytes:
        return self._input

    def commit_slice(self, data: bytes) -> None:
        """
        Write data to the journal.

        Raises:
            JournalError: If something has already been committed
        """
        if self._journal is not None:
            raise JournalError("Journal has already been committed")
        self._journal = bytes(data)

    @property
    def committed(self) -> bool:
        return self._journal is not None

    @property
    def journal(self) -> Optional[bytes]:
        return self._journal
