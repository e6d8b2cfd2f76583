"""
Canonical ABI encoding for the values a guest reads and commits.

This module provides:
1. The uint256 word codec used on both the input and the journal
2. Small normalizing helpers for host code that prepares guest input

A Solidity-style ABI word is exactly 32 bytes, big-endian, left padded with
zeros. Decoding is strict: the buffer must be one whole word with nothing
before or after it.
"""

from typing import Union, List

from zkpredicate.exceptions import DecodeFault


WORD_SIZE = 32
UINT256_MAX = (1 << 256) - 1


def _as_bytes(data) -> bytes:
    if isinstance(data, (list, tuple)):
        return bytes(data)
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, bytes):
        return data
    if hasattr(data, 'tobytes'):  # numpy arrays, array.array
        return data.tobytes()
    return bytes(data)


def to_uint256(value: int) -> bytes:
    """
    Serialize an integer as an ABI uint256.

    Format: 32 bytes, big-endian, zero padded on the left

    Args:
        value: Integer value (0 to 2^256-1)

    Returns:
        The 32-byte ABI word

    Raises:
        TypeError: If value is not an int (bool is rejected too)
        ValueError: If value is out of range for uint256

    Example:
        >>> to_uint256(12345).hex()
        '0000000000000000000000000000000000000000000000000000000000003039'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    if value < 0 or value > UINT256_MAX:
        raise ValueError(f"Value out of range for uint256: {value}")

    return value.to_bytes(WORD_SIZE, 'big')


def from_uint256(data: Union[bytes, bytearray, memoryview]) -> int:
    """
    Deserialize an ABI uint256.

    Every 32-byte word is a valid uint256, so the only malformed inputs are
    the ones with the wrong length: empty, short, or carrying trailing bytes.

    Args:
        data: Exactly 32 bytes

    Returns:
        The decoded integer

    Raises:
        DecodeFault: If data is not bytes-like or not exactly 32 bytes
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise DecodeFault(f"Expected bytes, got {type(data).__name__}")
    # len() of a memoryview counts items, not bytes
    data = bytes(data)
    if len(data) != WORD_SIZE:
        raise DecodeFault(f"Expected exactly {WORD_SIZE} bytes, got {len(data)}")

    return int.from_bytes(data, 'big')


def to_bytes32(data: Union[bytes, bytearray, List[int]]) -> bytes:
    """
    Ensure data is exactly one 32-byte word.

    Args:
        data: Exactly 32 bytes of data

    Returns:
        Raw 32 bytes

    Raises:
        ValueError: If data is not exactly 32 bytes
    """
    data = _as_bytes(data)

    if len(data) != WORD_SIZE:
        raise ValueError(f"Expected exactly {WORD_SIZE} bytes, got {len(data)}")

    return data


def raw_bytes(data: Union[bytes, bytearray, List[int]]) -> bytes:
    """
    Pass through raw bytes without any transformation or length prefix.

    Useful for feeding deliberately malformed input to a guest.

    Example:
        >>> raw_bytes([0, 1])
        b'\\x00\\x01'
    """
    return _as_bytes(data)


def uint256_input(value: Union[int, bytes, bytearray, List[int]]) -> bytes:
    """
    Build the input buffer for a guest that reads a single uint256.

    Args:
        value: Integer in [0, 2**256), or an already encoded 32-byte word

    Raises:
        ValueError: If value is out of range or the word is not 32 bytes

    Example:
        input_data = uint256_input(12345)
        outcome = zkpredicate.run(input_data)
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return to_uint256(value)
    return to_bytes32(value)
