"""
MIDI variable-length quantity (VLQ) encoding/decoding utilities.

Standard MIDI Files store delta-times (and meta/SysEx lengths) as
variable-length quantities: 7 payload bits per byte, big-endian, with
bit 7 set on every byte except the last.

Encoding scheme:
- Split the value into 7-bit groups, most significant first
- Set the high bit on every group except the final one
- Values up to 0x0FFFFFFF fit in at most 4 bytes

Example:
    Value:   0x2000 (8192)
    Groups:  0b1000000, 0b0000000
    Output:  [0xC0, 0x00]
"""

from typing import Tuple

# Largest value representable in 4 VLQ bytes
MAX_VARLEN = 0x0FFFFFFF

# SMF limits a quantity to 4 bytes
MAX_VARLEN_BYTES = 4


class VarLenError(ValueError):
    """Raised when a variable-length quantity cannot be decoded."""

    pass


def decode_varlen(data: bytes, pos: int = 0) -> Tuple[int, int]:
    """
    Decode a variable-length quantity starting at ``pos``.

    Args:
        data: Buffer containing the quantity
        pos: Offset of the first byte

    Returns:
        Tuple of (value, position after the last byte)

    Raises:
        VarLenError: If the buffer ends mid-quantity or the quantity
            is longer than 4 bytes

    Example:
        >>> decode_varlen(bytes([0x81, 0x00, 0x90]))
        (128, 2)
    """
    value = 0

    for count in range(MAX_VARLEN_BYTES):
        if pos >= len(data):
            raise VarLenError(f"Truncated variable-length quantity at offset {pos}")

        byte = data[pos]
        pos += 1
        value = (value << 7) | (byte & 0x7F)

        if not byte & 0x80:
            return value, pos

    raise VarLenError(f"Variable-length quantity longer than {MAX_VARLEN_BYTES} bytes")


def encode_varlen(value: int) -> bytes:
    """
    Encode a non-negative integer as a variable-length quantity.

    Args:
        value: Integer in the range 0..0x0FFFFFFF

    Returns:
        1-4 encoded bytes

    Example:
        >>> encode_varlen(0x2000)
        b'\\xc0\\x00'
    """
    if not 0 <= value <= MAX_VARLEN:
        raise VarLenError(f"Value out of VLQ range: {value}")

    result = bytearray([value & 0x7F])
    value >>= 7

    while value:
        result.insert(0, (value & 0x7F) | 0x80)
        value >>= 7

    return bytes(result)

