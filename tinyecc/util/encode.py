"""
Copyright (c) 2020, Brian Stafford
Copyright (c) 2020, the Decred developers
See LICENSE for details

Octet-string primitives shared by the field, the point codecs and
hash-to-field.
"""

from tinyecc import EccError


BIG_ENDIAN = "big"
LITTLE_ENDIAN = "little"


def i2osp(i, length, byteorder=BIG_ENDIAN):
    """
    Encodes a non-negative integer as an octet string of fixed length.

    Args:
        i (int): The integer.
        length (int): The number of bytes to produce.
        byteorder (str): "big" or "little".

    Returns:
        bytes: The encoded integer.

    Raises:
        EccError if i is negative or does not fit in length bytes.
    """
    if i < 0 or i >= 1 << (8 * length):
        raise EccError(f"integer too large for {length} bytes")
    return i.to_bytes(length, byteorder)


def os2ip(b, byteorder=BIG_ENDIAN):
    """
    Decodes an octet string as a non-negative integer.

    Args:
        b (bytes-like): The encoded integer.
        byteorder (str): "big" or "little".

    Returns:
        int: The decoded integer.
    """
    return int.from_bytes(b, byteorder)


def strxor(a, b):
    """
    Bytewise XOR of two octet strings of the same length.

    Args:
        a (bytes-like): The first string.
        b (bytes-like): The second string.

    Returns:
        bytes: a XOR b.
    """
    if len(a) != len(b):
        raise EccError(f"strxor length mismatch {len(a)} != {len(b)}")
    return bytes(x ^ y for x, y in zip(a, b))


def byteLength(bits):
    """
    The number of bytes needed to hold an integer of the given bit length.
    """
    return (bits + 7) // 8
