"""
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Hashing byte strings to field elements.

References:
  [RFC9380]: Hashing to Elliptic Curves, section 5
    https://www.rfc-editor.org/rfc/rfc9380
"""

import hashlib

from blake256.blake256 import blake_hash

from tinyecc import EccError, UnsupportedParameter
from tinyecc.util.encode import i2osp, os2ip, strxor


MAX_DST_LEN = 255
MAX_EXPAND_LEN = 65535
OVERSIZE_DST_PREFIX = b"H2C-OVERSIZE-DST-"

EXPANDER_XMD = "xmd"
EXPANDER_XOF = "xof"


class HashID:
    """
    HashID describes a hash function and the expand_message variant it is
    used with. Merkle-Damgard functions use expand_message_xmd, extendable
    output functions use expand_message_xof.
    """

    def __init__(self, name, expander, func, blockSize, outputSize, securityLevel):
        """
        Args:
            name (str): The hash name.
            expander (str): EXPANDER_XMD or EXPANDER_XOF.
            func (func(bytes, int) -> bytes): The hash function. The second
                argument is the output length, used by XOFs only.
            blockSize (int): The input block size in bytes, s_in_bytes.
            outputSize (int): The digest size in bytes, b_in_bytes. XOFs
                have no fixed output size, so this is 0 for them.
            securityLevel (int): The security level k in bits.
        """
        self.name = name
        self.expander = expander
        self.func = func
        self.blockSize = blockSize
        self.outputSize = outputSize
        self.securityLevel = securityLevel

    def __repr__(self):
        return f"HashID({self.name})"

    def digest(self, b, length=None):
        return self.func(b, length)


SHA256 = HashID(
    "SHA256", EXPANDER_XMD, lambda b, _: hashlib.sha256(b).digest(), 64, 32, 128
)
SHA384 = HashID(
    "SHA384", EXPANDER_XMD, lambda b, _: hashlib.sha384(b).digest(), 128, 48, 192
)
SHA512 = HashID(
    "SHA512", EXPANDER_XMD, lambda b, _: hashlib.sha512(b).digest(), 128, 64, 256
)
BLAKE256 = HashID("BLAKE256", EXPANDER_XMD, lambda b, _: blake_hash(b), 64, 32, 128)
SHAKE128 = HashID(
    "SHAKE128", EXPANDER_XOF, lambda b, n: hashlib.shake_128(b).digest(n), 168, 0, 128
)
SHAKE256 = HashID(
    "SHAKE256", EXPANDER_XOF, lambda b, n: hashlib.shake_256(b).digest(n), 136, 0, 256
)

the_hashes = {h.name: h for h in (SHA256, SHA384, SHA512, BLAKE256, SHAKE128, SHAKE256)}


def parseHash(name):
    """
    Get the HashID for the hash name.
    """
    try:
        return the_hashes[name]
    except KeyError:
        raise EccError(f"unrecognized hash name {name}")


def _reduceDST(hashID, dst):
    """
    DSTs longer than 255 bytes are hashed down, section 5.3.3 of [RFC9380].
    """
    dst = bytes(dst)
    if len(dst) <= MAX_DST_LEN:
        return dst
    if hashID.expander == EXPANDER_XMD:
        return hashID.digest(OVERSIZE_DST_PREFIX + dst)
    return hashID.digest(OVERSIZE_DST_PREFIX + dst, (2 * hashID.securityLevel + 7) // 8)


def expandMessageXMD(hashID, msg, dst, lenInBytes):
    """
    expand_message_xmd from section 5.3.1 of [RFC9380].

    Args:
        hashID (HashID): A Merkle-Damgard hash.
        msg (bytes-like): The message.
        dst (bytes-like): The domain separation tag.
        lenInBytes (int): The number of bytes to produce.

    Returns:
        bytes: A uniformly random byte string of length lenInBytes.

    Raises:
        UnsupportedParameter if lenInBytes exceeds 255 hash outputs or 65535.
    """
    if hashID.expander != EXPANDER_XMD:
        raise UnsupportedParameter(f"{hashID.name} is not an {EXPANDER_XMD} hash")
    bLen = hashID.outputSize
    ell = (lenInBytes + bLen - 1) // bLen
    if ell > 255 or lenInBytes > MAX_EXPAND_LEN:
        raise UnsupportedParameter(f"requested length {lenInBytes} is too long")
    dstPrime = _reduceDST(hashID, dst)
    dstPrime += i2osp(len(dstPrime), 1)
    zPad = bytes(hashID.blockSize)
    libStr = i2osp(lenInBytes, 2)

    b0 = hashID.digest(zPad + bytes(msg) + libStr + i2osp(0, 1) + dstPrime)
    bi = hashID.digest(b0 + i2osp(1, 1) + dstPrime)
    uniform = [bi]
    for i in range(2, ell + 1):
        bi = hashID.digest(strxor(b0, bi) + i2osp(i, 1) + dstPrime)
        uniform.append(bi)
    return b"".join(uniform)[:lenInBytes]


def expandMessageXOF(hashID, msg, dst, lenInBytes):
    """
    expand_message_xof from section 5.3.2 of [RFC9380].

    Raises:
        UnsupportedParameter if lenInBytes exceeds 65535.
    """
    if hashID.expander != EXPANDER_XOF:
        raise UnsupportedParameter(f"{hashID.name} is not an {EXPANDER_XOF} hash")
    if lenInBytes > MAX_EXPAND_LEN:
        raise UnsupportedParameter(f"requested length {lenInBytes} is too long")
    dstPrime = _reduceDST(hashID, dst)
    dstPrime += i2osp(len(dstPrime), 1)
    return hashID.digest(bytes(msg) + i2osp(lenInBytes, 2) + dstPrime, lenInBytes)


def expandMessage(hashID, msg, dst, lenInBytes):
    """
    expandMessage picks the expand_message variant for the hash.
    """
    if hashID.expander == EXPANDER_XOF:
        return expandMessageXOF(hashID, msg, dst, lenInBytes)
    return expandMessageXMD(hashID, msg, dst, lenInBytes)


class HashToField:
    """
    HashToField is the hash_to_field function of [RFC9380] section 5.2 for a
    prime field.
    """

    def __init__(self, field, hashID, dst, L):
        """
        Args:
            field (PrimeField): The target field.
            hashID (HashID): The hash function.
            dst (bytes-like): The domain separation tag.
            L (int): The number of bytes hashed into each element. It should
                be ceil((ceil(log2(p)) + k) / 8) for security level k.
        """
        self.field = field
        self.hashID = hashID
        self.dst = bytes(dst)
        self.L = L

    def hash(self, msg, count=1):
        """
        hash produces count field elements from a single expand_message call.

        Args:
            msg (bytes-like): The message.
            count (int): The number of elements.

        Returns:
            list(FieldElement): The elements.
        """
        L = self.L
        uniform = expandMessage(self.hashID, msg, self.dst, count * L)
        return [
            self.field.element(os2ip(uniform[i * L : (i + 1) * L]))
            for i in range(count)
        ]
