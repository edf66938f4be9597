"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""

import hashlib

import pytest

from tinyecc import EccError, UnsupportedParameter
from tinyecc.ec import params
from tinyecc.h2c import expand
from tinyecc.h2c.expand import HashToField


def test_expandMessageXMD():
    """
    Test vectors from RFC 9380 appendix K.1.
    """
    dst = b"QUUX-V01-CS02-with-expander-SHA256-128"
    tests = [
        (b"", "68a985b87eb6b46952128911f2a4412bbc302a9d759667f87f7a21d803f07235"),
        (b"abc", "d8ccab23b5985ccea865c6c97b6e5b8350e794e603b4b97902f53a8a0d605615"),
    ]
    for msg, want in tests:
        assert expand.expandMessageXMD(expand.SHA256, msg, dst, 0x20).hex() == want
        assert expand.expandMessage(expand.SHA256, msg, dst, 0x20).hex() == want


def test_expandMessageXOF():
    """
    Test vectors from RFC 9380 appendix K.6.
    """
    dst = b"QUUX-V01-CS02-with-expander-SHAKE128"
    tests = [
        (
            b"",
            0x20,
            "86518c9cd86581486e9485aa74ab35ba150d1c75c88e26b7043e44e2acd735a2",
        ),
        (
            b"abc",
            0x20,
            "8696af52a4d862417c0763556073f47bc9b9ba43c99b505305cb1ec04a9ab468",
        ),
        (
            b"abcdef0123456789",
            0x20,
            "912c58deac4821c3509dbefa094df54b34b8f5d01a191d1d3108a2c89077acca",
        ),
        (
            b"",
            0x80,
            "7314ff1a155a2fb99a0171dc71b89ab6e3b2b7d59e38e64419b8b6294d03ffee"
            "42491f11370261f436220ef787f8f76f5b26bdcd850071920ce023f3ac468477"
            "44f4612b8714db8f5db83205b2e625d95afd7d7b4d3094d3bdde815f52850bb4"
            "1ead9822e08f22cf41d615a303b0d9dde73263c049a7b9898208003a739a2e57",
        ),
        (
            b"abc",
            0x80,
            "c952f0c8e529ca8824acc6a4cab0e782fc3648c563ddb00da7399f2ae35654f4"
            "860ec671db2356ba7baa55a34a9d7f79197b60ddae6e64768a37d699a7832349"
            "6db3878c8d64d909d0f8a7de4927dcab0d3dbbc26cb20a49eceb0530b431cdf4"
            "7bc8c0fa3e0d88f53b318b6739fbed7d7634974f1b5c386d6230c76260d5337a",
        ),
    ]
    for msg, length, want in tests:
        assert expand.expandMessageXOF(expand.SHAKE128, msg, dst, length).hex() == want
        assert expand.expandMessage(expand.SHAKE128, msg, dst, length).hex() == want


def test_lengths(randBytes):
    msg = randBytes(0, 100)
    for h in (expand.SHA256, expand.SHA384, expand.SHA512, expand.BLAKE256):
        for n in (1, 31, 32, 33, 100, 255 * h.outputSize):
            assert len(expand.expandMessage(h, msg, b"DST", n)) == n
        with pytest.raises(UnsupportedParameter):
            expand.expandMessageXMD(h, msg, b"DST", 255 * h.outputSize + 1)
    for h in (expand.SHAKE128, expand.SHAKE256):
        for n in (1, 100, 65535):
            assert len(expand.expandMessage(h, msg, b"DST", n)) == n
        with pytest.raises(UnsupportedParameter):
            expand.expandMessageXOF(h, msg, b"DST", 65536)

    with pytest.raises(UnsupportedParameter):
        expand.expandMessageXMD(expand.SHAKE128, msg, b"DST", 32)
    with pytest.raises(UnsupportedParameter):
        expand.expandMessageXOF(expand.SHA256, msg, b"DST", 32)


def test_domain_separation():
    msg = b"msg"
    for h in expand.the_hashes.values():
        a = expand.expandMessage(h, msg, b"DST-A", 64)
        b = expand.expandMessage(h, msg, b"DST-B", 64)
        assert a != b
        assert a == expand.expandMessage(h, msg, b"DST-A", 64)
        assert a != expand.expandMessage(h, msg, b"DST-A", 65)[:64]
    assert expand.expandMessage(expand.SHA256, msg, b"DST", 32) != (
        expand.expandMessage(expand.BLAKE256, msg, b"DST", 32)
    )


def test_oversize_dst():
    longDST = b"x" * 256
    prefix = b"H2C-OVERSIZE-DST-"
    tests = [
        (expand.SHA256, hashlib.sha256(prefix + longDST).digest()),
        (expand.SHA512, hashlib.sha512(prefix + longDST).digest()),
        (expand.SHAKE128, hashlib.shake_128(prefix + longDST).digest(32)),
        (expand.SHAKE256, hashlib.shake_256(prefix + longDST).digest(64)),
    ]
    for h, shortDST in tests:
        assert expand.expandMessage(h, b"abc", longDST, 48) == (
            expand.expandMessage(h, b"abc", shortDST, 48)
        )
    # 255 bytes is still used as is.
    dst = b"x" * 255
    hashedDST = hashlib.sha256(prefix + dst).digest()
    assert expand.expandMessage(expand.SHA256, b"abc", dst, 48) != (
        expand.expandMessage(expand.SHA256, b"abc", hashedDST, 48)
    )


def test_parseHash():
    assert expand.parseHash("SHA512") is expand.SHA512
    assert expand.parseHash("BLAKE256") is expand.BLAKE256
    with pytest.raises(EccError):
        expand.parseHash("MD5")


def test_hashToField():
    """
    The field elements of the P256_XMD:SHA-256_SSWU_RO_ vectors of RFC 9380
    appendix J.1.1.
    """
    field = params.getCurve("P256").field
    dst = b"QUUX-V01-CS02-with-P256_XMD:SHA-256_SSWU_RO_"
    htf = HashToField(field, expand.SHA256, dst, 48)
    tests = [
        (
            b"",
            "ad5342c66a6dd0ff080df1da0ea1c04b96e0330dd89406465eeba11582515009",
            "8c0f1d43204bd6f6ea70ae8013070a1518b43873bcd850aafa0a9e220e2eea5a",
        ),
        (
            b"abc",
            "afe47f2ea2b10465cc26ac403194dfb68b7f5ee865cda61e9f3e07a537220af1",
            "379a27833b0bfe6f7bdca08e1e83c760bf9a338ab335542704edcd69ce9e46e0",
        ),
    ]
    for msg, u0, u1 in tests:
        assert htf.hash(msg, 2) == [field.element(int(u, 16)) for u in (u0, u1)]
    (u,) = htf.hash(b"abc", 1)
    assert 0 <= int(u) < field.p
    assert htf.hash(b"abc", 0) == []
