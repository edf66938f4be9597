"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""

import random

from nacl import bindings
import pytest

from tinyecc import EccError, InvalidEncoding, UnsupportedParameter
from tinyecc.ec import params
from tinyecc.ec.montgomery import MontgomeryCurve
from tinyecc.field import PrimeField
from tinyecc.util.encode import LITTLE_ENDIAN


def clamp(k):
    k &= ~7
    k &= ~(1 << 255)
    return k | 1 << 254


@pytest.fixture
def c25519():
    return params.getCurve("curve25519")


def test_against_x25519(c25519):
    g = c25519.generator()
    for _ in range(5):
        k = clamp(random.randrange(2 ** 256))
        u = bindings.crypto_scalarmult_base(k.to_bytes(32, "little"))
        x, _ = (g * k).affine()
        assert x.bytes(LITTLE_ENDIAN) == u


def test_group_law(c25519, randPoint):
    g = c25519.generator()
    o = c25519.identity()
    assert g * c25519.order == o
    assert g + o == g
    assert g - g == o
    p, q = randPoint(c25519), randPoint(c25519)
    assert p + q == q + p
    assert (p + q) - q == p
    assert p.double() == p * 2
    # (0, 0) has order 2.
    t = c25519.newPoint(0, 0)
    assert t + t == o
    assert (p + t) + t == p
    assert (g * 5 + t).isOnCurve()


def test_curve448():
    curve = params.getCurve("curve448")
    g = curve.generator()
    assert g * curve.order == curve.identity()
    assert (g + g) - g == g
    assert curve.decode(g.encode()) == g
    assert len(g.encode(compress=False)) == 1 + 2 * 56


def test_sec1(c25519):
    g = c25519.generator()
    assert g.encode()[0] == 0x02
    assert g.encode()[1:] == (9).to_bytes(32, "big")
    assert c25519.decode(g.encode()) == g
    assert c25519.decode(g.encode(False)) == g
    assert c25519.decode(b"\x00") == c25519.identity()
    with pytest.raises(EccError):
        c25519.identity().encode()
    # (0, 0) encodes with a zero sign bit only.
    t = c25519.newPoint(0, 0)
    assert c25519.decode(t.encode()) == t
    with pytest.raises(InvalidEncoding):
        c25519.decode(b"\x03" + bytes(32))


def test_unsupported():
    f = PrimeField(2 ** 255 - 19)
    with pytest.raises(UnsupportedParameter):
        MontgomeryCurve("b2", f, 486662, 2, 1, 1, 1)
    with pytest.raises(UnsupportedParameter):
        MontgomeryCurve("a0", f, 0, 1, 1, 1, 1)
