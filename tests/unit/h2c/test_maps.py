"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""

import pytest

from tinyecc import UnsupportedParameter
from tinyecc.ec import params
from tinyecc.h2c import ratmap
from tinyecc.h2c.elligator2 import EdwardsElligator2, Elligator2
from tinyecc.h2c.sswu import SSWU, SSWUAB0
from tinyecc.h2c.svdw import SVDW


def inputs(field, randElement, n=30):
    """
    Random field elements plus the values where the maps have special cases.
    """
    fixed = [0, 1, -1, 2, field.p - 2]
    return [field.element(u) for u in fixed] + [randElement(field) for _ in range(n)]


def test_sswu(randElement):
    for name, z in (("P256", -10), ("P384", -12), ("P521", -4)):
        curve = params.getCurve(name)
        m = SSWU(curve, z)
        for u in inputs(curve.field, randElement):
            p = m.map(u)
            assert p.isOnCurve()
            _, y = p.affine()
            assert y.sgn0() == u.sgn0()
            assert m.map(u) == p


def test_sswu_exceptional():
    """
    When Z^2u^4 + Zu^2 = 0 the map uses x = B/(ZA).
    """
    curve = params.getCurve("P256")
    m = SSWU(curve, -10)
    f = curve.field
    x, _ = m.map(f.zero()).affine()
    assert x == curve.b / (m.z * curve.a)


def test_sswu_preconditions():
    curve = params.getCurve("P256")
    f = curve.field
    for z in range(-20, 21):
        if z == 0:
            continue
        zz = f.element(z)
        valid = (
            not zz.isSquare()
            and zz != -1
            and curve.g(curve.b / (zz * curve.a)).isSquare()
        )
        if valid:
            SSWU(curve, z)
        else:
            with pytest.raises(UnsupportedParameter):
                SSWU(curve, z)
    with pytest.raises(UnsupportedParameter):
        SSWU(params.getCurve("secp256k1"), -11)


def test_svdw(randElement):
    for name, z in (("P256", -3), ("P384", -1), ("P521", 1)):
        curve = params.getCurve(name)
        m = SVDW(curve, z)
        assert m.c3.sgn0() == 0
        for u in inputs(curve.field, randElement):
            p = m.map(u)
            assert p.isOnCurve()
            _, y = p.affine()
            assert y.sgn0() == u.sgn0()


def test_svdw_preconditions():
    curve = params.getCurve("P256")
    for z in range(-10, 11):
        zz = curve.field.element(z)
        gz = curve.g(zz)
        h = zz * zz * 3 + curve.a * 4
        valid = (
            not gz.isZero()
            and not h.isZero()
            and (-h / (gz * 4)).isSquare()
            and (gz.isSquare() or curve.g(-zz / 2).isSquare())
        )
        if valid:
            SVDW(curve, z)
        else:
            with pytest.raises(UnsupportedParameter):
                SVDW(curve, z)


def test_sswu_ab0(randElement):
    tests = [
        ("secp256k1", -11, ratmap.secp256k1Isogeny()),
        ("BLS12381G1", 11, ratmap.bls12381G1Isogeny()),
    ]
    for name, z, iso in tests:
        curve = params.getCurve(name)
        m = SSWUAB0(curve, z, iso)
        for u in inputs(curve.field, randElement, n=10):
            p = m.map(u)
            assert p.curve == curve
            assert p.isOnCurve()

    with pytest.raises(UnsupportedParameter):
        SSWUAB0(params.getCurve("P256"), -10, ratmap.secp256k1Isogeny())
    with pytest.raises(UnsupportedParameter):
        SSWUAB0(params.getCurve("secp256k1"), -10, ratmap.bls12381G1Isogeny())


def test_elligator2(randElement):
    for name, z in (("curve25519", 2), ("curve448", -1)):
        curve = params.getCurve(name)
        m = Elligator2(curve, z)
        f = curve.field
        for u in inputs(f, randElement):
            assert m.map(u).isOnCurve()
        # u = 0 and Zu^2 = -1 have the same image.
        assert m.map(0) == m.map(f.zero())
        if name == "curve448":
            assert m.map(1) == m.map(0)

    with pytest.raises(UnsupportedParameter):
        Elligator2(params.getCurve("curve25519"), 4)


def test_edwards_elligator2(randElement):
    tests = [
        ("edwards25519", 2, ratmap.edwards25519ToCurve25519()),
        ("edwards448", -1, ratmap.edwards448ToCurve448()),
    ]
    for name, z, rm in tests:
        curve = params.getCurve(name)
        m = EdwardsElligator2(curve, z, rm)
        mont = Elligator2(rm.codomain, z)
        for u in inputs(curve.field, randElement, n=10):
            p = m.map(u)
            assert p.curve == curve
            assert p.isOnCurve()
            assert p == rm.pull(mont.map(u))

    with pytest.raises(UnsupportedParameter):
        EdwardsElligator2(
            params.getCurve("edwards448"), -1, ratmap.edwards25519ToCurve25519()
        )


def _mappers():
    return [
        ("P256-SSWU", SSWU(params.getCurve("P256"), -10)),
        ("P256-SVDW", SVDW(params.getCurve("P256"), -3)),
        (
            "secp256k1-SSWU",
            SSWUAB0(params.getCurve("secp256k1"), -11, ratmap.secp256k1Isogeny()),
        ),
        ("curve25519-ELL2", Elligator2(params.getCurve("curve25519"), 2)),
        (
            "edwards25519-ELL2",
            EdwardsElligator2(
                params.getCurve("edwards25519"), 2, ratmap.edwards25519ToCurve25519()
            ),
        ),
    ]


@pytest.mark.slow
@pytest.mark.parametrize("idx", range(5))
def test_map_totality(idx, randElement):
    """
    Every map sends 10,000 field elements to points on its curve.
    """
    name, m = _mappers()[idx]
    curve = m.curve
    for u in inputs(curve.field, randElement, n=10000):
        p = m.map(u)
        assert p.curve == curve, name
        assert p.isOnCurve(), name
