"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""

import pytest

from tinyecc import EccError, IncompatibleOperands
from tinyecc.ec import params
from tinyecc.h2c import ratmap
from tinyecc.h2c.sswu import SSWU


def test_edwards25519(randPoint):
    rm = ratmap.edwards25519ToCurve25519()
    ed, mont = rm.domain, rm.codomain
    assert ed.name == "edwards25519" and mont.name == "curve25519"
    assert rm.c * rm.c == -486664
    assert rm.c.sgn0() == 0

    # The base points correspond, up to the sign of v.
    g = rm.push(ed.generator())
    assert g.affine()[0] == 9
    assert g in (mont.generator(), -mont.generator())

    p, q = randPoint(ed), randPoint(ed)
    assert rm.pull(rm.push(p)) == p
    assert rm.push(p + q) == rm.push(p) + rm.push(q)
    m = randPoint(mont)
    assert rm.push(rm.pull(m)) == m

    assert rm.push(ed.identity()) == mont.identity()
    assert rm.pull(mont.identity()) == ed.identity()
    t = rm.push(ed.newPoint(0, -1))
    assert t == mont.newPoint(0, 0)
    assert rm.pull(t) == ed.newPoint(0, -1)
    assert rm.push(p + ed.newPoint(0, -1)) == rm.push(p) + t

    with pytest.raises(IncompatibleOperands):
        rm.push(m)
    with pytest.raises(IncompatibleOperands):
        rm.pull(p)


def test_edwards448(randPoint):
    rm = ratmap.edwards448ToCurve448()
    ed, mont = rm.domain, rm.codomain
    p, q = randPoint(ed), randPoint(ed)
    assert rm.push(p).isOnCurve()
    assert rm.push(p + q) == rm.push(p) + rm.push(q)
    m, n = randPoint(mont), randPoint(mont)
    assert rm.pull(m).isOnCurve()
    assert rm.pull(m + n) == rm.pull(m) + rm.pull(n)
    # The maps are dual 4-isogenies.
    assert rm.push(rm.pull(m)) in (m * 4, -(m * 4))
    assert rm.push(ed.identity()) == mont.identity()
    assert rm.pull(mont.identity()) == ed.identity()
    assert rm.pull(mont.newPoint(0, 0)) == ed.identity()


def test_isogenies(randElement):
    tests = [
        (ratmap.secp256k1Isogeny(), "secp256k1_3iso", "secp256k1", -11),
        (ratmap.bls12381G1Isogeny(), "BLS12381G1_11iso", "BLS12381G1", 11),
    ]
    for iso, domain, codomain, z in tests:
        assert iso.domain == params.getCurve(domain)
        assert iso.codomain == params.getCurve(codomain)
        assert iso.push(iso.domain.identity()) == iso.codomain.identity()
        with pytest.raises(EccError):
            iso.pull(iso.codomain.identity())
        m = SSWU(iso.domain, z)
        f = iso.domain.field
        p = m.map(randElement(f))
        q = m.map(randElement(f))
        assert iso.push(p).isOnCurve()
        assert iso.push(p + q) == iso.push(p) + iso.push(q)
        assert iso.push(-p) == -iso.push(p)
