"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""

import pytest

from tinyecc import EccError
from tinyecc.h2c import expand, ratmap, suites


def test_parse():
    s = suites.parse("P256-SHA256-SSWU-RO-")
    assert s.ro
    assert s.curveName == "P256"
    assert s.hashID is expand.SHA256
    assert s.mapID == suites.MAP_SSWU
    assert (s.z, s.L) == (-10, 48)
    assert suites.parse("P256_XMD:SHA-256_SSWU_RO_") is s
    assert not suites.parse("P256-SHA256-SSWU-NU-").ro
    assert suites.parse("edwards25519_XMD:SHA-512_ELL2_NU_") is suites.parse(
        "edwards25519-SHA512-EDELL2-NU-"
    )
    with pytest.raises(EccError):
        suites.parse("P256-SHA256-SSWU-XX-")


def test_table():
    names = [name for name, s in suites.the_suites.items() if name == s.name]
    assert len(names) == 28
    rfcIDs = [name for name, s in suites.the_suites.items() if name == s.rfcID]
    assert len(rfcIDs) == 10
    for name in names:
        assert name.endswith("-RO-") or name.endswith("-NU-")


@pytest.mark.parametrize(
    "name", sorted(n for n, s in suites.the_suites.items() if n == s.name)
)
def test_suites(name):
    """
    Every suite builds and hashes into the prime-order subgroup.
    """
    s = suites.parse(name)
    enc = s.get(b"QUUX-V01-CS02-with-" + name.encode())
    curve = enc.curve
    assert enc.ro == s.ro
    for msg in (b"", b"abc"):
        p = enc.hash(msg)
        assert p.isOnCurve()
        assert not p.isIdentity()
        assert p * curve.order == curve.identity()
        assert enc.hash(msg) == p
    assert enc.hash(b"abc") != enc.hash(b"abcd")


def test_cross_model():
    """
    Hashing to an Edwards curve is hashing to the equivalent Montgomery
    curve, then applying the map.
    """
    tests = [
        (
            "edwards25519-SHA512-EDELL2",
            "curve25519-SHA512-ELL2",
            ratmap.edwards25519ToCurve25519(),
        ),
        (
            "edwards448-SHA512-EDELL2",
            "curve448-SHA512-ELL2",
            ratmap.edwards448ToCurve448(),
        ),
    ]
    dst = b"cross-model"
    for edName, montName, rm in tests:
        for encType in ("-RO-", "-NU-"):
            ed = suites.parse(edName + encType).get(dst)
            mont = suites.parse(montName + encType).get(dst)
            for msg in (b"", b"abc", b"a" * 200):
                assert ed.hash(msg) == rm.pull(mont.hash(msg))


@pytest.mark.parametrize(
    "name", ["P256_XMD:SHA-256_SSWU_RO_", "edwards25519-SHA512-EDELL2-NU-"]
)
def test_domain_separation(name):
    s = suites.parse(name)
    points = {s.get(b"DST-%d" % i).hash(b"msg").encode() for i in range(100)}
    assert len(points) == 100
