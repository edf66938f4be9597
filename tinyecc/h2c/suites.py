"""
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Hash-to-curve suites. A suite fixes the curve, the hash function, the map
and its constants. Suites are named after the curve, hash, map and encoding
type, as in "P256-SHA256-SSWU-RO-". Suites that are also defined by
[RFC9380] can be looked up by their RFC suite ID too, as in
"P256_XMD:SHA-256_SSWU_RO_".

References:
  [RFC9380]: Hashing to Elliptic Curves, section 8
    https://www.rfc-editor.org/rfc/rfc9380
"""

from tinyecc import EccError
from tinyecc.ec import params
from tinyecc.util import helpers
from tinyecc.util.encode import LITTLE_ENDIAN

from . import expand, ratmap
from .elligator2 import Elligator2, EdwardsElligator2
from .encoding import Encoding
from .sswu import SSWU, SSWUAB0
from .svdw import SVDW


log = helpers.getLogger("H2C")

MAP_SSWU = "SSWU"
MAP_SVDW = "SVDW"
MAP_ELL2 = "ELL2"
MAP_EDELL2 = "EDELL2"

# Curves with A = 0 are reached through an isogenous curve.
_isogenies = {
    "secp256k1": ratmap.secp256k1Isogeny,
    "BLS12381G1": ratmap.bls12381G1Isogeny,
}

# Edwards curves are reached through an equivalent Montgomery curve.
_ratmaps = {
    "edwards25519": ratmap.edwards25519ToCurve25519,
    "edwards448": ratmap.edwards448ToCurve448,
}


class Suite:
    """
    Suite is a static description of a hash-to-curve encoding.
    """

    def __init__(
        self, curveName, hashID, mapID, z, L, ro, rfcID=None, sgn0=LITTLE_ENDIAN
    ):
        self.curveName = curveName
        self.hashID = hashID
        self.mapID = mapID
        self.z = z
        self.L = L
        self.ro = ro
        self.sgn0 = sgn0
        self.rfcID = rfcID
        encType = "RO" if ro else "NU"
        self.name = f"{curveName}-{hashID.name}-{mapID}-{encType}-"

    def __repr__(self):
        return f"Suite({self.name})"

    def _mapper(self, curve):
        if self.mapID == MAP_SSWU:
            isogeny = _isogenies.get(self.curveName)
            if isogeny:
                return SSWUAB0(curve, self.z, isogeny(), self.sgn0)
            return SSWU(curve, self.z, self.sgn0)
        if self.mapID == MAP_SVDW:
            return SVDW(curve, self.z, self.sgn0)
        if self.mapID == MAP_ELL2:
            return Elligator2(curve, self.z, self.sgn0)
        if self.mapID == MAP_EDELL2:
            return EdwardsElligator2(
                curve, self.z, _ratmaps[self.curveName](), self.sgn0
            )
        raise EccError(f"unknown map {self.mapID}")

    def get(self, dst):
        """
        Build the encoding for the suite with a domain separation tag.

        Args:
            dst (bytes-like): The domain separation tag. Applications should
                use a distinct tag, as described in section 3.1 of [RFC9380].

        Returns:
            Encoding: The encoding.
        """
        curve = params.getCurve(self.curveName)
        mapper = self._mapper(curve)
        encoding = Encoding(curve, self.hashID, dst, mapper, self.L, self.ro)
        log.debug(f"created {self.name} encoding")
        return encoding


def _pair(curveName, hashID, mapID, z, L, rfcName=None):
    """
    The nonuniform and random oracle suites for the same parameters.
    """
    return [
        Suite(
            curveName,
            hashID,
            mapID,
            z,
            L,
            ro,
            rfcID=f"{rfcName}_{'RO' if ro else 'NU'}_" if rfcName else None,
        )
        for ro in (False, True)
    ]


_suites = (
    _pair("P256", expand.SHA256, MAP_SSWU, -10, 48, "P256_XMD:SHA-256_SSWU")
    + _pair("P256", expand.SHA256, MAP_SVDW, -3, 48)
    + _pair("P384", expand.SHA512, MAP_SSWU, -12, 72)
    + _pair("P384", expand.SHA512, MAP_SVDW, -1, 72)
    + _pair("P521", expand.SHA512, MAP_SSWU, -4, 96)
    + _pair("P521", expand.SHA512, MAP_SVDW, 1, 96)
    + _pair("secp256k1", expand.SHA256, MAP_SSWU, -11, 48, "secp256k1_XMD:SHA-256_SSWU")
    + _pair(
        "BLS12381G1", expand.SHA256, MAP_SSWU, 11, 64, "BLS12381G1_XMD:SHA-256_SSWU"
    )
    + _pair("curve25519", expand.SHA256, MAP_ELL2, 2, 48)
    + _pair("curve25519", expand.SHA512, MAP_ELL2, 2, 48, "curve25519_XMD:SHA-512_ELL2")
    + _pair("edwards25519", expand.SHA256, MAP_EDELL2, 2, 48)
    + _pair(
        "edwards25519",
        expand.SHA512,
        MAP_EDELL2,
        2,
        48,
        "edwards25519_XMD:SHA-512_ELL2",
    )
    + _pair("curve448", expand.SHA512, MAP_ELL2, -1, 84)
    + _pair("edwards448", expand.SHA512, MAP_EDELL2, -1, 84)
)

the_suites = {s.name: s for s in _suites}
the_suites.update({s.rfcID: s for s in _suites if s.rfcID})


def parse(name):
    """
    Get the suite based on the suite name or its [RFC9380] suite ID.
    """
    try:
        return the_suites[name]
    except KeyError:
        raise EccError(f"unrecognized suite name {name}")
