"""
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Rational maps between curves: the birational maps relating the Edwards
curves of RFC 8032 to the Montgomery curves of RFC 7748, and the isogenies
used by SSWU for curves with A = 0.

References:
  [RFC7748]: Elliptic Curves for Security, section 4
    https://www.rfc-editor.org/rfc/rfc7748

  [RFC9380]: Hashing to Elliptic Curves, appendix E
    https://www.rfc-editor.org/rfc/rfc9380
"""

from tinyecc import EccError
from tinyecc.ec import params
from tinyecc.ec.params import bls12381g1iso, secp256k1iso


# sqrt(-486664) mod 2^255 - 19, with sgn0 = 0.
SQRT_MINUS_486664 = (
    6853475219497561581579357271197624642482790079785650197046958215289687604742
)


class RationalMap:
    """
    RationalMap is a map from the domain curve to the codomain curve.
    Subclasses that can be inverted implement pull.
    """

    def __init__(self, domain, codomain):
        self.domain = domain
        self.codomain = codomain

    def push(self, p):
        raise NotImplementedError

    def pull(self, p):
        raise EccError(f"{type(self).__name__} cannot be inverted")


class Edwards25519Map(RationalMap):
    """
    The birational map between edwards25519 and curve25519,
    (x, y) -> ((1 + y)/(1 - y), c(1 + y)/(x(1 - y))) with c = sqrt(-486664).
    The 2-torsion points (0, -1) and (0, 0) correspond to each other.
    """

    def __init__(self, domain, codomain):
        super().__init__(domain, codomain)
        self.c = codomain.field.element(SQRT_MINUS_486664)

    def push(self, p):
        """
        push maps an edwards25519 point to curve25519.
        """
        self.domain._check(p)
        if p.isIdentity():
            return self.codomain.identity()
        x, y, _, z = p.coords
        if x.isZero():
            # The only other point with x = 0 is (0, -1).
            return self.codomain.newProjective(0, 0, 1)
        t0 = z + y
        return self.codomain.newProjective(x * t0, self.c * z * t0, x * (z - y))

    def pull(self, p):
        """
        pull maps a curve25519 point to edwards25519.
        """
        self.codomain._check(p)
        if p.isIdentity():
            return self.domain.identity()
        x, y, z = p.coords
        if y.isZero():
            return self.domain.newProjective(0, -1, 0, 1)
        add, sub = x + z, x - z
        # fmt: off
        return self.domain.newProjective(
            self.c * x * add,
            y * sub,
            self.c * x * sub,
            y * add,
        )
        # fmt: on


class Edwards448Map(RationalMap):
    """
    The 4-isogeny between edwards448 and curve448 of [RFC7748] section 4.2,
    with its dual. Points whose image would have a zero denominator are sent
    to the identity.
    """

    def push(self, p):
        """
        push maps an edwards448 point to curve448,
        (x, y) -> (y^2/x^2, (2 - x^2 - y^2)y/x^3).
        """
        self.domain._check(p)
        x, y, _, z = p.coords
        if p.isIdentity() or x.isZero():
            return self.codomain.identity()
        x2, y2, z2 = x * x, y * y, z * z
        return self.codomain.newProjective(x * y2, y * (z2 * 2 - y2 - x2), x * x2)

    def pull(self, p):
        """
        pull maps a curve448 point to edwards448.
        """
        self.codomain._check(p)
        if p.isIdentity():
            return self.domain.identity()
        x, y, z = p.coords
        x2, y2, z2 = x * x, y * y, z * z
        x3, x4, z3, z4 = x2 * x, x2 * x2, z2 * z, z2 * z2
        x5 = x3 * x2
        xn = y * z * (x2 - z2) * 4
        xd = x4 - x2 * z2 * 2 + z4 + y2 * z2 * 4
        yn = -(x5 - x3 * z2 * 2 + x * z4 - x * y2 * z2 * 4)
        yd = x5 - x3 * z2 * 2 + x * z4 - x2 * y2 * z * 2 - y2 * z3 * 2
        if (xd * yd).isZero():
            return self.domain.identity()
        return self.domain.newProjective(xn * yd, yn * xd, xn * yn, xd * yd)


class Isogeny(RationalMap):
    """
    Isogeny is a rational map given by four polynomials,
    (x, y) -> (xNum(x)/xDen(x), y * yNum(x)/yDen(x)).
    Coefficient lists are ordered from the constant term up.
    """

    def __init__(self, domain, codomain, xNum, xDen, yNum, yDen):
        super().__init__(domain, codomain)
        f = domain.field
        self.xNum = [f.element(c) for c in xNum]
        self.xDen = [f.element(c) for c in xDen]
        self.yNum = [f.element(c) for c in yNum]
        self.yDen = [f.element(c) for c in yDen]

    @staticmethod
    def _horner(coeffs, x):
        acc = x.field.zero()
        for c in reversed(coeffs):
            acc = acc * x + c
        return acc

    def push(self, p):
        """
        push evaluates the isogeny at p. The identity and the points of the
        kernel go to the identity of the codomain.
        """
        self.domain._check(p)
        if p.isIdentity():
            return self.codomain.identity()
        x, y = p.affine()
        xDen = self._horner(self.xDen, x)
        yDen = self._horner(self.yDen, x)
        if xDen.isZero() or yDen.isZero():
            return self.codomain.identity()
        xx = self._horner(self.xNum, x) / xDen
        yy = y * self._horner(self.yNum, x) / yDen
        return self.codomain.newPoint(xx, yy)


def edwards25519ToCurve25519():
    return Edwards25519Map(
        params.getCurve("edwards25519"), params.getCurve("curve25519")
    )


def edwards448ToCurve448():
    return Edwards448Map(params.getCurve("edwards448"), params.getCurve("curve448"))


def _isogeny(iso, target):
    return Isogeny(
        params.getCurve(iso.Name),
        params.getCurve(target),
        iso.XNum,
        iso.XDen,
        iso.YNum,
        iso.YDen,
    )


def secp256k1Isogeny():
    """
    The 3-isogeny from the secp256k1 helper curve onto secp256k1.
    """
    return _isogeny(secp256k1iso, "secp256k1")


def bls12381G1Isogeny():
    """
    The 11-isogeny from the BLS12-381 G1 helper curve onto BLS12-381 G1.
    """
    return _isogeny(bls12381g1iso, "BLS12381G1")
