"""
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

The Simplified Shallue-van de Woestijne-Ulas map.

References:
  [RFC9380]: Hashing to Elliptic Curves, sections 6.6.2 and 6.6.3
    https://www.rfc-editor.org/rfc/rfc9380

  [WB19]: Fast and simple constant-time hashing to the BLS12-381 elliptic
    curve (Wahby, Boneh), https://eprint.iacr.org/2019/403
"""

from tinyecc import UnsupportedParameter
from tinyecc.util.encode import LITTLE_ENDIAN


class SSWU:
    """
    SSWU maps field elements onto a Weierstrass curve y^2 = x^3 + Ax + B with
    A != 0 and B != 0.
    """

    def __init__(self, curve, z, sgn0=LITTLE_ENDIAN):
        """
        Args:
            curve (WeierstrassCurve): The target curve.
            z (int): A non-square Z != -1 such that g(B/(ZA)) is square.
            sgn0 (str): The endianness of the sign function.

        Raises:
            UnsupportedParameter if the curve or Z are not suitable.
        """
        f = curve.field
        self.curve = curve
        self.z = f.element(z)
        self.sgn0 = sgn0
        a, b, z = curve.a, curve.b, self.z
        if a.isZero() or b.isZero():
            raise UnsupportedParameter(f"{curve.name}: SSWU needs A != 0 and B != 0")
        if z.isSquare() or z == -1:
            raise UnsupportedParameter(f"{curve.name}: invalid SSWU Z {int(z)}")
        if not curve.g(b / (z * a)).isSquare():
            raise UnsupportedParameter(f"{curve.name}: g(B/(ZA)) is not square")
        self.c1 = -b / a
        self.c2 = -1 / z

    def map(self, u):
        """
        map is a deterministic map from field elements to points on the curve.

        Args:
            u (FieldElement): An element of the curve's field.

        Returns:
            Point: The image of u.
        """
        f, curve = self.curve.field, self.curve
        u = f.element(u)
        # fmt: off
        t1 = self.z * u * u
        t2 = t1 * t1
        x1 = (t1 + t2).inverse()
        e1 = x1.isZero()
        x1 = f.select(x1 + 1, self.c2, e1) * self.c1
        gx1 = curve.g(x1)
        x2 = t1 * x1
        gx2 = gx1 * t1 * t2
        e2 = gx1.isSquare()
        x = f.select(x2, x1, e2)
        y = f.select(gx2, gx1, e2).sqrt()
        e3 = u.sgn0(self.sgn0) == y.sgn0(self.sgn0)
        y = f.select(-y, y, e3)
        # fmt: on
        return curve.newPoint(x, y)


class SSWUAB0:
    """
    SSWUAB0 handles curves where A or B is zero, such as secp256k1 and
    BLS12-381. It maps onto an isogenous curve with SSWU and pushes the
    result through the isogeny, section 6.6.3 of [RFC9380].
    """

    def __init__(self, curve, z, isogeny, sgn0=LITTLE_ENDIAN):
        """
        Args:
            curve (WeierstrassCurve): The target curve.
            z (int): The SSWU Z for the isogenous curve.
            isogeny (Isogeny): An isogeny from a curve suitable for SSWU
                onto the target curve.
            sgn0 (str): The endianness of the sign function.

        Raises:
            UnsupportedParameter if the isogeny does not end on the curve, or
                the curve does not have exactly one zero coefficient.
        """
        if isogeny.codomain != curve:
            raise UnsupportedParameter(f"isogeny codomain is not {curve.name}")
        if curve.a.isZero() == curve.b.isZero():
            raise UnsupportedParameter(f"{curve.name}: one of A, B must be zero")
        self.curve = curve
        self.isogeny = isogeny
        self.sswu = SSWU(isogeny.domain, z, sgn0)

    def map(self, u):
        return self.isogeny.push(self.sswu.map(u))
