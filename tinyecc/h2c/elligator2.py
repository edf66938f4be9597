"""
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Elligator 2 for Montgomery curves and, through a birational map, for
twisted Edwards curves.

References:
  [RFC9380]: Hashing to Elliptic Curves, sections 6.7.1 and 6.8.2
    https://www.rfc-editor.org/rfc/rfc9380
"""

from tinyecc import UnsupportedParameter
from tinyecc.util.encode import LITTLE_ENDIAN


class Elligator2:
    """
    Elligator2 maps field elements onto a Montgomery curve
    Bv^2 = u^3 + Au^2 + u with A != 0 and B != 0. Z must be a non-square.
    """

    def __init__(self, curve, z, sgn0=LITTLE_ENDIAN):
        f = curve.field
        self.curve = curve
        self.z = f.element(z)
        self.sgn0 = sgn0
        if curve.a.isZero() or curve.b.isZero():
            raise UnsupportedParameter(f"{curve.name}: A and B must be nonzero")
        if self.z.isSquare():
            raise UnsupportedParameter(f"{curve.name}: Z must be a non-square")
        self.c1 = curve.a / curve.b
        self.c2 = 1 / (curve.b * curve.b)

    def map(self, u):
        """
        map is a deterministic map from field elements to points on the curve.
        The case Zu^2 = -1, where the map is undefined, is sent to the same
        point as u = 0.

        Args:
            u (FieldElement): An element of the curve's field.

        Returns:
            Point: The image of u.
        """
        f, curve = self.curve.field, self.curve
        u = f.element(u)
        c1 = self.c1
        # fmt: off
        t1 = self.z * u * u
        t1 = f.select(t1, 0, t1 == -1)
        x1 = -c1 * (t1 + 1).inverse()
        gx1 = ((x1 + c1) * x1 + self.c2) * x1
        x2 = -x1 - c1
        gx2 = t1 * gx1
        e2 = gx1.isSquare()
        x = f.select(x2, x1, e2)
        y = f.select(gx2, gx1, e2).sqrt()
        e3 = y.sgn0(self.sgn0) == 1
        y = f.select(y, -y, e2 != e3)
        # fmt: on
        return curve.newPoint(x * curve.b, y * curve.b)


class EdwardsElligator2:
    """
    EdwardsElligator2 maps onto a twisted Edwards curve by running Elligator 2
    on a birationally equivalent Montgomery curve and pulling the point back.
    """

    def __init__(self, curve, z, ratmap, sgn0=LITTLE_ENDIAN):
        """
        Args:
            curve (EdwardsCurve): The target curve.
            z (int): The Elligator 2 Z of the Montgomery curve.
            ratmap (RationalMap): A map from the Edwards curve to a
                Montgomery curve.
            sgn0 (str): The endianness of the sign function.

        Raises:
            UnsupportedParameter if the map's domain is not the curve.
        """
        if ratmap.domain != curve:
            raise UnsupportedParameter(f"rational map domain is not {curve.name}")
        self.curve = curve
        self.ratmap = ratmap
        self.elligator2 = Elligator2(ratmap.codomain, z, sgn0)

    def map(self, u):
        return self.ratmap.pull(self.elligator2.map(u))
