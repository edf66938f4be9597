"""
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

The Shallue-van de Woestijne map, in the form of [RFC9380] section 6.6.1.
It works for every Weierstrass curve, given a suitable Z.

References:
  [RFC9380]: Hashing to Elliptic Curves
    https://www.rfc-editor.org/rfc/rfc9380
"""

from tinyecc import UnsupportedParameter
from tinyecc.util.encode import LITTLE_ENDIAN


class SVDW:
    def __init__(self, curve, z, sgn0=LITTLE_ENDIAN):
        """
        Args:
            curve (WeierstrassCurve): The target curve.
            z (int): The constant Z. g(Z) must be nonzero,
                -(3Z^2 + 4A)/(4g(Z)) nonzero and square, and at least one of
                g(Z) and g(-Z/2) square.
            sgn0 (str): The endianness of the sign function.

        Raises:
            UnsupportedParameter if Z does not satisfy the conditions.
        """
        f = curve.field
        self.curve = curve
        self.z = z = f.element(z)
        self.sgn0 = sgn0
        gz = curve.g(z)
        h = z * z * 3 + curve.a * 4
        if gz.isZero():
            raise UnsupportedParameter(f"{curve.name}: g(Z) is zero")
        if h.isZero():
            raise UnsupportedParameter(f"{curve.name}: 3Z^2 + 4A is zero")
        if not (-h / (gz * 4)).isSquare():
            raise UnsupportedParameter(f"{curve.name}: invalid SVDW Z {int(z)}")
        if not (gz.isSquare() or curve.g(-z / 2).isSquare()):
            raise UnsupportedParameter(f"{curve.name}: g(Z), g(-Z/2) are non-squares")
        self.c1 = gz
        self.c2 = -z / 2
        c3 = (-gz * h).sqrt()
        if c3.sgn0(sgn0) == 1:
            c3 = -c3
        self.c3 = c3
        self.c4 = -gz * 4 / h

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
        t1 = u * u * self.c1
        t2 = 1 + t1
        t1 = 1 - t1
        t3 = (t1 * t2).inverse()
        t4 = u * t1 * t3 * self.c3
        x1 = self.c2 - t4
        e1 = curve.g(x1).isSquare()
        x2 = self.c2 + t4
        e2 = curve.g(x2).isSquare() and not e1
        x3 = t2 * t2 * t3
        x3 = x3 * x3 * self.c4 + self.z
        x = f.select(x3, x1, e1)
        x = f.select(x, x2, e2)
        y = curve.g(x).sqrt()
        e3 = u.sgn0(self.sgn0) == y.sgn0(self.sgn0)
        y = f.select(-y, y, e3)
        # fmt: on
        return curve.newPoint(x, y)
