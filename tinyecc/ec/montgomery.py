"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details

Montgomery curves by^2 = x^3 + ax^2 + x in homogeneous projective
coordinates (X : Y : Z). The point at infinity is (0 : 1 : 0) and (0, 0) is
a point of order 2.
"""

from tinyecc import UnsupportedParameter
from tinyecc.ec.curve import Curve, SEC1Codec


class MontgomeryCurve(SEC1Codec, Curve):
    """
    MontgomeryCurve adds points with a complete projective addition law built
    from the auxiliary constant s. The law requires b = 1 and a value of s for
    which the line y = s does not meet the curve. Points are encoded like
    Weierstrass points.
    """

    model = "montgomery"

    def __init__(self, name, field, a, b, s, order, cofactor, gx=None, gy=None):
        super().__init__(name, field, order, cofactor, gx, gy)
        self.a = field.element(a)
        self.b = field.element(b)
        self.s = field.element(s)
        if self.a.isZero() or self.b != 1:
            raise UnsupportedParameter(f"{name}: unsupported Montgomery coefficients")

    def _coefficients(self):
        return (self.a, self.b)

    def ySquared(self, x):
        return x * (x * (x + self.a) + 1) / self.b

    def _identityCoords(self):
        f = self.field
        return (f.zero(), f.one(), f.zero())

    def _fromAffine(self, x, y):
        return (x, y, self.field.one())

    def _onCurve(self, c):
        x, y, z = c
        return self.b * y * y * z == x * (x * x + self.a * x * z + z * z)

    def _add(self, c1, c2):
        x1, y1, z1 = c1
        x2, y2, z2 = c2
        a, s = self.a, self.s
        # fmt: off
        t0 = x1 * x2
        t1 = y1 * y2
        t2 = z1 * z2
        t3 = x1 * y2
        t4 = x2 * y1
        t5 = y1 * z2
        t6 = y2 * z1
        t7 = x1 * z2
        t8 = x2 * z1
        t9 = t7 + t8
        ta = t9 + t0 * a
        r = t5 + t6
        t = ta - t1
        v = t9 * a + t0 * 3 + t2
        w = (t3 - t4) * s + t0 - t2
        u = (t7 - t8) * s - t3 - t4
        m = (t5 - t6) * s + ta + t1
        # fmt: on
        return (r * w - t * u, t * m - v * w, v * u - r * m)

    def _neg(self, c):
        x, y, z = c
        return (x, -y, z)

    def _eq(self, c1, c2):
        x1, y1, z1 = c1
        x2, y2, z2 = c2
        return x1 * z2 == x2 * z1 and y1 * z2 == y2 * z1

    def _toAffine(self, c):
        x, y, z = c
        if z.isZero():
            return self._identityCoords()
        zInv = z.inverse()
        return (x * zInv, y * zInv, self.field.one())
