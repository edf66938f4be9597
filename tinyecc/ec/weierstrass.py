"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details

Short Weierstrass curves y^2 = x^3 + ax + b in homogeneous projective
coordinates (X : Y : Z), with x = X/Z and y = Y/Z. The point at infinity is
(0 : 1 : 0).

References:
  [RCB16]: Complete addition formulas for prime order elliptic curves
    (Renes, Costello, Batina), https://eprint.iacr.org/2015/1060
"""

from tinyecc.ec.curve import Curve, SEC1Codec


class WeierstrassCurve(SEC1Codec, Curve):
    model = "weierstrass"

    def __init__(self, name, field, a, b, order, cofactor, gx=None, gy=None, hEff=None):
        super().__init__(name, field, order, cofactor, gx, gy, hEff)
        self.a = field.element(a)
        self.b = field.element(b)
        self.b3 = self.b * 3

    def _coefficients(self):
        return (self.a, self.b)

    def g(self, x):
        """
        g is the right hand side of the curve equation, x^3 + ax + b.
        """
        return (x * x + self.a) * x + self.b

    ySquared = g

    def _identityCoords(self):
        f = self.field
        return (f.zero(), f.one(), f.zero())

    def _fromAffine(self, x, y):
        return (x, y, self.field.one())

    def _onCurve(self, c):
        x, y, z = c
        # X^3 + Z(Z(aX + bZ) - Y^2) = 0
        return (x * x * x + z * (z * (self.a * x + self.b * z) - y * y)).isZero()

    def _add(self, c1, c2):
        """
        _add is algorithm 1 of [RCB16], complete for curves of odd order and
        any a.
        """
        x1, y1, z1 = c1
        x2, y2, z2 = c2
        a, b3 = self.a, self.b3
        # fmt: off
        t0 = x1 * x2
        t1 = y1 * y2
        t2 = z1 * z2
        t3 = (x1 + y1) * (x2 + y2)
        t4 = t0 + t1
        t3 = t3 - t4                  # X1Y2 + X2Y1
        t4 = (x1 + z1) * (x2 + z2)
        t5 = t0 + t2
        t4 = t4 - t5                  # X1Z2 + X2Z1
        t5 = (y1 + z1) * (y2 + z2)
        x3 = t1 + t2
        t5 = t5 - x3                  # Y1Z2 + Y2Z1
        z3 = a * t4
        x3 = b3 * t2
        z3 = x3 + z3
        x3 = t1 - z3
        z3 = t1 + z3
        y3 = x3 * z3
        t1 = t0 + t0 + t0
        t2 = a * t2
        t4 = b3 * t4
        t1 = t1 + t2
        t2 = t0 - t2
        t2 = a * t2
        t4 = t4 + t2
        t0 = t1 * t4
        y3 = y3 + t0
        t0 = t5 * t4
        x3 = t3 * x3
        x3 = x3 - t0
        t0 = t3 * t1
        z3 = t5 * z3
        z3 = z3 + t0
        # fmt: on
        return (x3, y3, z3)

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
