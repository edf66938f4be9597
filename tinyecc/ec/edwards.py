"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details

Twisted Edwards curves ax^2 + y^2 = 1 + dx^2y^2 in extended coordinates
(X : Y : T : Z), with x = X/Z, y = Y/Z and T = XY/Z. The neutral element is
(0, 1).

References:
  [HWCD08]: Twisted Edwards Curves Revisited (Hisil, Wong, Carter, Dawson),
    https://eprint.iacr.org/2008/522

  [RFC8032]: Edwards-Curve Digital Signature Algorithm (EdDSA)
    https://www.rfc-editor.org/rfc/rfc8032
"""

from tinyecc import InvalidPoint
from tinyecc.ec.curve import Curve
from tinyecc.util.encode import LITTLE_ENDIAN, byteLength, i2osp, os2ip


class EdwardsCurve(Curve):
    """
    EdwardsCurve uses the unified addition law of [HWCD08], which is complete
    when a is a square and d is not. Points are encoded as in [RFC8032].
    """

    model = "edwards"

    def __init__(self, name, field, a, d, order, cofactor, gx=None, gy=None, hEff=None):
        super().__init__(name, field, order, cofactor, gx, gy, hEff)
        self.a = field.element(a)
        self.d = field.element(d)
        # One extra bit for the sign of x.
        self.encodingLen = byteLength(field.bitLen + 1)

    def _coefficients(self):
        return (self.a, self.d)

    def _identityCoords(self):
        f = self.field
        return (f.zero(), f.one(), f.zero(), f.one())

    def _fromAffine(self, x, y):
        return (x, y, x * y, self.field.one())

    def _onCurve(self, c):
        x, y, t, z = c
        return (
            self.a * x * x + y * y == self.d * t * t + z * z
            and x * y == t * z
            and not z.isZero()
        )

    def _add(self, c1, c2):
        x1, y1, t1, z1 = c1
        x2, y2, t2, z2 = c2
        # fmt: off
        a = x1 * x2
        b = y1 * y2
        c = self.d * t1 * t2
        d = z1 * z2
        e = (x1 + y1) * (x2 + y2) - a - b
        f = d - c
        g = d + c
        h = b - self.a * a
        # fmt: on
        return (e * f, g * h, e * h, f * g)

    def _neg(self, c):
        x, y, t, z = c
        return (-x, y, -t, z)

    def _eq(self, c1, c2):
        x1, y1, _, z1 = c1
        x2, y2, _, z2 = c2
        return x1 * z2 == x2 * z1 and y1 * z2 == y2 * z1

    def _toAffine(self, c):
        x, y, _, z = c
        zInv = z.inverse()
        x, y = x * zInv, y * zInv
        return (x, y, x * y, self.field.one())

    def encode(self, p, compress=True):
        """
        encode serializes the point as in [RFC8032]: y in little-endian order
        on encodingLen bytes, with the most significant bit holding the parity
        of x. There is a single format, so compress is ignored.
        """
        self._check(p)
        x, y = p.affine()
        n = y.n | (x.n & 1) << (8 * self.encodingLen - 1)
        return i2osp(n, self.encodingLen, LITTLE_ENDIAN)

    def decode(self, b):
        """
        decode parses an [RFC8032] point encoding.

        Raises:
            InvalidEncoding if the bytes do not encode a point on the curve.
        """
        b = bytes(b)
        f = self.field
        if len(b) != self.encodingLen:
            raise self._invalid(f"invalid point encoding length {len(b)}")
        n = os2ip(b, LITTLE_ENDIAN)
        signBit = 8 * self.encodingLen - 1
        sign = n >> signBit
        yv = n & ((1 << signBit) - 1)
        if yv >= f.p:
            raise self._invalid("y coordinate out of range")
        y = f.element(yv)
        # x^2 = (1 - y^2) / (a - dy^2)
        y2 = y * y
        den = self.a - self.d * y2
        if den.isZero():
            raise self._invalid("y coordinate is not on the curve")
        x2 = (1 - y2) / den
        x = x2.sqrt()
        if x * x != x2:
            raise self._invalid("y coordinate is not on the curve")
        if x.isZero() and sign:
            raise self._invalid("invalid sign for x = 0")
        if x.sgn0() != sign:
            x = -x
        try:
            return self.newPoint(x, y)
        except InvalidPoint:
            raise self._invalid("point is not on the curve")
