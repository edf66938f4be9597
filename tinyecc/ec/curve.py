"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Elliptic curve groups over prime fields.

Curve is a generic group driver. The short Weierstrass, twisted Edwards and
Montgomery models subclass it and provide the model hooks:

  _identityCoords  projective coordinates of the neutral element
  _fromAffine      projective coordinates of an affine point
  _onCurve         projective evaluation of the curve equation
  _add             a complete addition formula
  _neg             negation
  _eq              equality up to projective scaling
  _toAffine        the coordinates scaled to Z = 1
  encode, decode   octet-string serialization

Everything else, including scalar multiplication, is written once here.

References:
  [SEC1] Elliptic Curve Cryptography
    https://www.secg.org/sec1-v2.pdf
"""

from tinyecc import EccError, InvalidEncoding, InvalidPoint, checkOperands
from tinyecc.scalar import Scalar, ScalarBits
from tinyecc.util import helpers
from tinyecc.util.encode import os2ip


log = helpers.getLogger("CURVE")

POINT_INFINITY = 0x00
POINT_COMPRESSED = 0x02  # 0x02 | sgn0(y), then x
POINT_UNCOMPRESSED = 0x04  # 0x04, then x and y


class Curve:
    """
    Curve is an elliptic curve group over a PrimeField. A curve is an
    immutable descriptor: the coefficients, the order r of the prime-order
    subgroup, the cofactor h and, when published, a generator.
    """

    model = None

    def __init__(self, name, field, order, cofactor, gx=None, gy=None, hEff=None):
        """
        Args:
            name (str): The curve name.
            field (PrimeField): The field of definition.
            order (int): The order r of the prime-order subgroup.
            cofactor (int): The cofactor h.
            gx (int): Optional. The affine x coordinate of the generator.
            gy (int): Optional. The affine y coordinate of the generator.
            hEff (int): Optional. The scalar used for cofactor clearing, when
                it is not h.
        """
        self.name = name
        self.field = field
        self.order = order
        self.cofactor = cofactor
        self.hEff = cofactor if hEff is None else hEff
        self.gx = gx
        self.gy = gy

    def _coefficients(self):
        raise NotImplementedError

    def __eq__(self, other):
        return (
            isinstance(other, Curve)
            and self.model == other.model
            and self.field == other.field
            and self._coefficients() == other._coefficients()
        )

    def __hash__(self):
        return hash((self.model, self.field) + self._coefficients())

    def __repr__(self):
        return f"{type(self).__name__}({self.name})"

    def _check(self, p):
        checkOperands("curve", self, p.curve)

    def newPoint(self, x, y):
        """
        newPoint creates a point from affine coordinates.

        Args:
            x (int or FieldElement): The x coordinate.
            y (int or FieldElement): The y coordinate.

        Returns:
            Point: The point (x, y).

        Raises:
            InvalidPoint if (x, y) is not on the curve.
        """
        f = self.field
        return self.newProjective(*self._fromAffine(f.element(x), f.element(y)))

    def newProjective(self, *coords):
        """
        newProjective creates a point from projective coordinates.

        Raises:
            InvalidPoint if the coordinates do not satisfy the curve equation.
        """
        coords = tuple(self.field.element(c) for c in coords)
        if (
            len(coords) != len(self._identityCoords())
            or all(c.isZero() for c in coords)
            or not self._onCurve(coords)
        ):
            raise InvalidPoint(f"point is not on {self.name}")
        return Point(self, coords)

    def identity(self):
        return Point(self, self._identityCoords())

    def generator(self):
        """
        generator returns the published generator of the prime-order subgroup.

        Raises:
            EccError if the curve has no published generator.
        """
        if self.gx is None:
            raise EccError(f"{self.name} has no generator")
        return self.newPoint(self.gx, self.gy)

    def isOnCurve(self, p):
        return p.curve == self and self._onCurve(p.coords)

    def add(self, p, q):
        """
        add returns p + q. The formulas are complete, so doubling, the
        identity and inverse points need no special handling.

        Raises:
            IncompatibleOperands if either point is not on this curve.
        """
        self._check(p)
        self._check(q)
        return Point(self, self._add(p.coords, q.coords))

    def negate(self, p):
        self._check(p)
        return Point(self, self._neg(p.coords))

    def double(self, p):
        return self.add(p, p)

    def scalarMult(self, p, k):
        """
        scalarMult returns k * p with left-to-right double-and-add. k is not
        reduced modulo the order, so the result is also correct for points
        outside the prime-order subgroup. The running time depends on k.

        Args:
            p (Point): The point.
            k (int): The multiplier. Negative values multiply -p.

        Returns:
            Point: k * p.
        """
        self._check(p)
        if k < 0:
            p, k = self.negate(p), -k
        coords = p.coords
        q = self._identityCoords()
        for bit in ScalarBits(k):
            q = self._add(q, q)
            if bit:
                q = self._add(q, coords)
        return Point(self, q)

    def normalize(self, p):
        """
        normalize scales the coordinates of p in place so that Z = 1, or to
        the canonical form of the identity when it has no affine coordinates.

        Returns:
            Point: p, for chaining.
        """
        self._check(p)
        p.coords = self._toAffine(p.coords)
        return p

    def equals(self, p, q):
        self._check(p)
        self._check(q)
        return self._eq(p.coords, q.coords)

    def isIdentity(self, p):
        return self.equals(p, self.identity())

    def clearCofactor(self, p):
        """
        clearCofactor maps p into the prime-order subgroup.
        """
        return self.scalarMult(p, self.hEff)

    def newScalar(self, k):
        return Scalar(k, self.order)

    def encode(self, p, compress=True):
        raise NotImplementedError

    def decode(self, b):
        raise NotImplementedError

    def _invalid(self, msg):
        log.debug(f"{self.name}: {msg}")
        return InvalidEncoding(msg)


class SEC1Codec:
    """
    SEC1Codec implements the [SEC1] octet-string encoding for curve models
    with a y^2 = f(x) shape. The class using it provides ySquared.

    The point at infinity decodes from the single byte 0x00, but is never
    encoded.
    """

    def ySquared(self, x):
        raise NotImplementedError

    def encode(self, p, compress=True):
        """
        encode serializes the point in the compressed or uncompressed [SEC1]
        format. The sign bit of the compressed format is sgn0(y).

        Raises:
            EccError for the point at infinity.
        """
        self._check(p)
        if self.isIdentity(p):
            raise EccError("the point at infinity has no encoding")
        x, y = p.affine()
        if compress:
            return bytes([POINT_COMPRESSED | y.sgn0()]) + x.bytes()
        return bytes([POINT_UNCOMPRESSED]) + x.bytes() + y.bytes()

    def decode(self, b):
        """
        decode parses a point in either [SEC1] format.

        Args:
            b (bytes-like): The encoded point.

        Returns:
            Point: The decoded point.

        Raises:
            InvalidEncoding if the bytes do not encode a point on the curve.
        """
        b = bytes(b)
        f = self.field
        size = f.byteLen
        if not b:
            raise self._invalid("empty point encoding")
        tag = b[0]
        if tag == POINT_INFINITY:
            if len(b) != 1:
                raise self._invalid("the point at infinity is a single zero byte")
            return self.identity()
        if tag == POINT_UNCOMPRESSED:
            expLen = 1 + 2 * size
        elif tag in (POINT_COMPRESSED, POINT_COMPRESSED | 1):
            expLen = 1 + size
        else:
            raise self._invalid(f"invalid point format {tag:#x}")
        if len(b) != expLen:
            raise self._invalid(f"invalid point encoding length {len(b)}")

        xv = os2ip(b[1 : size + 1])
        if xv >= f.p:
            raise self._invalid("x coordinate out of range")
        x = f.element(xv)

        if tag == POINT_UNCOMPRESSED:
            yv = os2ip(b[size + 1 :])
            if yv >= f.p:
                raise self._invalid("y coordinate out of range")
            try:
                return self.newPoint(x, yv)
            except InvalidPoint:
                raise self._invalid("point is not on the curve")

        y2 = self.ySquared(x)
        y = y2.sqrt()
        if y * y != y2:
            raise self._invalid("x coordinate is not on the curve")
        sign = tag & 1
        if y.isZero() and sign:
            raise self._invalid("invalid sign for y = 0")
        if y.sgn0() != sign:
            y = -y
        return self.newPoint(x, y)


class Point:
    """
    Point is a point of a Curve in projective coordinates: (X, Y, Z) for the
    Weierstrass and Montgomery models and (X, Y, T, Z) for the Edwards model.
    Two points are equal when they represent the same affine point.
    """

    def __init__(self, curve, coords):
        self.curve = curve
        self.coords = coords

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.curve.add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.curve.add(self, self.curve.negate(other))

    def __neg__(self):
        return self.curve.negate(self)

    def __mul__(self, k):
        if isinstance(k, Scalar):
            return k.act(self)
        if isinstance(k, int):
            return self.curve.scalarMult(self, k)
        return NotImplemented

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.curve == other.curve and self.curve._eq(self.coords, other.coords)

    def __hash__(self):
        return hash((self.curve, self.curve._toAffine(self.coords)))

    def __repr__(self):
        coords = ", ".join(f"{int(c):#x}" for c in self.coords)
        return f"Point({self.curve.name}: {coords})"

    def copy(self):
        return Point(self.curve, self.coords)

    def double(self):
        return self.curve.double(self)

    def isIdentity(self):
        return self.curve.isIdentity(self)

    def isOnCurve(self):
        return self.curve.isOnCurve(self)

    def normalize(self):
        return self.curve.normalize(self)

    def affine(self):
        """
        affine returns the affine coordinates (x, y) as FieldElements. The
        point itself is not modified.

        Raises:
            EccError if the point is at infinity.
        """
        coords = self.curve._toAffine(self.coords)
        if coords[-1].isZero():
            raise EccError("the point at infinity has no affine coordinates")
        return coords[0], coords[1]

    def encode(self, compress=True):
        return self.curve.encode(self, compress)
