"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""

from tinyecc import GroupMismatch, checkOperands


class ScalarBits:
    """
    ScalarBits iterates the binary digits of a non-negative integer as
    booleans. Every call to iter starts over, so a ScalarBits can be traversed
    any number of times.
    """

    def __init__(self, k, leftToRight=True):
        self.k = k
        self.leftToRight = leftToRight

    def __len__(self):
        return self.k.bit_length()

    def __iter__(self):
        k = self.k
        positions = range(k.bit_length())
        if self.leftToRight:
            positions = reversed(positions)
        for i in positions:
            yield (k >> i) & 1 == 1


class Scalar:
    """
    Scalar is an integer modulo the order r of a prime-order group.
    """

    def __init__(self, k, r):
        self.r = r
        self.k = k % r

    def _lift(self, other):
        if isinstance(other, Scalar):
            checkOperands("scalar", self.r, other.r)
            return other.k
        if isinstance(other, int):
            return other
        return None

    def __add__(self, other):
        k = self._lift(other)
        if k is None:
            return NotImplemented
        return Scalar(self.k + k, self.r)

    __radd__ = __add__

    def __sub__(self, other):
        k = self._lift(other)
        if k is None:
            return NotImplemented
        return Scalar(self.k - k, self.r)

    def __rsub__(self, other):
        k = self._lift(other)
        if k is None:
            return NotImplemented
        return Scalar(k - self.k, self.r)

    def __mul__(self, other):
        # Points handle Scalar * Point in their __rmul__.
        k = self._lift(other)
        if k is None:
            return NotImplemented
        return Scalar(self.k * k, self.r)

    def __rmul__(self, other):
        k = self._lift(other)
        if k is None:
            return NotImplemented
        return Scalar(k * self.k, self.r)

    def __neg__(self):
        return Scalar(-self.k, self.r)

    def __eq__(self, other):
        if isinstance(other, Scalar):
            return self.r == other.r and self.k == other.k
        if isinstance(other, int):
            return self.k == other % self.r
        return NotImplemented

    def __hash__(self):
        return hash((self.r, self.k))

    def __int__(self):
        return self.k

    def __repr__(self):
        return f"Scalar({self.k:#x})"

    def inverse(self):
        """
        inverse is the multiplicative inverse mod r. r is prime, so this is
        k^(r-2). The inverse of zero is zero.
        """
        return Scalar(pow(self.k, self.r - 2, self.r), self.r)

    def act(self, point):
        """
        act multiplies the point by this scalar.

        Args:
            point (Point): A point of a curve of order r.

        Returns:
            Point: k * point.

        Raises:
            GroupMismatch if the point's curve order is not r.
        """
        if point.curve.order != self.r:
            raise GroupMismatch("scalar modulus differs from the curve order")
        return point.curve.scalarMult(point, self.k)

    def bits(self, leftToRight=True):
        """
        bits returns the binary digits of k, most significant first by
        default, or least significant first.

        Returns:
            ScalarBits: A restartable iterable of booleans.
        """
        return ScalarBits(self.k, leftToRight)
