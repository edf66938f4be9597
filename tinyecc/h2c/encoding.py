"""
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Encodings from byte strings to curve points, section 3 of [RFC9380].

References:
  [RFC9380]: Hashing to Elliptic Curves
    https://www.rfc-editor.org/rfc/rfc9380
"""

from tinyecc.h2c.expand import HashToField


class Encoding:
    """
    Encoding composes hash_to_field, a map to the curve and cofactor
    clearing. A random oracle encoding (ro = True) maps two field elements
    and adds the results, so that its output distribution is statistically
    close to uniform. A nonuniform encoding maps a single element.
    """

    def __init__(self, curve, hashID, dst, mapper, L, ro):
        """
        Args:
            curve (Curve): The target curve.
            hashID (HashID): The hash function.
            dst (bytes-like): The domain separation tag.
            mapper (object): A map to the curve. It must have a method
                map(FieldElement) -> Point.
            L (int): The number of bytes hashed into each field element.
            ro (bool): Whether this is a random oracle encoding.
        """
        self.curve = curve
        self.mapper = mapper
        self.ro = ro
        self.hashToField = HashToField(curve.field, hashID, dst, L)

    @property
    def dst(self):
        return self.hashToField.dst

    def encodeToCurve(self, msg):
        """
        encodeToCurve is the nonuniform encoding, encode_to_curve.
        """
        (u,) = self.hashToField.hash(msg, 1)
        return self.curve.clearCofactor(self.mapper.map(u))

    def hashToCurve(self, msg):
        """
        hashToCurve is the random oracle encoding, hash_to_curve.
        """
        u0, u1 = self.hashToField.hash(msg, 2)
        p = self.mapper.map(u0) + self.mapper.map(u1)
        return self.curve.clearCofactor(p)

    def hash(self, msg):
        """
        Hash a message to a point of the prime-order subgroup.

        Args:
            msg (bytes-like): The message.

        Returns:
            Point: The point.
        """
        if self.ro:
            return self.hashToCurve(msg)
        return self.encodeToCurve(msg)
