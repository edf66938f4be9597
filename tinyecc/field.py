"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Arithmetic in prime fields GF(p).

A PrimeField is an immutable descriptor for the integers modulo an odd
prime p. FieldElements are always-reduced residues that carry a reference
to their field. Elements of different fields never mix: two fields are
the same field when their moduli are equal, regardless of object identity.

References:
  [RFC9380]: Hashing to Elliptic Curves
    https://www.rfc-editor.org/rfc/rfc9380

  [HAC]: Handbook of Applied Cryptography (Menezes, van Oorschot, Vanstone),
    algorithm 3.34 (Tonelli-Shanks)
"""

from tinyecc import UnsupportedParameter, checkOperands
from tinyecc.util import helpers
from tinyecc.util.encode import BIG_ENDIAN, LITTLE_ENDIAN, byteLength, i2osp, os2ip


log = helpers.getLogger("FIELD")

# Square root strategies. The strategy of a field is picked from p mod 16
# when the field is created.
SQRT_3MOD4 = "3mod4"
SQRT_5MOD8 = "5mod8"
SQRT_9MOD16 = "9mod16"
SQRT_1MOD16 = "1mod16"


class PrimeField:
    """
    PrimeField is the field of integers modulo the odd prime p. The modulus is
    assumed to be prime; this is not verified.
    """

    def __init__(self, p):
        """
        Args:
            p (int): The field modulus.

        Raises:
            UnsupportedParameter if p is smaller than 3 or even.
        """
        if p < 3 or p % 2 == 0:
            raise UnsupportedParameter(f"invalid field modulus {p}")
        self.p = p
        self.bitLen = p.bit_length()
        self.byteLen = byteLength(self.bitLen)
        self.halfP = (p - 1) // 2
        self.sqrtStrategy = self._prepareSqrt()
        log.debug(f"GF({p:#x}) uses {self.sqrtStrategy} square roots")

    def _prepareSqrt(self):
        """
        _prepareSqrt precomputes the constants of the square root strategy
        matching p mod 16 and returns the strategy name.
        """
        p = self.p
        if p % 4 == 3:
            self.sqrtExp = (p + 1) // 4
            self._sqrt = self._sqrt3mod4
            return SQRT_3MOD4
        if p % 8 == 5:
            # 2 is a non-residue when p = 5 (mod 8), so 2^((p-1)/4) is a
            # square root of -1.
            self.sqrtExp = (p + 3) // 8
            self.sqrtMinusOne = pow(2, (p - 1) // 4, p)
            self._sqrt = self._sqrt5mod8
            return SQRT_5MOD8
        # p - 1 = 2^s * q with q odd.
        s, q = 0, p - 1
        while q % 2 == 0:
            s, q = s + 1, q // 2
        c = 2
        while pow(c, self.halfP, p) != p - 1:
            c += 1
            if c >= p:
                raise UnsupportedParameter(f"no quadratic non-residue mod {p}")
        self.tsS = s
        self.tsQ = q
        self.tsC = pow(c, q, p)
        self._sqrt = self._sqrtTonelliShanks
        return SQRT_9MOD16 if p % 16 == 9 else SQRT_1MOD16

    def _sqrt3mod4(self, n):
        return pow(n, self.sqrtExp, self.p)

    def _sqrt5mod8(self, n):
        p = self.p
        r = pow(n, self.sqrtExp, p)
        if r * r % p == n:
            return r
        return r * self.sqrtMinusOne % p

    def _sqrtTonelliShanks(self, n):
        """
        _sqrtTonelliShanks is algorithm 3.34 from [HAC]. For a non-residue
        the loop exits early and the partial result is returned.
        """
        if n == 0:
            return 0
        p = self.p
        m, c = self.tsS, self.tsC
        t = pow(n, self.tsQ, p)
        r = pow(n, (self.tsQ + 1) // 2, p)
        while t != 1:
            # Find the least i, 0 < i < m, such that t^(2^i) = 1.
            i, t2 = 0, t
            while t2 != 1:
                t2 = t2 * t2 % p
                i += 1
                if i == m:
                    return r
            b = pow(c, 1 << (m - i - 1), p)
            m = i
            c = b * b % p
            t = t * c % p
            r = r * b % p
        return r

    def element(self, n):
        """
        element lifts an integer into the field.

        Args:
            n (int or FieldElement): The value.

        Returns:
            FieldElement: n mod p.
        """
        if isinstance(n, FieldElement):
            checkOperands("field", self, n.field)
            return FieldElement(self, n.n)
        return FieldElement(self, n)

    def zero(self):
        return FieldElement(self, 0)

    def one(self):
        return FieldElement(self, 1)

    def fromBytes(self, b, byteorder=BIG_ENDIAN):
        """
        fromBytes interprets b as an integer and reduces it into the field.
        """
        return FieldElement(self, os2ip(b, byteorder))

    def select(self, x, y, bit):
        """
        select returns y if bit is set, otherwise x. The choice is made with
        an integer mask rather than a branch.

        Args:
            x (FieldElement or int): Returned when bit is not set.
            y (FieldElement or int): Returned when bit is set.
            bit (bool or int): The selector.

        Returns:
            FieldElement: The selected value.
        """
        a, b = self.element(x).n, self.element(y).n
        mask = -int(bool(bit))
        return FieldElement(self, a ^ ((a ^ b) & mask))

    def __eq__(self, other):
        return isinstance(other, PrimeField) and self.p == other.p

    def __hash__(self):
        return hash(self.p)

    def __repr__(self):
        return f"PrimeField({self.p:#x})"


class FieldElement:
    """
    FieldElement is a residue in [0, p). Python integers are accepted as the
    other operand of every operation and are lifted into the element's field.
    """

    def __init__(self, field, n):
        self.field = field
        self.n = n % field.p

    def _lift(self, other):
        if isinstance(other, FieldElement):
            checkOperands("field", self.field, other.field)
            return other.n
        if isinstance(other, int):
            return other
        return None

    def __add__(self, other):
        n = self._lift(other)
        if n is None:
            return NotImplemented
        return FieldElement(self.field, self.n + n)

    __radd__ = __add__

    def __sub__(self, other):
        n = self._lift(other)
        if n is None:
            return NotImplemented
        return FieldElement(self.field, self.n - n)

    def __rsub__(self, other):
        n = self._lift(other)
        if n is None:
            return NotImplemented
        return FieldElement(self.field, n - self.n)

    def __mul__(self, other):
        n = self._lift(other)
        if n is None:
            return NotImplemented
        return FieldElement(self.field, self.n * n)

    __rmul__ = __mul__

    def __truediv__(self, other):
        n = self._lift(other)
        if n is None:
            return NotImplemented
        if n % self.field.p == 0:
            raise ZeroDivisionError("field division by zero")
        return self * FieldElement(self.field, n).inverse()

    def __rtruediv__(self, other):
        n = self._lift(other)
        if n is None:
            return NotImplemented
        return FieldElement(self.field, n) / self

    def __neg__(self):
        return FieldElement(self.field, -self.n)

    def __pow__(self, e):
        if e < 0:
            return self.inverse() ** -e
        return FieldElement(self.field, pow(self.n, e, self.field.p))

    def __eq__(self, other):
        if isinstance(other, FieldElement):
            return self.field == other.field and self.n == other.n
        if isinstance(other, int):
            return self.n == other % self.field.p
        return NotImplemented

    def __hash__(self):
        return hash((self.field.p, self.n))

    def __int__(self):
        return self.n

    def __repr__(self):
        return f"FieldElement({self.n:#x})"

    def __str__(self):
        return str(self.n)

    def isZero(self):
        return self.n == 0

    def inverse(self):
        """
        inverse returns the multiplicative inverse computed as a^(p-2). The
        inverse of zero is zero, which is the inv0 function of [RFC9380].
        """
        p = self.field.p
        return FieldElement(self.field, pow(self.n, p - 2, p))

    def sqrt(self):
        """
        sqrt returns a square root of the element. The result is meaningful
        only when isSquare() is True. Callers that handle untrusted input must
        check that the square of the result equals the element.
        """
        return FieldElement(self.field, self.field._sqrt(self.n))

    def isSquare(self):
        """
        isSquare is Euler's criterion. Zero is a square.
        """
        f = self.field
        return pow(self.n, f.halfP, f.p) in (0, 1)

    def sgn0(self, endianness=LITTLE_ENDIAN):
        """
        sgn0 is the sign of the element. The little-endian sign is the parity
        of the element. The big-endian sign is 1 for elements greater than
        (p-1)/2 and 0 otherwise.
        """
        if endianness == LITTLE_ENDIAN:
            return self.n & 1
        return int(self.n > self.field.halfP)

    def bytes(self, byteorder=BIG_ENDIAN, length=None):
        """
        bytes encodes the element on length bytes, by default the byte length
        of the modulus.
        """
        return i2osp(self.n, length or self.field.byteLen, byteorder)
