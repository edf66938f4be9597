"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""


class EccError(Exception):
    pass


class IncompatibleOperands(EccError):
    """
    The operands of a binary operation belong to different fields, curves or
    scalar groups.
    """

    pass


class GroupMismatch(IncompatibleOperands):
    """
    A scalar was applied to a point of a curve whose order is not the scalar's
    modulus.
    """

    pass


class InvalidPoint(EccError):
    """
    The coordinates do not satisfy the curve equation.
    """

    pass


class InvalidEncoding(EccError):
    """
    A byte string could not be decoded into a point.
    """

    pass


class UnsupportedParameter(EccError):
    """
    A component was configured with parameters it cannot work with.
    """

    pass


def checkOperands(kind, a, b):
    """
    Check that the descriptors of two operands match.

    Args:
        kind str: what is being compared, used in error messages.
        a object: the descriptor of the left operand.
        b object: the descriptor of the right operand.

    Raises:
        IncompatibleOperands if a != b.
    """
    if a != b:
        raise IncompatibleOperands(f"{kind}: operands do not match")
