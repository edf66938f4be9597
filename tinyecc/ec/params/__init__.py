"""
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details
"""

from tinyecc import EccError
from tinyecc.ec.edwards import EdwardsCurve
from tinyecc.ec.montgomery import MontgomeryCurve
from tinyecc.ec.weierstrass import WeierstrassCurve
from tinyecc.field import PrimeField
from tinyecc.util import helpers

from . import (
    bls12381g1,
    bls12381g1iso,
    curve448,
    curve25519,
    edwards448,
    edwards25519,
    p256,
    p384,
    p521,
    secp256k1,
    secp256k1iso,
)


log = helpers.getLogger("CURVE")

the_params = {
    c.Name: c
    for c in (
        p256,
        p384,
        p521,
        secp256k1,
        secp256k1iso,
        bls12381g1,
        bls12381g1iso,
        curve25519,
        curve448,
        edwards25519,
        edwards448,
    )
}

_curves = {}


def parse(name):
    """
    Get the curve parameters based on the curve name.
    """
    try:
        return the_params[name]
    except KeyError:
        raise EccError(f"unrecognized curve name {name}")


def buildCurve(params):
    """
    Construct a curve from a parameters module.

    Args:
        params (module): One of the modules of the_params, or any object with
            the same attributes.

    Returns:
        Curve: The curve.
    """
    field = PrimeField(params.P)
    gx = getattr(params, "Gx", None)
    gy = getattr(params, "Gy", None)
    hEff = getattr(params, "HEff", None)
    if params.Model == WeierstrassCurve.model:
        return WeierstrassCurve(
            params.Name, field, params.A, params.B, params.R, params.H, gx, gy, hEff
        )
    if params.Model == EdwardsCurve.model:
        return EdwardsCurve(
            params.Name, field, params.A, params.D, params.R, params.H, gx, gy, hEff
        )
    if params.Model == MontgomeryCurve.model:
        return MontgomeryCurve(
            params.Name,
            field,
            params.A,
            params.B,
            params.S,
            params.R,
            params.H,
            gx,
            gy,
        )
    raise EccError(f"unknown curve model {params.Model}")


def getCurve(name):
    """
    Get the curve for the name. Curves are immutable, so a single instance
    is built per name and shared.

    Args:
        name (str): The curve name.

    Returns:
        Curve: The curve.

    Raises:
        EccError if the name is unknown.
    """
    curve = _curves.get(name)
    if curve is None:
        curve = _curves[name] = buildCurve(parse(name))
        log.debug(f"built curve {name}")
    return curve
