#!/usr/bin/env python3

# Copyright (C) 2024 The ecmsg developers
#
# This file is part of ecmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and functions.

Note that CurveGroup does not have to be a cyclic subgroup.
For the cyclic subgroup of prime order generated by G,
see the ecmsg.curve module.
"""

from ecmsg.alias import Integer
from ecmsg.exceptions import ECMsgTypeError, ECMsgValueError
from ecmsg.number_theory import canonical_mod, mod_inv
from ecmsg.point import INF, Affine, Identity, Point
from ecmsg.utils import hex_string, int_from_integer, int_repr

_HEXTHRESHOLD = 0xFFFFFFFF


class CurveGroup:
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity INF.

    The group is defined by the point addition group law.
    Parameters are read-only: they are never changed after construction.
    """

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:
        self._p = int_from_integer(p)
        self._a = int_from_integer(a)
        self._b = int_from_integer(b)
        # byte-length
        self.p_size = (self._p.bit_length() + 7) // 8

    @property
    def p(self) -> int:
        return self._p

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    def __str__(self) -> str:
        result = "Curve"
        if self._p > _HEXTHRESHOLD:
            result += f"\n p   = {hex_string(self._p)}"
        else:
            result += f"\n p   = {self._p}"

        if self._a > _HEXTHRESHOLD or self._b > _HEXTHRESHOLD:
            result += f"\n a   = {hex_string(self._a)}"
            result += f"\n b   = {hex_string(self._b)}"
        else:
            result += f"\n a   = {self._a}"
            result += f"\n b   = {self._b}"

        return result

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if isinstance(Q, Identity):
            return INF
        if isinstance(Q, Affine):
            return Affine(Q.x, canonical_mod(-Q.y, self._p))
        raise ECMsgTypeError("not a point")

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self.add_aff(Q1, Q2)

    def add_aff(self, Q: Point, R: Point) -> Point:
        # points are assumed to be on curve
        if isinstance(R, Identity):
            return Q
        if isinstance(Q, Identity):
            return R

        if R.x == Q.x:
            if R.y == Q.y:  # point doubling
                return self.double_aff(Q)
            # opposite points
            return INF

        lam = canonical_mod((Q.y - R.y) * mod_inv(Q.x - R.x, self._p), self._p)
        x = canonical_mod(lam * lam - Q.x - R.x, self._p)
        y = canonical_mod(lam * (Q.x - x) - Q.y, self._p)
        return Affine(x, y)

    def double_aff(self, Q: Point) -> Point:
        # point is assumed to be on curve
        if isinstance(Q, Identity):
            return INF
        if Q.y == 0:  # point of order two
            return INF

        lam = (3 * Q.x * Q.x + self._a) * mod_inv(2 * Q.y, self._p)
        lam = canonical_mod(lam, self._p)
        x = canonical_mod(lam * lam - Q.x - Q.x, self._p)
        y = canonical_mod(lam * (Q.x - x) - Q.y, self._p)
        return Affine(x, y)

    def y2(self, x: int) -> int:
        "Return the right-hand side of the curve equation: x^3 + a*x + b."
        return canonical_mod((x * x + self._a) * x + self._b, self._p)

    def is_on_curve(self, Q: Point) -> bool:
        "Return True if the point is on the curve."
        if isinstance(Q, Identity):
            return True
        if not isinstance(Q, Affine):
            raise ECMsgTypeError("not a point")
        if not 0 <= Q.x < self._p:
            return False
        if not 0 <= Q.y < self._p:
            return False
        return self.y2(Q.x) == canonical_mod(Q.y * Q.y, self._p)

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise ECMsgValueError("point not on curve")


def mult_aff(m: int, Q: Point, ec: CurveGroup) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses 'double & add' algorithm,
    'right-to-left' binary decomposition of m,
    affine coordinates.
    It is not constant-time.

    The input point is assumed to be on curve,
    m is assumed to have been reduced mod n if appropriate
    (e.g. cyclic groups of order n).
    """

    if m < 0:
        raise ECMsgValueError(f"negative m: {int_repr(m)}")

    R: Point = INF  # initialize as infinity point
    while m > 0:  # use binary representation of m
        if m & 1:  # if least significant bit is 1
            R = ec.add_aff(R, Q)  # then add current Q
        m >>= 1  # remove the bit just accounted for
        Q = ec.double_aff(Q)  # double Q for next step
    return R
