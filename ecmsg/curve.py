#!/usr/bin/env python3

# Copyright (C) 2024 The ecmsg developers
#
# This file is part of ecmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve class and the packaged curve parameters.

Curve parameters are loaded once, at import time, from

* Federal Information Processing Standards Publication 186-4
  (NIST) curves
  https://nvlpubs.nist.gov/nistpubs/FIPS/NIST.FIPS.186-4.pdf

and are shared read-only by every other module:
secp256r1 (a.k.a. NIST P-256, prime256v1) is the default curve.
"""

import json
from os import path
from typing import Dict, Optional, Sequence

from ecmsg.alias import Integer
from ecmsg.curve_group import _HEXTHRESHOLD, CurveGroup, mult_aff
from ecmsg.exceptions import ECMsgValueError
from ecmsg.point import Affine, Point
from ecmsg.utils import hex_string, int_from_integer


class Curve(CurveGroup):
    """Prime order subgroup of the points of an elliptic curve over Fp.

    The subgroup is generated by G, has order n and cofactor h.
    Curve parameters are not validated.
    """

    def __init__(
        self,
        name: str,
        p: Integer,
        a: Integer,
        b: Integer,
        G: Sequence[Integer],
        n: Integer,
        h: int,
    ) -> None:

        super().__init__(p, a, b)

        if len(G) != 2:
            raise ECMsgValueError("Generator must a be a sequence[int, int]")
        self._name = name
        self._G = Affine(int_from_integer(G[0]), int_from_integer(G[1]))
        self._n = int_from_integer(n)
        self._h = h

        self.nlen = self._n.bit_length()
        self.n_size = (self.nlen + 7) // 8

    @property
    def name(self) -> str:
        return self._name

    @property
    def G(self) -> Affine:
        return self._G

    @property
    def n(self) -> int:
        return self._n

    @property
    def h(self) -> int:
        return self._h

    def __str__(self) -> str:
        result = super().__str__()
        if self.p > _HEXTHRESHOLD:
            result += f"\n x_G = {hex_string(self._G.x)}"
            result += f"\n y_G = {hex_string(self._G.y)}"
        else:
            result += f"\n x_G = {self._G.x}"
            result += f"\n y_G = {self._G.y}"
        if self._n > _HEXTHRESHOLD:
            result += f"\n n   = {hex_string(self._n)}"
        else:
            result += f"\n n   = {self._n}"
        result += f"\n h = {self._h}"
        return result

    def __repr__(self) -> str:
        return f"Curve('{self._name}')"


datadir = path.join(path.dirname(__file__), "data")

# FIPS PUB 186-4
# FEDERAL INFORMATION PROCESSING STANDARDS PUBLICATION
# Digital Signature Standard (DSS)
filename = path.join(datadir, "ec_NIST.json")
with open(filename, "r", encoding="ascii") as file_:
    NIST_params = json.load(file_)
CURVES: Dict[str, Curve] = {}
for ec_name, ec_params in NIST_params.items():
    CURVES[ec_name] = Curve(ec_name, *ec_params)

secp256r1 = CURVES["secp256r1"]
P256 = secp256r1


def mult(m: int, Q: Optional[Point] = None, ec: Curve = secp256r1) -> Point:
    """Elliptic curve scalar multiplication.

    Q defaults to the generator G; m is reduced mod n first,
    so that negative m are handled as their congruent scalar in
    [0, n-1], i.e. (-m)*Q == -(m*Q).
    """
    if Q is None:
        Q = ec.G
    else:
        ec.require_on_curve(Q)
    m %= ec.n
    return mult_aff(m, Q, ec)
