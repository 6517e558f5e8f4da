#!/usr/bin/env python3

# Copyright (C) 2024 The ecmsg developers
#
# This file is part of ecmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Diffie-Hellman elliptic curve key agreement scheme.

Implementation of the Diffie-Hellman key agreement scheme using
elliptic curve cryptography. A key agreement scheme is used
by two entities to establish shared keying data, which will be
later utilized e.g. in symmetric cryptographic scheme.

The two entities must agree on the elliptic curve and hash function
to use.

The shared point coordinates are not uniformly distributed bit strings:
only the x-coordinate is used as key material,
and always through a hash function.
"""

from hashlib import sha256

from ecmsg.alias import HashF
from ecmsg.curve import Curve, mult, secp256r1
from ecmsg.exceptions import ECMsgRuntimeError
from ecmsg.point import Affine, Point


def shared_secret(own_prv: int, other_pub: Point, ec: Curve = secp256r1) -> Point:
    """Return the shared point own_prv * other_pub.

    For key-pairs (a, aG) and (b, bG): a*(bG) == b*(aG).
    """
    return mult(own_prv, other_pub, ec)


def _shared_x(own_prv: int, other_pub: Point, ec: Curve) -> bytes:
    shared_secret_point = shared_secret(own_prv, other_pub, ec)
    if not isinstance(shared_secret_point, Affine):
        raise ECMsgRuntimeError("invalid (INF) key")
    shared_secret_field_element = shared_secret_point.x
    return shared_secret_field_element.to_bytes(ec.p_size, byteorder="big", signed=False)


def shared_key(
    own_prv: int, other_pub: Point, ec: Curve = secp256r1, hf: HashF = sha256
) -> bytes:
    "Return the hash digest of the shared point x-coordinate."
    h = hf()
    h.update(_shared_x(own_prv, other_pub, ec))
    return h.digest()
