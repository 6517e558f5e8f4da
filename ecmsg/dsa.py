#!/usr/bin/env python3

# Copyright (C) 2024 The ecmsg developers
#
# This file is part of ecmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve Digital Signature Algorithm (ECDSA).

Implementation according to SEC 1 v.2:

http://www.secg.org/sec1-v2.pdf

with a fresh random nonce for each signature attempt.
"""

import logging
from dataclasses import InitVar, dataclass, field
from hashlib import sha256
from typing import Optional, Union

from dataclasses_json import DataClassJsonMixin, config

from ecmsg.alias import HashF, String
from ecmsg.curve import CURVES, Curve, secp256r1
from ecmsg.curve_group import mult_aff
from ecmsg.exceptions import (
    ECMsgRuntimeError,
    ECMsgValueError,
    MalformedSignatureError,
    RejectionRetryExhaustedError,
)
from ecmsg.hashes import digest_to_int, hex_digest
from ecmsg.keys import MAX_ATTEMPTS, KeyPair, gen_prv_key, int_from_prv_key
from ecmsg.number_theory import canonical_mod, mod_inv
from ecmsg.point import Affine, Identity, Point
from ecmsg.utils import int_from_integer, int_repr

logger = logging.getLogger(__name__)


def _curve_from_name(name: str) -> Curve:
    try:
        return CURVES[name]
    except KeyError as e:
        raise ECMsgValueError(f"unknown curve: {name}") from e


@dataclass(frozen=True)
class Sig(DataClassJsonMixin):
    """ECDSA signature.

    JSON serialization uses hex-strings for the scalars
    and the curve name for the curve.
    """

    # 0 < r < ec.n (ec.n is the curve order)
    r: int = field(metadata=config(encoder=hex, decoder=int_from_integer))
    # 0 < s < ec.n (ec.n is the curve order)
    s: int = field(metadata=config(encoder=hex, decoder=int_from_integer))
    ec: Curve = field(
        default=secp256r1,
        metadata=config(encoder=lambda v: v.name, decoder=_curve_from_name),
    )
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        # r is a scalar, fail if r is not in [1, n-1]
        if not 0 < self.r < self.ec.n:
            raise MalformedSignatureError(f"scalar r not in 1..n-1: {int_repr(self.r)}")

        # s is a scalar, fail if s is not in [1, n-1]
        if not 0 < self.s < self.ec.n:
            raise MalformedSignatureError(f"scalar s not in 1..n-1: {int_repr(self.s)}")


def challenge_(msg: String, ec: Curve = secp256r1, hf: HashF = sha256) -> int:
    """Return the challenge e, the integer value of the message digest.

    If the digest is longer than the bit-length of n, only its leftmost
    nlen bits are used (SEC 1 v.2 section 4.1.3 step 5):
    SHA256 on secp256r1 uses the whole digest.
    The result is not reduced mod n.
    """

    hex_digest_ = hex_digest(msg, hf)
    c = digest_to_int(hex_digest_)
    hlen = len(hex_digest_) * 4
    if hlen > ec.nlen:
        c >>= hlen - ec.nlen
    return c


def _sign_(c: int, q: int, nonce: int, ec: Curve = secp256r1) -> Sig:
    # Private function for testing purposes: it allows to explore all
    # possible value of the challenge c (for low-cardinality curves).
    # It assume that q and nonce are in [1, n-1]
    # Steps numbering follows SEC 1 v.2 section 4.1.3
    K = mult_aff(nonce, ec.G, ec)  # 1
    # only possible if n is not the order of G
    if not isinstance(K, Affine):
        raise ECMsgRuntimeError("invalid (INF) nonce point")

    # mod n makes the x_K field element a scalar
    r = canonical_mod(K.x, ec.n)  # 2, 3
    if r == 0:  # r≠0 required as it multiplies the public key
        raise ECMsgRuntimeError("failed to sign: r = 0")

    s = canonical_mod(mod_inv(nonce, ec.n) * (c + r * q), ec.n)  # 6
    if s == 0:  # s≠0 required as verify will need the inverse of s
        raise ECMsgRuntimeError("failed to sign: s = 0")

    return Sig(r, s, ec)


def sign(
    msg: String,
    prv_key: Union[int, str, KeyPair],
    ec: Curve = secp256r1,
    hf: HashF = sha256,
    nonce: Optional[int] = None,
) -> Sig:
    """ECDSA signature.

    Implemented according to SEC 1 v.2
    The message msg is first processed by hf, yielding the value

        msg_hash = hf(msg),

    whose leftmost nlen bits are the challenge.

    Unless a nonce is provided, a fresh random nonce is drawn for each
    attempt: a new attempt is made if r or s happens to be zero,
    up to MAX_ATTEMPTS times.
    """

    # the secret key q: an integer in the range 1..n-1.
    q = int_from_prv_key(prv_key, ec)

    # the challenge
    c = challenge_(msg, ec, hf)  # 4, 5

    if nonce is not None:
        nonce = int_from_prv_key(nonce, ec)
        return _sign_(c, q, nonce, ec)

    for attempt in range(1, MAX_ATTEMPTS + 1):
        nonce = gen_prv_key(ec)
        try:
            return _sign_(c, q, nonce, ec)
        except ECMsgRuntimeError as e:
            logger.debug("%s, retrying with a new nonce (attempt %d)", e, attempt)
    raise RejectionRetryExhaustedError(f"failed to sign after {MAX_ATTEMPTS} attempts")


def _assert_as_valid_(c: int, Q: Affine, r: int, s: int, ec: Curve) -> None:
    # Private function for test/dev purposes
    # Steps numbering follows SEC 1 v.2 section 4.1.4

    w = mod_inv(s, ec.n)
    u1 = canonical_mod(c * w, ec.n)
    u2 = canonical_mod(r * w, ec.n)  # 4
    # Let K = u1*G + u2*Q.
    K = ec.add_aff(mult_aff(u1, ec.G, ec), mult_aff(u2, Q, ec))  # 5

    # Fail if infinite(K).
    if isinstance(K, Identity):  # 5
        raise ECMsgRuntimeError("invalid (INF) key")

    # Fail if r ≠ x_K %n.
    if r != canonical_mod(K.x, ec.n):  # 6, 7, 8
        raise ECMsgRuntimeError("signature verification failed")


def assert_as_valid(msg: String, pub_key: Point, sig: Sig, hf: HashF = sha256) -> None:
    # Private function for test/dev purposes
    # It raises Errors, while verify should always return True or False

    sig.assert_valid()  # 1

    if not isinstance(pub_key, Affine) or not sig.ec.is_on_curve(pub_key):
        raise ECMsgValueError(f"not a valid public key: {pub_key}")

    c = challenge_(msg, sig.ec, hf)  # 2, 3

    # second part delegated to helper function
    _assert_as_valid_(c, pub_key, sig.r, sig.s, sig.ec)


def verify(msg: String, pub_key: Point, sig: Sig, hf: HashF = sha256) -> bool:
    """ECDSA signature verification (SEC 1 v.2 section 4.1.4)."""

    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        assert_as_valid(msg, pub_key, sig, hf)
    except Exception:  # pylint: disable=broad-except
        return False

    return True
