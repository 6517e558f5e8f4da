#!/usr/bin/env python3

# Copyright (C) 2024 The ecmsg developers
#
# This file is part of ecmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Private scalars and key-pairs.

Private keys (and ECDSA ephemeral nonces) are scalars in [1, n-1],
drawn by rejection sampling from a cryptographically secure source.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass, field
from typing import Tuple, Union

from ecmsg.curve import Curve, mult, secp256r1
from ecmsg.exceptions import (
    ECMsgRuntimeError,
    ECMsgValueError,
    RejectionRetryExhaustedError,
)
from ecmsg.point import Affine
from ecmsg.utils import int_from_integer, int_repr

logger = logging.getLogger(__name__)

# safety cap for rejection sampling loops:
# for secp256r1 a single retry has probability of about 2^-32
MAX_ATTEMPTS = 64


def gen_prv_key(ec: Curve = secp256r1) -> int:
    """Return a uniformly random private key in [1, n-1].

    n_size random bytes (32 for secp256r1) are assembled
    most significant byte first; bits exceeding the bit-length of n
    are dropped, then the value is rejected and drawn again
    if it is zero or not lower than n.
    """

    excess_bits = ec.n_size * 8 - ec.nlen
    for attempt in range(1, MAX_ATTEMPTS + 1):
        q = int.from_bytes(secrets.token_bytes(ec.n_size), byteorder="big")
        q >>= excess_bits
        if 0 < q < ec.n:
            return q
        logger.debug("rejected scalar candidate (attempt %d)", attempt)
    raise RejectionRetryExhaustedError(
        f"no valid scalar after {MAX_ATTEMPTS} attempts"
    )


def int_from_prv_key(prv_key: Union[int, str, KeyPair], ec: Curve = secp256r1) -> int:
    """Return a verified-as-valid private key integer.

    It supports:

    - integer (native int or hex-string)
    - KeyPair
    """

    if isinstance(prv_key, KeyPair):
        if prv_key.ec is not ec:
            raise ECMsgValueError(f"curve mismatch: {prv_key.ec.name} / {ec.name}")
        return prv_key.prv_key

    q = int_from_integer(prv_key)
    if not 0 < q < ec.n:
        raise ECMsgValueError(f"private key not in 1..n-1: {int_repr(q)}")
    return q


@dataclass(frozen=True)
class KeyPair:
    """Private/public key-pair.

    The public key is always derived from the private key,
    it cannot be provided.
    """

    prv_key: int
    ec: Curve = field(default=secp256r1, repr=False)
    pub_key: Affine = field(init=False, compare=False)

    def __post_init__(self) -> None:
        if not 0 < self.prv_key < self.ec.n:
            err_msg = f"private key not in 1..n-1: {int_repr(self.prv_key)}"
            raise ECMsgValueError(err_msg)
        Q = mult(self.prv_key, self.ec.G, self.ec)
        # only possible if n is not the order of G
        if not isinstance(Q, Affine):
            raise ECMsgRuntimeError("invalid (INF) key")
        object.__setattr__(self, "pub_key", Q)

    @classmethod
    def generate(cls, ec: Curve = secp256r1) -> KeyPair:
        "Return a key-pair with a freshly drawn private key."
        return cls(gen_prv_key(ec), ec)


def gen_keys(
    prv_key: Union[int, str, None] = None, ec: Curve = secp256r1
) -> Tuple[int, Affine]:
    "Return a private/public (int, Affine) key-pair."
    if prv_key is None:
        q = gen_prv_key(ec)
    else:
        q = int_from_prv_key(prv_key, ec)
    key_pair = KeyPair(q, ec)
    return key_pair.prv_key, key_pair.pub_key
