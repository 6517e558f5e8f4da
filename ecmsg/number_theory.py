#!/usr/bin/env python3

# Copyright (C) 2024 The ecmsg developers
#
# This file is part of ecmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic functions.

All curve arithmetic goes through the three functions of this module:

* canonical_mod, the non-negative residue of an integer
* mod_pow, square-and-multiply modular exponentiation
* mod_inv, the modular inverse by Fermat's little theorem

The inverse is only defined for a prime modulus,
which is always the case for the field prime p and the group order n.
"""

import functools

from ecmsg.exceptions import ECMsgValueError, NonInvertibleElementError
from ecmsg.utils import int_repr


def canonical_mod(v: int, m: int) -> int:
    """Return the canonical residue of v (mod m), i.e. in [0, m-1].

    The result is non-negative even for negative v.
    """

    if m < 1:
        raise ECMsgValueError(f"modulus not positive: {int_repr(m)}")
    # the remainder takes the sign of the (positive) divisor
    return v % m


def mod_pow(base: int, exponent: int, m: int) -> int:
    """Return base^exponent (mod m).

    Right-to-left binary 'square & multiply':
    O(log exponent) modular multiplications.
    """

    if exponent < 0:
        raise ECMsgValueError(f"negative exponent: {int_repr(exponent)}")

    result = canonical_mod(1, m)
    base = canonical_mod(base, m)
    while exponent > 0:
        if exponent & 1:  # if least significant bit is 1
            result = result * base % m  # then multiply by current base
        base = base * base % m  # square for next bit
        exponent >>= 1  # remove the bit just accounted for
    return result


@functools.lru_cache()  # only a couple of moduli are ever used
def _is_probable_prime(m: int) -> bool:
    # Fermat test will do as _probabilistic_ primality test
    if m == 2:
        return True
    return m > 2 and m % 2 == 1 and mod_pow(2, m - 1, m) == 1


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m must be a prime.

    Based on Fermat's little theorem: a^(m-1) = 1 (mod m),
    hence a^(m-2) is the inverse of a.
    The result is checked, as a composite modulus can pass
    the probable-prime test.
    """

    if not _is_probable_prime(m):
        raise NonInvertibleElementError(f"modulus is not prime: {int_repr(m)}")
    err_msg = f"no inverse for {int_repr(a)} mod {int_repr(m)}"
    if canonical_mod(a, m) == 0:
        raise NonInvertibleElementError(err_msg)
    inv = mod_pow(a, m - 2, m)
    # base-2 pseudoprimes (e.g. 341) pass the Fermat test
    if a * inv % m != 1:
        raise NonInvertibleElementError(err_msg)
    return inv
