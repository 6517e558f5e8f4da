#!/usr/bin/env python3

# Copyright (C) 2024 The ecmsg developers
#
# This file is part of ecmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecmsg.number_theory` module."

import pytest

from ecmsg.exceptions import ECMsgValueError, NonInvertibleElementError
from ecmsg.number_theory import canonical_mod, mod_inv, mod_pow

primes = [
    2,
    3,
    5,
    7,
    11,
    13,
    17,
    19,
    23,
    29,
    31,
    97,
    101,
    2 ** 160 - 2 ** 31 - 1,
    2 ** 192 - 2 ** 64 - 1,
    2 ** 224 - 2 ** 96 + 1,
    2 ** 256 - 2 ** 32 - 977,
    2 ** 256 - 2 ** 224 + 2 ** 192 + 2 ** 96 - 1,
    2 ** 521 - 1,
]


def test_canonical_mod() -> None:
    assert canonical_mod(7, 5) == 2
    assert canonical_mod(-7, 5) == 3
    assert canonical_mod(-5, 5) == 0
    assert canonical_mod(0, 5) == 0
    assert canonical_mod(-1, 2 ** 256) == 2 ** 256 - 1
    for m in range(1, 20):
        for v in range(-3 * m, 3 * m):
            r = canonical_mod(v, m)
            assert 0 <= r < m
            assert (v - r) % m == 0

    for m in (0, -5):
        with pytest.raises(ECMsgValueError, match="modulus not positive: "):
            canonical_mod(3, m)


def test_mod_pow() -> None:
    for m in (1, 2, 3, 10, 97, 2 ** 127 - 1, 2 ** 256 - 2 ** 32 - 977):
        for base in (0, 1, 2, 3, -1, -12345, 2 ** 200 + 7):
            for exponent in (0, 1, 2, 3, 5, 64, 2 ** 64 + 1, m):
                assert mod_pow(base, exponent, m) == pow(base, exponent, m)

    assert mod_pow(0, 0, 7) == 1
    assert mod_pow(5, 0, 1) == 0

    with pytest.raises(ECMsgValueError, match="negative exponent: "):
        mod_pow(2, -1, 7)


def test_mod_inv_prime() -> None:
    for p in primes:
        with pytest.raises(NonInvertibleElementError, match="no inverse for 0 mod"):
            mod_inv(0, p)
        with pytest.raises(NonInvertibleElementError, match="no inverse for "):
            mod_inv(p, p)
        for a in range(1, min(p, 300)):  # exhausted only for small p
            inv = mod_inv(a, p)
            assert a * inv % p == 1
            inv = mod_inv(a + p, p)
            assert a * inv % p == 1
            inv = mod_inv(-a, p)
            assert -a * inv % p == 1


def test_mod_inv_large() -> None:
    p = 2 ** 256 - 2 ** 224 + 2 ** 192 + 2 ** 96 - 1
    for a in (2 ** 255, p - 1, 0xDEADBEEF ** 7, 3 ** 150):
        assert a * mod_inv(a, p) % p == 1


def test_mod_inv_not_prime() -> None:
    for m in (1, 4, 9, 15, 100, 2 ** 256):
        with pytest.raises(NonInvertibleElementError, match="modulus is not prime: "):
            mod_inv(1, m)

    # 341 = 11 * 31 is a base-2 Fermat pseudoprime
    assert mod_pow(2, 340, 341) == 1
    for a in (11, 31, 3):
        with pytest.raises(NonInvertibleElementError, match="no inverse for "):
            mod_inv(a, 341)
    assert mod_inv(2, 341) == 171
    # Carmichael number: a^(m-2) is the inverse of any a coprime to m
    assert mod_inv(2, 561) == 281
    with pytest.raises(NonInvertibleElementError, match="no inverse for 3 mod 561"):
        mod_inv(3, 561)
