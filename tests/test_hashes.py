#!/usr/bin/env python3

# Copyright (C) 2024 The ecmsg developers
#
# This file is part of ecmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecmsg.hashes` module."

import hashlib

import pytest

from ecmsg.exceptions import ECMsgValueError
from ecmsg.hashes import digest_to_int, hex_digest, sha256_hex


def test_sha256_hex() -> None:
    exp = "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
    assert sha256_hex("hello") == exp
    assert sha256_hex(b"hello") == exp
    exp = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    assert sha256_hex("") == exp

    assert hex_digest("hello", hashlib.sha1) == hashlib.sha1(b"hello").hexdigest()


def test_digest_to_int() -> None:
    assert digest_to_int("") == 0
    assert digest_to_int("0") == 0
    assert digest_to_int("f") == 15
    assert digest_to_int("ff") == 255
    assert digest_to_int("0123456789abcdef") == 0x0123456789ABCDEF
    # upper case hex digits are the same digits
    assert digest_to_int("0123456789ABCDEF") == 0x0123456789ABCDEF
    assert digest_to_int("dEaDbEeF") == 0xDEADBEEF

    hex_ = sha256_hex("hello")
    assert digest_to_int(hex_) == int(hex_, 16)


def test_digest_to_int_invalid() -> None:
    for hex_ in ("g", "0x1f", "12 34", "-1", "ff\n", "１"):
        with pytest.raises(ECMsgValueError, match="invalid hex digit: "):
            digest_to_int(hex_)
