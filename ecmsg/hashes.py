#!/usr/bin/env python3

# Copyright (C) 2024 The ecmsg developers
#
# This file is part of ecmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions."""

import hashlib

from ecmsg.alias import HashF, String
from ecmsg.exceptions import ECMsgValueError
from ecmsg.utils import bytes_from_string

_HEX_DIGITS = "0123456789abcdef"


def hex_digest(msg: String, hf: HashF = hashlib.sha256) -> str:
    "Return the lowercase hex-string digest of the input message."
    h = hf()
    h.update(bytes_from_string(msg))
    return h.hexdigest()


def sha256_hex(msg: String) -> str:
    "Return the lowercase hex-string SHA256(*) of the input message."
    return hex_digest(msg, hashlib.sha256)


def digest_to_int(hex_digest_: str) -> int:
    """Return the integer value of a hex-string digest.

    The digest is read most significant digit first.
    Upper case digits are accepted as well as lower case ones;
    any other character raises an error, instead of being silently
    mapped to a digit value. The empty string is zero.
    """

    i = 0
    for char in hex_digest_:
        digit = _HEX_DIGITS.find(char.lower())
        if digit < 0:
            raise ECMsgValueError(f"invalid hex digit: {char!r}")
        i = i * 16 + digit
    return i
