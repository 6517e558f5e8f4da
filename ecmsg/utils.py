#!/usr/bin/env python3

# Copyright (C) 2024 The ecmsg developers
#
# This file is part of ecmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Assorted conversion utilities."

from ecmsg.alias import Integer, String
from ecmsg.exceptions import ECMsgTypeError, ECMsgValueError


def bytes_from_string(msg: String) -> bytes:
    "Return bytes from a text string (UTF-8 encoded) or bytes."

    if isinstance(msg, str):
        return msg.encode()
    if isinstance(msg, bytes):
        return msg
    raise ECMsgTypeError(f"not bytes or str: {type(msg).__name__}")


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 3735928559
    * -3735928559
    * "0xdeadbeef"
    * "-0xdeadbeef"
    * "deadbeef"
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        try:
            return int(i, 16)
        except ValueError as e:
            raise ECMsgValueError(f"not an integer: '{i}'") from e

    raise ECMsgTypeError(f"not an integer: {type(i).__name__}")


def hex_string(i: Integer) -> str:
    """Return a hex-string from many positive integer representations.

    Negative integers are not allowed.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise ECMsgValueError(f"negative integer: {int_}")
    a_str = hex(int_)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, i - 8) : i]) for i in indx]
    result = " ".join(lresult)
    return result.upper()


def int_repr(i: int) -> str:
    "Return hex_string for large values, the decimal string otherwise."

    return f"'{hex_string(i)}'" if i > 0xFFFFFFFF else f"{i}"
