#!/usr/bin/env python3

# Copyright (C) 2024 The ecmsg developers
#
# This file is part of ecmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecmsg.utils` module."

import pytest

from ecmsg.exceptions import ECMsgTypeError, ECMsgValueError
from ecmsg.utils import bytes_from_string, hex_string, int_from_integer, int_repr


def test_int_from_integer() -> None:
    i = 0xDEADBEEF
    assert int_from_integer(i) == i
    assert int_from_integer(-i) == -i
    assert int_from_integer("deadbeef") == i
    assert int_from_integer(" DEADBEEF ") == i
    assert int_from_integer("0xdeadbeef") == i
    assert int_from_integer("-0xdeadbeef") == -i

    with pytest.raises(ECMsgValueError, match="not an integer: "):
        int_from_integer("not an integer")
    with pytest.raises(ECMsgTypeError, match="not an integer: "):
        int_from_integer(1.5)  # type: ignore


def test_hex_string() -> None:
    assert hex_string(0) == "00"
    assert hex_string(0xABC) == "0ABC"
    assert hex_string(0x123456789) == "01 23456789"
    assert hex_string("deadbeefdeadbeef") == "DEADBEEF DEADBEEF"

    with pytest.raises(ECMsgValueError, match="negative integer: "):
        hex_string(-1)


def test_int_repr() -> None:
    assert int_repr(12) == "12"
    assert int_repr(-12) == "-12"
    assert int_repr(0x100000000) == "'01 00000000'"


def test_bytes_from_string() -> None:
    assert bytes_from_string("hello") == b"hello"
    assert bytes_from_string(b"hello") == b"hello"
    assert bytes_from_string("€") == b"\xe2\x82\xac"

    with pytest.raises(ECMsgTypeError, match="not bytes or str: "):
        bytes_from_string(42)  # type: ignore
