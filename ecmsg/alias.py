#!/usr/bin/env python3

# Copyright (C) 2024 The ecmsg developers
#
# This file is part of ecmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Any, Callable, Union

# bytes or text string (not hex-string)
#
# this is for string that can be
# converted to bytes using encode()
# e.g. a message to be signed
#    if isinstance(msg, str):
#        msg = msg.encode()
String = Union[bytes, str]

# hex-string or int representation of an integer
# e.g. curve parameters loaded from json:
# "ffffffff00000001000000000000000000000000ffffffffffffffffffffffff"
# "0xdeadbeef"
# 3735928559
Integer = Union[str, int]

# Hash digest constructor: it may be any name suitable to hashlib.new()
HashF = Callable[[], Any]
