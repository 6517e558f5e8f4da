#!/usr/bin/env python3

# Copyright (C) 2024 The ecmsg developers
#
# This file is part of ecmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve points.

A curve point is either the group identity (the point at infinity)
or an affine pair (x, y):

    Point = Union[Identity, Affine]

The two variants are distinct types, so that every consumer has to
handle the infinity point explicitly, e.g.:

    if isinstance(Q, Identity):
        ...
    else:
        x, y = Q

INF is the shared Identity instance.
"""

from dataclasses import dataclass
from typing import Iterator, Union


@dataclass(frozen=True)
class Identity:
    "The point at infinity, neutral element of the group law."

    def __repr__(self) -> str:
        return "INF"


@dataclass(frozen=True)
class Affine:
    "Elliptic curve point in affine coordinates."

    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        # allow 'x, y = Q' unpacking
        yield self.x
        yield self.y


Point = Union[Identity, Affine]

INF = Identity()
