#!/usr/bin/env python3

# Copyright (C) 2024 The ecmsg developers
#
# This file is part of ecmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by ecmsg from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the ecmsg versions are derived.
"""


class ECMsgValueError(ValueError):
    pass


class ECMsgTypeError(TypeError):
    pass


class ECMsgRuntimeError(RuntimeError):
    pass


class MalformedSignatureError(ECMsgValueError):
    "Signature scalar r or s not in 1..n-1."


class NonInvertibleElementError(ECMsgValueError):
    "Modular inverse requested outside of its preconditions."


class RejectionRetryExhaustedError(ECMsgRuntimeError):
    "A bounded rejection-sampling loop ran out of attempts."
