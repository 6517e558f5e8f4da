#!/usr/bin/env python3

# Copyright (C) 2024 The ecmsg developers
#
# This file is part of ecmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ecmsg package."

name = "ecmsg"
__version__ = "2024.10.1"
__author__ = "The ecmsg developers"
__author_email__ = "devs@ecmsg.org"
__copyright__ = "Copyright (C) 2024 The ecmsg developers"
__license__ = "MIT License"
