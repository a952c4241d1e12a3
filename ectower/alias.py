#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Callable, Union

# hex-string or bytes representation of an int
# e.g. 863, "0x35f", "035f", b"\x03\x5f"
Integer = Union[bytes, str, int]

# Source of randomness: randbelow(n) returns an int in [0, n-1],
# e.g. secrets.randbelow or random.Random(seed).randrange
RandBelow = Callable[[int], int]
