#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by ectower from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the ectower versions are derived.
"""


class ECTowerValueError(ValueError):
    pass


class ECTowerTypeError(TypeError):
    pass


class ECTowerRuntimeError(RuntimeError):
    pass


class ECTowerInvariantError(ECTowerRuntimeError):
    """An internal precondition of an algorithm does not hold.

    E.g. a denominator of the elliptic curve group law that turns out
    not to be invertible: the input points were not on the curve.
    """
