#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ectower package."

name = "ectower"
__version__ = "2022.7.1"
__author__ = "The ectower developers"
__author_email__ = "devs@ectower.org"
__copyright__ = "Copyright (C) 2021-2022 The ectower developers"
__license__ = "MIT License"
