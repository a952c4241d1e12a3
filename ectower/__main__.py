#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Entry point for 'python -m ectower'."

import sys

from ectower.demo import main

sys.exit(main())
