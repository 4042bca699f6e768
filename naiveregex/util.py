#! /usr/bin/env python3

# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 The naiveregex authors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import sys
import typing

# Arguments for value classes that are created in large numbers.
# frozen implies hashable, which rules and patterns need.
dataclass_args: dict[str, typing.Any] = {'frozen': True} \
    if sys.version_info < (3, 10) \
    else {'frozen': True, 'slots': True}
