# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Orderflow Contributors
#
# This file is part of Orderflow.
#
# Orderflow is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Orderflow is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

from orderflow.cli.exitcodes import EXIT_OK
from orderflow.core.engine import reference_config, run_checkout


def run() -> int:
    run_checkout(reference_config())
    return EXIT_OK
