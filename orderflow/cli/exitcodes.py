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

from orderflow.order.errors import MissingStrategyError

# CI-friendly semantics
EXIT_OK = 0
EXIT_MISSING_STRATEGY = 1
EXIT_ENGINE_ERROR = 2


def exit_code_from_error(error: BaseException) -> int:
    """
    Policy:
      - MissingStrategyError => EXIT_MISSING_STRATEGY
      - config, registry or unexpected errors => EXIT_ENGINE_ERROR
    """
    if isinstance(error, MissingStrategyError):
        return EXIT_MISSING_STRATEGY
    return EXIT_ENGINE_ERROR
