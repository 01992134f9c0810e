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

from orderflow.pricing.calculator import Quote
from orderflow.reporting._json import dumps_deterministic


class JsonQuoteRenderer:
    """
    Machine-readable quote output with sorted keys.
    """

    def render(self, quote: Quote) -> str:
        return dumps_deterministic(quote, indent=2) + "\n"
