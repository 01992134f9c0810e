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

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from orderflow.order.types import Order


@dataclass(frozen=True, slots=True)
class SumDiscount:
    """
    Threshold discount on the order total.

    Semantics:
    - total > threshold  -> total * percentage / 100
    - total <= threshold -> 0 (a total equal to the threshold gets no discount)

    Percentage is not range-checked; values above 100 produce a discount
    larger than the total.
    """

    discount_threshold: float
    discount_percentage: float

    def calculate_discount(self, order: Order) -> float:
        total_amount = order.get_total_amount()
        if total_amount > self.discount_threshold:
            return total_amount * self.discount_percentage / 100
        return 0
