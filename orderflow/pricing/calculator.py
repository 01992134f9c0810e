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

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from orderflow.order.types import Order
from orderflow.strategies.interfaces import Discount


@dataclass(frozen=True, slots=True)
class Quote:
    """
    Price breakdown of an order at one point in time.
    """

    total: float
    discount: float
    final: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "discount": self.discount,
            "final": self.final,
        }


class DiscountCalculator:
    """
    Applies an ordered collection of discount rules to an order total.

    Semantics:
    - contributions are summed, so insertion order does not change the result
    - no deduplication: the same rule added twice counts twice
    - the final amount is not clamped and can go negative
    """

    def __init__(self, discounts: Iterable[Discount] = ()) -> None:
        self._discounts: list[Discount] = list(discounts)

    @property
    def discounts(self) -> tuple[Discount, ...]:
        return tuple(self._discounts)

    def add_discount(self, discount: Discount) -> None:
        self._discounts.append(discount)

    def total_discount(self, order: Order) -> float:
        total_discount: float = 0
        for discount in self._discounts:
            total_discount += discount.calculate_discount(order)
        return total_discount

    def calculate_total(self, order: Order) -> float:
        return order.get_total_amount() - self.total_discount(order)

    def quote(self, order: Order) -> Quote:
        total = order.get_total_amount()
        discount = self.total_discount(order)
        return Quote(total=total, discount=discount, final=total - discount)
