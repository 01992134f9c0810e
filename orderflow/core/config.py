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

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class ItemSpec:
    name: str
    price: float


@dataclass(frozen=True, slots=True)
class DiscountSpec:
    kind: str = "sum"
    options: Mapping[str, Any] = field(default_factory=dict)  # passed to the registry factory


@dataclass(frozen=True)
class CheckoutConfig:
    """
    Declarative description of one order: its items, the registry names of
    its strategies and the discount rules to price it with.

    Strategy names left as None stay unassigned on the built order.
    """

    items: tuple[ItemSpec, ...] = ()
    payment: str | None = None
    delivery: str | None = None
    notification: str | None = None
    discounts: tuple[DiscountSpec, ...] = ()
    charge_discounted: bool = False  # charge the final price instead of the undiscounted total
