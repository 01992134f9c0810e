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
class CourierDelivery:
    def deliver_order(self, order: Order) -> None:
        print("Доставка курьером.")


@dataclass(frozen=True, slots=True)
class PostDelivery:
    def deliver_order(self, order: Order) -> None:
        print("Доставка почтой.")


@dataclass(frozen=True, slots=True)
class PickUpPointDelivery:
    def deliver_order(self, order: Order) -> None:
        print("Самовывоз из пункта выдачи.")
