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

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from orderflow.order.types import Order


class PaymentMethod(Protocol):
    """
    Payment capability contract.

    Implementations report how the amount is charged. No gateway is contacted.
    """

    def process_payment(self, amount: float) -> None:
        raise NotImplementedError()


class DeliveryMethod(Protocol):
    """
    Delivery capability contract.

    Receives the whole order; built-in variants do not inspect it.
    """

    def deliver_order(self, order: Order) -> None:
        raise NotImplementedError()


class NotificationMethod(Protocol):
    """
    Notification capability contract.
    """

    def send_notification(self, message: str) -> None:
        raise NotImplementedError()


class Discount(Protocol):
    """
    Discount capability contract.

    Must be a pure function of the order. The contract does not require
    a non-negative result; DiscountCalculator sums whatever is returned.
    """

    def calculate_discount(self, order: Order) -> float:
        raise NotImplementedError()
