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

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from orderflow.order.capability import Capability
from orderflow.order.errors import MissingStrategyError

if TYPE_CHECKING:
    from orderflow.strategies.interfaces import DeliveryMethod, NotificationMethod, PaymentMethod

PROCESSING_MESSAGE = "Обработка заказа..."
SUCCESS_MESSAGE = "Ваш заказ был успешно оформлен!"


@dataclass(frozen=True, slots=True)
class OrderItem:
    """
    A single line of an order.
    """

    name: str
    price: float


@dataclass(slots=True)
class Order:
    """
    Accumulates items and holds one strategy per required capability.

    Lifecycle:
      order = Order()
      order.add_item("Товар 1", 500)
      order.payment_method = CreditCardPayment()
      ...
      order.process_order()

    Prices are not validated: negative or non-finite values are summed as-is.
    """

    items: list[OrderItem] = field(default_factory=list)
    price: float = 0

    payment_method: PaymentMethod | None = None
    delivery_method: DeliveryMethod | None = None
    notification_method: NotificationMethod | None = None

    def add_item(self, name: str, price: float) -> None:
        self.items.append(OrderItem(name=name, price=price))
        self.price += price

    def get_total_amount(self) -> float:
        """
        Sum of all item prices, independent of any discount.
        """
        return self.price

    def strategy_for(self, capability: Capability) -> object | None:
        if capability == Capability.PAYMENT:
            return self.payment_method
        if capability == Capability.DELIVERY:
            return self.delivery_method
        if capability == Capability.NOTIFICATION:
            return self.notification_method
        raise ValueError(f"Order has no {capability.value} strategy slot")

    def missing_capabilities(self) -> tuple[Capability, ...]:
        """
        Required capabilities without an assigned strategy, in invocation order.
        """
        return tuple(c for c in Capability.required() if self.strategy_for(c) is None)

    def process_order(self, amount: float | None = None) -> None:
        """
        Invoke payment, delivery and notification strategies in that order.

        The payment strategy is charged ``amount`` when given, otherwise the
        undiscounted running total.

        Raises:
            MissingStrategyError before any output if a required strategy is unset.
        """
        payment = self.payment_method
        delivery = self.delivery_method
        notification = self.notification_method
        if payment is None or delivery is None or notification is None:
            missing = self.missing_capabilities()
            raise MissingStrategyError(missing[0], details={"missing": [c.value for c in missing]})

        print(PROCESSING_MESSAGE)
        payment.process_payment(self.price if amount is None else amount)
        delivery.deliver_order(self)
        notification.send_notification(SUCCESS_MESSAGE)
