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

from orderflow.strategies.delivery import CourierDelivery, PickUpPointDelivery, PostDelivery
from orderflow.strategies.discount import SumDiscount
from orderflow.strategies.interfaces import Discount, DeliveryMethod, NotificationMethod, PaymentMethod
from orderflow.strategies.notification import EmailNotification, SmsNotification
from orderflow.strategies.payment import BankTransferPayment, CreditCardPayment, PayPalPayment
from orderflow.strategies.registry import PluginLoadError, RegisteredStrategy, StrategyRegistry, default_registry

__all__ = [
    "PaymentMethod",
    "DeliveryMethod",
    "NotificationMethod",
    "Discount",
    "CreditCardPayment",
    "PayPalPayment",
    "BankTransferPayment",
    "CourierDelivery",
    "PostDelivery",
    "PickUpPointDelivery",
    "EmailNotification",
    "SmsNotification",
    "SumDiscount",
    "StrategyRegistry",
    "RegisteredStrategy",
    "PluginLoadError",
    "default_registry",
]
