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

from enum import auto

from orderflow.utils.enum import StrEnum


class Capability(StrEnum):
    """
    Extension points of an order.

    PAYMENT, DELIVERY and NOTIFICATION must be assigned before an order
    is processed. DISCOUNT rules live on a DiscountCalculator instead.
    """

    PAYMENT = auto()
    DELIVERY = auto()
    NOTIFICATION = auto()
    DISCOUNT = auto()

    @staticmethod
    def required() -> tuple["Capability", ...]:
        """
        Capabilities an order needs, in the order they are invoked.
        """
        return (Capability.PAYMENT, Capability.DELIVERY, Capability.NOTIFICATION)

    @classmethod
    def from_str(cls, value: str) -> "Capability":
        """
        Parse capability from string (case-insensitive).

        Raises:
            ValueError if invalid capability.
        """
        value = value.strip().lower()
        for cap in Capability:
            if cap.value == value:
                return cap
        raise ValueError(f"Invalid capability: {value}")
