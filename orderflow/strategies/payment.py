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

from dataclasses import dataclass

from orderflow.order.formatting import format_amount


@dataclass(frozen=True, slots=True)
class CreditCardPayment:
    def process_payment(self, amount: float) -> None:
        print(f"Оплата кредитной картой: {format_amount(amount)} рублей.")


@dataclass(frozen=True, slots=True)
class PayPalPayment:
    def process_payment(self, amount: float) -> None:
        print(f"Оплата через PayPal: {format_amount(amount)} рублей.")


@dataclass(frozen=True, slots=True)
class BankTransferPayment:
    def process_payment(self, amount: float) -> None:
        print(f"Оплата банковским переводом: {format_amount(amount)} рублей.")
