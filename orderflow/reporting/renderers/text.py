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

from orderflow.order.formatting import format_amount
from orderflow.pricing.calculator import Quote

FINAL_PRICE_TEMPLATE = "Итоговая сумма с учетом скидки: {amount} рублей."


def final_price_line(final: float) -> str:
    return FINAL_PRICE_TEMPLATE.format(amount=format_amount(final))


class TextQuoteRenderer:
    """
    Human-readable quote output. Pure rendering: does not recompute anything.

    Default output is the single final-price line; verbose adds the
    undiscounted total and the discount above it.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def render(self, quote: Quote) -> str:
        lines: list[str] = []
        if self.verbose:
            lines.append(f"Сумма заказа: {format_amount(quote.total)} рублей.")
            lines.append(f"Скидка: {format_amount(quote.discount)} рублей.")
        lines.append(final_price_line(quote.final))
        return "\n".join(lines) + "\n"
