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

import logging

from orderflow.core.config import CheckoutConfig, DiscountSpec, ItemSpec
from orderflow.order.capability import Capability
from orderflow.order.errors import MissingStrategyError
from orderflow.order.types import Order
from orderflow.pricing.calculator import DiscountCalculator, Quote
from orderflow.reporting.renderers.text import final_price_line
from orderflow.strategies.registry import StrategyRegistry, default_registry

logger = logging.getLogger(__name__)


def reference_config() -> CheckoutConfig:
    """
    Two items, credit card, courier, email and 10% off orders above 1000.
    """
    return CheckoutConfig(
        items=(ItemSpec(name="Товар 1", price=500), ItemSpec(name="Товар 2", price=1500)),
        payment="credit_card",
        delivery="courier",
        notification="email",
        discounts=(DiscountSpec(kind="sum", options={"discount_threshold": 1000, "discount_percentage": 10}),),
    )


def order_from_items(config: CheckoutConfig) -> Order:
    """
    Order holding the configured items and no strategies.
    """
    order = Order()
    for item in config.items:
        order.add_item(item.name, item.price)
    return order


def build_order(config: CheckoutConfig, registry: StrategyRegistry) -> Order:
    order = order_from_items(config)

    if config.payment is not None:
        order.payment_method = registry.create(Capability.PAYMENT, config.payment)
    if config.delivery is not None:
        order.delivery_method = registry.create(Capability.DELIVERY, config.delivery)
    if config.notification is not None:
        order.notification_method = registry.create(Capability.NOTIFICATION, config.notification)

    logger.debug("Built order with %d item(s), total %r", len(order.items), order.get_total_amount())
    return order


def build_calculator(config: CheckoutConfig, registry: StrategyRegistry) -> DiscountCalculator:
    calculator = DiscountCalculator()
    for spec in config.discounts:
        calculator.add_discount(registry.create(Capability.DISCOUNT, spec.kind, **dict(spec.options)))
    return calculator


def quote_order(config: CheckoutConfig, registry: StrategyRegistry | None = None) -> Quote:
    """
    Price the configured order without processing it.

    Only items and discounts are used; strategy names are not looked up.
    """
    if registry is None:
        registry = default_registry()
    order = order_from_items(config)
    return build_calculator(config, registry).quote(order)


def run_checkout(config: CheckoutConfig, registry: StrategyRegistry | None = None) -> Quote:
    """
    Build the order, report its discounted price and process it.

    Output (one line each):
      final price, processing started, payment, delivery, notification

    Payment is charged the undiscounted total unless config.charge_discounted
    is set.

    Raises:
        MissingStrategyError before any output if a required strategy is unset.
        UnknownStrategyError if a configured name is not registered.
    """
    if registry is None:
        registry = default_registry()

    order = build_order(config, registry)
    missing = order.missing_capabilities()
    if missing:
        raise MissingStrategyError(missing[0], details={"missing": [c.value for c in missing]})

    quote = build_calculator(config, registry).quote(order)
    logger.debug("Quote: total=%r discount=%r final=%r", quote.total, quote.discount, quote.final)

    print(final_price_line(quote.final))
    order.process_order(amount=quote.final if config.charge_discounted else None)
    return quote
