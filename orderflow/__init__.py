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

from orderflow._version import __version__
from orderflow.core import CheckoutConfig, reference_config, run_checkout
from orderflow.order import Capability, MissingStrategyError, Order, OrderError, OrderItem
from orderflow.pricing import DiscountCalculator, Quote
from orderflow.strategies import StrategyRegistry, SumDiscount, default_registry

__all__ = [
    "__version__",
    "Capability",
    "CheckoutConfig",
    "DiscountCalculator",
    "MissingStrategyError",
    "Order",
    "OrderError",
    "OrderItem",
    "Quote",
    "StrategyRegistry",
    "SumDiscount",
    "default_registry",
    "reference_config",
    "run_checkout",
]
