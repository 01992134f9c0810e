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

from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from orderflow.core.config import CheckoutConfig, DiscountSpec, ItemSpec
from orderflow.core.loader import CheckoutConfigLoader, ConfigLoadError

DEFAULT_CONFIG_NAMES = ("order.yaml", "order.yml", "order.json")


def default_config_file(cwd: str | Path = ".") -> str | None:
    p = Path(cwd)
    for name in DEFAULT_CONFIG_NAMES:
        candidate = p / name
        if candidate.exists():
            return str(candidate)
    return None


def load_config(path: str | None) -> CheckoutConfig:
    config_file = path if path is not None else default_config_file()
    if config_file is None:
        return CheckoutConfig()
    return CheckoutConfigLoader().load(Path(config_file))


def _parse_number(text: str, *, what: str) -> float:
    try:
        value = float(text)
    except ValueError as e:
        raise ConfigLoadError(code="invalid_argument", message=f"{what} must be a number, got {text!r}") from e
    return int(value) if value.is_integer() else value


def parse_item(text: str) -> ItemSpec:
    """
    "NAME=PRICE" -> ItemSpec. The last '=' separates the price.
    """
    name, sep, price = text.rpartition("=")
    if not sep or not name:
        raise ConfigLoadError(code="invalid_argument", message=f"Item must look like NAME=PRICE, got {text!r}")
    return ItemSpec(name=name, price=_parse_number(price, what="Item price"))


def parse_discount(text: str) -> DiscountSpec:
    """
    "THRESHOLD:PERCENTAGE" -> sum DiscountSpec.
    """
    threshold, sep, percentage = text.partition(":")
    if not sep:
        raise ConfigLoadError(
            code="invalid_argument",
            message=f"Discount must look like THRESHOLD:PERCENTAGE, got {text!r}",
        )
    return DiscountSpec(
        kind="sum",
        options={
            "discount_threshold": _parse_number(threshold, what="Discount threshold"),
            "discount_percentage": _parse_number(percentage, what="Discount percentage"),
        },
    )


def apply_overrides(
    config: CheckoutConfig,
    *,
    payment: str | None = None,
    delivery: str | None = None,
    notification: str | None = None,
    items: Sequence[str] = (),
    discounts: Sequence[str] = (),
    charge_discounted: bool = False,
) -> CheckoutConfig:
    """
    Strategy flags replace config values; items and discounts are appended.
    """
    return replace(
        config,
        payment=payment if payment is not None else config.payment,
        delivery=delivery if delivery is not None else config.delivery,
        notification=notification if notification is not None else config.notification,
        items=config.items + tuple(parse_item(i) for i in items),
        discounts=config.discounts + tuple(parse_discount(d) for d in discounts),
        charge_discounted=config.charge_discounted or charge_discounted,
    )
