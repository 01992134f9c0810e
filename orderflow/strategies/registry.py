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

import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from importlib.metadata import entry_points
from typing import Any, Final

from orderflow.order.capability import Capability
from orderflow.order.errors import OrderError, UnknownStrategyError
from orderflow.strategies.delivery import CourierDelivery, PickUpPointDelivery, PostDelivery
from orderflow.strategies.discount import SumDiscount
from orderflow.strategies.notification import EmailNotification, SmsNotification
from orderflow.strategies.payment import BankTransferPayment, CreditCardPayment, PayPalPayment

logger = logging.getLogger(__name__)

StrategyFactory = Callable[..., Any]

ENTRYPOINT_GROUPS: Final[Mapping[Capability, str]] = {
    Capability.PAYMENT: "orderflow.payment",
    Capability.DELIVERY: "orderflow.delivery",
    Capability.NOTIFICATION: "orderflow.notification",
    Capability.DISCOUNT: "orderflow.discount",
}

BUILTINS: Final[tuple[tuple[Capability, str, StrategyFactory], ...]] = (
    (Capability.PAYMENT, "credit_card", CreditCardPayment),
    (Capability.PAYMENT, "paypal", PayPalPayment),
    (Capability.PAYMENT, "bank_transfer", BankTransferPayment),
    (Capability.DELIVERY, "courier", CourierDelivery),
    (Capability.DELIVERY, "post", PostDelivery),
    (Capability.DELIVERY, "pickup_point", PickUpPointDelivery),
    (Capability.NOTIFICATION, "email", EmailNotification),
    (Capability.NOTIFICATION, "sms", SmsNotification),
    (Capability.DISCOUNT, "sum", SumDiscount),
)


@dataclass(frozen=True, slots=True)
class RegisteredStrategy:
    """
    Strategy factory together with its provenance (useful for debugging).
    """

    capability: Capability
    name: str
    factory: StrategyFactory
    source: str  # e.g. "builtin", "manual", "my_shop.payments:CryptoPayment"


@dataclass(frozen=True, slots=True)
class PluginLoadError:
    """
    Represents a failure to load a plugin (kept non-fatal).
    """

    source: str
    error: str


class StrategyRegistry:
    """
    Maps (capability, name) to a strategy factory.

    Typical lifecycle:
      reg = StrategyRegistry()
      reg.register_builtins()
      reg.load_entrypoints()
      payment = reg.create(Capability.PAYMENT, "credit_card")

    A later registration under an existing name replaces the earlier one,
    so plugins can override built-ins.
    """

    def __init__(self) -> None:
        self._entries: dict[Capability, dict[str, RegisteredStrategy]] = {c: {} for c in Capability}
        self._load_errors: list[PluginLoadError] = []
        self._entrypoints_loaded: bool = False

    def register(
        self,
        capability: Capability,
        name: str,
        factory: StrategyFactory,
        *,
        source: str = "manual",
    ) -> None:
        """
        Manual registration (useful for unit tests or embedding).
        """
        entries = self._entries[capability]
        if name in entries:
            logger.debug("Replacing %s strategy %r from %s with %s", capability, name, entries[name].source, source)
        entries[name] = RegisteredStrategy(capability=capability, name=name, factory=factory, source=source)

    def register_builtins(self) -> None:
        for capability, name, factory in BUILTINS:
            self.register(capability, name, factory, source="builtin")

    def load_entrypoints(self) -> None:
        """
        Discover strategies registered under the 'orderflow.<capability>' groups.

        Rules:
        - Must be safe: plugin import errors must not crash the whole tool.
        - The entry point name is the strategy name; the loaded object must
          be callable (a class or factory function).
        - If called multiple times, does nothing after first call.
        """
        if self._entrypoints_loaded:
            return

        eps = entry_points()
        for capability, group_name in ENTRYPOINT_GROUPS.items():
            for ep in eps.select(group=group_name):
                source = f"{ep.module}:{ep.attr}"
                try:
                    loaded_obj = ep.load()
                    if not callable(loaded_obj):
                        raise TypeError(f"{source} is not callable")
                    self.register(capability, ep.name, loaded_obj, source=source)
                except Exception as e:
                    logger.warning("Failed to load %s strategy plugin %s: %r", capability, source, e)
                    self._load_errors.append(PluginLoadError(source=source, error=repr(e)))

        self._entrypoints_loaded = True

    def get(self, capability: Capability, name: str) -> RegisteredStrategy:
        entry = self._entries[capability].get(name)
        if entry is None:
            available = self.names(capability)
            raise UnknownStrategyError(
                code="unknown_strategy",
                message=f"Unknown {capability.value} strategy '{name}'. Available: {', '.join(available) or '-'}",
                details={"capability": capability.value, "name": name, "available": list(available)},
            )
        return entry

    def create(self, capability: Capability, name: str, **options: Any) -> Any:
        """
        Instantiate a registered strategy, passing options to its factory.

        Raises:
            UnknownStrategyError if the name is not registered.
            OrderError if the options do not match the factory signature.
        """
        entry = self.get(capability, name)
        logger.debug("Creating %s strategy %r from %s with %r", capability, name, entry.source, options)
        try:
            inspect.signature(entry.factory).bind(**options)
        except ValueError:
            # no introspectable signature; let the factory validate its options
            pass
        except TypeError as e:
            raise OrderError(
                code="invalid_strategy_options",
                message=f"Invalid options for {capability.value} strategy '{name}': {e}",
                details={"capability": capability.value, "name": name, "options": dict(options)},
            ) from e
        return entry.factory(**options)

    def names(self, capability: Capability) -> tuple[str, ...]:
        return tuple(sorted(self._entries[capability]))

    def all(self) -> tuple[RegisteredStrategy, ...]:
        """
        Returns all registered strategies, grouped by capability and sorted by name.
        """
        out: list[RegisteredStrategy] = []
        for capability in Capability:
            out.extend(self._entries[capability][n] for n in self.names(capability))
        return tuple(out)

    def load_errors(self) -> tuple[PluginLoadError, ...]:
        """
        Returns non-fatal plugin load errors.
        """
        return tuple(self._load_errors)


def default_registry() -> StrategyRegistry:
    """
    Registry with built-ins and installed plugins.
    """
    reg = StrategyRegistry()
    reg.register_builtins()
    reg.load_entrypoints()
    return reg
