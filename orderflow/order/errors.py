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

from collections.abc import Mapping
from typing import Any

from orderflow.order.capability import Capability


class OrderError(Exception):
    """
    Base class for all order-processing errors.

    These errors should be surfaced to users as configuration issues,
    not as internal crashes.
    """

    code: str
    message: str
    details: Mapping[str, Any] | None = None

    def __init__(
        self,
        message: str,
        code: str = "order_error",
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class MissingStrategyError(OrderError):
    """Raised by Order.process_order() when a required strategy is unset."""

    capability: Capability

    def __init__(self, capability: Capability, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(
            message=f"No {capability.value} strategy assigned to the order.",
            code="missing_strategy",
            details=details,
        )
        self.capability = capability


class UnknownStrategyError(OrderError):
    """Raised when a strategy name is not present in the registry."""

    pass
