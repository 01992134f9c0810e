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

from orderflow.cli._io import apply_overrides, load_config
from orderflow.cli.exitcodes import EXIT_OK
from orderflow.core.engine import run_checkout


def run(
    *,
    config: str | None,
    payment: str | None,
    delivery: str | None,
    notification: str | None,
    items: Sequence[str],
    discounts: Sequence[str],
    charge_discounted: bool,
) -> int:
    checkout = apply_overrides(
        load_config(config),
        payment=payment,
        delivery=delivery,
        notification=notification,
        items=items,
        discounts=discounts,
        charge_discounted=charge_discounted,
    )
    run_checkout(checkout)
    return EXIT_OK
