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
from orderflow.core.engine import quote_order
from orderflow.reporting.renderers.json import JsonQuoteRenderer
from orderflow.reporting.renderers.text import TextQuoteRenderer


def run(
    *,
    config: str | None,
    items: Sequence[str],
    discounts: Sequence[str],
    fmt: str,
    verbose: bool = False,
) -> int:
    checkout = apply_overrides(load_config(config), items=items, discounts=discounts)
    quote = quote_order(checkout)

    if fmt == "json":
        out = JsonQuoteRenderer().render(quote)
    else:
        out = TextQuoteRenderer(verbose=verbose).render(quote)
    print(out, end="")

    return EXIT_OK
