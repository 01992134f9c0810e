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

from orderflow.cli.exitcodes import EXIT_OK
from orderflow.order.capability import Capability
from orderflow.strategies.registry import default_registry


def list_strategies(*, capability: str | None) -> int:
    reg = default_registry()
    capabilities = (Capability.from_str(capability),) if capability is not None else tuple(Capability)

    lines: list[str] = []
    for cap in capabilities:
        lines.append(f"{cap.value}:")
        for name in reg.names(cap):
            entry = reg.get(cap, name)
            lines.append(f"  {name:<16} {entry.source}")

    errors = reg.load_errors()
    if errors:
        lines.append("")
        lines.append("plugin load errors:")
        for e in errors:
            lines.append(f"  ! {e.source}: {e.error}")

    print("\n".join(lines))
    return EXIT_OK
