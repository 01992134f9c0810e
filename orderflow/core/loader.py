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

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

from orderflow.core.config import CheckoutConfig, DiscountSpec, ItemSpec

logger = logging.getLogger(__name__)

# Short keys accepted for the built-in "sum" discount
SUM_OPTION_ALIASES: Final[Mapping[str, str]] = {
    "threshold": "discount_threshold",
    "percentage": "discount_percentage",
}

STRATEGY_KEYS: Final[tuple[str, ...]] = ("payment", "delivery", "notification")


@dataclass(frozen=True, slots=True)
class ConfigLoadError(Exception):
    code: str
    message: str
    details: Mapping[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class CheckoutConfigLoader:
    """
    Loads a CheckoutConfig from order.yaml / order.yml / order.json

    Example:
      items:
        - {name: "Товар 1", price: 500}
        - {name: "Товар 2", price: 1500}
      payment: credit_card
      delivery: courier
      notification: email
      discounts:
        - {kind: sum, threshold: 1000, percentage: 10}
    """

    def load(self, path: Path) -> CheckoutConfig:
        if not isinstance(path, Path):
            path = Path(path)

        if not path.exists():
            raise ConfigLoadError(code="config_not_found", message=f"Config file does not exist: {path}")

        logger.debug("Loading checkout config from %s", path)
        return self.parse(self._read_config_file(path))

    def parse(self, data: Any) -> CheckoutConfig:
        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ConfigLoadError(code="invalid_config", message="Checkout config root must be a mapping/object.")

        names: dict[str, str | None] = {}
        for key in STRATEGY_KEYS:
            value = data.get(key)
            if value is not None and (not isinstance(value, str) or not value.strip()):
                raise ConfigLoadError(
                    code="invalid_strategy_name",
                    message=f"'{key}' must be a non-empty string when present.",
                    details={"key": key, "value": value},
                )
            names[key] = value.strip() if isinstance(value, str) else None

        charge_discounted = data.get("charge_discounted", False)
        if not isinstance(charge_discounted, bool):
            raise ConfigLoadError(code="invalid_config", message="'charge_discounted' must be a boolean.")

        return CheckoutConfig(
            items=self._parse_items(data.get("items")),
            payment=names["payment"],
            delivery=names["delivery"],
            notification=names["notification"],
            discounts=self._parse_discounts(data.get("discounts")),
            charge_discounted=charge_discounted,
        )

    def _read_config_file(self, path: Path) -> Any:
        suffix = path.suffix.lower()
        raw = path.read_text(encoding="utf-8")

        if suffix == ".json":
            try:
                return json.loads(raw)
            except json.JSONDecodeError as e:
                raise ConfigLoadError(
                    code="invalid_config",
                    message=f"Failed to parse JSON config: {e}",
                    details={"path": str(path)},
                ) from e

        if suffix in (".yaml", ".yml"):
            return self._yaml_load(raw, path)

        # Unknown extension: try JSON then YAML
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            return self._yaml_load(raw, path)

    def _yaml_load(self, raw: str, path: Path) -> Any:
        try:
            import yaml
        except ImportError as e:
            raise ConfigLoadError(
                code="yaml_dependency_missing",
                message="YAML config requires PyYAML.",
                details={"hint": "pip install pyyaml", "path": str(path)},
            ) from e

        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigLoadError(
                code="invalid_config",
                message=f"Failed to parse YAML config: {e}",
                details={"path": str(path)},
            ) from e

    def _parse_items(self, raw: Any) -> tuple[ItemSpec, ...]:
        if raw is None:
            return ()

        if not isinstance(raw, list):
            raise ConfigLoadError(code="invalid_items", message="'items' must be a list when present.")

        items: list[ItemSpec] = []
        for idx, item in enumerate(raw):
            if not isinstance(item, dict):
                raise ConfigLoadError(code="invalid_item", message=f"Item #{idx + 1} must be an object.")

            name = item.get("name")
            price = item.get("price")
            if not isinstance(name, str):
                raise ConfigLoadError(
                    code="invalid_item",
                    message=f"Item #{idx + 1} needs a string 'name'.",
                    details={"item": item},
                )
            # bool is an int subclass; reject it explicitly
            if isinstance(price, bool) or not isinstance(price, (int, float)):
                raise ConfigLoadError(
                    code="invalid_item",
                    message=f"Item '{name}' needs a numeric 'price'.",
                    details={"item": item},
                )

            items.append(ItemSpec(name=name, price=price))

        return tuple(items)

    def _parse_discounts(self, raw: Any) -> tuple[DiscountSpec, ...]:
        if raw is None:
            return ()

        if not isinstance(raw, list):
            raise ConfigLoadError(code="invalid_discounts", message="'discounts' must be a list when present.")

        out: list[DiscountSpec] = []
        for idx, spec in enumerate(raw):
            if not isinstance(spec, dict):
                raise ConfigLoadError(code="invalid_discount", message=f"Discount #{idx + 1} must be an object.")

            kind = spec.get("kind", "sum")
            if not isinstance(kind, str) or not kind.strip():
                raise ConfigLoadError(
                    code="invalid_discount",
                    message=f"Discount #{idx + 1} 'kind' must be a non-empty string.",
                    details={"discount": spec},
                )
            kind = kind.strip()

            options = {str(k): v for k, v in spec.items() if k != "kind"}
            if kind == "sum":
                options = {SUM_OPTION_ALIASES.get(k, k): v for k, v in options.items()}
                for key, value in options.items():
                    if isinstance(value, bool) or not isinstance(value, (int, float)):
                        raise ConfigLoadError(
                            code="invalid_discount",
                            message=f"Discount #{idx + 1} '{key}' must be a number.",
                            details={"discount": spec},
                        )

            out.append(DiscountSpec(kind=kind, options=options))

        return tuple(out)
