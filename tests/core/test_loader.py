import json
from pathlib import Path
from typing import Any

import pytest
from orderflow.core import CheckoutConfig, CheckoutConfigLoader, ConfigLoadError, DiscountSpec, ItemSpec

# ----------------------------
# Helpers
# ----------------------------


def write_json(path: Path, obj: Any) -> Path:
    path.write_text(json.dumps(obj, ensure_ascii=False, indent=2), encoding="utf-8")
    return path


def write_yaml(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def load(path: Path) -> CheckoutConfig:
    return CheckoutConfigLoader().load(path)


# ----------------------------
# Happy paths
# ----------------------------


def test_loader_yaml_full(tmp_path: Path):
    f = write_yaml(
        tmp_path / "order.yaml",
        """
items:
  - name: Товар 1
    price: 500
  - {name: Товар 2, price: 1500}
payment: credit_card
delivery: courier
notification: email
discounts:
  - kind: sum
    threshold: 1000
    percentage: 10
""",
    )
    cfg = load(f)

    assert cfg.items == (ItemSpec("Товар 1", 500), ItemSpec("Товар 2", 1500))
    assert (cfg.payment, cfg.delivery, cfg.notification) == ("credit_card", "courier", "email")
    assert cfg.discounts == (
        DiscountSpec(kind="sum", options={"discount_threshold": 1000, "discount_percentage": 10}),
    )
    assert cfg.charge_discounted is False


def test_loader_json_minimal(tmp_path: Path):
    cfg = load(write_json(tmp_path / "order.json", {}))
    assert cfg == CheckoutConfig()


def test_loader_empty_yaml_is_empty_config(tmp_path: Path):
    assert load(write_yaml(tmp_path / "order.yml", "")) == CheckoutConfig()


def test_loader_discount_kind_defaults_to_sum_and_keeps_long_keys(tmp_path: Path):
    cfg = load(
        write_json(
            tmp_path / "order.json",
            {"discounts": [{"discount_threshold": 10, "discount_percentage": 1}]},
        )
    )
    assert cfg.discounts[0].kind == "sum"
    assert cfg.discounts[0].options == {"discount_threshold": 10, "discount_percentage": 1}


def test_loader_passes_plugin_discount_options_through(tmp_path: Path):
    cfg = load(write_json(tmp_path / "order.json", {"discounts": [{"kind": "loyalty", "threshold": 3}]}))
    assert cfg.discounts[0] == DiscountSpec(kind="loyalty", options={"threshold": 3})


def test_loader_unknown_extension_falls_back_to_yaml(tmp_path: Path):
    cfg = load(write_yaml(tmp_path / "order.conf", "payment: paypal\ncharge_discounted: true\n"))
    assert cfg.payment == "paypal"
    assert cfg.charge_discounted is True


def test_loader_strips_strategy_names(tmp_path: Path):
    cfg = load(write_json(tmp_path / "order.json", {"delivery": "  post "}))
    assert cfg.delivery == "post"


# ----------------------------
# Errors
# ----------------------------


def test_loader_missing_file(tmp_path: Path):
    with pytest.raises(ConfigLoadError) as ei:
        load(tmp_path / "nope.yaml")
    assert ei.value.code == "config_not_found"


@pytest.mark.parametrize(
    "data, code",
    [
        ([1, 2], "invalid_config"),
        ({"items": {"a": 1}}, "invalid_items"),
        ({"items": ["a"]}, "invalid_item"),
        ({"items": [{"price": 1}]}, "invalid_item"),
        ({"items": [{"name": "a", "price": "10"}]}, "invalid_item"),
        ({"items": [{"name": "a", "price": True}]}, "invalid_item"),
        ({"discounts": {"kind": "sum"}}, "invalid_discounts"),
        ({"discounts": [5]}, "invalid_discount"),
        ({"discounts": [{"kind": ""}]}, "invalid_discount"),
        ({"payment": 3}, "invalid_strategy_name"),
        ({"notification": "  "}, "invalid_strategy_name"),
        ({"charge_discounted": "yes"}, "invalid_config"),
        ({"discounts": [{"threshold": "1000", "percentage": 10}]}, "invalid_discount"),
        ({"discounts": [{"kind": "sum", "discount_percentage": True, "discount_threshold": 0}]}, "invalid_discount"),
    ],
)
def test_loader_structural_errors(tmp_path: Path, data, code):
    with pytest.raises(ConfigLoadError) as ei:
        load(write_json(tmp_path / "order.json", data))
    assert ei.value.code == code


def test_loader_invalid_json(tmp_path: Path):
    with pytest.raises(ConfigLoadError) as ei:
        load(write_yaml(tmp_path / "order.json", "{not json"))
    assert ei.value.code == "invalid_config"
    assert str(ei.value).startswith("invalid_config: ")


def test_loader_invalid_yaml(tmp_path: Path):
    with pytest.raises(ConfigLoadError) as ei:
        load(write_yaml(tmp_path / "order.yaml", "items: [unclosed"))
    assert ei.value.code == "invalid_config"
