"""
End-to-end tests for orderflow CLI commands.

These tests run the actual CLI against real order files,
without mocking or monkeypatching the engine. They verify the full pipeline
from CLI invocation to console output.
"""

import json
import os
import sys
from dataclasses import dataclass
from io import StringIO
from pathlib import Path

import pytest
from orderflow.cli.main import main as orderflow_main


@dataclass
class CLIResult:
    """Result of running the CLI."""

    returncode: int
    stdout: str
    stderr: str


def run_orderflow(*args: str, cwd: Path | None = None) -> CLIResult:
    """Run orderflow CLI command and return the result."""
    original_cwd = os.getcwd()
    original_stdout = sys.stdout
    original_stderr = sys.stderr

    stdout_capture = StringIO()
    stderr_capture = StringIO()

    try:
        if cwd:
            os.chdir(cwd)

        sys.stdout = stdout_capture
        sys.stderr = stderr_capture

        try:
            returncode = orderflow_main(list(args))
        except SystemExit as e:
            returncode = e.code if e.code is not None else 0

    finally:
        os.chdir(original_cwd)
        sys.stdout = original_stdout
        sys.stderr = original_stderr

    return CLIResult(
        returncode=returncode,
        stdout=stdout_capture.getvalue(),
        stderr=stderr_capture.getvalue(),
    )


@pytest.fixture
def shop_dir(tmp_path: Path) -> Path:
    """
    A working directory with an order.yaml describing the reference order.
    """
    shop = tmp_path / "shop"
    shop.mkdir()
    (shop / "order.yaml").write_text(
        """
items:
  - {name: Товар 1, price: 500}
  - {name: Товар 2, price: 1500}
payment: credit_card
delivery: courier
notification: email
discounts:
  - {kind: sum, threshold: 1000, percentage: 10}
""",
        encoding="utf-8",
    )
    return shop


@pytest.fixture
def multi_discount_order(tmp_path: Path) -> Path:
    """
    A JSON order with two overlapping discounts and bank transfer + post.
    """
    path = tmp_path / "big-order.json"
    order = {
        "items": [{"name": "Ноутбук", "price": 2500}, {"name": "Сумка", "price": 500}],
        "payment": "bank_transfer",
        "delivery": "post",
        "notification": "sms",
        "discounts": [
            {"threshold": 1000, "percentage": 10},
            {"kind": "sum", "discount_threshold": 2000, "discount_percentage": 5},
        ],
    }
    path.write_text(json.dumps(order, ensure_ascii=False), encoding="utf-8")
    return path


class TestCheckoutE2E:
    def test_discovered_order_file_matches_reference_output(self, shop_dir: Path):
        result = run_orderflow("checkout", cwd=shop_dir)

        assert result.returncode == 0
        assert result.stdout == (
            "Итоговая сумма с учетом скидки: 1800 рублей.\n"
            "Обработка заказа...\n"
            "Оплата кредитной картой: 2000 рублей.\n"
            "Доставка курьером.\n"
            "Отправка email: Ваш заказ был успешно оформлен!\n"
        )
        assert result.stderr == ""

    def test_demo_matches_discovered_reference_order(self, shop_dir: Path):
        assert run_orderflow("demo").stdout == run_orderflow("checkout", cwd=shop_dir).stdout

    def test_flags_override_file(self, shop_dir: Path):
        result = run_orderflow("checkout", "--delivery", "post", "--charge-discounted", cwd=shop_dir)

        assert result.returncode == 0
        lines = result.stdout.splitlines()
        assert lines[2] == "Оплата кредитной картой: 1800 рублей."
        assert lines[3] == "Доставка почтой."

    def test_multi_discount_json_order(self, multi_discount_order: Path):
        result = run_orderflow("checkout", str(multi_discount_order))

        assert result.returncode == 0
        assert result.stdout.splitlines() == [
            "Итоговая сумма с учетом скидки: 2550 рублей.",
            "Обработка заказа...",
            "Оплата банковским переводом: 3000 рублей.",
            "Доставка почтой.",
            "Отправка SMS: Ваш заказ был успешно оформлен!",
        ]

    def test_quote_json_for_discovered_order(self, shop_dir: Path):
        result = run_orderflow("quote", "--format", "json", cwd=shop_dir)

        assert result.returncode == 0
        assert json.loads(result.stdout) == {"discount": 200, "final": 1800, "total": 2000}

    def test_invalid_order_file_exits_with_engine_error(self, tmp_path: Path):
        bad = tmp_path / "order.yaml"
        bad.write_text("items: 5\n", encoding="utf-8")

        result = run_orderflow("checkout", cwd=tmp_path)

        assert result.returncode == 2
        assert result.stdout == ""
        assert "invalid_items" in result.stderr

    def test_order_without_strategies_exits_with_missing_strategy(self, tmp_path: Path):
        (tmp_path / "order.json").write_text('{"items": [{"name": "a", "price": 1}]}', encoding="utf-8")

        result = run_orderflow("checkout", cwd=tmp_path)

        assert result.returncode == 1
        assert result.stdout == ""
        assert "No payment strategy assigned" in result.stderr


class TestQuoteE2E:
    def test_quote_with_uninstalled_plugin_strategy(self, tmp_path: Path):
        (tmp_path / "order.yaml").write_text(
            """
items:
  - {name: a, price: 2000}
payment: crypto
discounts:
  - {threshold: 1000, percentage: 10}
""",
            encoding="utf-8",
        )

        result = run_orderflow("quote", cwd=tmp_path)

        assert result.returncode == 0
        assert result.stdout == "Итоговая сумма с учетом скидки: 1800 рублей.\n"

    def test_quote_rejects_string_threshold(self, tmp_path: Path):
        (tmp_path / "order.yaml").write_text(
            "items: [{name: a, price: 2000}]\ndiscounts:\n  - {threshold: '1000', percentage: 10}\n",
            encoding="utf-8",
        )

        result = run_orderflow("quote", cwd=tmp_path)

        assert result.returncode == 2
        assert "invalid_discount" in result.stderr
