from dataclasses import replace

import pytest
from orderflow.core import (
    CheckoutConfig,
    DiscountSpec,
    ItemSpec,
    build_calculator,
    build_order,
    quote_order,
    reference_config,
    run_checkout,
)
from orderflow.order import Capability, MissingStrategyError, UnknownStrategyError
from orderflow.strategies import CourierDelivery, CreditCardPayment, EmailNotification, StrategyRegistry

REFERENCE_OUTPUT = (
    "Итоговая сумма с учетом скидки: 1800 рублей.\n"
    "Обработка заказа...\n"
    "Оплата кредитной картой: 2000 рублей.\n"
    "Доставка курьером.\n"
    "Отправка email: Ваш заказ был успешно оформлен!\n"
)


@pytest.fixture
def registry() -> StrategyRegistry:
    reg = StrategyRegistry()
    reg.register_builtins()
    return reg


def test_reference_scenario_output(capsys, registry):
    quote = run_checkout(reference_config(), registry)

    assert capsys.readouterr().out == REFERENCE_OUTPUT
    assert (quote.total, quote.discount, quote.final) == (2000, 200, 1800)


def test_charge_discounted_pays_final_price(capsys, registry):
    run_checkout(replace(reference_config(), charge_discounted=True), registry)

    lines = capsys.readouterr().out.splitlines()
    assert lines[2] == "Оплата кредитной картой: 1800 рублей."


def test_build_order_assigns_named_strategies(registry):
    order = build_order(reference_config(), registry)

    assert order.get_total_amount() == 2000
    assert [i.name for i in order.items] == ["Товар 1", "Товар 2"]
    assert isinstance(order.payment_method, CreditCardPayment)
    assert isinstance(order.delivery_method, CourierDelivery)
    assert isinstance(order.notification_method, EmailNotification)


def test_build_order_leaves_unnamed_strategies_unset(registry):
    order = build_order(CheckoutConfig(items=(ItemSpec("a", 1),), payment="paypal"), registry)
    assert order.missing_capabilities() == (Capability.DELIVERY, Capability.NOTIFICATION)


def test_build_calculator_one_rule_per_discount(registry):
    cfg = CheckoutConfig(
        discounts=(
            DiscountSpec(options={"discount_threshold": 1000, "discount_percentage": 10}),
            DiscountSpec(options={"discount_threshold": 2000, "discount_percentage": 5}),
        )
    )
    assert len(build_calculator(cfg, registry).discounts) == 2


def test_missing_strategy_prints_nothing(capsys, registry):
    cfg = replace(reference_config(), payment=None)

    with pytest.raises(MissingStrategyError) as ei:
        run_checkout(cfg, registry)

    assert ei.value.capability == Capability.PAYMENT
    assert capsys.readouterr().out == ""


def test_unknown_strategy_name_fails_before_output(capsys, registry):
    with pytest.raises(UnknownStrategyError):
        run_checkout(replace(reference_config(), delivery="teleport"), registry)
    assert capsys.readouterr().out == ""


def test_quote_order_does_not_process(capsys, registry):
    quote = quote_order(replace(reference_config(), payment=None), registry)

    assert quote.final == 1800
    assert capsys.readouterr().out == ""


def test_quote_order_ignores_unregistered_strategy_names(registry):
    cfg = CheckoutConfig(
        items=(ItemSpec("a", 2000),),
        payment="crypto",
        delivery="drone",
        discounts=(DiscountSpec(options={"discount_threshold": 1000, "discount_percentage": 10}),),
    )

    assert quote_order(cfg, registry).final == 1800


def test_run_checkout_uses_default_registry(capsys):
    run_checkout(reference_config())
    assert capsys.readouterr().out == REFERENCE_OUTPUT
