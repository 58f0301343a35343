"""Tests for funding_rules: amount parsing, checkout params and record mapping."""

from datetime import datetime, timezone

import pytest

from redhope.core.errors import InvalidAmountError
from redhope.core.funding_rules import (
    CheckoutSession,
    build_checkout_params,
    build_funding_record,
    from_minor_units,
    parse_amount,
    to_minor_units,
)


@pytest.mark.parametrize("raw, expected", [(25, 25), ("40", 40), (" 7 ", 7), (10.0, 10)])
def test_parse_amount_accepts_positive_whole_numbers(raw, expected):
    assert parse_amount(raw) == expected


@pytest.mark.parametrize("raw", [-5, 0, "abc", "", "12.5", 3.5, None, True, [10]])
def test_parse_amount_rejects_everything_else(raw):
    with pytest.raises(InvalidAmountError) as exc:
        parse_amount(raw)
    assert exc.value.http_status == 400
    assert exc.value.message == "Invalid amount"


def test_minor_unit_conversion():
    assert to_minor_units(50) == 5000
    assert from_minor_units(5000) == 50
    assert from_minor_units(1999) == 19.99
    assert from_minor_units(None) == 0


def test_checkout_params_carry_donation_line_item_and_metadata():
    params = build_checkout_params(
        50, "Karim", "karim@mail.com", "https://redhope.app/", "usd",
    )
    item = params["line_items"][0]
    assert params["mode"] == "payment"
    assert item["quantity"] == 1
    assert item["price_data"]["unit_amount"] == 5000
    assert item["price_data"]["currency"] == "usd"
    assert item["price_data"]["product_data"]["name"] == "Donation"
    assert params["metadata"] == {
        "donorName": "Karim", "donorEmail": "karim@mail.com", "type": "funding",
    }
    assert params["customer_email"] == "karim@mail.com"


def test_checkout_redirects_use_site_and_session_placeholder():
    params = build_checkout_params(5, None, None, "https://redhope.app/", "usd")
    assert params["success_url"] == (
        "https://redhope.app/dashboard/funding-success?session_id={CHECKOUT_SESSION_ID}"
    )
    assert params["cancel_url"] == "https://redhope.app/dashboard/funding?canceled=true"
    assert "customer_email" not in params


def test_funding_record_from_paid_session():
    session = CheckoutSession(
        id="cs_1", payment_status="paid", payment_intent="pi_1",
        amount_total=2500, currency="usd", customer_email="card@mail.com",
        metadata={"donorName": "Karim", "donorEmail": "karim@mail.com"},
    )
    now = datetime(2026, 5, 1, tzinfo=timezone.utc)
    record = build_funding_record(session, now)
    assert record == {
        "name": "Karim",
        "email": "karim@mail.com",
        "amount": 25.0,
        "currency": "usd",
        "transaction_id": "pi_1",
        "payment_status": "paid",
        "created_at": now,
    }


def test_funding_record_name_falls_back_to_customer_email():
    session = CheckoutSession(
        id="cs_2", payment_status="paid", payment_intent="pi_2",
        amount_total=1000, customer_email="card@mail.com", metadata={},
    )
    record = build_funding_record(session)
    assert record["name"] == "card@mail.com"
    assert record["email"] == "card@mail.com"


def test_is_paid_only_for_paid_status():
    assert CheckoutSession(id="a", payment_status="paid").is_paid
    assert not CheckoutSession(id="b", payment_status="unpaid").is_paid
    assert not CheckoutSession(id="c").is_paid
