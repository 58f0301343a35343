"""Tests for StripePaymentGateway: session normalization and Stripe error mapping."""

from types import SimpleNamespace

import pytest
import stripe

from redhope.core.errors import PaymentGatewayError
from redhope.infrastructure.payment_gateway import (
    StripePaymentGateway, to_checkout_session,
)


def _stripe_session(**overrides):
    values = dict(
        id="cs_test_1",
        url="https://checkout.stripe.com/c/pay/cs_test_1",
        payment_status="paid",
        payment_intent="pi_123",
        amount_total=5000,
        currency="usd",
        customer_details=SimpleNamespace(email="card@mail.com"),
        metadata={"donorName": "Karim", "type": "funding"},
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def test_to_checkout_session_copies_reconciliation_fields():
    session = to_checkout_session(_stripe_session())
    assert session.id == "cs_test_1"
    assert session.payment_intent == "pi_123"
    assert session.amount_total == 5000
    assert session.customer_email == "card@mail.com"
    assert session.metadata == {"donorName": "Karim", "type": "funding"}
    assert session.is_paid


def test_to_checkout_session_handles_missing_details_and_expanded_intent():
    session = to_checkout_session(_stripe_session(
        customer_details=None,
        metadata=None,
        payment_intent=SimpleNamespace(id="pi_expanded"),
    ))
    assert session.customer_email is None
    assert session.metadata == {}
    assert session.payment_intent == "pi_expanded"


async def test_create_passes_params_and_api_key(monkeypatch):
    calls = []

    async def fake_create(**kwargs):
        calls.append(kwargs)
        return _stripe_session(payment_status="unpaid", payment_intent=None)

    monkeypatch.setattr(stripe.checkout.Session, "create_async", fake_create)
    gateway = StripePaymentGateway("sk_test_abc")
    session = await gateway.create_checkout_session({"mode": "payment"})

    assert calls == [{"api_key": "sk_test_abc", "mode": "payment"}]
    assert session.url == "https://checkout.stripe.com/c/pay/cs_test_1"


async def test_retrieve_maps_invalid_request_error(monkeypatch):
    async def fake_retrieve(session_id, **kwargs):
        raise stripe.InvalidRequestError("No such checkout.session", "id")

    monkeypatch.setattr(stripe.checkout.Session, "retrieve_async", fake_retrieve)
    gateway = StripePaymentGateway("sk_test_abc")

    with pytest.raises(PaymentGatewayError) as exc:
        await gateway.retrieve_checkout_session("cs_missing")
    assert exc.value.gateway_error_type == "invalid_request"
    assert exc.value.http_status == 502
    assert exc.value.context.session_id == "cs_missing"


async def test_create_maps_connection_error(monkeypatch):
    async def fake_create(**kwargs):
        raise stripe.APIConnectionError("Network unreachable")

    monkeypatch.setattr(stripe.checkout.Session, "create_async", fake_create)
    gateway = StripePaymentGateway("sk_test_abc")

    with pytest.raises(PaymentGatewayError) as exc:
        await gateway.create_checkout_session({})
    assert exc.value.gateway_error_type == "connection_error"
