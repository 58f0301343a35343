"""Stripe Payment Gateway: wraps Stripe Checkout with error mapping.

Invariants:
    - Every call is single-shot: no retries, no backoff
    - All Stripe failures mapped to PaymentGatewayError (core/errors.py)
    - Returned sessions are normalized into core CheckoutSession dataclasses

Design Decisions:
    - Wrapper over raw SDK: reconciliation logic never sees Stripe types
    - api_key passed per request instead of mutating the stripe module global
"""

import logging

import stripe

from redhope.core.errors import PaymentGatewayError, ErrorContext
from redhope.core.funding_rules import CheckoutSession

logger = logging.getLogger(__name__)


def _error_type(e: stripe.StripeError) -> str:
    if isinstance(e, stripe.CardError):
        return "card_error"
    if isinstance(e, stripe.RateLimitError):
        return "rate_limit"
    if isinstance(e, stripe.AuthenticationError):
        return "authentication"
    if isinstance(e, stripe.InvalidRequestError):
        return "invalid_request"
    if isinstance(e, stripe.APIConnectionError):
        return "connection_error"
    return "api_error"


def to_checkout_session(session) -> CheckoutSession:
    """Normalize a stripe.checkout.Session into a CheckoutSession."""
    customer_details = getattr(session, "customer_details", None)
    metadata = getattr(session, "metadata", None)
    payment_intent = getattr(session, "payment_intent", None)
    if payment_intent is not None and not isinstance(payment_intent, str):
        # expanded PaymentIntent object
        payment_intent = payment_intent.id
    return CheckoutSession(
        id=session.id,
        url=getattr(session, "url", None),
        payment_status=getattr(session, "payment_status", None),
        payment_intent=payment_intent,
        amount_total=getattr(session, "amount_total", None),
        currency=getattr(session, "currency", None),
        customer_email=(
            getattr(customer_details, "email", None) if customer_details else None
        ),
        metadata=_plain_dict(metadata),
    )


def _plain_dict(obj) -> dict:
    if not obj:
        return {}
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    return dict(obj)


class StripePaymentGateway:
    """Creates and retrieves Stripe Checkout sessions."""

    def __init__(self, api_key: str):
        self.api_key = api_key

    async def create_checkout_session(self, params: dict) -> CheckoutSession:
        try:
            session = await stripe.checkout.Session.create_async(
                api_key=self.api_key, **params,
            )
        except stripe.StripeError as e:
            raise self._map_error(e, "create_checkout_session")
        logger.info(
            "Checkout session created",
            extra={"session_id": session.id},
        )
        return to_checkout_session(session)

    async def retrieve_checkout_session(self, session_id: str) -> CheckoutSession:
        try:
            session = await stripe.checkout.Session.retrieve_async(
                session_id, api_key=self.api_key,
            )
        except stripe.StripeError as e:
            raise self._map_error(e, "retrieve_checkout_session", session_id)
        return to_checkout_session(session)

    def _map_error(
        self, e: stripe.StripeError, operation: str, session_id: str | None = None,
    ) -> PaymentGatewayError:
        error_type = _error_type(e)
        logger.error(
            f"Stripe {operation} failed: {e.user_message or e}",
            extra={"gateway_error_type": error_type, "session_id": session_id},
        )
        return PaymentGatewayError(
            e.user_message or "Stripe request failed",
            error_type,
            ErrorContext(operation=operation, session_id=session_id),
        )
