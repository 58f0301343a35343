"""Boundary Protocols: contract between funding reconciliation and the payment gateway.

Invariants:
    - Core NEVER imports from infrastructure; the gateway is injected
    - Implementations raise PaymentGatewayError on any gateway failure

Design Decisions:
    - Protocol over ABC: structural subtyping lets tests pass a plain fake
"""

from typing import Protocol

from redhope.core.funding_rules import CheckoutSession


class PaymentGateway(Protocol):
    """Hosted checkout gateway, implemented by infrastructure/payment_gateway.py."""
    async def create_checkout_session(self, params: dict) -> CheckoutSession: ...
    async def retrieve_checkout_session(self, session_id: str) -> CheckoutSession: ...
