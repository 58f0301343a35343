"""Funding Reconciliation: Stripe checkout initiation and paid-session recording.

Invariants:
    - initiate_checkout() validates the amount before any gateway call and persists nothing
    - confirm_funding() inserts at most one Funding per transaction id:
        1. existing record for the transaction id → "already recorded"
        2. session paid → insert, return inserted id
        3. anything else → success=False, nothing written
    - A unique-index conflict on insert means a concurrent confirmation won;
      it is answered as "already recorded"
    - No retries: an unpaid session is re-confirmed by the client calling again

Design Decisions:
    - Transaction id is the session's payment_intent, falling back to the session
      id when the gateway omits it, so the dedup key is never empty
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from redhope.core.errors import MissingSessionIdError
from redhope.core.funding_rules import (
    CheckoutSession, build_checkout_params, build_funding_record, parse_amount,
)
from redhope.core.payment_protocols import PaymentGateway
from redhope.models.funding import Funding
from redhope.schemas.funding import CheckoutResponse, FundingConfirmation

logger = logging.getLogger(__name__)

ALREADY_RECORDED_MESSAGE = "already recorded"
NOT_PAID_MESSAGE = "Payment not completed"


class FundingReconciliation:
    """Funding flow over an injected AsyncSession and PaymentGateway."""

    def __init__(
        self,
        db: AsyncSession,
        gateway: PaymentGateway,
        site_domain: str,
        currency: str = "usd",
    ):
        self.db = db
        self.gateway = gateway
        self.site_domain = site_domain
        self.currency = currency

    async def initiate_checkout(
        self,
        amount: object,
        donor_name: str | None,
        donor_email: str | None,
    ) -> CheckoutResponse:
        value = parse_amount(amount)
        params = build_checkout_params(
            value, donor_name, donor_email, self.site_domain, self.currency,
        )
        session = await self.gateway.create_checkout_session(params)
        return CheckoutResponse(url=session.url)

    async def confirm_funding(self, session_id: str | None) -> FundingConfirmation:
        if not session_id or not session_id.strip():
            raise MissingSessionIdError()

        session = await self.gateway.retrieve_checkout_session(session_id)
        transaction_id = session.payment_intent or session.id

        existing = await self._find_by_transaction(transaction_id)
        if existing:
            logger.info(
                "Funding already recorded",
                extra={"transaction_id": transaction_id, "session_id": session_id},
            )
            return _already_recorded(existing)

        if not session.is_paid:
            logger.info(
                f"Checkout session not paid ({session.payment_status})",
                extra={"session_id": session_id},
            )
            return FundingConfirmation(
                success=False,
                message=NOT_PAID_MESSAGE,
                payment_status=session.payment_status,
            )

        return await self._record(session, transaction_id)

    async def list_fundings(self) -> list[dict]:
        result = await self.db.execute(
            select(Funding).order_by(Funding.created_at.desc()),
        )
        return [f.to_document() for f in result.scalars().all()]

    async def _record(
        self, session: CheckoutSession, transaction_id: str,
    ) -> FundingConfirmation:
        values = build_funding_record(session)
        values["transaction_id"] = transaction_id
        funding = Funding(**values)
        self.db.add(funding)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            winner = await self._find_by_transaction(transaction_id)
            if winner is None:
                raise
            logger.warning(
                "Concurrent funding confirmation lost the insert race",
                extra={"transaction_id": transaction_id, "session_id": session.id},
            )
            return _already_recorded(winner)

        logger.info(
            f"Funding recorded: {funding.amount} {funding.currency}",
            extra={"transaction_id": transaction_id, "session_id": session.id},
        )
        return FundingConfirmation(
            success=True,
            inserted_id=str(funding.id),
            transaction_id=transaction_id,
        )

    async def _find_by_transaction(self, transaction_id: str) -> Funding | None:
        result = await self.db.execute(
            select(Funding).where(Funding.transaction_id == transaction_id),
        )
        return result.scalar_one_or_none()


def _already_recorded(funding: Funding) -> FundingConfirmation:
    return FundingConfirmation(
        success=True,
        message=ALREADY_RECORDED_MESSAGE,
        transaction_id=funding.transaction_id,
    )
