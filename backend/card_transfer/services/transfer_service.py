"""Transfer Service: async shell around the synchronous TransferEvaluator.

Invariants:
    - Non-positive amounts are rejected before any database access
    - Both endpoint cards are loaded (and row-locked) before the evaluator runs
    - Successful transfers commit balance changes and the transaction row together
    - Rejected transfers roll back; nothing the evaluator touched is persisted
    - Completed transfers are logged with masked card numbers; rejections are
      logged once, by the HTTP error handler

Design Decisions:
    - Evaluator built per request: the directory and log are bound to the request's
      AsyncSession
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from card_transfer.config import Settings
from card_transfer.core.commissions import CommissionPolicy, percent_with_floor
from card_transfer.core.domain_types import mask_card_number
from card_transfer.core.errors import ErrorContext
from card_transfer.core.evaluate_transfer import (
    TransferEvaluator,
    TransferOutcome,
    validate_amount,
)
from card_transfer.infrastructure.session_directory import (
    SessionCardDirectory,
    SessionTransactionLog,
)

logger = logging.getLogger(__name__)


def build_commission_policy(settings: Settings) -> CommissionPolicy:
    """Build the three commission legs from configuration."""
    return CommissionPolicy(
        from_inner=percent_with_floor(
            settings.from_inner_permille, settings.from_inner_minimum,
        ),
        to_inner=percent_with_floor(
            settings.to_inner_permille, settings.to_inner_minimum,
        ),
        from_outer_to_outer=percent_with_floor(
            settings.outer_permille, settings.outer_minimum,
        ),
    )


async def _build_evaluator(
    db: AsyncSession, source: str, destination: str, settings: Settings,
) -> TransferEvaluator:
    cards = await SessionCardDirectory.load(
        db, (source, destination), settings.issuer_prefix,
    )
    return TransferEvaluator(
        cards,
        SessionTransactionLog(db),
        build_commission_policy(settings),
        strict_ownership=settings.strict_ownership,
    )


def _log_fields(source: str, destination: str, amount: int, total: int) -> dict:
    return {
        "source": mask_card_number(source),
        "destination": mask_card_number(destination),
        "amount": amount,
        "total": total,
    }


async def execute_transfer(
    db: AsyncSession,
    source: str,
    destination: str,
    amount: int,
    settings: Settings,
) -> TransferOutcome:
    """Evaluate and persist one transfer. Domain rejections come back in the outcome."""
    error = validate_amount(
        amount, ErrorContext(source=source, destination=destination, amount=amount),
    )
    if error is not None:
        return TransferOutcome(total=0, error=error)

    evaluator = await _build_evaluator(db, source, destination, settings)
    outcome = evaluator.evaluate(source, destination, amount)

    if outcome.error is not None:
        await db.rollback()
        return outcome

    await db.commit()
    logger.info(
        "Transfer completed",
        extra={
            **_log_fields(source, destination, amount, outcome.total),
            "commission": outcome.total - amount,
        },
    )
    return outcome


async def quote_transfer(
    db: AsyncSession,
    source: str,
    destination: str,
    amount: int,
    settings: Settings,
) -> TransferOutcome:
    """Price a transfer without moving money or logging a transaction."""
    error = validate_amount(
        amount, ErrorContext(source=source, destination=destination, amount=amount),
    )
    if error is not None:
        return TransferOutcome(total=0, error=error)

    evaluator = await _build_evaluator(db, source, destination, settings)
    outcome = evaluator.quote(source, destination, amount)
    # release the row locks taken by the directory load
    await db.rollback()
    return outcome
