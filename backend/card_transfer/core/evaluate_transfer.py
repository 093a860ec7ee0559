"""Transfer Evaluator: commission selection, total computation, debit, credit, log.

Invariants:
    - amount <= 0 fails with InvalidAmountError before any directory or log call
    - Each endpoint is looked up and classified exactly once per evaluation
    - Strict ownership: an unknown number carrying the bank's issuer prefix fails
      with CardNotFoundError (source checked first), total 0, no mutation;
      lenient ownership reports such an endpoint as OUTER
    - total = amount + commission; the source is debited total, the destination
      credited exactly amount
    - Side effects strictly ordered debit -> credit -> log; a failed debit stops
      everything after it
    - Errors are returned in TransferOutcome, never raised; the would-have-been
      total is surfaced alongside InsufficientFundsError

Design Decisions:
    - Synchronous with no internal locking: atomicity of withdraw() belongs to
      the CardDirectory implementation
    - quote() shares classification and pricing with evaluate() but never mutates
"""

from dataclasses import dataclass

from card_transfer.core.classify_endpoint import classify_endpoint
from card_transfer.core.commissions import CommissionPolicy, compute_commission
from card_transfer.core.domain_types import EndpointKind
from card_transfer.core.errors import (
    CardTransferError,
    CardNotFoundError,
    ErrorContext,
    InsufficientFundsError,
    InvalidAmountError,
)
from card_transfer.core.repository_protocols import (
    CardDirectory,
    CardLike,
    TransactionLog,
)


@dataclass(frozen=True)
class TransferOutcome:
    """Result of one evaluation: total debited (or would-be) and optional error."""
    total: int
    error: CardTransferError | None = None
    source_kind: EndpointKind | None = None
    destination_kind: EndpointKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class _Priced:
    """A transfer that passed validation and has a total, not yet executed."""
    source: CardLike | None
    destination: CardLike | None
    source_kind: EndpointKind
    destination_kind: EndpointKind
    total: int
    context: ErrorContext

    def outcome(self, error: CardTransferError | None = None) -> TransferOutcome:
        return TransferOutcome(
            total=self.total,
            error=error,
            source_kind=self.source_kind,
            destination_kind=self.destination_kind,
        )


def validate_amount(
    amount: int, context: ErrorContext | None = None,
) -> InvalidAmountError | None:
    """Return InvalidAmountError for non-positive amounts, None otherwise."""
    if amount <= 0:
        return InvalidAmountError(amount, context)
    return None


def _as_outer(kind: EndpointKind) -> EndpointKind:
    """Lenient ownership: an inconsistent endpoint is priced and reported as outer."""
    if kind is EndpointKind.INCONSISTENT:
        return EndpointKind.OUTER
    return kind


class TransferEvaluator:
    """Evaluates card-to-card transfers against a directory, a log and a commission policy."""

    def __init__(
        self,
        cards: CardDirectory,
        transactions: TransactionLog,
        commissions: CommissionPolicy,
        strict_ownership: bool = True,
    ):
        self.cards = cards
        self.transactions = transactions
        self._commissions = commissions
        self._strict_ownership = strict_ownership

    @property
    def commissions(self) -> CommissionPolicy:
        return self._commissions

    @property
    def strict_ownership(self) -> bool:
        return self._strict_ownership

    def evaluate(self, source: str, destination: str, amount: int) -> TransferOutcome:
        """Run a transfer: validate, classify, charge, debit, credit, log."""
        priced = self._price(source, destination, amount)
        if isinstance(priced, TransferOutcome):
            return priced

        if priced.source is not None and not self.cards.withdraw(priced.source, priced.total):
            return priced.outcome(InsufficientFundsError(priced.total, priced.context))

        if priced.destination is not None:
            self.cards.add_money(priced.destination, amount)

        self.transactions.add(source, destination, amount, priced.total)
        return priced.outcome()

    def quote(self, source: str, destination: str, amount: int) -> TransferOutcome:
        """Compute the total a transfer would debit, without mutating or logging.

        Reports InsufficientFundsError when the source balance, as read now,
        cannot cover the total. A later evaluate() may still disagree.
        """
        priced = self._price(source, destination, amount)
        if isinstance(priced, TransferOutcome):
            return priced

        if priced.source is not None and priced.source.balance < priced.total:
            return priced.outcome(InsufficientFundsError(priced.total, priced.context))
        return priced.outcome()

    # ─── helpers ─────────────────────────────────────────────────

    def _price(
        self, source: str, destination: str, amount: int,
    ) -> "_Priced | TransferOutcome":
        """Validate, look up, classify and total. Failures come back as outcomes."""
        context = ErrorContext(source=source, destination=destination, amount=amount)

        error = validate_amount(amount, context)
        if error is not None:
            return TransferOutcome(total=0, error=error)

        prefix = self.cards.issuer_prefix
        source_card = self.cards.find_card(source)
        destination_card = self.cards.find_card(destination)
        source_kind = classify_endpoint(source_card, source, prefix)
        destination_kind = classify_endpoint(destination_card, destination, prefix)

        if self._strict_ownership:
            if source_kind is EndpointKind.INCONSISTENT:
                return TransferOutcome(total=0, error=CardNotFoundError(source, context))
            if destination_kind is EndpointKind.INCONSISTENT:
                return TransferOutcome(total=0, error=CardNotFoundError(destination, context))
        else:
            source_kind = _as_outer(source_kind)
            destination_kind = _as_outer(destination_kind)

        context.total = amount + compute_commission(
            self._commissions, source_kind, destination_kind, amount,
        )
        return _Priced(
            source=source_card,
            destination=destination_card,
            source_kind=source_kind,
            destination_kind=destination_kind,
            total=context.total,
            context=context,
        )
