"""Endpoint Classification: inner / outer / inconsistent, computed once per endpoint.

Invariants:
    - Pure: no lookups here, the caller passes the directory's answer in
    - A found card is always INNER, whatever its number looks like
    - An empty issuer prefix never yields INCONSISTENT
"""

from card_transfer.core.domain_types import EndpointKind
from card_transfer.core.repository_protocols import CardLike


def is_own_numbering(number: str, issuer_prefix: str) -> bool:
    """True if number starts with the bank's issuer prefix."""
    return bool(issuer_prefix) and number.startswith(issuer_prefix)


def classify_endpoint(
    card: CardLike | None, number: str, issuer_prefix: str,
) -> EndpointKind:
    """Classify one side of a transfer from the directory lookup result."""
    if card is not None:
        return EndpointKind.INNER
    if is_own_numbering(number, issuer_prefix):
        return EndpointKind.INCONSISTENT
    return EndpointKind.OUTER
