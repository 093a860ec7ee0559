"""Commission Policy: three pure amount -> commission functions, one per commission leg.

Invariants:
    - Policy is immutable after construction (frozen dataclass)
    - Evaluators are total over positive ints and return non-negative ints
      (negative commissions are a policy-author error, not guarded here)
    - compute_commission selects legs by endpoint classification only; it never
      inspects which policy is installed

Design Decisions:
    - Three named fields over an Enum-keyed dict: exactly three legs, known statically
    - Integer floor division for rates: money stays in minor units, no floats
"""

from dataclasses import dataclass
from typing import Callable

from card_transfer.core.domain_types import EndpointKind

CommissionEvaluator = Callable[[int], int]


def no_commission(amount: int) -> int:
    return 0


def percent_with_floor(permille: int, minimum: int = 0) -> CommissionEvaluator:
    """Build max(amount * permille / 1000, minimum), e.g. 5 permille floor 10_00."""

    def evaluate(amount: int) -> int:
        return max(amount * permille // 1000, minimum)

    return evaluate


@dataclass(frozen=True)
class CommissionPolicy:
    """Commission table injected into the evaluator at construction."""
    from_inner: CommissionEvaluator = no_commission
    to_inner: CommissionEvaluator = no_commission
    from_outer_to_outer: CommissionEvaluator = no_commission


def compute_commission(
    policy: CommissionPolicy,
    source: EndpointKind,
    destination: EndpointKind,
    amount: int,
) -> int:
    """Sum the commission legs that apply to this pair of endpoints.

    Neither side inner: only the outer-to-outer leg applies. Otherwise the
    destination and source legs are charged independently, so an inner-to-inner
    transfer pays both.
    """
    source_inner = source is EndpointKind.INNER
    destination_inner = destination is EndpointKind.INNER

    if not source_inner and not destination_inner:
        return policy.from_outer_to_outer(amount)

    commission = 0
    if destination_inner:
        commission += policy.to_inner(amount)
    if source_inner:
        commission += policy.from_inner(amount)
    return commission
