"""Services Layer: orchestrates async IO around the synchronous transfer evaluator.

Invariants:
    - Services own the transaction boundary (commit on success, rollback on rejection)
    - Routes never call the evaluator directly
"""
