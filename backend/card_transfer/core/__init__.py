"""Core Layer: transfer evaluation, commission selection, collaborator contracts.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - No IO, no async, no logging: side effects only through injected Protocols

Design Decisions:
    - Functional core separated from imperative shell (async shell loads and commits
      around the synchronous evaluator)
"""
