"""Infrastructure Layer: database sessions, logging, collaborator implementations.

Invariants:
    - Collaborator implementations satisfy core/repository_protocols.py structurally
    - All SQLAlchemy failures surface as DatabaseError
"""
