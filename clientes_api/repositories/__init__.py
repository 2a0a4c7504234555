"""Repositories: SQLAlchemy implementations of the core boundary protocols.

Invariants:
    - Repositories never commit implicitly; callers decide when to save()
"""
