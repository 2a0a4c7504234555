"""Clientes API: CRUD service for the cliente resource.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
