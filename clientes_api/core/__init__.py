"""Core Layer: domain types, errors, patch application and boundary protocols.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, db/ or models/
    - Functions here are pure and deterministic; IO only appears as Protocol signatures
"""
