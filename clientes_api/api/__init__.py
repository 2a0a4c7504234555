"""API Layer: FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (or no body for 204)

Design Decisions:
    - Thin routes delegate to the repository and the mapper
"""
