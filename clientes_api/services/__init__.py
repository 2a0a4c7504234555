"""Services Layer: mapping and patch orchestration between DTOs and entities.

Invariants:
    - No IO: services work on entities already loaded by a repository
"""
