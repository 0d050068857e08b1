"""Services Layer — async repositories over the ORM, one per aggregate.

Invariants:
    - Repositories take an AsyncSession and an explicit owner id; none hold per-request state
    - Domain failures raised as TodoAppError subclasses, never HTTPException
"""
