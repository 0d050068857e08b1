"""API Schemas — Pydantic request/response models, one module per resource.

Invariants:
    - Request models forbid unknown fields (extra="forbid")
    - Response models read straight from ORM objects (from_attributes)
"""
