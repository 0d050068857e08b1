"""Schema Bases — shared configuration for request and response models.

Invariants:
    - RequestModel rejects unknown fields at the boundary
    - PatchModel additionally rejects explicit nulls: omit a field to leave it unchanged
"""

from pydantic import BaseModel, ConfigDict, model_validator


class RequestModel(BaseModel):
    """Base for request bodies — unknown keys are a 400, not silently dropped."""
    model_config = ConfigDict(extra="forbid")


class PatchModel(RequestModel):
    """Partial update body — only fields actually sent are applied."""

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulls = sorted(
            name for name in self.model_fields_set if getattr(self, name) is None
        )
        if nulls:
            raise ValueError(f"fields cannot be null: {', '.join(nulls)}")
        return self

    def changes(self) -> dict:
        """Fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class ResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)
