"""Pydantic schemas for the research outputs feature."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ResearchOutputCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    project_id: int
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    output_type: str = Field(default="DATASET", max_length=64)


class ResearchOutputUpdate(BaseModel):
    """Partial update for a research output.

    ``repository_ids`` and ``metadata_standard_ids`` are complete desired
    sets; ``None`` leaves that relationship untouched.
    Fields left out are not changed; ``description`` may be cleared with ``None``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    output_type: str | None = Field(default=None, max_length=64)
    repository_ids: list[int] | None = None
    metadata_standard_ids: list[int] | None = None

    @field_validator("title", "output_type")
    @classmethod
    def reject_null(cls, v: str | None) -> str:
        """Title and output type can be changed but not cleared."""
        if v is None:
            raise ValueError("may not be null")
        return v
