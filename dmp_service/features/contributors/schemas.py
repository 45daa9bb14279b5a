"""Pydantic schemas for the contributors feature."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class ContributorBase(BaseModel):
    """Shared attributes for contributor payloads."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    given_name: str | None = Field(default=None, max_length=255)
    sur_name: str | None = Field(default=None, max_length=255)
    email: EmailStr | None = None
    orcid: str | None = Field(default=None, max_length=64)
    affiliation_id: int | None = None


class ContributorCreate(ContributorBase):
    """Payload used when adding a contributor to a project."""

    project_id: int
    contributor_role_ids: list[int] = Field(default_factory=list)


class ContributorUpdate(ContributorBase):
    """Payload for updating a contributor.

    ``contributor_role_ids`` is the complete desired role set; ``None``
    leaves roles untouched.
    """

    contributor_role_ids: list[int] | None = None
