"""Pydantic model for a target job role."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class JobRole(BaseModel):
    """A target occupation and the keywords an ATS expects for it."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    keywords: tuple[str, ...]  # catalog-authoring order
    priority_keywords: frozenset[str] = frozenset()

    @field_validator("id", "name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @model_validator(mode="after")
    def _priority_subset(self) -> JobRole:
        unknown = self.priority_keywords - set(self.keywords)
        if unknown:
            raise ValueError(
                f"priority keywords not in keyword list for role {self.id!r}: "
                f"{', '.join(sorted(unknown))}"
            )
        return self
