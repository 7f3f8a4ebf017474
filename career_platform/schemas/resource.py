# resource.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ResourceListing(BaseModel):
    id: int
    title: str
    url: str
    platform: str | None = None
    cost: str | None = None
    related_skills: str | None = None

    model_config = ConfigDict(from_attributes=True)


class ResourceMatchResult(ResourceListing):
    matched_skills: list[str] = Field(default_factory=list)
    match_count: int = 0
