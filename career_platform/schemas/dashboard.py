from __future__ import annotations

from pydantic import BaseModel, Field

from career_platform.schemas.job import JobMatchResult
from career_platform.schemas.resource import ResourceMatchResult


class DashboardUser(BaseModel):
    name: str
    email: str
    track: str | None = None
    skills: list[str] = Field(default_factory=list)


class DashboardResponse(BaseModel):
    user: DashboardUser
    jobs: list[JobMatchResult]
    resources: list[ResourceMatchResult]
