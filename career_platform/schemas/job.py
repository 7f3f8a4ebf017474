# job.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from career_platform.schemas.resource import ResourceListing


class JobListing(BaseModel):
    id: int
    job_title: str
    company: str | None = None
    location: str | None = None
    job_type: str | None = None
    experience_level: str | None = None
    # Raw comma-separated skills as stored, e.g. "React,Node.js,SQL".
    required_skills: str | None = None

    model_config = ConfigDict(from_attributes=True)


class JobMatchResult(JobListing):
    matched_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    match_percent: int = Field(default=0, ge=0, le=100)
    recommended_resources: list[ResourceListing] = Field(default_factory=list)


class JobCreate(BaseModel):
    job_title: str = Field(min_length=1)
    company: str | None = None
    location: str | None = None
    job_type: str | None = None
    experience_level: str | None = None
    required_skills: str = ""
