# profile.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProfileRead(BaseModel):
    full_name: str
    email: str
    education_level: str | None = None
    experience_level: str | None = None
    career_track: str | None = None
    skills: str | None = None
    experience_notes: str | None = None
    target_roles: str | None = None
    cv_text: str | None = None

    model_config = ConfigDict(from_attributes=True)


class ProfileUpdate(BaseModel):
    # Only fields present in the request body are written.
    full_name: str | None = Field(default=None, min_length=1)
    education_level: str | None = None
    experience_level: str | None = None
    career_track: str | None = None
    skills: str | None = None
    experience_notes: str | None = None
    target_roles: str | None = None
    cv_text: str | None = None


class CVAnalysisRequest(BaseModel):
    cv_text: str


class CVAnalysisResponse(BaseModel):
    message: str
    skills: str
    # The keyword dictionary cannot infer roles; kept for client compatibility.
    roles: str = ""


class SummaryRequest(BaseModel):
    skills: str | None = None
    experience: str | None = None


class SummaryResponse(BaseModel):
    summary: str
