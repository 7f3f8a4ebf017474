from __future__ import annotations

from pydantic import BaseModel, Field


class RoadmapRequest(BaseModel):
    target_role: str = Field(min_length=1)
    timeframe: str = Field(min_length=1)
    # Falls back to the stored profile skills when omitted.
    current_skills: str | None = None


class RoadmapResponse(BaseModel):
    roadmap: str
    message: str = "Roadmap created."


class ChatRequest(BaseModel):
    query: str = Field(min_length=1)


class ChatResponse(BaseModel):
    response: str
