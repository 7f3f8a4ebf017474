# recommendation_service.py
from __future__ import annotations

from enum import Enum
from typing import Sequence

from career_platform.schemas.job import JobListing, JobMatchResult
from career_platform.schemas.resource import ResourceListing, ResourceMatchResult
from career_platform.services.match_engine import match_job, match_resource
from career_platform.services.skill_normalizer import SkillSet


DASHBOARD_LIMIT = 5


class RecommendationMode(str, Enum):
    # Curated summary: drop non-matches, keep the best few.
    DASHBOARD = "dashboard"
    # Explicit search or listing: keep every candidate, ranked only.
    SEARCH = "search"


def _resolve_limit(mode: RecommendationMode) -> int | None:
    if mode is RecommendationMode.DASHBOARD:
        return DASHBOARD_LIMIT
    return None


def recommend_jobs(
    jobs: Sequence[JobListing],
    user_skills: SkillSet,
    resources: Sequence[ResourceListing],
    mode: RecommendationMode = RecommendationMode.DASHBOARD,
) -> list[JobMatchResult]:
    results = [match_job(job, user_skills, resources) for job in jobs]
    if mode is RecommendationMode.DASHBOARD:
        results = [item for item in results if item.match_percent > 0]
    # list.sort is stable: equal scores keep catalog order.
    results.sort(key=lambda item: item.match_percent, reverse=True)
    limit = _resolve_limit(mode)
    return results if limit is None else results[:limit]


def recommend_resources(
    resources: Sequence[ResourceListing],
    user_skills: SkillSet,
    mode: RecommendationMode = RecommendationMode.DASHBOARD,
) -> list[ResourceMatchResult]:
    results = [match_resource(resource, user_skills) for resource in resources]
    results = [item for item in results if item.match_count > 0]
    results.sort(key=lambda item: item.match_count, reverse=True)
    limit = _resolve_limit(mode)
    return results if limit is None else results[:limit]
