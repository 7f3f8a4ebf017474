# match_engine.py
from __future__ import annotations

from typing import Sequence

from career_platform.schemas.job import JobListing, JobMatchResult
from career_platform.schemas.resource import ResourceListing, ResourceMatchResult
from career_platform.services.skill_normalizer import SkillSet, normalize_skills, skill_tokens


MAX_RECOMMENDED_RESOURCES = 2


def compute_match_percent(matched_count: int, total_count: int) -> int:
    # Exact round-half-up of 100 * matched / total.
    if total_count <= 0:
        return 0
    return (200 * matched_count + total_count) // (2 * total_count)


def find_gap_resources(
    missing_skills: Sequence[str],
    resource_catalog: Sequence[ResourceListing],
    *,
    limit: int = MAX_RECOMMENDED_RESOURCES,
) -> list[ResourceListing]:
    if not missing_skills or limit <= 0:
        return []
    missing = set(missing_skills)
    picked: list[ResourceListing] = []
    for resource in resource_catalog:
        if normalize_skills(resource.related_skills) & missing:
            picked.append(resource)
            if len(picked) >= limit:
                break
    return picked


def match_job(
    job: JobListing,
    user_skills: SkillSet,
    resource_catalog: Sequence[ResourceListing],
) -> JobMatchResult:
    """Score one job against an already-normalized user skill set.

    A job without declared skills is never a match: it scores 0 with empty
    matched/missing lists and no resource suggestions.
    """
    base = job.model_dump(include=set(JobListing.model_fields))
    job_skills = skill_tokens(job.required_skills)
    if not job_skills:
        return JobMatchResult(**base)

    matched = [skill for skill in job_skills if skill in user_skills]
    missing = [skill for skill in job_skills if skill not in user_skills]

    return JobMatchResult(
        **base,
        matched_skills=matched,
        missing_skills=missing,
        match_percent=compute_match_percent(len(matched), len(job_skills)),
        recommended_resources=find_gap_resources(missing, resource_catalog),
    )


def match_resource(resource: ResourceListing, user_skills: SkillSet) -> ResourceMatchResult:
    matched = [skill for skill in skill_tokens(resource.related_skills) if skill in user_skills]
    return ResourceMatchResult(
        **resource.model_dump(include=set(ResourceListing.model_fields)),
        matched_skills=matched,
        match_count=len(matched),
    )
