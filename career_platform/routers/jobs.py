# jobs.py
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from career_platform.database import get_db
from career_platform.models.user import User
from career_platform.routers.dependencies import get_current_user
from career_platform.schemas.job import JobListing, JobMatchResult
from career_platform.services.job_service import get_job, list_jobs, list_resources
from career_platform.services.match_engine import match_job
from career_platform.services.profile_service import user_skill_set
from career_platform.services.recommendation_service import RecommendationMode, recommend_jobs


router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=list[JobMatchResult])
def search_jobs(
    title: str | None = Query(default=None),
    location: str | None = Query(default=None),
    job_type: str | None = Query(default=None, alias="type"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[JobMatchResult]:
    jobs = list_jobs(db, title=title, location=location, job_type=job_type)
    resources = list_resources(db)
    return recommend_jobs(jobs, user_skill_set(current_user), resources, RecommendationMode.SEARCH)


@router.get("/public", response_model=list[JobListing])
def list_public_jobs(
    title: str | None = Query(default=None),
    location: str | None = Query(default=None),
    job_type: str | None = Query(default=None, alias="type"),
    db: Session = Depends(get_db),
) -> list[JobListing]:
    return list_jobs(db, title=title, location=location, job_type=job_type)


@router.get("/{job_id}/match", response_model=JobMatchResult)
def read_job_match(
    job_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> JobMatchResult:
    job = get_job(db, job_id)
    if job is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    return match_job(job, user_skill_set(current_user), list_resources(db))
