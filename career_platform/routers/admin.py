from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from career_platform.database import get_db
from career_platform.models.user import User
from career_platform.routers.dependencies import require_admin
from career_platform.schemas.job import JobCreate, JobListing
from career_platform.services import job_service


router = APIRouter(prefix="/admin", tags=["admin"])

logger = logging.getLogger(__name__)


@router.get("/jobs", response_model=list[JobListing])
def admin_list_jobs(
    db: Session = Depends(get_db),
    _admin: User = Depends(require_admin),
) -> list[JobListing]:
    return job_service.list_jobs(db)


@router.post("/jobs", response_model=JobListing, status_code=status.HTTP_201_CREATED)
def admin_create_job(
    payload: JobCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> JobListing:
    job = job_service.create_job(db, payload)
    logger.info("admin.jobs.create admin=%s job_id=%s", admin.email, job.id)
    return job


@router.delete("/jobs/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def admin_delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Response:
    if not job_service.delete_job(db, job_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    logger.info("admin.jobs.delete admin=%s job_id=%s", admin.email, job_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
