# job_service.py
from __future__ import annotations

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from career_platform.models.job import Job
from career_platform.models.resource import Resource
from career_platform.schemas.job import JobCreate, JobListing
from career_platform.schemas.resource import ResourceListing


logger = logging.getLogger(__name__)


def list_jobs(
    db: Session,
    *,
    title: str | None = None,
    location: str | None = None,
    job_type: str | None = None,
) -> list[JobListing]:
    query = db.query(Job)
    title_q = (title or "").strip()
    if title_q:
        query = query.filter(func.lower(Job.job_title).contains(title_q.lower(), autoescape=True))
    if location:
        query = query.filter(Job.location == location)
    if job_type:
        query = query.filter(Job.job_type == job_type)
    rows = query.order_by(Job.id).all()
    return [JobListing.model_validate(row) for row in rows]


def get_job(db: Session, job_id: int) -> JobListing | None:
    row = db.get(Job, job_id)
    if row is None:
        return None
    return JobListing.model_validate(row)


def list_resources(db: Session) -> list[ResourceListing]:
    rows = db.query(Resource).order_by(Resource.id).all()
    return [ResourceListing.model_validate(row) for row in rows]


def create_job(db: Session, payload: JobCreate) -> JobListing:
    job = Job(**payload.model_dump())
    db.add(job)
    db.commit()
    db.refresh(job)
    logger.info("job.create id=%s title=%s", job.id, job.job_title)
    return JobListing.model_validate(job)


def delete_job(db: Session, job_id: int) -> bool:
    job = db.get(Job, job_id)
    if job is None:
        return False
    db.delete(job)
    db.commit()
    logger.info("job.delete id=%s", job_id)
    return True
