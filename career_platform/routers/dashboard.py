# dashboard.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from career_platform.database import get_db
from career_platform.models.user import User
from career_platform.routers.dependencies import get_current_user
from career_platform.schemas.dashboard import DashboardResponse, DashboardUser
from career_platform.services.job_service import list_jobs, list_resources
from career_platform.services.profile_service import user_skill_list, user_skill_set
from career_platform.services.recommendation_service import (
    RecommendationMode,
    recommend_jobs,
    recommend_resources,
)


router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
def read_dashboard(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DashboardResponse:
    skills = user_skill_list(current_user)
    user_skills = user_skill_set(current_user)
    jobs = list_jobs(db)
    resources = list_resources(db)

    return DashboardResponse(
        user=DashboardUser(
            name=current_user.full_name,
            email=current_user.email,
            track=current_user.career_track,
            skills=skills,
        ),
        jobs=recommend_jobs(jobs, user_skills, resources, RecommendationMode.DASHBOARD),
        resources=recommend_resources(resources, user_skills, RecommendationMode.DASHBOARD),
    )
