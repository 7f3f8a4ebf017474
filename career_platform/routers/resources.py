# resources.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from career_platform.database import get_db
from career_platform.models.user import User
from career_platform.routers.dependencies import get_current_user
from career_platform.schemas.resource import ResourceListing, ResourceMatchResult
from career_platform.services.job_service import list_resources
from career_platform.services.profile_service import user_skill_set
from career_platform.services.recommendation_service import RecommendationMode, recommend_resources


router = APIRouter(prefix="/resources", tags=["resources"])


@router.get("", response_model=list[ResourceListing])
def read_resources(db: Session = Depends(get_db)) -> list[ResourceListing]:
    return list_resources(db)


@router.get("/recommended", response_model=list[ResourceMatchResult])
def read_recommended_resources(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[ResourceMatchResult]:
    return recommend_resources(list_resources(db), user_skill_set(current_user), RecommendationMode.SEARCH)
