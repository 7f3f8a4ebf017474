# users.py
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from career_platform.config import is_admin_email
from career_platform.database import get_db
from career_platform.models.user import User
from career_platform.routers.dependencies import get_current_user, get_skill_dictionary, llm_http_error
from career_platform.schemas.profile import (
    CVAnalysisRequest,
    CVAnalysisResponse,
    ProfileRead,
    ProfileUpdate,
    SummaryRequest,
    SummaryResponse,
)
from career_platform.schemas.user import UserRead
from career_platform.services.ai_service import generate_summary
from career_platform.services.llm_client import GeminiClient, LLMServiceError, get_llm_client
from career_platform.services.profile_service import get_profile, save_profile, save_skills
from career_platform.services.skill_extractor import SkillDictionary, extract_skills
from career_platform.services.skill_normalizer import join_skills


router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)) -> UserRead:
    user_out = UserRead.model_validate(current_user)
    return user_out.model_copy(update={"is_admin": is_admin_email(current_user.email)})


@router.get("/me/profile", response_model=ProfileRead)
def read_my_profile(current_user: User = Depends(get_current_user)) -> ProfileRead:
    return get_profile(current_user)


@router.put("/me/profile", response_model=ProfileRead)
def update_my_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProfileRead:
    return save_profile(db, current_user, payload)


@router.post("/me/profile/analyze-cv", response_model=CVAnalysisResponse)
def analyze_cv(
    payload: CVAnalysisRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    dictionary: SkillDictionary = Depends(get_skill_dictionary),
) -> CVAnalysisResponse:
    if not payload.cv_text.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="CV text is empty.")

    found = extract_skills(dictionary, payload.cv_text)
    skills = join_skills(found)
    save_skills(db, current_user, skills)
    logger.info(
        "profile.analyze_cv user_id=%s dictionary=%s skills=%d",
        current_user.id,
        dictionary.version,
        len(found),
    )
    return CVAnalysisResponse(message="CV Analyzed successfully!", skills=skills, roles="")


@router.post("/me/profile/summarize", response_model=SummaryResponse)
def summarize_profile(
    payload: SummaryRequest,
    current_user: User = Depends(get_current_user),
    llm: GeminiClient = Depends(get_llm_client),
) -> SummaryResponse:
    skills = (payload.skills or "").strip()
    experience = (payload.experience or "").strip()
    if not skills and not experience:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Add skills or experience first.")
    try:
        summary = generate_summary(llm, skills, experience)
    except LLMServiceError as exc:
        logger.error("profile.summarize failed user_id=%s: %s", current_user.id, exc)
        raise llm_http_error(exc) from exc
    return SummaryResponse(summary=summary)
