# ai.py
import logging
from fastapi import APIRouter, Depends
from career_platform.models.user import User
from career_platform.routers.dependencies import get_current_user, llm_http_error
from career_platform.schemas.ai import ChatRequest, ChatResponse, RoadmapRequest, RoadmapResponse
from career_platform.services.ai_service import answer_chat, generate_roadmap
from career_platform.services.llm_client import GeminiClient, LLMServiceError, get_llm_client
from career_platform.services.profile_service import user_skill_list
from career_platform.services.skill_normalizer import join_skills


router = APIRouter(prefix="/ai", tags=["ai"])

logger = logging.getLogger(__name__)


@router.post("/roadmap", response_model=RoadmapResponse)
def create_roadmap(
    payload: RoadmapRequest,
    current_user: User = Depends(get_current_user),
    llm: GeminiClient = Depends(get_llm_client),
) -> RoadmapResponse:
    current_skills = payload.current_skills
    if current_skills is None:
        current_skills = join_skills(user_skill_list(current_user))
    try:
        roadmap = generate_roadmap(llm, payload.target_role, payload.timeframe, current_skills)
    except LLMServiceError as exc:
        logger.error("ai.roadmap failed user_id=%s: %s", current_user.id, exc)
        raise llm_http_error(exc) from exc
    return RoadmapResponse(roadmap=roadmap)


@router.post("/chatbot", response_model=ChatResponse)
def chat(
    payload: ChatRequest,
    current_user: User = Depends(get_current_user),
    llm: GeminiClient = Depends(get_llm_client),
) -> ChatResponse:
    try:
        reply = answer_chat(
            llm,
            payload.query.strip(),
            track=current_user.career_track,
            skills=user_skill_list(current_user),
        )
    except LLMServiceError as exc:
        logger.error("ai.chatbot failed user_id=%s: %s", current_user.id, exc)
        raise llm_http_error(exc) from exc
    return ChatResponse(response=reply)
