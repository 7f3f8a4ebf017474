# dependencies.py
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from career_platform.config import is_admin_email
from career_platform.database import get_db
from career_platform.models.user import User
from career_platform.schemas.user import TokenData
from career_platform.services.llm_client import LLMNotConfiguredError, LLMServiceError
from career_platform.services.skill_extractor import DEFAULT_SKILL_DICTIONARY, SkillDictionary
from career_platform.utils.jwt_handler import decode_access_token


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")


def get_current_user(db: Session = Depends(get_db), token: str = Depends(oauth2_scheme)) -> User:
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    payload = decode_access_token(token)
    user_id = payload.get("sub")
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token payload")
    try:
        token_data = TokenData(user_id=int(user_id))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token subject") from exc
    user = db.query(User).filter(User.id == token_data.user_id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if not is_admin_email(current_user.email):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return current_user


def get_skill_dictionary(request: Request) -> SkillDictionary:
    # Loaded once at startup; the built-in table covers apps created without lifespan.
    return getattr(request.app.state, "skill_dictionary", None) or DEFAULT_SKILL_DICTIONARY


def llm_http_error(exc: LLMServiceError) -> HTTPException:
    if isinstance(exc, LLMNotConfiguredError):
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="AI service is not configured")
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc) or "AI service error")
