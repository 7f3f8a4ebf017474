# auth.py
import logging
from datetime import timedelta
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from career_platform.config import is_admin_email, settings
from career_platform.database import get_db
from career_platform.models.user import User
from career_platform.schemas.user import Token, UserCreate, UserLogin, UserRead
from career_platform.utils.jwt_handler import create_access_token
from career_platform.utils.password_hash import hash_password, verify_password


router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)) -> UserRead:
    existing_user = db.query(User).filter(User.email == user_in.email).first()
    if existing_user:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")
    user = User(
        email=user_in.email,
        password_hash=hash_password(user_in.password),
        full_name=user_in.full_name,
        education_level=user_in.education_level,
        experience_level=user_in.experience_level,
        career_track=user_in.career_track,
        skills="",
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("auth.register user_id=%s", user.id)
    user_out = UserRead.model_validate(user)
    return user_out.model_copy(update={"is_admin": is_admin_email(user.email)})


@router.post("/login", response_model=Token)
def login_user(user_in: UserLogin, db: Session = Depends(get_db)) -> Token:
    user = db.query(User).filter(User.email == user_in.email).first()
    if not user or not verify_password(user_in.password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    token = create_access_token({"sub": str(user.id), "email": user.email}, expires_delta)
    return Token(access_token=token, token_type="bearer")
