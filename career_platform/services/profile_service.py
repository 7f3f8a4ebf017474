# profile_service.py
from sqlalchemy.orm import Session

from career_platform.models.user import User
from career_platform.schemas.profile import ProfileRead, ProfileUpdate
from career_platform.services.skill_normalizer import SkillSet, normalize_skills, skill_tokens


def get_profile(user: User) -> ProfileRead:
    return ProfileRead.model_validate(user)


def save_profile(db: Session, user: User, update: ProfileUpdate) -> ProfileRead:
    update_data = update.model_dump(exclude_unset=True)
    if update_data.get("full_name") is None:
        update_data.pop("full_name", None)
    for field, value in update_data.items():
        setattr(user, field, value)
    db.add(user)
    db.commit()
    db.refresh(user)
    return ProfileRead.model_validate(user)


def save_skills(db: Session, user: User, skills: str) -> None:
    user.skills = skills
    db.add(user)
    db.commit()


def user_skill_set(user: User) -> SkillSet:
    return normalize_skills(user.skills)


def user_skill_list(user: User) -> list[str]:
    return skill_tokens(user.skills)
