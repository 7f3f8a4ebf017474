# user.py
from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func
from career_platform.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(255), nullable=False)
    education_level = Column(String(255), nullable=True)
    experience_level = Column(String(100), nullable=True)
    career_track = Column(String(255), nullable=True)

    # Raw comma-separated skill list, e.g. "JavaScript, React".
    skills = Column(Text, nullable=True, default="")
    experience_notes = Column(Text, nullable=True)
    target_roles = Column(Text, nullable=True)
    cv_text = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
