# job.py
from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func
from career_platform.database import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    job_title = Column(String(255), index=True, nullable=False)
    company = Column(String(255), nullable=True)
    location = Column(String(255), index=True, nullable=True)
    job_type = Column(String(64), index=True, nullable=True)
    experience_level = Column(String(100), nullable=True)
    required_skills = Column(Text, nullable=True, default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
