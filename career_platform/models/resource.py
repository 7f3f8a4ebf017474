# resource.py
from sqlalchemy import Column, Integer, String, Text
from career_platform.database import Base


class Resource(Base):
    __tablename__ = "resources"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    url = Column(String(1024), nullable=False)
    platform = Column(String(255), nullable=True)
    cost = Column(String(64), nullable=True)  # free | paid
    related_skills = Column(Text, nullable=True, default="")
