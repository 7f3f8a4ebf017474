# __init__.py
from career_platform.models.job import Job
from career_platform.models.resource import Resource
from career_platform.models.user import User

__all__ = [
	"Job",
	"Resource",
	"User",
]
