# __init__.py
from career_platform.schemas.ai import ChatRequest, ChatResponse, RoadmapRequest, RoadmapResponse
from career_platform.schemas.dashboard import DashboardResponse, DashboardUser
from career_platform.schemas.job import JobCreate, JobListing, JobMatchResult
from career_platform.schemas.profile import (
	CVAnalysisRequest,
	CVAnalysisResponse,
	ProfileRead,
	ProfileUpdate,
	SummaryRequest,
	SummaryResponse,
)
from career_platform.schemas.resource import ResourceListing, ResourceMatchResult
from career_platform.schemas.user import Token, TokenData, UserCreate, UserLogin, UserRead

__all__ = [
	"ChatRequest",
	"ChatResponse",
	"RoadmapRequest",
	"RoadmapResponse",
	"DashboardResponse",
	"DashboardUser",
	"JobCreate",
	"JobListing",
	"JobMatchResult",
	"CVAnalysisRequest",
	"CVAnalysisResponse",
	"ProfileRead",
	"ProfileUpdate",
	"SummaryRequest",
	"SummaryResponse",
	"ResourceListing",
	"ResourceMatchResult",
	"Token",
	"TokenData",
	"UserCreate",
	"UserLogin",
	"UserRead",
]
