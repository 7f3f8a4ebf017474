# main.py
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from career_platform.config import build_sqlalchemy_db_url, settings
from career_platform.database import Base, engine
from career_platform.models import Job, Resource, User  # noqa: F401  (register ORM tables)
from career_platform.api.routes.health import router as health_router
from career_platform.routers import admin, ai, auth, dashboard, jobs, resources, users
from career_platform.services.skill_extractor import load_skill_dictionary


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # CV keyword dictionary is loaded once and shared by all requests.
        app.state.skill_dictionary = load_skill_dictionary(settings.skill_dictionary_path)
        yield

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(health_router)

    application.include_router(auth.router, prefix="/auth", tags=["auth"])
    application.include_router(users.router, prefix="/users", tags=["users"])
    application.include_router(dashboard.router)
    application.include_router(jobs.router)
    application.include_router(resources.router)
    application.include_router(ai.router)
    application.include_router(admin.router)

    # Avoid accidental schema changes in shared MySQL databases.
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    return application


app = create_app()
