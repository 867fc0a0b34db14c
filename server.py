"""
FastAPI application for the career recommendation backend.
Reads career and skill collections through the Supabase REST API.
"""
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any

from fastapi import Body, Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from core.errors import InvalidArgument
from core.log import configure_logging, get_logger
from core.operations import get_all_careers, get_career_recommendations, get_skills_with_resources
from core.settings import Settings
from ingestion.read_career_catalog import DocumentStore
from models.responses import CareersResponse, InvalidArgumentDetail, RecommendationsResponse, SkillsResponse
from supabase_client import SupabaseClient

settings = Settings.from_env()
configure_logging(settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # one store handle for the life of the process
    store = SupabaseClient.from_settings(settings)
    app.state.store = store
    logger.info("Store client ready for %s", settings.supabase_url)
    try:
        yield
    finally:
        await store.aclose()


app = FastAPI(title="Career Recommendation API", version="1.0.0", lifespan=lifespan)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allow_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store


def get_settings() -> Settings:
    return settings


def _invalid_argument(e: InvalidArgument) -> HTTPException:
    return HTTPException(status_code=400, detail=InvalidArgumentDetail(code=e.code, message=e.message).model_dump())


# ============================================================================
# HEALTH CHECK
# ============================================================================

@app.get("/")
@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring"""
    return {
        "status": "healthy",
        "service": "careers-backend",
        "timestamp": datetime.now().isoformat()
    }


# ============================================================================
# CAREER ENDPOINTS
# ============================================================================

@app.post("/careers/recommendations", response_model=RecommendationsResponse)
async def career_recommendations(
        payload: Any = Body(None),
        store: DocumentStore = Depends(get_store),
        config: Settings = Depends(get_settings),
):
    """Score every career against the submitted profile, best first"""
    try:
        return await get_career_recommendations(
            store,
            payload,
            careers_collection=config.careers_collection,
            skills_collection=config.skills_collection,
        )
    except InvalidArgument as e:
        raise _invalid_argument(e)


@app.get("/careers", response_model=CareersResponse)
@app.post("/careers", response_model=CareersResponse)
async def all_careers(
        store: DocumentStore = Depends(get_store),
        config: Settings = Depends(get_settings),
):
    """Unranked catalog, for users who skip personalisation"""
    return await get_all_careers(store, careers_collection=config.careers_collection)


# ============================================================================
# SKILL ENDPOINTS
# ============================================================================

@app.post("/skills/resources", response_model=SkillsResponse)
async def skills_with_resources(
        payload: Any = Body(None),
        store: DocumentStore = Depends(get_store),
        config: Settings = Depends(get_settings),
):
    """Skills linked to the given careers, or all skills when none are given"""
    try:
        return await get_skills_with_resources(store, payload, skills_collection=config.skills_collection)
    except InvalidArgument as e:
        raise _invalid_argument(e)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server:app", host="0.0.0.0", port=8000)
