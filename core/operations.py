"""
The three career operations, independent of HTTP.

Each takes the store handle explicitly and returns a result model.
InvalidArgument escapes to the caller; every other fault is logged and
turned into a FailureResult.
"""
from typing import Any

from core.log import get_logger
from core.validation import validate_career_ids, validate_profile_payload
from ingestion.read_career_catalog import (
    CAREERS_COLLECTION,
    SKILLS_COLLECTION,
    DocumentStore,
    fetch_documents,
    load_catalog,
)
from link.service import filter_skills
from models.responses import (
    CareersResponse,
    CareersResult,
    FailureResult,
    RecommendationsResponse,
    RecommendationsResult,
    SkillsResponse,
    SkillsResult,
)
from scripts.rank_all_careers import rank_profiles

logger = get_logger(__name__)


def _failure(summary: str, error: Exception) -> FailureResult:
    logger.exception("%s: %s", summary, error)
    return FailureResult(error=summary, details=str(error))


async def get_career_recommendations(
    store: DocumentStore,
    payload: Any,
    careers_collection: str = CAREERS_COLLECTION,
    skills_collection: str = SKILLS_COLLECTION,
) -> RecommendationsResponse:
    # raises InvalidArgument before the store is touched
    user = validate_profile_payload(payload)

    try:
        careers, skills = await load_catalog(store, careers_collection, skills_collection)
        _results, ranking = rank_profiles(user, careers, skills)
    except Exception as e:
        return _failure("Failed to generate recommendations", e)

    logger.info(
        "Ranked %d careers (education=%s, %d skills, %d interests, %d experience)",
        len(ranking), user.education, len(user.skills), len(user.interests), len(user.experience),
    )
    return RecommendationsResult(recommendations=[item.to_dict() for item in ranking])


async def get_all_careers(
    store: DocumentStore,
    careers_collection: str = CAREERS_COLLECTION,
) -> CareersResponse:
    try:
        careers = await fetch_documents(store, careers_collection)
    except Exception as e:
        return _failure("Failed to fetch careers", e)

    return CareersResult(careers=[{"id": career_id, **fields} for career_id, fields in careers.items()])


async def get_skills_with_resources(
    store: DocumentStore,
    payload: Any,
    skills_collection: str = SKILLS_COLLECTION,
) -> SkillsResponse:
    career_ids = validate_career_ids(payload)

    try:
        skills = await fetch_documents(store, skills_collection)
        relevant = filter_skills(skills, career_ids)
    except Exception as e:
        return _failure("Failed to fetch skills", e)

    return SkillsResult(skills=relevant)
