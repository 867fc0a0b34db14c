"""Pytest configuration and shared fixtures."""

import pytest

from core.log import reset_logging
from models.skill_record import SkillRecord
from models.user_profile import UserProfile


class FakeStore:
    """In-memory document store; collections map to lists of (id, fields)."""

    def __init__(self, collections=None, failing=()):
        self.collections = collections or {}
        self.failing = set(failing)
        self.calls = []

    async def fetch_all(self, collection):
        self.calls.append(collection)
        if collection in self.failing:
            raise ConnectionError(f"{collection} unavailable")
        return list(self.collections.get(collection, []))


@pytest.fixture
def skill_documents() -> dict:
    return {
        "s1": {"name": "python", "linkedCareers": ["c1", "c2"]},
        "s2": {"name": "Welding", "linkedCareers": ["c3"]},
        "s3": {"name": "Figma"},
        "s4": {"name": "Knife Skills", "linkedCareers": "c3"},
    }


@pytest.fixture
def skill_catalog(skill_documents) -> dict:
    return {skill_id: SkillRecord.from_document(skill_id, fields) for skill_id, fields in skill_documents.items()}


@pytest.fixture
def career_documents() -> dict:
    return {
        "c1": {
            "title": "Software Developer",
            "tags": ["coding", "design"],
            "skills": ["s1", "missing-skill"],
            "education": ["Bachelor's degree in computer science"],
        },
        "c2": {
            "title": "Data Analyst",
            "tags": ["data"],
            "skills": ["s1"],
            "education": ["Master's preferred"],
        },
        "c3": {
            "title": "Line Cook",
            "tags": ["cook"],
            "skills": ["s4"],
            "education": ["On the job training"],
        },
    }


@pytest.fixture
def fake_store(career_documents, skill_documents) -> FakeStore:
    return FakeStore({
        "careers": list(career_documents.items()),
        "skills": list(skill_documents.items()),
    })


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(
        education="bachelor",
        skills=["Python"],
        interests=["Coding"],
        experience=["two years of freelance coding"],
    )


@pytest.fixture
def store_factory():
    """Build a FakeStore with custom collections or failing reads."""
    return FakeStore


@pytest.fixture(autouse=True)
def _fresh_logging():
    """Let caplog see application logs; server import configures a handler."""
    reset_logging()
    yield
    reset_logging()
