"""
Boundary checks for request payloads.

Only shapes are checked here; element types are left to the scorer.
"""
from typing import Any, List, Mapping, Optional

from core.errors import InvalidArgument
from models.user_profile import UserProfile

PROFILE_FIELDS = ("education", "skills", "interests", "experience")
LIST_FIELDS = ("skills", "interests", "experience")


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_blank(value: Any) -> bool:
    """
    None, False, zero, NaN and "" count as not supplied.
    Empty lists and objects are supplied values.
    """
    if value is None or value is False or value == "":
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or value != value
    return False


def _require_mapping(payload: Any) -> Mapping[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise InvalidArgument("Request payload must be an object")
    return payload


def validate_profile_payload(payload: Any) -> UserProfile:
    data = _require_mapping(payload)

    missing = [name for name in PROFILE_FIELDS if is_blank(data.get(name))]
    if missing:
        raise InvalidArgument(
            "Missing required inputs: education, skills, interests, experience "
            f"(missing: {', '.join(missing)})"
        )

    malformed = [name for name in LIST_FIELDS if not is_sequence(data[name])]
    if malformed:
        raise InvalidArgument(
            "skills, interests, and experience must be arrays "
            f"(not arrays: {', '.join(malformed)})"
        )

    return UserProfile(
        education=data["education"],
        skills=list(data["skills"]),
        interests=list(data["interests"]),
        experience=list(data["experience"]),
    )


def validate_career_ids(payload: Any) -> Optional[List[Any]]:
    """careerIds is optional; when given it must be a list."""
    data = _require_mapping(payload)

    career_ids = data.get("careerIds")
    if career_ids is None:
        return None
    if not is_sequence(career_ids):
        raise InvalidArgument("careerIds must be an array")
    return list(career_ids)
