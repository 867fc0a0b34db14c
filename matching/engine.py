from typing import Mapping

from models.career_profile import CareerRecord
from models.skill_record import SkillRecord
from models.user_profile import UserProfile
from matching.interests import match_interests
from matching.skills import match_skills
from matching.education import match_education
from matching.experience import match_experience
from matching.aggregate import aggregate_match

"""
Matching orchestration layer.

This module coordinates component-wise matchers.
It does not contain scoring logic itself.
"""


def match_user_to_role(
    user: UserProfile,
    role: CareerRecord,
    skill_catalog: Mapping[str, SkillRecord],
) -> dict[str, int]:
    """
    Entry point for matching.
    Returns component-wise scores plus their total.
    """

    component_scores = {
        "interests": match_interests(user.interests, role.tags),
        "skills": match_skills(user.skills, role.skills, skill_catalog),
        "education": match_education(user.education, role.education),
        "experience": match_experience(user.experience, role.tags),
    }

    component_scores["total"] = aggregate_match(component_scores)
    return component_scores


def score_career(
    role: CareerRecord,
    skill_catalog: Mapping[str, SkillRecord],
    user: UserProfile,
) -> int:
    return match_user_to_role(user, role, skill_catalog)["total"]
