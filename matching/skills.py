from typing import Any, Mapping, Sequence

from core.errors import MalformedRecord
from models.skill_record import SkillRecord

SKILL_WEIGHT = 1


def _skill_matches(user_skill: str, skill_id: Any, catalog: Mapping[Any, SkillRecord]) -> bool:
    skill = catalog.get(skill_id)
    # unresolved ids are a non-match, not a defect
    if skill is None:
        return False
    if not isinstance(skill.name, str):
        raise MalformedRecord("skills", skill.skill_id, "name")
    return skill.name.lower() == user_skill.lower()


def match_skills(
    user_skills: Sequence[str],
    career_skills: Sequence[Any],
    catalog: Mapping[Any, SkillRecord],
) -> int:
    """
    Skill fit.

    Rule:
    - Career skills are ids; they are resolved to names through the catalog
    - A user skill matches when it equals any resolved name, ignoring case
    - Each matching user skill is worth SKILL_WEIGHT
    - Career skills are checked in order and the check stops at the first match
    """

    matching = [
        user_skill for user_skill in user_skills
        if any(_skill_matches(user_skill, skill_id, catalog) for skill_id in career_skills)
    ]

    return SKILL_WEIGHT * len(matching)
