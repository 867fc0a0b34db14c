from typing import Any, Dict, Iterable, List, Mapping, Optional

from core.errors import InvalidArgument
from core.validation import is_sequence
from models.skill_record import SkillRecord


def filter_skills(
    skills: Mapping[Any, Dict[str, Any]],
    career_ids: Optional[Iterable[Any]] = None,
) -> List[Dict[str, Any]]:
    """
    Skills relevant to a set of careers, each with its id merged in.

    No ids (None or empty) means every skill. Otherwise a skill is kept when
    its linkedCareers list shares at least one id with the request.
    """
    if career_ids is not None and not is_sequence(career_ids):
        raise InvalidArgument("careerIds must be an array")

    records = [SkillRecord.from_document(skill_id, fields) for skill_id, fields in skills.items()]

    if career_ids:
        wanted = list(career_ids)
        records = [
            record for record in records
            if record.linked_careers is not None and any(career_id in wanted for career_id in record.linked_careers)
        ]

    return [record.to_dict() for record in records]
