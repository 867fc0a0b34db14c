from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from core.errors import MalformedRecord

REQUIRED_CAREER_FIELDS = ("tags", "skills", "education")


@dataclass(frozen=True)
class CareerRecord:
    """
    A single career document as read from the catalog.
    No logic. No scoring.

    `fields` keeps the full document so responses can echo it back.
    """

    career_id: Any

    tags: Tuple[str, ...]
    skills: Tuple[Any, ...]
    education: Tuple[str, ...]

    fields: Dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_document(cls, career_id: Any, fields: Dict[str, Any]) -> "CareerRecord":
        for name in REQUIRED_CAREER_FIELDS:
            value = fields.get(name)
            if value is None:
                raise MalformedRecord("careers", career_id, name)
            if not isinstance(value, (list, tuple)):
                raise MalformedRecord("careers", career_id, name, problem="has a non-list field")

        return cls(
            career_id=career_id,
            tags=tuple(fields["tags"]),
            skills=tuple(fields["skills"]),
            education=tuple(fields["education"]),
            fields=dict(fields),
        )


@dataclass(frozen=True)
class ScoredCareer:
    career: CareerRecord
    score: int

    @property
    def career_id(self) -> Any:
        return self.career.career_id

    def to_dict(self) -> Dict[str, Any]:
        # document fields override the id; score always wins
        return {"id": self.career.career_id, **self.career.fields, "score": self.score}
