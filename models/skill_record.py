from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class SkillRecord:
    """A skill document. `linked_careers` is None when the document has no usable list."""

    skill_id: Any
    name: Optional[str]
    linked_careers: Optional[Tuple[Any, ...]] = None

    fields: Dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_document(cls, skill_id: Any, fields: Dict[str, Any]) -> "SkillRecord":
        linked = fields.get("linkedCareers")
        return cls(
            skill_id=skill_id,
            name=fields.get("name"),
            linked_careers=tuple(linked) if isinstance(linked, (list, tuple)) else None,
            fields=dict(fields),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.skill_id, **self.fields}
