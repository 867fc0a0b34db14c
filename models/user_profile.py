from dataclasses import dataclass, field
from typing import List


@dataclass
class UserProfile:
    """
    What a user tells us about themselves for one recommendation request.
    Never persisted.
    """

    education: str
    skills: List[str] = field(default_factory=list)
    interests: List[str] = field(default_factory=list)
    experience: List[str] = field(default_factory=list)
