from typing import Sequence

EXPERIENCE_BONUS = 2


def match_experience(
    user_experience: Sequence[str],
    career_tags: Sequence[str],
) -> int:
    """
    Experience relevance.

    Rule:
    - Any experience entry containing any career tag (ignoring case) earns the bonus
    - The bonus is flat; more matches do not add more
    """

    relevant = any(
        any(tag.lower() in entry.lower() for tag in career_tags)
        for entry in user_experience
    )

    return EXPERIENCE_BONUS if relevant else 0
