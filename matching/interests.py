from typing import Sequence

INTEREST_WEIGHT = 2


def match_interests(
    user_interests: Sequence[str],
    career_tags: Sequence[str],
) -> int:
    """
    Interest fit.

    Rule:
    - Career tags define what matters; each tag counts at most once
    - A tag matches when any interest equals it, ignoring case
    - Each matching tag is worth INTEREST_WEIGHT
    """

    matching_tags = [
        tag for tag in career_tags
        if any(interest.lower() == tag.lower() for interest in user_interests)
    ]

    return INTEREST_WEIGHT * len(matching_tags)
