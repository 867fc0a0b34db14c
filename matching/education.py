from typing import Sequence

EDUCATION_LEVELS = {
    "high_school": 1,
    "some_college": 2,
    "associate": 3,
    "bachelor": 4,
    "master": 5,
    "phd": 6,
}
DEFAULT_EDUCATION_LEVEL = 1

DEGREE_KEYWORDS = ("degree", "bachelor", "master")

# Degree careers want associate or above, the others favour up to some college
DEGREE_MIN_LEVEL = 3
NO_DEGREE_MAX_LEVEL = 2

EDUCATION_BONUS = 1


def education_level(education: object) -> int:
    """Ordinal for an education key; unknown keys rank as high school."""
    if not isinstance(education, str):
        return DEFAULT_EDUCATION_LEVEL
    return EDUCATION_LEVELS.get(education, DEFAULT_EDUCATION_LEVEL)


def requires_degree(requirements: Sequence[str]) -> bool:
    """Substring test, so "No degree needed" still counts as requiring one."""
    for requirement in requirements:
        text = requirement.lower()
        if any(keyword in text for keyword in DEGREE_KEYWORDS):
            return True
    return False


def match_education(
    user_education: object,
    career_requirements: Sequence[str],
) -> int:
    level = education_level(user_education)

    if requires_degree(career_requirements):
        return EDUCATION_BONUS if level >= DEGREE_MIN_LEVEL else 0
    return EDUCATION_BONUS if level <= NO_DEGREE_MAX_LEVEL else 0
