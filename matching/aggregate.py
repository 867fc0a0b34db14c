COMPONENTS = ("interests", "skills", "education", "experience")


def aggregate_match(scores: dict[str, int]) -> int:
    """
    Aggregate component-wise match scores into a single ranking score.

    Components are already weighted by their matchers, so the total is a
    plain sum. Keys outside COMPONENTS (e.g. "total") are ignored.
    """

    return sum(scores.get(component, 0) for component in COMPONENTS)
