import argparse
import asyncio
from typing import Any, Dict, List, Mapping, Tuple

from models.career_profile import CareerRecord, ScoredCareer
from models.skill_record import SkillRecord
from models.user_profile import UserProfile
from matching.engine import match_user_to_role

Documents = Mapping[Any, Dict[str, Any]]


def build_skill_catalog(skills: Documents) -> Dict[Any, SkillRecord]:
    return {skill_id: SkillRecord.from_document(skill_id, fields) for skill_id, fields in skills.items()}


def rank_profiles(
    user: UserProfile,
    careers: Documents,
    skills: Documents,
) -> Tuple[Dict[Any, Dict[str, int]], List[ScoredCareer]]:
    """
    Score every career in catalog order, then sort by score (descending).

    A malformed career aborts the whole pass. The sort is stable, so careers
    with equal scores keep their catalog order.
    """
    skill_catalog = build_skill_catalog(skills)

    results = {}
    scored = []

    for career_id, fields in careers.items():
        career = CareerRecord.from_document(career_id, fields)
        scores = match_user_to_role(user, career, skill_catalog)
        results[career_id] = scores
        scored.append(ScoredCareer(career=career, score=scores["total"]))

    ranking = sorted(scored, key=lambda item: item.score, reverse=True)
    return results, ranking


def _parse_list(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rank all careers in the catalog for a profile")
    parser.add_argument("--education", default="high_school")
    parser.add_argument("--skills", help="comma separated skill names")
    parser.add_argument("--interests", help="comma separated interests")
    parser.add_argument("--experience", action="append", default=[], help="repeat for each entry")
    parser.add_argument("--top", type=int, default=10)
    return parser


async def _load_and_rank(user: UserProfile):
    from core.settings import Settings
    from ingestion.read_career_catalog import load_catalog
    from supabase_client import SupabaseClient

    settings = Settings.from_env()
    async with SupabaseClient.from_settings(settings) as store:
        careers, skills = await load_catalog(
            store,
            careers_collection=settings.careers_collection,
            skills_collection=settings.skills_collection,
        )
    return rank_profiles(user, careers, skills)


def main(argv: list[str] | None = None):
    from core.log import configure_logging

    args = build_parser().parse_args(argv)
    configure_logging()

    user = UserProfile(
        education=args.education,
        skills=_parse_list(args.skills),
        interests=_parse_list(args.interests),
        experience=args.experience,
    )
    results, ranking = asyncio.run(_load_and_rank(user))

    print("\n===== CAREER RANKINGS =====\n")

    for rank, item in enumerate(ranking[:args.top], start=1):
        scores = results[item.career_id]
        print(f"{rank:3d}. {item.career_id}  |  TOTAL: {item.score}")
        print(
            f"     interests:  {scores['interests']}\n"
            f"     skills:     {scores['skills']}\n"
            f"     education:  {scores['education']}\n"
            f"     experience: {scores['experience']}\n"
        )


if __name__ == "__main__":
    main()
