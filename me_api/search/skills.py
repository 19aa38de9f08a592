"""Project skill-tag queries: filtering by tag and tag frequency ranking."""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable

from me_api.profile.models import Profile, Project
from me_api.search.text_matcher import normalize

DEFAULT_TOP_SKILLS = 5


@dataclass(frozen=True)
class SkillCount:
    skill: str
    count: int

    def to_dict(self) -> dict:
        return {"skill": self.skill, "count": self.count}


def iter_projects(profiles: Iterable[Profile]) -> Iterable[Project]:
    for profile in profiles:
        yield from profile.projects


def projects_by_skill(profiles: Iterable[Profile], skill: str) -> list[Project]:
    """Projects, across all profiles, tagged with ``skill`` (exact, case-insensitive).

    Only project tags (``pskills``) are considered, never profile-level skills.
    """
    if not skill or not skill.strip():
        return []

    wanted = normalize(skill)

    return [
        project
        for project in iter_projects(profiles)
        if any(normalize(tag) == wanted for tag in project.pskills)
    ]


def top_skills(profiles: Iterable[Profile], limit: int = DEFAULT_TOP_SKILLS) -> list[SkillCount]:
    """Most frequent project tags, highest count first.

    Tags are lower-cased before counting. Equal counts keep the order in
    which each tag was first seen.
    """
    if limit <= 0:
        return []

    counts: Counter[str] = Counter()
    for project in iter_projects(profiles):
        for tag in project.pskills:
            counts[normalize(tag)] += 1

    # sorted() is stable, so ties stay in first-seen order
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [SkillCount(skill, count) for skill, count in ranked[:limit]]
