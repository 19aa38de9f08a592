"""Query service: runs keyword and skill queries against the profile store."""

import logging

from me_api.profile.models import Project
from me_api.search.projector import MatchedView, project_profile
from me_api.search.skills import DEFAULT_TOP_SKILLS, SkillCount, projects_by_skill, top_skills
from me_api.search.text_matcher import normalize
from me_api.storage.repository import ProfileRepository

logger = logging.getLogger("me_api.search")


class QueryService:
    """Read-only queries over every stored profile.

    Each call reads the store afresh. An empty query term returns an empty
    result without touching the store; store failures (StoreUnavailable)
    propagate to the caller.
    """

    def __init__(self, repository: ProfileRepository, top_skills_limit: int = DEFAULT_TOP_SKILLS):
        self.repository = repository
        self.top_skills_limit = top_skills_limit

    def search_by_skill(self, skill: str | None) -> list[Project]:
        if not skill or not skill.strip():
            return []

        projects = projects_by_skill(self.repository.find_all(), skill)
        logger.info("Skill query '%s': %d projects", skill, len(projects))
        return projects

    def search_by_keyword(self, q: str | None) -> list[MatchedView]:
        needle = normalize(q.strip()) if q else ""
        if not needle:
            return []

        views = [project_profile(p, needle) for p in self.repository.find_all()]
        matched = [view for view in views if view.qualifies]
        logger.info("Keyword query '%s': %d/%d profiles matched", needle, len(matched), len(views))
        return matched

    def top_skills(self, limit: int | None = None) -> list[SkillCount]:
        if limit is None:
            limit = self.top_skills_limit

        ranked = top_skills(self.repository.find_all(), limit)
        logger.info("Top skills (limit %d): %d returned", limit, len(ranked))
        return ranked

    # JSON payloads, shaped as the HTTP API returns them

    def projects_payload(self, skill: str | None) -> list[dict]:
        return [p.to_dict() for p in self.search_by_skill(skill)]

    def search_payload(self, q: str | None) -> dict:
        return {"profiles": [view.to_dict() for view in self.search_by_keyword(q)]}

    def top_skills_payload(self, limit: int | None = None) -> list[dict]:
        return [entry.to_dict() for entry in self.top_skills(limit)]
