"""Read-only query routes: projects by skill, top skills, keyword search."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from me_api.search.service import QueryService

from .dependencies import get_query_service

router = APIRouter(prefix="/query")

MAX_TOP_SKILLS = 50


@router.get("/projects")
def projects_by_skill(
    skill: Optional[str] = None,
    service: QueryService = Depends(get_query_service),
) -> list[dict]:
    return service.projects_payload(skill)


@router.get("/skills/top")
def top_skills(
    limit: Optional[int] = Query(default=None, ge=1, le=MAX_TOP_SKILLS),
    service: QueryService = Depends(get_query_service),
) -> list[dict]:
    return service.top_skills_payload(limit)


@router.get("/search")
def search(
    q: Optional[str] = None,
    service: QueryService = Depends(get_query_service),
) -> dict:
    return service.search_payload(q)
