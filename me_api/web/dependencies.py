"""Shared FastAPI dependencies: DB session, repository and query service."""

from collections.abc import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from me_api.search.service import QueryService
from me_api.storage.repository import ProfileRepository, SqlProfileRepository


def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_repository(db: Session = Depends(get_db)) -> ProfileRepository:
    return SqlProfileRepository(db)


def get_query_service(
    request: Request,
    repository: ProfileRepository = Depends(get_repository),
) -> QueryService:
    return QueryService(repository, top_skills_limit=request.app.state.config.query.top_skills_limit)
