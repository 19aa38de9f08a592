"""Profile store access: the repository interface and its SQLAlchemy implementation."""

import logging
from typing import Optional, Protocol

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from me_api.errors import StoreUnavailable
from me_api.models import ProfileRecord
from me_api.profile.models import Profile

logger = logging.getLogger("me_api.storage")


class ProfileRepository(Protocol):
    """Everything the rest of the service needs from the profile store."""

    def find_all(self) -> list[Profile]:
        ...

    def find_first(self) -> Optional[Profile]:
        ...

    def replace(self, profile: Profile) -> Profile:
        ...

    def update(self, profile_id: str, changes: dict) -> Optional[Profile]:
        ...

    def delete(self, profile_id: str) -> bool:
        ...


class SqlProfileRepository:
    """Profile repository backed by a SQLAlchemy session.

    Database errors are re-raised as StoreUnavailable so callers can tell a
    failed read apart from an empty store.
    """

    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> list[Profile]:
        try:
            rows = self.session.scalars(select(ProfileRecord).order_by(ProfileRecord.id)).all()
        except SQLAlchemyError as e:
            raise self._unavailable("read profiles", e) from e
        return [row.to_profile() for row in rows]

    def find_first(self) -> Optional[Profile]:
        try:
            row = self.session.scalars(
                select(ProfileRecord).order_by(ProfileRecord.id).limit(1)
            ).first()
        except SQLAlchemyError as e:
            raise self._unavailable("read profile", e) from e
        return row.to_profile() if row else None

    def replace(self, profile: Profile) -> Profile:
        """Delete every stored profile, then store ``profile`` under a new id."""
        data = profile.to_dict()
        data.pop("id")
        row = ProfileRecord()
        row.apply(data)
        try:
            self.session.execute(delete(ProfileRecord))
            self.session.add(row)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise self._unavailable("save profile", e) from e

        logger.info("Stored profile %s", row.profile_id)
        return row.to_profile()

    def update(self, profile_id: str, changes: dict) -> Optional[Profile]:
        try:
            row = self._get(profile_id)
            if row is None:
                return None
            row.apply(changes)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise self._unavailable("update profile", e) from e

        logger.info("Updated profile %s (%s)", profile_id, ", ".join(sorted(changes)) or "no fields")
        return row.to_profile()

    def delete(self, profile_id: str) -> bool:
        try:
            row = self._get(profile_id)
            if row is None:
                return False
            self.session.delete(row)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise self._unavailable("delete profile", e) from e

        logger.info("Deleted profile %s", profile_id)
        return True

    def _get(self, profile_id: str) -> Optional[ProfileRecord]:
        return self.session.scalars(
            select(ProfileRecord).where(ProfileRecord.profile_id == profile_id)
        ).first()

    @staticmethod
    def _unavailable(action: str, error: Exception) -> StoreUnavailable:
        logger.error("Could not %s: %s", action, error)
        return StoreUnavailable(f"Could not {action}: {type(error).__name__}")
