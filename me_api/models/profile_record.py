"""Profile table: one row per stored profile, collections kept as JSON."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from me_api.profile.models import Profile

from .base import Base


EDITABLE_FIELDS = ("name", "email", "education", "skills", "projects", "work", "links")


def _new_profile_id() -> str:
    return uuid.uuid4().hex


class ProfileRecord(Base):
    __tablename__ = "profiles"

    # Autoincrement key keeps insertion order; profile_id is what clients see
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    profile_id: Mapped[str] = mapped_column(
        String(32), unique=True, nullable=False, index=True, default=_new_profile_id
    )

    name: Mapped[str] = mapped_column(String(255), default="")
    email: Mapped[str] = mapped_column(String(255), default="")
    education: Mapped[str] = mapped_column(Text, default="")
    skills: Mapped[list] = mapped_column(JSON, default=list)
    projects: Mapped[list] = mapped_column(JSON, default=list)
    work: Mapped[list] = mapped_column(JSON, default=list)
    links: Mapped[dict] = mapped_column(JSON, default=dict)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def to_profile(self) -> Profile:
        """Convert DB row to the Profile dataclass."""
        return Profile.from_dict({
            "id": self.profile_id,
            "name": self.name,
            "email": self.email,
            "education": self.education,
            "skills": self.skills,
            "projects": self.projects,
            "work": self.work,
            "links": self.links,
        })

    def apply(self, data: dict) -> None:
        """Overwrite the columns named in ``data``; other columns are left alone."""
        for column in EDITABLE_FIELDS:
            if column in data:
                setattr(self, column, data[column])
