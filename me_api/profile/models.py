"""Profile data model."""

from dataclasses import dataclass, field
from typing import Any, Optional

LINK_KEYS = ("github", "linkedin", "portfolio")


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, str)]


def _dict_list(value: Any) -> list[dict]:
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, dict)]


@dataclass
class Project:
    """A project owned by a profile. ``pskills`` are its own skill tags."""

    title: str = ""
    description: str = ""
    link: str = ""
    pskills: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: dict) -> "Project":
        return cls(
            title=_text(raw.get("title")),
            description=_text(raw.get("description")),
            link=_text(raw.get("link")),
            pskills=_string_list(raw.get("pskills")),
        )

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "link": self.link,
            "pskills": list(self.pskills),
        }


@dataclass
class WorkExperience:
    company: str = ""
    role: str = ""
    duration: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, raw: dict) -> "WorkExperience":
        return cls(
            company=_text(raw.get("company")),
            role=_text(raw.get("role")),
            duration=_text(raw.get("duration")),
            description=_text(raw.get("description")),
        )

    def to_dict(self) -> dict:
        return {
            "company": self.company,
            "role": self.role,
            "duration": self.duration,
            "description": self.description,
        }


@dataclass
class ProfileLinks:
    github: Optional[str] = None
    linkedin: Optional[str] = None
    portfolio: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Any) -> "ProfileLinks":
        if not isinstance(raw, dict):
            return cls()
        values = {}
        for key in LINK_KEYS:
            value = raw.get(key)
            values[key] = value if isinstance(value, str) else None
        return cls(**values)

    def items(self) -> list[tuple[str, str]]:
        """(key, value) pairs for the links that are set."""
        return [(key, getattr(self, key)) for key in LINK_KEYS if getattr(self, key)]

    def to_dict(self) -> dict:
        return dict(self.items())


@dataclass
class Profile:
    """A person's profile: identity, skills, projects, work history and links.

    ``id`` is assigned by the store and stays ``None`` until persisted.
    """

    id: Optional[str] = None
    name: str = ""
    email: str = ""
    education: str = ""
    skills: list[str] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    work: list[WorkExperience] = field(default_factory=list)
    links: ProfileLinks = field(default_factory=ProfileLinks)

    @classmethod
    def from_dict(cls, raw: dict) -> "Profile":
        """Build a profile from a stored record.

        Missing or wrongly-typed fields fall back to empty values instead of
        raising, so one damaged record never fails a whole query.
        """
        profile_id = raw.get("id")
        return cls(
            id=str(profile_id) if profile_id is not None else None,
            name=_text(raw.get("name")),
            email=_text(raw.get("email")),
            education=_text(raw.get("education")),
            skills=_string_list(raw.get("skills")),
            projects=[Project.from_dict(p) for p in _dict_list(raw.get("projects"))],
            work=[WorkExperience.from_dict(w) for w in _dict_list(raw.get("work"))],
            links=ProfileLinks.from_dict(raw.get("links")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "education": self.education,
            "skills": list(self.skills),
            "projects": [p.to_dict() for p in self.projects],
            "work": [w.to_dict() for w in self.work],
            "links": self.links.to_dict(),
        }

    def to_summary_string(self) -> str:
        """Create a concise one-screen text summary (used by the CLI)."""
        parts = []
        if self.name:
            parts.append(f"Name: {self.name}")
        if self.email:
            parts.append(f"Email: {self.email}")
        if self.skills:
            parts.append(f"Skills: {', '.join(self.skills)}")
        if self.projects:
            parts.append(f"Projects: {', '.join(p.title for p in self.projects if p.title)}")
        if self.work:
            parts.append(f"Work: {len(self.work)} entries")
        return "\n".join(parts)
