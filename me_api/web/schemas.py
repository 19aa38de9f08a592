"""Request bodies for the profile routes.

Create and update are separate shapes: neither accepts a client-supplied
id, and they differ in what an absent field means.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from me_api.profile.models import Profile, ProfileLinks, Project, WorkExperience


class ProjectIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str
    description: str = ""
    link: str = ""
    pskills: list[str] = Field(default_factory=list)

    @field_validator("pskills", mode="before")
    @classmethod
    def _pskills_list(cls, value: Any) -> Any:
        return value if isinstance(value, list) else []

    def to_project(self) -> Project:
        return Project(
            title=self.title,
            description=self.description,
            link=self.link,
            pskills=list(self.pskills),
        )


class WorkExperienceIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    company: str = ""
    role: str = ""
    duration: str = ""
    description: str = ""

    def to_work(self) -> WorkExperience:
        return WorkExperience(**self.model_dump())


class LinksIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    github: Optional[str] = None
    linkedin: Optional[str] = None
    portfolio: Optional[str] = None

    def to_links(self) -> ProfileLinks:
        return ProfileLinks(**self.model_dump())


class ProfileCreate(BaseModel):
    """Body of POST /profile. Absent fields are stored empty."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    email: str = ""
    education: str = ""
    skills: list[str] = Field(default_factory=list)
    projects: list[ProjectIn] = Field(default_factory=list)
    work: list[WorkExperienceIn] = Field(default_factory=list)
    links: LinksIn = Field(default_factory=LinksIn)

    def to_profile(self) -> Profile:
        return Profile(
            name=self.name,
            email=self.email,
            education=self.education,
            skills=list(self.skills),
            projects=[p.to_project() for p in self.projects],
            work=[w.to_work() for w in self.work],
            links=self.links.to_links(),
        )


class ProfileUpdate(BaseModel):
    """Body of PUT /profile/{id}.

    Absent name, email or education keep their stored values; absent
    collections are reset to empty.
    """

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    education: Optional[str] = None
    skills: list[str] = Field(default_factory=list)
    projects: list[ProjectIn] = Field(default_factory=list)
    work: list[WorkExperienceIn] = Field(default_factory=list)
    links: LinksIn = Field(default_factory=LinksIn)

    def to_changes(self) -> dict:
        changes = {
            "skills": list(self.skills),
            "projects": [p.to_project().to_dict() for p in self.projects],
            "work": [w.to_work().to_dict() for w in self.work],
            "links": self.links.to_links().to_dict(),
        }
        for key in ("name", "email", "education"):
            value = getattr(self, key)
            if value is not None:
                changes[key] = value
        return changes
