"""Keyword projection: reduce a profile to the parts that match a search term."""

from dataclasses import dataclass
from typing import Optional

from me_api.profile.models import Profile, Project, WorkExperience
from me_api.search.text_matcher import any_matches, matches


@dataclass
class MatchedView:
    """Read-only partial view of a profile produced by a keyword search.

    Fields that did not match stay ``None`` and are left out of ``to_dict``.
    """

    id: Optional[str]
    name: Optional[str] = None
    email: Optional[str] = None
    education: Optional[str] = None
    skills: Optional[list[str]] = None
    projects: Optional[list[Project]] = None
    work: Optional[list[WorkExperience]] = None
    links: Optional[dict[str, str]] = None

    @property
    def qualifies(self) -> bool:
        """Whether this view belongs in search results.

        Education and links are reported when they match but do not qualify
        a profile on their own.
        """
        return bool(self.name or self.email or self.skills or self.projects or self.work)

    def to_dict(self) -> dict:
        out = {"id": self.id}
        if self.name is not None:
            out["name"] = self.name
        if self.email is not None:
            out["email"] = self.email
        if self.education is not None:
            out["education"] = self.education
        if self.skills is not None:
            out["skills"] = list(self.skills)
        if self.projects is not None:
            out["projects"] = [p.to_dict() for p in self.projects]
        if self.work is not None:
            out["work"] = [w.to_dict() for w in self.work]
        if self.links is not None:
            out["links"] = dict(self.links)
        return out


def _project_matches(project: Project, needle: str) -> bool:
    return any_matches((project.title, project.description, project.link), needle)


def _work_matches(entry: WorkExperience, needle: str) -> bool:
    return any_matches((entry.role, entry.company, entry.duration, entry.description), needle)


def project_profile(profile: Profile, needle: str) -> MatchedView:
    """Build the MatchedView of ``profile`` for ``needle``.

    Scalars are kept when they match. Skills, projects and work entries are
    filtered in their original order, a project or work entry being kept
    whole when any of its text fields match. Empty collections are dropped.
    """
    view = MatchedView(id=profile.id)

    if matches(profile.name, needle):
        view.name = profile.name
    if matches(profile.email, needle):
        view.email = profile.email
    if matches(profile.education, needle):
        view.education = profile.education

    skills = [s for s in profile.skills if matches(s, needle)]
    if skills:
        view.skills = skills

    projects = [p for p in profile.projects if _project_matches(p, needle)]
    if projects:
        view.projects = projects

    work = [w for w in profile.work if _work_matches(w, needle)]
    if work:
        view.work = work

    links = {key: value for key, value in profile.links.items() if matches(value, needle)}
    if links:
        view.links = links

    return view
