"""Shared fixtures: profile factories and in-memory repositories."""

import copy

import pytest

from me_api.errors import StoreUnavailable
from me_api.profile.models import Profile, ProfileLinks, Project, WorkExperience


def make_project(**kwargs) -> Project:
    defaults = dict(title="Engine", description="calc", link="", pskills=["python", "math"])
    defaults.update(kwargs)
    return Project(**defaults)


def make_profile(**kwargs) -> Profile:
    defaults = dict(
        id="1",
        name="Ada Lovelace",
        email="ada@x.com",
        education="",
        skills=["math"],
        projects=[make_project()],
        work=[],
        links=ProfileLinks(),
    )
    defaults.update(kwargs)
    return Profile(**defaults)


class InMemoryProfileRepository:
    """Repository fake holding profiles in a list, in insertion order."""

    def __init__(self, profiles=None):
        self.profiles = list(profiles or [])
        self.find_all_calls = 0
        self._next_id = len(self.profiles) + 1

    def find_all(self):
        self.find_all_calls += 1
        return copy.deepcopy(self.profiles)

    def find_first(self):
        return copy.deepcopy(self.profiles[0]) if self.profiles else None

    def replace(self, profile):
        stored = copy.deepcopy(profile)
        stored.id = str(self._next_id)
        self._next_id += 1
        self.profiles = [stored]
        return copy.deepcopy(stored)

    def update(self, profile_id, changes):
        for index, profile in enumerate(self.profiles):
            if profile.id == profile_id:
                data = profile.to_dict()
                data.update(changes)
                self.profiles[index] = Profile.from_dict(data)
                return copy.deepcopy(self.profiles[index])
        return None

    def delete(self, profile_id):
        before = len(self.profiles)
        self.profiles = [p for p in self.profiles if p.id != profile_id]
        return len(self.profiles) < before


class ExplodingRepository:
    """Fails the test if anything reads the store."""

    def __getattr__(self, name):
        raise AssertionError(f"store accessed: {name}")


class UnavailableRepository:
    """Every call fails the way an unreachable database does."""

    def _fail(self, *args, **kwargs):
        raise StoreUnavailable("Could not read profiles: OperationalError")

    find_all = find_first = replace = update = delete = _fail


@pytest.fixture
def ada():
    return make_profile()


@pytest.fixture
def repository(ada):
    return InMemoryProfileRepository([ada])
