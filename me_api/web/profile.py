"""Profile routes: read, replace, update and delete the stored profile."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from me_api.storage.repository import ProfileRepository

from .dependencies import get_repository
from .schemas import ProfileCreate, ProfileUpdate

logger = logging.getLogger("me_api.web")

router = APIRouter(prefix="/profile")


@router.get("")
def get_profile(repository: ProfileRepository = Depends(get_repository)) -> Optional[dict]:
    profile = repository.find_first()
    return profile.to_dict() if profile else None


@router.post("")
def create_profile(body: ProfileCreate, repository: ProfileRepository = Depends(get_repository)) -> dict:
    # Only one profile is kept: saving a new one replaces whatever was stored
    created = repository.replace(body.to_profile())
    return created.to_dict()


@router.put("/{profile_id}")
def update_profile(
    profile_id: str,
    body: ProfileUpdate,
    repository: ProfileRepository = Depends(get_repository),
) -> dict:
    updated = repository.update(profile_id, body.to_changes())
    if updated is None:
        logger.warning("Update for unknown profile %s", profile_id)
        raise HTTPException(status_code=404, detail="Profile not found")
    return updated.to_dict()


@router.delete("/{profile_id}")
def delete_profile(profile_id: str, repository: ProfileRepository = Depends(get_repository)) -> dict:
    if not repository.delete(profile_id):
        raise HTTPException(status_code=404, detail="Profile not found")
    return {"message": "Profile deleted successfully"}
