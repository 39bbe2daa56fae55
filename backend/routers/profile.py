from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
import logging

from database import get_db
from schemas.profile import Profile, ProfileUpdate
from schemas.session import CurrentUser
from crud import profile as crud_profile
from utils.auth_utils import get_current_user, get_user_identifier

router = APIRouter(prefix="/profile", tags=["Profile"])
logger = logging.getLogger(__name__)


@router.get("/", response_model=Profile)
def read_profile(db: Session = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    db_profile = crud_profile.get_profile(db, user)
    if db_profile is None:
        raise HTTPException(status_code=404, detail="Profile not found. Please sign in again via POST /auth/sync")
    return db_profile


@router.patch("/", response_model=Profile)
def update_profile(
    profile: ProfileUpdate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Update farm name and location."""
    db_profile = crud_profile.update_profile(db, user, profile)
    if db_profile is None:
        raise HTTPException(status_code=404, detail="Profile not found. Please sign in again via POST /auth/sync")
    logger.info("Profile updated by user %s", get_user_identifier(user))
    return db_profile
