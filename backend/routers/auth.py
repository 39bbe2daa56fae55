from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from database import get_db
from models.revoked_token import RevokedToken
from schemas.session import CurrentUser, LogoutResult, SyncResult
from crud import profile as crud_profile
from utils.auth_utils import SessionToken, get_session, get_current_user, get_user_identifier

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/sync", response_model=SyncResult)
def sync_user(session: SessionToken = Depends(get_session), db: Session = Depends(get_db)):
    """Create the caller's farm profile on first sign-in; later calls are no-ops."""
    user = CurrentUser(id=session.payload["sub"], email=session.payload.get("email"))
    profile, created = crud_profile.sync_profile(db, user)
    if created:
        logger.info("Profile created for user %s", get_user_identifier(user))
    return SyncResult(status="synced", user_id=profile.id, new=created)


@router.get("/me", response_model=CurrentUser)
def read_current_user(user: CurrentUser = Depends(get_current_user)):
    return user


@router.post("/logout", response_model=LogoutResult)
def logout(session: SessionToken = Depends(get_session), db: Session = Depends(get_db)):
    """Sign out: the presented token is refused from now until it expires."""
    expires_at = None
    if session.payload.get("exp"):
        expires_at = datetime.fromtimestamp(session.payload["exp"], tz=timezone.utc)
    # Expired tokens are refused by signature checks already
    db.query(RevokedToken).filter(
        RevokedToken.expires_at.isnot(None),
        RevokedToken.expires_at < datetime.now(timezone.utc),
    ).delete(synchronize_session=False)
    db.add(RevokedToken(token_id=session.token_id, user_id=session.payload["sub"], expires_at=expires_at))
    db.commit()
    logger.info("User %s signed out", session.payload.get("email") or session.payload["sub"])
    return LogoutResult(message="Signed out successfully")
