from sqlalchemy.orm import Session
from models.profile import Profile
from schemas.profile import ProfileUpdate
from schemas.session import CurrentUser


def get_profile(db: Session, user: CurrentUser):
    return db.query(Profile).filter(Profile.id == user.id).first()


def sync_profile(db: Session, user: CurrentUser):
    """Get-or-create the profile for a signed-in user. Returns (profile, created)."""
    db_profile = get_profile(db, user)
    if db_profile:
        if user.email and db_profile.email != user.email:
            db_profile.email = user.email
            db.commit()
            db.refresh(db_profile)
        return db_profile, False

    db_profile = Profile(id=user.id, email=user.email or "")
    db.add(db_profile)
    db.commit()
    db.refresh(db_profile)
    return db_profile, True


def update_profile(db: Session, user: CurrentUser, profile: ProfileUpdate):
    db_profile = get_profile(db, user)
    if db_profile:
        for key, value in profile.model_dump(exclude_unset=True).items():
            setattr(db_profile, key, value)
        db.commit()
        db.refresh(db_profile)
    return db_profile
