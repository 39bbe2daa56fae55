from sqlalchemy.orm import Session
from models.coop import Coop
from models.chicken import Chicken
from models.feed import Feed
from schemas.coop import CoopCreate, CoopUpdate
from schemas.session import CurrentUser


def get_coop(db: Session, user: CurrentUser, coop_id: int):
    return db.query(Coop).filter(Coop.id == coop_id, Coop.user_id == user.id).first()


def get_coops(db: Session, user: CurrentUser, skip: int = 0, limit: int = 100):
    return db.query(Coop).filter(Coop.user_id == user.id).order_by(
        Coop.created_at.desc(), Coop.id.desc()
    ).offset(skip).limit(limit).all()


def count_coops(db: Session, user: CurrentUser) -> int:
    return db.query(Coop).filter(Coop.user_id == user.id).count()


def create_coop(db: Session, user: CurrentUser, coop: CoopCreate):
    db_coop = Coop(**coop.model_dump(), user_id=user.id)
    db.add(db_coop)
    db.commit()
    db.refresh(db_coop)
    return db_coop


def update_coop(db: Session, user: CurrentUser, coop_id: int, coop: CoopUpdate):
    db_coop = get_coop(db, user, coop_id)
    if db_coop:
        for key, value in coop.model_dump(exclude_unset=True).items():
            setattr(db_coop, key, value)
        db.commit()
        db.refresh(db_coop)
    return db_coop


def delete_coop(db: Session, user: CurrentUser, coop_id: int):
    db_coop = get_coop(db, user, coop_id)
    if not db_coop:
        return False, "Coop not found."

    # Feed history keeps the coop; chickens are simply un-housed
    feed_entries = db.query(Feed).filter(Feed.coop_id == coop_id).count()
    if feed_entries:
        return False, f"Coop has {feed_entries} feed record(s) and cannot be deleted."

    db.query(Chicken).filter(Chicken.coop_id == coop_id).update(
        {Chicken.coop_id: None}, synchronize_session=False
    )
    db.delete(db_coop)
    db.commit()
    return True, "Coop deleted successfully."
