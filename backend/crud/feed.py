from datetime import date
from typing import Optional
from sqlalchemy.orm import Session
from models.coop import Coop
from models.feed import Feed
from schemas.feed import FeedCreate, FeedUpdate
from schemas.session import CurrentUser


def _owned(db: Session, user: CurrentUser):
    return db.query(Feed).join(Coop, Feed.coop_id == Coop.id).filter(Coop.user_id == user.id)


def get_feed(db: Session, user: CurrentUser, feed_id: int):
    return _owned(db, user).filter(Feed.id == feed_id).first()


def get_feeds(
    db: Session,
    user: CurrentUser,
    coop_id: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    skip: int = 0,
    limit: Optional[int] = 100,
):
    query = _owned(db, user)
    if coop_id is not None:
        query = query.filter(Feed.coop_id == coop_id)
    if start_date is not None:
        query = query.filter(Feed.date >= start_date)
    if end_date is not None:
        query = query.filter(Feed.date <= end_date)
    query = query.order_by(Feed.date.desc(), Feed.id.desc()).offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def create_feed(db: Session, user: CurrentUser, feed: FeedCreate):
    db_feed = Feed(**feed.model_dump())
    db.add(db_feed)
    db.commit()
    db.refresh(db_feed)
    return db_feed


def update_feed(db: Session, user: CurrentUser, feed_id: int, feed: FeedUpdate):
    db_feed = get_feed(db, user, feed_id)
    if db_feed:
        for key, value in feed.model_dump(exclude_unset=True).items():
            setattr(db_feed, key, value)
        db.commit()
        db.refresh(db_feed)
    return db_feed


def delete_feed(db: Session, user: CurrentUser, feed_id: int):
    db_feed = get_feed(db, user, feed_id)
    if not db_feed:
        return False, "Feed record not found."
    db.delete(db_feed)
    db.commit()
    return True, "Feed record deleted successfully."
