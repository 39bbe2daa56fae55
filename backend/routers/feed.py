from datetime import date
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from database import get_db
from schemas.feed import Feed, FeedCreate, FeedUpdate
from schemas.session import CurrentUser
from crud import coop as crud_coop
from crud import feed as crud_feed
from utils.auth_utils import get_current_user, get_user_identifier

router = APIRouter(prefix="/feed", tags=["Feed"], dependencies=[Depends(get_current_user)])
logger = logging.getLogger("feed")


def _check_coop(db: Session, user: CurrentUser, coop_id: int):
    if crud_coop.get_coop(db=db, user=user, coop_id=coop_id) is None:
        raise HTTPException(status_code=404, detail="Coop not found")


@router.post("/", response_model=Feed, status_code=status.HTTP_201_CREATED)
def create_feed(
    feed: FeedCreate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Record a feeding event for a coop."""
    _check_coop(db, user, feed.coop_id)
    db_feed = crud_feed.create_feed(db=db, user=user, feed=feed)
    logger.info("Feed record %d (%s kg) created by user %s", db_feed.id, db_feed.quantity_kg, get_user_identifier(user))
    return db_feed


@router.get("/", response_model=List[Feed])
def read_feeds(
    coop_id: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    skip: int = 0,
    limit: Optional[int] = None,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Get feed records, newest first."""
    return crud_feed.get_feeds(
        db=db, user=user, coop_id=coop_id, start_date=start_date, end_date=end_date, skip=skip, limit=limit
    )


@router.get("/{feed_id}", response_model=Feed)
def read_feed(feed_id: int, db: Session = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    """Get a specific feed record by ID."""
    db_feed = crud_feed.get_feed(db=db, user=user, feed_id=feed_id)
    if db_feed is None:
        raise HTTPException(status_code=404, detail="Feed record not found")
    return db_feed


@router.patch("/{feed_id}", response_model=Feed)
def update_feed(
    feed_id: int,
    feed: FeedUpdate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Update an existing feed record."""
    if feed.coop_id is not None:
        _check_coop(db, user, feed.coop_id)
    db_feed = crud_feed.update_feed(db=db, user=user, feed_id=feed_id, feed=feed)
    if db_feed is None:
        raise HTTPException(status_code=404, detail="Feed record not found")
    logger.info("Feed record %d updated by user %s", feed_id, get_user_identifier(user))
    return db_feed


@router.delete("/{feed_id}", status_code=status.HTTP_200_OK)
def delete_feed(feed_id: int, db: Session = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    """Delete a specific feed record."""
    success, message = crud_feed.delete_feed(db=db, user=user, feed_id=feed_id)
    if not success:
        raise HTTPException(status_code=404, detail=message)
    logger.info("Feed record %d deleted by user %s", feed_id, get_user_identifier(user))
    return {"message": message}
