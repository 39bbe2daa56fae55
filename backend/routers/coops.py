from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from database import get_db
from schemas.coop import Coop, CoopCreate, CoopUpdate
from schemas.session import CurrentUser
from crud import coop as crud_coop
from utils.auth_utils import get_current_user, get_user_identifier

router = APIRouter(prefix="/coops", tags=["Coops"], dependencies=[Depends(get_current_user)])
logger = logging.getLogger(__name__)


@router.post("/", response_model=Coop, status_code=status.HTTP_201_CREATED)
def create_coop(
    coop: CoopCreate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Create a new coop."""
    db_coop = crud_coop.create_coop(db=db, user=user, coop=coop)
    logger.info("Coop '%s' created by user %s", db_coop.name, get_user_identifier(user))
    return db_coop


@router.get("/", response_model=List[Coop])
def read_coops(
    skip: int = 0,
    limit: Optional[int] = None,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Retrieve the user's coops, newest first."""
    return crud_coop.get_coops(db=db, user=user, skip=skip, limit=limit)


@router.get("/{coop_id}", response_model=Coop)
def read_coop(coop_id: int, db: Session = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    db_coop = crud_coop.get_coop(db=db, user=user, coop_id=coop_id)
    if db_coop is None:
        raise HTTPException(status_code=404, detail="Coop not found")
    return db_coop


@router.patch("/{coop_id}", response_model=Coop)
def update_coop(
    coop_id: int,
    coop: CoopUpdate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Update an existing coop."""
    db_coop = crud_coop.update_coop(db=db, user=user, coop_id=coop_id, coop=coop)
    if db_coop is None:
        logger.warning("Coop %d not found for user %s", coop_id, get_user_identifier(user))
        raise HTTPException(status_code=404, detail="Coop not found")
    logger.info("Coop %d updated by user %s", coop_id, get_user_identifier(user))
    return db_coop


@router.delete("/{coop_id}", status_code=status.HTTP_200_OK)
def delete_coop(coop_id: int, db: Session = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    """Delete a coop. Coops with feed history cannot be deleted."""
    if crud_coop.get_coop(db=db, user=user, coop_id=coop_id) is None:
        raise HTTPException(status_code=404, detail="Coop not found")

    success, message = crud_coop.delete_coop(db=db, user=user, coop_id=coop_id)
    if not success:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=message)
    logger.info("Coop %d deleted by user %s", coop_id, get_user_identifier(user))
    return {"message": message}
