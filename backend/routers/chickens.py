from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from database import get_db
from models.chicken import ChickenStatus
from schemas.chicken import Chicken, ChickenCreate, ChickenUpdate
from schemas.session import CurrentUser
from crud import chicken as crud_chicken
from crud import coop as crud_coop
from utils.auth_utils import get_current_user, get_user_identifier

router = APIRouter(prefix="/chickens", tags=["Chickens"], dependencies=[Depends(get_current_user)])
logger = logging.getLogger(__name__)


def _check_coop(db: Session, user: CurrentUser, coop_id: Optional[int]):
    if coop_id is not None and crud_coop.get_coop(db=db, user=user, coop_id=coop_id) is None:
        raise HTTPException(status_code=404, detail="Coop not found")


@router.post("/", response_model=Chicken, status_code=status.HTTP_201_CREATED)
def create_chicken(
    chicken: ChickenCreate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Register a new chicken batch."""
    _check_coop(db, user, chicken.coop_id)
    db_chicken = crud_chicken.create_chicken(db=db, user=user, chicken=chicken)
    logger.info("Chicken batch '%s' created by user %s", db_chicken.batch_number, get_user_identifier(user))
    return db_chicken


@router.get("/", response_model=List[Chicken])
def read_chickens(
    status: Optional[ChickenStatus] = None,
    coop_id: Optional[int] = None,
    skip: int = 0,
    limit: Optional[int] = None,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    return crud_chicken.get_chickens(db=db, user=user, status=status, coop_id=coop_id, skip=skip, limit=limit)


@router.get("/{chicken_id}", response_model=Chicken)
def read_chicken(chicken_id: int, db: Session = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    db_chicken = crud_chicken.get_chicken(db=db, user=user, chicken_id=chicken_id)
    if db_chicken is None:
        raise HTTPException(status_code=404, detail="Chicken batch not found")
    return db_chicken


@router.patch("/{chicken_id}", response_model=Chicken)
def update_chicken(
    chicken_id: int,
    chicken: ChickenUpdate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Update a batch. Status changes are free-form (active, sold, dead in any order)."""
    if "coop_id" in chicken.model_fields_set:
        _check_coop(db, user, chicken.coop_id)
    db_chicken = crud_chicken.update_chicken(db=db, user=user, chicken_id=chicken_id, chicken=chicken)
    if db_chicken is None:
        logger.warning("Chicken batch %d not found for user %s", chicken_id, get_user_identifier(user))
        raise HTTPException(status_code=404, detail="Chicken batch not found")
    logger.info("Chicken batch %d updated by user %s", chicken_id, get_user_identifier(user))
    return db_chicken


@router.delete("/{chicken_id}", status_code=status.HTTP_200_OK)
def delete_chicken(chicken_id: int, db: Session = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    """Delete a batch. Batches with production or health history cannot be deleted."""
    if crud_chicken.get_chicken(db=db, user=user, chicken_id=chicken_id) is None:
        raise HTTPException(status_code=404, detail="Chicken batch not found")

    success, message = crud_chicken.delete_chicken(db=db, user=user, chicken_id=chicken_id)
    if not success:
        logger.info("Refused to delete chicken batch %d: %s", chicken_id, message)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=message)
    logger.info("Chicken batch %d deleted by user %s", chicken_id, get_user_identifier(user))
    return {"message": message}
