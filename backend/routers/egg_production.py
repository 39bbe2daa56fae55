from datetime import date
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from database import get_db
from schemas.egg_production import EggProduction, EggProductionCreate, EggProductionUpdate
from schemas.session import CurrentUser
from crud import chicken as crud_chicken
from crud import egg_production as crud_egg_production
from utils.auth_utils import get_current_user, get_user_identifier

router = APIRouter(prefix="/egg-production", tags=["Egg Production"], dependencies=[Depends(get_current_user)])
logger = logging.getLogger(__name__)


def _check_chicken(db: Session, user: CurrentUser, chicken_id: int):
    if crud_chicken.get_chicken(db=db, user=user, chicken_id=chicken_id) is None:
        raise HTTPException(status_code=404, detail="Chicken batch not found")


@router.post("/", response_model=EggProduction, status_code=status.HTTP_201_CREATED)
def create_egg_production(
    entry: EggProductionCreate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Record eggs collected from a batch. Several entries on one day are allowed."""
    _check_chicken(db, user, entry.chicken_id)
    db_entry = crud_egg_production.create_egg_production(db=db, user=user, entry=entry)
    logger.info(
        "Recorded %d eggs for chicken batch %d on %s (user %s)",
        db_entry.count, db_entry.chicken_id, db_entry.date, get_user_identifier(user),
    )
    return db_entry


@router.get("/", response_model=List[EggProduction])
def read_egg_production(
    chicken_id: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    skip: int = 0,
    limit: Optional[int] = None,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    return crud_egg_production.get_egg_productions(
        db=db, user=user, chicken_id=chicken_id, start_date=start_date, end_date=end_date, skip=skip, limit=limit
    )


@router.get("/{production_id}", response_model=EggProduction)
def read_egg_production_entry(production_id: int, db: Session = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    db_entry = crud_egg_production.get_egg_production(db=db, user=user, production_id=production_id)
    if db_entry is None:
        raise HTTPException(status_code=404, detail="Egg production record not found")
    return db_entry


@router.patch("/{production_id}", response_model=EggProduction)
def update_egg_production(
    production_id: int,
    entry: EggProductionUpdate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    if entry.chicken_id is not None:
        _check_chicken(db, user, entry.chicken_id)
    db_entry = crud_egg_production.update_egg_production(db=db, user=user, production_id=production_id, entry=entry)
    if db_entry is None:
        raise HTTPException(status_code=404, detail="Egg production record not found")
    logger.info("Egg production record %d updated by user %s", production_id, get_user_identifier(user))
    return db_entry


@router.delete("/{production_id}", status_code=status.HTTP_200_OK)
def delete_egg_production(production_id: int, db: Session = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    success, message = crud_egg_production.delete_egg_production(db=db, user=user, production_id=production_id)
    if not success:
        raise HTTPException(status_code=404, detail=message)
    logger.info("Egg production record %d deleted by user %s", production_id, get_user_identifier(user))
    return {"message": message}
