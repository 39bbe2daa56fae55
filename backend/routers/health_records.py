from datetime import date
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from database import get_db
from models.health_record import HealthRecordType
from schemas.health_record import HealthRecord, HealthRecordCreate, HealthRecordUpdate
from schemas.session import CurrentUser
from crud import chicken as crud_chicken
from crud import health_record as crud_health_record
from utils.auth_utils import get_current_user, get_user_identifier

router = APIRouter(prefix="/health-records", tags=["Health Records"], dependencies=[Depends(get_current_user)])
logger = logging.getLogger(__name__)


def _check_chicken(db: Session, user: CurrentUser, chicken_id: int):
    if crud_chicken.get_chicken(db=db, user=user, chicken_id=chicken_id) is None:
        raise HTTPException(status_code=404, detail="Chicken batch not found")


@router.post("/", response_model=HealthRecord, status_code=status.HTTP_201_CREATED)
def create_health_record(
    record: HealthRecordCreate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Record a vaccination, treatment or checkup for a batch."""
    _check_chicken(db, user, record.chicken_id)
    db_record = crud_health_record.create_health_record(db=db, user=user, record=record)
    logger.info(
        "Health record %d (%s) created for chicken batch %d by user %s",
        db_record.id, db_record.type.value, db_record.chicken_id, get_user_identifier(user),
    )
    return db_record


@router.get("/", response_model=List[HealthRecord])
def read_health_records(
    chicken_id: Optional[int] = None,
    type: Optional[HealthRecordType] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    skip: int = 0,
    limit: Optional[int] = None,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    return crud_health_record.get_health_records(
        db=db,
        user=user,
        chicken_id=chicken_id,
        record_type=type,
        start_date=start_date,
        end_date=end_date,
        skip=skip,
        limit=limit,
    )


@router.get("/{record_id}", response_model=HealthRecord)
def read_health_record(record_id: int, db: Session = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    db_record = crud_health_record.get_health_record(db=db, user=user, record_id=record_id)
    if db_record is None:
        raise HTTPException(status_code=404, detail="Health record not found")
    return db_record


@router.patch("/{record_id}", response_model=HealthRecord)
def update_health_record(
    record_id: int,
    record: HealthRecordUpdate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    if record.chicken_id is not None:
        _check_chicken(db, user, record.chicken_id)
    db_record = crud_health_record.update_health_record(db=db, user=user, record_id=record_id, record=record)
    if db_record is None:
        raise HTTPException(status_code=404, detail="Health record not found")
    logger.info("Health record %d updated by user %s", record_id, get_user_identifier(user))
    return db_record


@router.delete("/{record_id}", status_code=status.HTTP_200_OK)
def delete_health_record(record_id: int, db: Session = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    success, message = crud_health_record.delete_health_record(db=db, user=user, record_id=record_id)
    if not success:
        raise HTTPException(status_code=404, detail=message)
    logger.info("Health record %d deleted by user %s", record_id, get_user_identifier(user))
    return {"message": message}
