from datetime import date
from typing import Optional
from sqlalchemy.orm import Session
from models.chicken import Chicken
from models.health_record import HealthRecord, HealthRecordType
from schemas.health_record import HealthRecordCreate, HealthRecordUpdate
from schemas.session import CurrentUser


def _owned(db: Session, user: CurrentUser):
    return db.query(HealthRecord).join(Chicken, HealthRecord.chicken_id == Chicken.id).filter(
        Chicken.user_id == user.id
    )


def get_health_record(db: Session, user: CurrentUser, record_id: int):
    return _owned(db, user).filter(HealthRecord.id == record_id).first()


def get_health_records(
    db: Session,
    user: CurrentUser,
    chicken_id: Optional[int] = None,
    record_type: Optional[HealthRecordType] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    skip: int = 0,
    limit: Optional[int] = 100,
):
    query = _owned(db, user)
    if chicken_id is not None:
        query = query.filter(HealthRecord.chicken_id == chicken_id)
    if record_type:
        query = query.filter(HealthRecord.type == record_type)
    if start_date is not None:
        query = query.filter(HealthRecord.date >= start_date)
    if end_date is not None:
        query = query.filter(HealthRecord.date <= end_date)
    query = query.order_by(HealthRecord.date.desc(), HealthRecord.id.desc()).offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def create_health_record(db: Session, user: CurrentUser, record: HealthRecordCreate):
    db_record = HealthRecord(**record.model_dump())
    db.add(db_record)
    db.commit()
    db.refresh(db_record)
    return db_record


def update_health_record(db: Session, user: CurrentUser, record_id: int, record: HealthRecordUpdate):
    db_record = get_health_record(db, user, record_id)
    if db_record:
        for key, value in record.model_dump(exclude_unset=True).items():
            setattr(db_record, key, value)
        db.commit()
        db.refresh(db_record)
    return db_record


def delete_health_record(db: Session, user: CurrentUser, record_id: int):
    db_record = get_health_record(db, user, record_id)
    if not db_record:
        return False, "Health record not found."
    db.delete(db_record)
    db.commit()
    return True, "Health record deleted successfully."
