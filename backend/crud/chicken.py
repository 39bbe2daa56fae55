from typing import Optional
from sqlalchemy.orm import Session
from models.chicken import Chicken, ChickenStatus
from models.egg_production import EggProduction
from models.health_record import HealthRecord
from schemas.chicken import ChickenCreate, ChickenUpdate
from schemas.session import CurrentUser


def get_chicken(db: Session, user: CurrentUser, chicken_id: int):
    return db.query(Chicken).filter(Chicken.id == chicken_id, Chicken.user_id == user.id).first()


def get_chickens(
    db: Session,
    user: CurrentUser,
    status: Optional[ChickenStatus] = None,
    coop_id: Optional[int] = None,
    skip: int = 0,
    limit: Optional[int] = 100,
):
    query = db.query(Chicken).filter(Chicken.user_id == user.id)
    if status:
        query = query.filter(Chicken.status == status)
    if coop_id is not None:
        query = query.filter(Chicken.coop_id == coop_id)
    query = query.order_by(Chicken.created_at.desc(), Chicken.id.desc()).offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def create_chicken(db: Session, user: CurrentUser, chicken: ChickenCreate):
    data = chicken.model_dump()
    if data.get("current_count") is None:
        data["current_count"] = data["initial_count"]
    db_chicken = Chicken(**data, user_id=user.id)
    db.add(db_chicken)
    db.commit()
    db.refresh(db_chicken)
    return db_chicken


def update_chicken(db: Session, user: CurrentUser, chicken_id: int, chicken: ChickenUpdate):
    db_chicken = get_chicken(db, user, chicken_id)
    if db_chicken:
        for key, value in chicken.model_dump(exclude_unset=True).items():
            setattr(db_chicken, key, value)
        db.commit()
        db.refresh(db_chicken)
    return db_chicken


def delete_chicken(db: Session, user: CurrentUser, chicken_id: int):
    """
    Hard delete a batch. Batches with recorded production or health history are
    kept (foreign keys are RESTRICT), so the delete is rejected instead.
    """
    db_chicken = get_chicken(db, user, chicken_id)
    if not db_chicken:
        return False, "Chicken batch not found."

    production_rows = db.query(EggProduction).filter(EggProduction.chicken_id == chicken_id).count()
    health_rows = db.query(HealthRecord).filter(HealthRecord.chicken_id == chicken_id).count()
    if production_rows or health_rows:
        return False, (
            f"Chicken batch has {production_rows} egg production and {health_rows} health "
            "record(s) and cannot be deleted."
        )

    db.delete(db_chicken)
    db.commit()
    return True, "Chicken batch deleted successfully."
