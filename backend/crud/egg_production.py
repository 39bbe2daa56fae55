from datetime import date
from typing import Optional
from sqlalchemy.orm import Session
from models.chicken import Chicken
from models.egg_production import EggProduction
from schemas.egg_production import EggProductionCreate, EggProductionUpdate
from schemas.session import CurrentUser


def _owned(db: Session, user: CurrentUser):
    """Production rows belong to the user through the chicken batch."""
    return db.query(EggProduction).join(Chicken, EggProduction.chicken_id == Chicken.id).filter(
        Chicken.user_id == user.id
    )


def get_egg_production(db: Session, user: CurrentUser, production_id: int):
    return _owned(db, user).filter(EggProduction.id == production_id).first()


def get_egg_productions(
    db: Session,
    user: CurrentUser,
    chicken_id: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    skip: int = 0,
    limit: Optional[int] = 100,
):
    query = _owned(db, user)
    if chicken_id is not None:
        query = query.filter(EggProduction.chicken_id == chicken_id)
    if start_date is not None:
        query = query.filter(EggProduction.date >= start_date)
    if end_date is not None:
        query = query.filter(EggProduction.date <= end_date)
    query = query.order_by(EggProduction.date.desc(), EggProduction.id.desc()).offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def create_egg_production(db: Session, user: CurrentUser, entry: EggProductionCreate):
    db_entry = EggProduction(**entry.model_dump())
    db.add(db_entry)
    db.commit()
    db.refresh(db_entry)
    return db_entry


def update_egg_production(db: Session, user: CurrentUser, production_id: int, entry: EggProductionUpdate):
    db_entry = get_egg_production(db, user, production_id)
    if db_entry:
        for key, value in entry.model_dump(exclude_unset=True).items():
            setattr(db_entry, key, value)
        db.commit()
        db.refresh(db_entry)
    return db_entry


def delete_egg_production(db: Session, user: CurrentUser, production_id: int):
    db_entry = get_egg_production(db, user, production_id)
    if not db_entry:
        return False, "Egg production record not found."
    db.delete(db_entry)
    db.commit()
    return True, "Egg production record deleted successfully."
