from datetime import date
from decimal import Decimal
from typing import Optional
from sqlalchemy.orm import Session
from models.sales import Sale, SaleStatus
from schemas.sales import SaleCreate, SaleUpdate
from schemas.session import CurrentUser


def calculate_total(egg_count: int, price_per_unit) -> Decimal:
    return Decimal(egg_count) * Decimal(str(price_per_unit))


def get_sale(db: Session, user: CurrentUser, sale_id: int):
    return db.query(Sale).filter(Sale.id == sale_id, Sale.user_id == user.id).first()


def get_sales(
    db: Session,
    user: CurrentUser,
    status: Optional[SaleStatus] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    skip: int = 0,
    limit: Optional[int] = 100,
):
    query = db.query(Sale).filter(Sale.user_id == user.id)
    if status:
        query = query.filter(Sale.status == status)
    if start_date is not None:
        query = query.filter(Sale.date >= start_date)
    if end_date is not None:
        query = query.filter(Sale.date <= end_date)
    query = query.order_by(Sale.date.desc(), Sale.id.desc()).offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def create_sale(db: Session, user: CurrentUser, sale: SaleCreate):
    db_sale = Sale(
        **sale.model_dump(),
        user_id=user.id,
        total=calculate_total(sale.egg_count, sale.price_per_unit),
    )
    db.add(db_sale)
    db.commit()
    db.refresh(db_sale)
    return db_sale


def update_sale(db: Session, user: CurrentUser, sale_id: int, sale: SaleUpdate):
    db_sale = get_sale(db, user, sale_id)
    if db_sale:
        for key, value in sale.model_dump(exclude_unset=True).items():
            setattr(db_sale, key, value)
        # Recomputed on every write from whichever factors are now stored
        db_sale.total = calculate_total(db_sale.egg_count, db_sale.price_per_unit)
        db.commit()
        db.refresh(db_sale)
    return db_sale


def delete_sale(db: Session, user: CurrentUser, sale_id: int):
    db_sale = get_sale(db, user, sale_id)
    if not db_sale:
        return False, "Sale not found."
    db.delete(db_sale)
    db.commit()
    return True, "Sale deleted successfully."
