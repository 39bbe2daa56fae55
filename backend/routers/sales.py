from datetime import date
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from database import get_db
from models.sales import SaleStatus
from schemas.sales import Sale, SaleCreate, SaleUpdate
from schemas.session import CurrentUser
from crud import sales as crud_sales
from utils.auth_utils import get_current_user, get_user_identifier

router = APIRouter(prefix="/sales", tags=["Sales"], dependencies=[Depends(get_current_user)])
logger = logging.getLogger(__name__)


@router.post("/", response_model=Sale, status_code=status.HTTP_201_CREATED)
def create_sale(
    sale: SaleCreate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Record an egg sale. The total is always egg_count * price_per_unit."""
    db_sale = crud_sales.create_sale(db=db, user=user, sale=sale)
    logger.info(
        "Sale %d of %d eggs (total %s) created by user %s",
        db_sale.id, db_sale.egg_count, db_sale.total, get_user_identifier(user),
    )
    return db_sale


@router.get("/", response_model=List[Sale])
def read_sales(
    status: Optional[SaleStatus] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    skip: int = 0,
    limit: Optional[int] = None,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    return crud_sales.get_sales(
        db=db, user=user, status=status, start_date=start_date, end_date=end_date, skip=skip, limit=limit
    )


@router.get("/{sale_id}", response_model=Sale)
def read_sale(sale_id: int, db: Session = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    db_sale = crud_sales.get_sale(db=db, user=user, sale_id=sale_id)
    if db_sale is None:
        raise HTTPException(status_code=404, detail="Sale not found")
    return db_sale


@router.patch("/{sale_id}", response_model=Sale)
def update_sale(
    sale_id: int,
    sale: SaleUpdate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    db_sale = crud_sales.update_sale(db=db, user=user, sale_id=sale_id, sale=sale)
    if db_sale is None:
        raise HTTPException(status_code=404, detail="Sale not found")
    logger.info("Sale %d updated by user %s", sale_id, get_user_identifier(user))
    return db_sale


@router.delete("/{sale_id}", status_code=status.HTTP_200_OK)
def delete_sale(sale_id: int, db: Session = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    success, message = crud_sales.delete_sale(db=db, user=user, sale_id=sale_id)
    if not success:
        raise HTTPException(status_code=404, detail=message)
    logger.info("Sale %d deleted by user %s", sale_id, get_user_identifier(user))
    return {"message": message}
