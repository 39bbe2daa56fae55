from pydantic import BaseModel, Field, field_validator
from datetime import date as date_type, datetime
from decimal import Decimal
from typing import Optional
from models.sales import SaleStatus


class SaleBase(BaseModel):
    date: date_type
    egg_count: int = Field(..., ge=0)
    price_per_unit: Decimal = Field(..., ge=0, decimal_places=2)
    customer: Optional[str] = None
    status: SaleStatus = SaleStatus.PENDING


class SaleCreate(SaleBase):
    """Any client-supplied total is ignored; it is always egg_count * price_per_unit."""
    pass


class SaleUpdate(BaseModel):
    date: Optional[date_type] = None
    egg_count: Optional[int] = Field(None, ge=0)
    price_per_unit: Optional[Decimal] = Field(None, ge=0, decimal_places=2)
    customer: Optional[str] = None
    status: Optional[SaleStatus] = None

    @field_validator('date', 'egg_count', 'price_per_unit', 'status')
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f'{info.field_name} cannot be null')
        return v


class Sale(SaleBase):
    id: int
    user_id: str
    total: Decimal
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
