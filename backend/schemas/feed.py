from pydantic import BaseModel, Field, field_validator
from datetime import date as date_type, datetime
from decimal import Decimal
from typing import Optional


class FeedBase(BaseModel):
    coop_id: int
    date: date_type
    type: str = Field(..., min_length=1)
    quantity_kg: Decimal = Field(..., ge=0, decimal_places=3)
    cost: Decimal = Field(..., ge=0, decimal_places=2)
    notes: Optional[str] = None


class FeedCreate(FeedBase):
    pass


class FeedUpdate(BaseModel):
    coop_id: Optional[int] = None
    date: Optional[date_type] = None
    type: Optional[str] = Field(None, min_length=1)
    quantity_kg: Optional[Decimal] = Field(None, ge=0, decimal_places=3)
    cost: Optional[Decimal] = Field(None, ge=0, decimal_places=2)
    notes: Optional[str] = None

    @field_validator('coop_id', 'date', 'type', 'quantity_kg', 'cost')
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f'{info.field_name} cannot be null')
        return v


class Feed(FeedBase):
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
