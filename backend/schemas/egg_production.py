from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import date as date_type, datetime
from decimal import Decimal
from models.egg_production import EggGrade


class EggProductionBase(BaseModel):
    chicken_id: int
    date: date_type
    count: int = Field(..., ge=0)
    weight: Optional[Decimal] = Field(None, ge=0, decimal_places=3)
    quality: EggGrade = EggGrade.A
    notes: Optional[str] = None


class EggProductionCreate(EggProductionBase):
    pass


class EggProductionUpdate(BaseModel):
    chicken_id: Optional[int] = None
    date: Optional[date_type] = None
    count: Optional[int] = Field(None, ge=0)
    weight: Optional[Decimal] = Field(None, ge=0, decimal_places=3)
    quality: Optional[EggGrade] = None
    notes: Optional[str] = None

    @field_validator('chicken_id', 'date', 'count', 'quality')
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f'{info.field_name} cannot be null')
        return v


class EggProduction(EggProductionBase):
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
