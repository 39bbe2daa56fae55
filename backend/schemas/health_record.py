from pydantic import BaseModel, Field, field_validator
from datetime import date as date_type, datetime
from decimal import Decimal
from typing import Optional
from models.health_record import HealthRecordType


class HealthRecordBase(BaseModel):
    chicken_id: int
    date: date_type
    type: HealthRecordType
    description: str = Field(..., min_length=1)
    cost: Decimal = Field(..., ge=0, decimal_places=2)
    vet_name: Optional[str] = None


class HealthRecordCreate(HealthRecordBase):
    pass


class HealthRecordUpdate(BaseModel):
    chicken_id: Optional[int] = None
    date: Optional[date_type] = None
    type: Optional[HealthRecordType] = None
    description: Optional[str] = Field(None, min_length=1)
    cost: Optional[Decimal] = Field(None, ge=0, decimal_places=2)
    vet_name: Optional[str] = None

    @field_validator('chicken_id', 'date', 'type', 'description', 'cost')
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f'{info.field_name} cannot be null')
        return v


class HealthRecord(HealthRecordBase):
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
