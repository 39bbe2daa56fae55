from pydantic import BaseModel, computed_field
from datetime import date
from decimal import Decimal
from typing import List
from utils.report_window import ReportWindow


class DailyEggCount(BaseModel):
    date: date
    count: int


class GradeCount(BaseModel):
    grade: str
    count: int


class ReportSummary(BaseModel):
    window: ReportWindow
    start_date: date
    end_date: date
    total_eggs: int
    total_sales: Decimal
    total_feed_cost: Decimal
    total_health_cost: Decimal
    profit: Decimal
    egg_production: List[DailyEggCount] = []
    eggs_by_grade: List[GradeCount] = []

    @computed_field
    @property
    def total_cost(self) -> Decimal:
        return self.total_feed_cost + self.total_health_cost


class DashboardStats(BaseModel):
    total_chickens: int
    today_eggs: int
    total_coops: int
    total_sales: Decimal
    week_production: List[DailyEggCount] = []

    # Empty-state rendering decisions for the client
    @computed_field
    @property
    def has_coops(self) -> bool:
        return self.total_coops > 0

    @computed_field
    @property
    def has_production(self) -> bool:
        return len(self.week_production) > 0
