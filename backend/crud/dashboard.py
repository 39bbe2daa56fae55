from datetime import date
from typing import Optional
from sqlalchemy.orm import Session

import crud.chicken as crud_chicken
import crud.coop as crud_coop
import crud.egg_production as crud_egg_production
import crud.sales as crud_sales
from models.chicken import ChickenStatus
from models.sales import SaleStatus
from schemas.reports import DashboardStats
from schemas.session import CurrentUser
from utils.aggregation import bucket_by_date, sum_field
from utils.clock import farm_today
from utils.report_window import ReportWindow, window_bounds


def get_dashboard_stats(db: Session, user: CurrentUser, today: Optional[date] = None) -> DashboardStats:
    today = today or farm_today()

    active_chickens = crud_chicken.get_chickens(db, user, status=ChickenStatus.ACTIVE, limit=None)
    todays_eggs = crud_egg_production.get_egg_productions(db, user, start_date=today, limit=None)
    completed_sales = crud_sales.get_sales(db, user, status=SaleStatus.COMPLETED, limit=None)

    week_start, week_end = window_bounds(ReportWindow.SEVEN_DAY, today)
    week_eggs = crud_egg_production.get_egg_productions(
        db, user, start_date=week_start, end_date=week_end, limit=None
    )

    return DashboardStats(
        total_chickens=sum_field(active_chickens, "current_count"),
        today_eggs=sum_field(todays_eggs, "count"),
        total_coops=crud_coop.count_coops(db, user),
        total_sales=sum_field(completed_sales, "total"),
        week_production=bucket_by_date(week_eggs),
    )
