from datetime import date
from typing import Optional
from sqlalchemy.orm import Session

import crud.egg_production as crud_egg_production
import crud.feed as crud_feed
import crud.health_record as crud_health_record
import crud.sales as crud_sales
from models.sales import SaleStatus
from schemas.reports import ReportSummary
from schemas.session import CurrentUser
from utils.aggregation import bucket_by_date, compute_profit, grade_distribution, sum_field
from utils.report_window import ReportWindow, window_bounds


def get_report_summary(db: Session, user: CurrentUser, window: ReportWindow, today: Optional[date] = None) -> ReportSummary:
    """
    Totals, profit and chart series for one report window.

    Only rows dated inside the window are counted, and only completed sales
    contribute revenue.
    """
    start_date, end_date = window_bounds(window, today)

    eggs = crud_egg_production.get_egg_productions(
        db, user, start_date=start_date, end_date=end_date, limit=None
    )
    sales = crud_sales.get_sales(
        db, user, status=SaleStatus.COMPLETED, start_date=start_date, end_date=end_date, limit=None
    )
    feeds = crud_feed.get_feeds(db, user, start_date=start_date, end_date=end_date, limit=None)
    health_records = crud_health_record.get_health_records(
        db, user, start_date=start_date, end_date=end_date, limit=None
    )

    total_sales = sum_field(sales, "total")
    total_feed_cost = sum_field(feeds, "cost")
    total_health_cost = sum_field(health_records, "cost")

    return ReportSummary(
        window=window,
        start_date=start_date,
        end_date=end_date,
        total_eggs=sum_field(eggs, "count"),
        total_sales=total_sales,
        total_feed_cost=total_feed_cost,
        total_health_cost=total_health_cost,
        profit=compute_profit(total_sales, total_feed_cost, total_health_cost),
        egg_production=bucket_by_date(eggs),
        eggs_by_grade=grade_distribution(eggs),
    )
