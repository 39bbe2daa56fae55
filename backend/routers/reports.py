from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session
import logging

from database import get_db
from schemas.reports import ReportSummary
from schemas.session import CurrentUser
from crud import reports as crud_reports
from utils.auth_utils import get_current_user, get_user_identifier
from utils.report_export import write_report_workbook
from utils.report_window import ReportWindow

router = APIRouter(prefix="/reports", tags=["Reports"], dependencies=[Depends(get_current_user)])
logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.get("/summary", response_model=ReportSummary)
def get_report_summary(
    window: ReportWindow = ReportWindow.THIRTY_DAY,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Totals, profit, daily production and grade split for a reporting window."""
    return crud_reports.get_report_summary(db=db, user=user, window=window)


@router.get("/export")
def export_report(
    window: ReportWindow = ReportWindow.THIRTY_DAY,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Download the report summary as an Excel workbook."""
    summary = crud_reports.get_report_summary(db=db, user=user, window=window)
    output = write_report_workbook(summary)
    filename = f"farm_report_{window.value}_{summary.end_date.isoformat()}.xlsx"
    logger.info("Report export (%s) generated for user %s", window.value, get_user_identifier(user))
    return StreamingResponse(
        output,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
