from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_db
from schemas.reports import DashboardStats
from schemas.session import CurrentUser
from crud import dashboard as crud_dashboard
from utils.auth_utils import get_current_user

router = APIRouter(prefix="/dashboard", tags=["Dashboard"], dependencies=[Depends(get_current_user)])


@router.get("/", response_model=DashboardStats)
def get_dashboard(db: Session = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    """Headline numbers and the last seven days of production."""
    return crud_dashboard.get_dashboard_stats(db=db, user=user)
