from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from donorhub.database import get_db
from donorhub.schemas.statistics import DashboardStatistics
from donorhub.services.dashboard_service import get_dashboard_statistics
from donorhub.utils.response import create_response, handle_exception

router = APIRouter(tags=["Statistics"])


@router.get("/dashboard-statistics")
def dashboard_statistics(db: Session = Depends(get_db)):
    try:
        totals = DashboardStatistics(**get_dashboard_statistics(db))
        return create_response(
            message="Dashboard statistics fetched",
            data=totals.model_dump(by_alias=True),
        )
    except Exception as exc:
        return handle_exception(exc, "Failed to fetch dashboard statistics")
