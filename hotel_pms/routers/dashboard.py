"""
Dashboard routes
"""
from fastapi import APIRouter, Depends
from hotel_pms.database import MemoryStore, get_store
from hotel_pms.models.schemas import DashboardMetrics
from hotel_pms.services.report_service import ReportService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/metrics", response_model=DashboardMetrics)
def get_dashboard_metrics(store: MemoryStore = Depends(get_store)):
    """Occupancy, today's revenue and the headline counts"""
    return DashboardMetrics(**ReportService(store).get_dashboard_metrics())
