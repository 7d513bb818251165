
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from opportunities.db.session import get_db
from opportunities.api.deps import get_current_admin_user
from opportunities.models.user import User
from opportunities.schemas.social import Report as ReportSchema
from opportunities.services import social

router = APIRouter(prefix="/admin/reports", tags=["Admin - Reports"])


@router.get("", response_model=List[ReportSchema])
def list_reports(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """Unresolved reports, newest first."""
    return social.list_open_reports(db)


@router.post("/{report_id}/resolve", response_model=ReportSchema)
def resolve_report(
    report_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    return social.resolve_report(db, report_id)
