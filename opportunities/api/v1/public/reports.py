
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from opportunities.db.session import get_db
from opportunities.api.deps import get_current_user
from opportunities.models.user import User
from opportunities.schemas.social import ReportCreate, Report as ReportSchema
from opportunities.services import social

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.post("", response_model=ReportSchema, status_code=status.HTTP_201_CREATED)
def file_report(
    data: ReportCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Flag a listing or a review for moderation."""
    return social.create_report(db, current_user, data)
