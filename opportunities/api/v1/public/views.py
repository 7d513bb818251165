
from typing import Optional

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from opportunities.db.session import get_db
from opportunities.api.deps import get_optional_user
from opportunities.models.user import User
from opportunities.schemas.social import ListingRef, ViewTrackResult
from opportunities.services.views import track_view, tracking_identity

router = APIRouter(prefix="/views", tags=["Views"])


def client_ip(request: Request) -> Optional[str]:
    # Forwarded headers are applied by uvicorn (--proxy-headers) for trusted proxies only
    return request.client.host if request.client else None


@router.post("/track", response_model=ViewTrackResult)
def track(
    data: ListingRef,
    request: Request,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user),
):
    """
    Record a detail view. Counted at most once per visitor per listing inside
    the rate-limit window; `tracked` says whether this one counted.
    """
    identity = tracking_identity(current_user, client_ip(request))
    return ViewTrackResult(tracked=track_view(db, identity, data.listing_type, data.listing_id))
