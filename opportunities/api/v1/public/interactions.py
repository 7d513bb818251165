
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from opportunities.db.session import get_db
from opportunities.api.deps import get_current_user
from opportunities.models.listing import ListingType
from opportunities.models.user import User
from opportunities.schemas.social import (
    ListingRef,
    ThumbsUpToggle,
    ThumbsUpCount,
    ThumbsUpStatus,
    BookmarkToggle,
    BookmarkPage,
)
from opportunities.services import social
from opportunities.utils.query import parse_int

thumbs_up_router = APIRouter(prefix="/thumbs-up", tags=["Thumbs up"])
bookmarks_router = APIRouter(prefix="/bookmarks", tags=["Bookmarks"])


# ---------------------------------------------------------------------------
# Thumbs up
# ---------------------------------------------------------------------------


@thumbs_up_router.post("", response_model=ThumbsUpToggle)
def toggle_thumbs_up(
    data: ListingRef,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Add the caller's thumbs-up, or remove it if already there."""
    state = social.toggle_thumbs_up(db, current_user, data.listing_type, data.listing_id)
    return ThumbsUpToggle(is_thumbed_up=state)


@thumbs_up_router.get("/{listing_type}/{listing_id}", response_model=ThumbsUpCount)
def thumbs_up_count(listing_type: ListingType, listing_id: int, db: Session = Depends(get_db)):
    return ThumbsUpCount(count=social.count_thumbs_up(db, listing_type, listing_id))


@thumbs_up_router.get("/{listing_type}/{listing_id}/user", response_model=ThumbsUpStatus)
def thumbs_up_status(
    listing_type: ListingType,
    listing_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return ThumbsUpStatus(has_thumbed_up=social.has_thumbed_up(db, current_user, listing_type, listing_id))


# ---------------------------------------------------------------------------
# Bookmarks
# ---------------------------------------------------------------------------


@bookmarks_router.post("", response_model=BookmarkToggle)
def toggle_bookmark(
    data: ListingRef,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    state = social.toggle_bookmark(db, current_user, data.listing_type, data.listing_id)
    return BookmarkToggle(is_bookmarked=state)


@bookmarks_router.get("", response_model=BookmarkPage)
def list_bookmarks(
    limit: Optional[str] = Query(None),
    offset: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """The caller's bookmarks, newest first, each with its listing attached."""
    items, total = social.list_bookmarks(
        db, current_user, limit=parse_int(limit) if limit else None, offset=parse_int(offset) if offset else 0,
    )
    return {"items": items, "total": total}


@bookmarks_router.get("/{listing_type}/{listing_id}/user", response_model=BookmarkToggle)
def bookmark_status(
    listing_type: ListingType,
    listing_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return BookmarkToggle(is_bookmarked=social.is_bookmarked(db, current_user, listing_type, listing_id))
