
from typing import Optional, List, Any, Literal
from datetime import datetime

from pydantic import Field

from opportunities.models.listing import ListingType
from opportunities.schemas.common import CamelModel


class ListingRef(CamelModel):
    listing_type: ListingType
    listing_id: int


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------


class ReviewCreate(ListingRef):
    title: str = Field(min_length=1, max_length=255)
    rating: int = Field(ge=1, le=5)
    content: Optional[str] = None


class ReviewUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    content: Optional[str] = None


class Review(CamelModel):
    id: int
    user_id: str
    listing_type: str
    listing_id: int
    title: str
    rating: int
    content: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Reviewer display fields, joined from users
    reviewer_nickname: Optional[str] = None
    reviewer_first_name: Optional[str] = None
    reviewer_last_name: Optional[str] = None
    reviewer_profile_image_url: Optional[str] = None


# ---------------------------------------------------------------------------
# Thumbs up / bookmarks
# ---------------------------------------------------------------------------


class ThumbsUpToggle(CamelModel):
    is_thumbed_up: bool


class ThumbsUpCount(CamelModel):
    count: int


class ThumbsUpStatus(CamelModel):
    has_thumbed_up: bool


class BookmarkToggle(CamelModel):
    is_bookmarked: bool


class Bookmark(CamelModel):
    id: int
    user_id: str
    listing_type: str
    listing_id: int
    created_at: Optional[datetime] = None
    listing: Optional[Any] = None


class BookmarkPage(CamelModel):
    items: List[Bookmark]
    total: int


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------


class ReportCreate(CamelModel):
    report_type: Literal["listing", "review"]
    item_type: ListingType
    item_id: int
    reason: Optional[str] = None
    description: Optional[str] = None


class Report(CamelModel):
    id: int
    user_id: str
    report_type: str
    item_type: str
    item_id: int
    reason: Optional[str] = None
    description: Optional[str] = None
    is_resolved: bool
    created_at: Optional[datetime] = None


# ---------------------------------------------------------------------------
# View tracking
# ---------------------------------------------------------------------------


class ViewTrackResult(CamelModel):
    tracked: bool
