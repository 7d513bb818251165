
import logging
from datetime import datetime, timezone

from sqlalchemy import desc, func
from sqlalchemy.orm import Session

from opportunities.core.config import settings
from opportunities.core.errors import NotFoundError, ForbiddenError, ConflictError
from opportunities.models.listing import ListingType
from opportunities.models.social import Review, ThumbsUp, Bookmark, Report
from opportunities.models.user import User
from opportunities.services.listings import store_for

logger = logging.getLogger(__name__)


def _require_listing(db: Session, listing_type, listing_id: int):
    store = store_for(listing_type)
    if not store.exists(db, listing_id):
        raise NotFoundError(f"{store.label} not found")
    return store


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------


def _with_reviewer(review, nickname, first_name, last_name, image_url):
    review.reviewer_nickname = nickname
    review.reviewer_first_name = first_name
    review.reviewer_last_name = last_name
    review.reviewer_profile_image_url = image_url
    return review


def _review_query(db: Session):
    return db.query(
        Review, User.nickname, User.first_name, User.last_name, User.profile_image_url,
    ).outerjoin(User, User.id == Review.user_id)


def list_reviews(db: Session, listing_type, listing_id: int):
    """Reviews on one listing, newest first, with reviewer display fields."""
    rows = (
        _review_query(db)
        .filter(
            Review.listing_type == ListingType(listing_type).value,
            Review.listing_id == listing_id,
        )
        .order_by(desc(Review.created_at), desc(Review.id))
        .all()
    )
    return [_with_reviewer(*row) for row in rows]


def get_review(db: Session, review_id: int):
    row = _review_query(db).filter(Review.id == review_id).first()
    if row is None:
        raise NotFoundError("Review not found")
    return _with_reviewer(*row)


def create_review(db: Session, user: User, data):
    """
    Rules:
    - The listing must exist.
    - One review per user per listing (409 if already reviewed).
    """
    listing_type = ListingType(data.listing_type).value
    _require_listing(db, listing_type, data.listing_id)

    existing = db.query(Review.id).filter(
        Review.user_id == user.id,
        Review.listing_type == listing_type,
        Review.listing_id == data.listing_id,
    ).first()
    if existing:
        raise ConflictError("You have already reviewed this listing")

    review = Review(
        user_id=user.id,
        listing_type=listing_type,
        listing_id=data.listing_id,
        title=data.title,
        rating=data.rating,
        content=data.content,
    )
    db.add(review)
    db.commit()
    db.refresh(review)
    return get_review(db, review.id)


def update_review(db: Session, user: User, review_id: int, data):
    review = db.query(Review).filter(Review.id == review_id).first()
    if not review:
        raise NotFoundError("Review not found")
    if review.user_id != user.id:
        raise ForbiddenError("You can only edit your own reviews")

    for field, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(review, field, value)
    review.updated_at = datetime.now(timezone.utc)
    db.commit()
    return get_review(db, review_id)


def delete_review(db: Session, user: User, review_id: int) -> None:
    """Owners delete their own reviews; admins delete any."""
    review = db.query(Review).filter(Review.id == review_id).first()
    if not review:
        raise NotFoundError("Review not found")
    if review.user_id != user.id and user.role != "admin":
        raise ForbiddenError("You can only delete your own reviews")

    # Moderation reports filed against the review go with it
    db.query(Report).filter(
        Report.report_type == "review", Report.item_id == review_id,
    ).delete(synchronize_session=False)
    db.delete(review)
    db.commit()


# ---------------------------------------------------------------------------
# Toggles
# ---------------------------------------------------------------------------


def _toggle(db: Session, model, user: User, listing_type, listing_id: int) -> bool:
    """Delete the (user, listing) row if present, else insert it. Returns the new state."""
    listing_type = ListingType(listing_type).value
    _require_listing(db, listing_type, listing_id)

    row = db.query(model).filter(
        model.user_id == user.id,
        model.listing_type == listing_type,
        model.listing_id == listing_id,
    ).first()
    if row:
        db.delete(row)
        db.commit()
        return False

    db.add(model(user_id=user.id, listing_type=listing_type, listing_id=listing_id))
    db.commit()
    return True


def _has_row(db: Session, model, user: User, listing_type, listing_id: int) -> bool:
    return db.query(model.id).filter(
        model.user_id == user.id,
        model.listing_type == ListingType(listing_type).value,
        model.listing_id == listing_id,
    ).first() is not None


def toggle_thumbs_up(db: Session, user: User, listing_type, listing_id: int) -> bool:
    return _toggle(db, ThumbsUp, user, listing_type, listing_id)


def count_thumbs_up(db: Session, listing_type, listing_id: int) -> int:
    return db.query(func.count(ThumbsUp.id)).filter(
        ThumbsUp.listing_type == ListingType(listing_type).value,
        ThumbsUp.listing_id == listing_id,
    ).scalar() or 0


def has_thumbed_up(db: Session, user: User, listing_type, listing_id: int) -> bool:
    return _has_row(db, ThumbsUp, user, listing_type, listing_id)


def toggle_bookmark(db: Session, user: User, listing_type, listing_id: int) -> bool:
    return _toggle(db, Bookmark, user, listing_type, listing_id)


def is_bookmarked(db: Session, user: User, listing_type, listing_id: int) -> bool:
    return _has_row(db, Bookmark, user, listing_type, listing_id)


def list_bookmarks(db: Session, user: User, limit: int = None, offset: int = 0):
    """
    A page of the user's bookmarks, newest first, each carrying its listing.

    Bookmarks whose listing no longer exists are skipped, so a page can hold
    fewer than `limit` items. `total` counts every bookmark row.
    """
    if limit is None or limit < 1:
        limit = settings.DEFAULT_PAGE_SIZE
    limit = min(limit, settings.MAX_PAGE_SIZE)
    offset = max(offset or 0, 0)

    query = db.query(Bookmark).filter(Bookmark.user_id == user.id)
    total = query.count()
    bookmarks = (
        query.order_by(desc(Bookmark.created_at), desc(Bookmark.id))
        .offset(offset)
        .limit(limit)
        .all()
    )

    items = []
    for bookmark in bookmarks:
        try:
            store = store_for(bookmark.listing_type)
        except ValueError:
            logger.warning("Bookmark %s has unknown listing type %r", bookmark.id, bookmark.listing_type)
            continue
        listing = store.get(db, bookmark.listing_id)
        if listing is None:
            continue
        bookmark.listing = store.serialize(listing)
        items.append(bookmark)
    return items, total


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------


def create_report(db: Session, user: User, data) -> Report:
    item_type = ListingType(data.item_type).value
    if data.report_type == "listing":
        _require_listing(db, item_type, data.item_id)
    elif not db.query(Review.id).filter(Review.id == data.item_id).first():
        raise NotFoundError("Review not found")

    report = Report(
        user_id=user.id,
        report_type=data.report_type,
        item_type=item_type,
        item_id=data.item_id,
        reason=data.reason,
        description=data.description,
        is_resolved=False,
    )
    db.add(report)
    db.commit()
    db.refresh(report)
    logger.info("Report %s filed against %s %s", report.id, data.report_type, data.item_id)
    return report


def list_open_reports(db: Session):
    return (
        db.query(Report)
        .filter(Report.is_resolved == False)
        .order_by(desc(Report.created_at), desc(Report.id))
        .all()
    )


def resolve_report(db: Session, report_id: int) -> Report:
    report = db.query(Report).filter(Report.id == report_id).first()
    if not report:
        raise NotFoundError("Report not found")
    report.is_resolved = True
    db.commit()
    db.refresh(report)
    return report
