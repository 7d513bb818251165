
from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy import func, select

from opportunities.models.social import Review, ThumbsUp


def thumbs_up_count(model):
    return (
        select(func.count(ThumbsUp.id))
        .where(
            ThumbsUp.listing_type == model.LISTING_TYPE.value,
            ThumbsUp.listing_id == model.id,
        )
        .correlate(model)
        .scalar_subquery()
    )


def review_count(model):
    return (
        select(func.count(Review.id))
        .where(
            Review.listing_type == model.LISTING_TYPE.value,
            Review.listing_id == model.id,
        )
        .correlate(model)
        .scalar_subquery()
    )


def average_rating(model):
    # Unrated rows sort as 0
    return (
        select(func.coalesce(func.avg(Review.rating), 0))
        .where(
            Review.listing_type == model.LISTING_TYPE.value,
            Review.listing_id == model.id,
        )
        .correlate(model)
        .scalar_subquery()
    )


def aggregate_columns(model):
    """Labeled per-row aggregates to select alongside a listing entity."""
    return (
        thumbs_up_count(model).label("thumbs_up_count"),
        average_rating(model).label("average_rating"),
        review_count(model).label("review_count"),
    )


def round_rating(value) -> float:
    """Round a mean rating half-up to one decimal place; 0.0 when unrated."""
    if value is None:
        return 0.0
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def decorate(rows):
    """
    Attach the computed aggregates to each listing instance.

    `rows` are `(listing, thumbs_up_count, average_rating, review_count)`
    tuples as produced by selecting `aggregate_columns()` next to the entity.
    """
    items = []
    for listing, thumbs, rating, reviews in rows:
        listing.thumbs_up_count = thumbs or 0
        listing.average_rating = round_rating(rating)
        listing.review_count = reviews or 0
        items.append(listing)
    return items
