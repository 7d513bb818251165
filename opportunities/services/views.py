
import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy import update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from opportunities.core.config import settings
from opportunities.models.listing import ListingType
from opportunities.models.social import ViewTracking
from opportunities.services.listings import store_for

logger = logging.getLogger(__name__)


def tracking_identity(user=None, client_ip: str = None) -> str:
    if user is not None:
        return str(user.id)
    return f"anon_{client_ip or 'unknown'}"


def track_view(db: Session, tracking_id: str, listing_type, listing_id: int, now: datetime = None) -> bool:
    """
    Count one view of a listing for `tracking_id`, at most once per window.

    The tracking row is written by a single conditional upsert that only
    touches an existing row when its last view is at least a window old, so
    a returned id means "this view counts". The view_count increment runs in
    the same transaction. Never raises: failures are logged and reported as
    not tracked.
    """
    now = now or datetime.now(timezone.utc)
    cutoff = now - timedelta(minutes=settings.VIEW_RATE_LIMIT_MINUTES)

    try:
        listing_type = ListingType(listing_type)
        model = store_for(listing_type).model

        insert = pg_insert if db.get_bind().dialect.name == "postgresql" else sqlite_insert
        stmt = insert(ViewTracking).values(
            tracking_id=tracking_id,
            listing_type=listing_type.value,
            listing_id=listing_id,
            last_viewed_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["tracking_id", "listing_type", "listing_id"],
            set_={"last_viewed_at": stmt.excluded.last_viewed_at},
            where=ViewTracking.last_viewed_at <= cutoff,
        ).returning(ViewTracking.id)

        if db.execute(stmt).first() is None:
            db.rollback()
            return False

        result = db.execute(
            update(model)
            .where(model.id == listing_id)
            .values(view_count=model.view_count + 1)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            db.rollback()
            return False

        db.commit()
        return True
    except Exception:
        db.rollback()
        logger.exception("View tracking failed for %s %s", listing_type, listing_id)
        return False
