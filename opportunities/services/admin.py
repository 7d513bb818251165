
from sqlalchemy.orm import Session

from opportunities.core.config import settings
from opportunities.services.listings import STORES


def pending_approvals(db: Session) -> dict:
    """Unapproved rows from every listing table, keyed by type."""
    return {store.admin_key: store.pending(db) for store in STORES.values()}


def live_listings(db: Session, limit: int = None) -> dict:
    """Approved rows from every listing table, each bucket capped."""
    limit = limit or settings.ADMIN_LIVE_LIMIT
    return {store.admin_key: store.live(db, limit) for store in STORES.values()}
