
import logging

from sqlalchemy import update
from sqlalchemy.orm import Session

from opportunities.models.listing import LISTING_MODELS
from opportunities.models.user import User

logger = logging.getLogger(__name__)

CONTRIBUTOR_FIELDS = {
    "nickname": "contributor_nickname",
    "first_name": "contributor_first_name",
    "last_name": "contributor_last_name",
}


def update_profile(db: Session, user: User, data) -> User:
    """
    Apply a profile patch and keep the contributor display fields copied onto
    the user's listings in step with it. Both happen in one transaction.
    """
    changes = data.model_dump(exclude_unset=True)
    for field, value in changes.items():
        setattr(user, field, value)

    listing_changes = {
        column: changes[field]
        for field, column in CONTRIBUTOR_FIELDS.items()
        if field in changes
    }

    try:
        if listing_changes:
            for model in LISTING_MODELS:
                db.execute(
                    update(model)
                    .where(model.user_id == user.id)
                    .values(**listing_changes)
                    .execution_options(synchronize_session=False)
                )
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(user)
    if listing_changes:
        logger.info("Synced contributor fields for user %s", user.id)
    return user
