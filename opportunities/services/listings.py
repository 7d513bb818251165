
import logging
from datetime import datetime, timezone
from typing import Optional, List, Tuple

from sqlalchemy import or_, asc, desc, select
from sqlalchemy.orm import Session

from opportunities.core.config import settings
from opportunities.db.types import array_overlap
from opportunities.models.listing import (
    ListingType, TutoringProvider, SummerCamp, Internship, Job, Service, Event,
)
from opportunities.models.social import Review, ThumbsUp, Bookmark, Report, ViewTracking
from opportunities.services.aggregates import (
    aggregate_columns, decorate, thumbs_up_count, average_rating,
)
from opportunities import schemas
from opportunities.schemas import filters as listing_filters

logger = logging.getLogger(__name__)

# Never writable through a patch
PROTECTED_FIELDS = {"id", "submitted_at", "approved_at", "created_at", "updated_at", "view_count"}


class ListingStore:
    """
    Data access for one listing table.

    Subclasses bind the model and schemas and declare which filters map to
    array-overlap, `IN` or exact-flag predicates; anything that does not fit
    those shapes goes in an override of `filter_clauses`.
    """

    model = None
    listing_type: ListingType = None
    route_slug: str = None
    admin_slugs: Tuple[str, ...] = ()
    admin_key: str = None
    label: str = "Listing"

    create_schema = None
    update_schema = None
    out_schema = None
    filter_schema = listing_filters.ListingFilters

    search_columns: Tuple[str, ...] = ("description",)
    admin_search_columns: Tuple[str, ...] = ("description", "city", "state")

    # filter attribute -> column
    array_filters: dict = {}
    in_filters: dict = {}
    flag_filters: Tuple[str, ...] = ()
    # sortBy key -> column
    sort_columns: dict = {}

    # ------------------------------------------------------------------
    # Query building
    # ------------------------------------------------------------------

    def visible_clauses(self):
        return [self.model.is_approved == True, self.model.is_active == True]

    def filter_clauses(self, db: Session, filters) -> list:
        m = self.model
        clauses = []

        if filters.search:
            term = f"%{filters.search}%"
            clauses.append(or_(*[getattr(m, name).ilike(term) for name in self.search_columns]))
        if filters.city:
            clauses.append(m.city.ilike(f"%{filters.city}%"))
        if filters.state:
            clauses.append(m.state == filters.state)

        dialect = db.get_bind().dialect.name
        for attr, column in self.array_filters.items():
            values = getattr(filters, attr, None)
            if values:
                clauses.append(array_overlap(getattr(m, column), values, dialect))
        for attr, column in self.in_filters.items():
            values = getattr(filters, attr, None)
            if values:
                clauses.append(getattr(m, column).in_(values))
        for attr in self.flag_filters:
            value = getattr(filters, attr, None)
            if value is not None:
                clauses.append(getattr(m, attr) == value)

        minimum_age = getattr(filters, "minimum_age", None)
        if minimum_age is not None and hasattr(m, "minimum_age"):
            clauses.append(m.minimum_age <= minimum_age)

        return clauses

    def sort_expression(self, key: Optional[str]):
        m = self.model
        common = {
            "createdAt": m.created_at,
            "viewCount": m.view_count,
            "thumbsUp": thumbs_up_count(m),
            "rating": average_rating(m),
        }
        if key in common:
            return common[key]
        if key in self.sort_columns:
            return getattr(m, self.sort_columns[key])
        return None

    def order_by(self, filters) -> list:
        expression = self.sort_expression(filters.sort_by)
        if expression is None:
            return [desc(self.model.created_at), desc(self.model.id)]
        direction = asc if filters.sort_order == "asc" else desc
        return [direction(expression), direction(self.model.id)]

    def _page(self, filters) -> Tuple[int, int]:
        limit = filters.limit
        if limit is None or limit < 1:
            limit = settings.DEFAULT_PAGE_SIZE
        limit = min(limit, settings.MAX_PAGE_SIZE)
        offset = filters.offset if filters.offset and filters.offset > 0 else 0
        return limit, offset

    def _with_aggregates(self, db: Session):
        return db.query(self.model, *aggregate_columns(self.model))

    # ------------------------------------------------------------------
    # Public reads
    # ------------------------------------------------------------------

    def list(self, db: Session, filters=None):
        """Approved, active rows matching `filters`, plus the unpaged total."""
        filters = filters or self.filter_schema()
        clauses = self.visible_clauses() + self.filter_clauses(db, filters)

        total = db.query(self.model).filter(*clauses).count()

        limit, offset = self._page(filters)
        rows = (
            self._with_aggregates(db)
            .filter(*clauses)
            .order_by(*self.order_by(filters))
            .offset(offset)
            .limit(limit)
            .all()
        )
        return decorate(rows), total

    def get(self, db: Session, listing_id: int):
        row = self._with_aggregates(db).filter(self.model.id == listing_id).first()
        if row is None:
            return None
        return decorate([row])[0]

    def exists(self, db: Session, listing_id: int) -> bool:
        return db.query(self.model.id).filter(self.model.id == listing_id).first() is not None

    def serialize(self, listing) -> dict:
        return self.out_schema.model_validate(listing).model_dump(by_alias=True, mode="json")

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, db: Session, data, contributor=None):
        values = data.model_dump() if hasattr(data, "model_dump") else dict(data)
        listing = self.model(**values)
        listing.is_approved = False
        listing.is_active = True
        listing.submitted_at = datetime.now(timezone.utc)
        listing.view_count = 0

        if contributor is not None:
            listing.user_id = contributor.id
            listing.contributor_nickname = contributor.nickname
            listing.contributor_first_name = contributor.first_name
            listing.contributor_last_name = contributor.last_name

        db.add(listing)
        db.commit()
        db.refresh(listing)
        logger.info("Created %s %s (pending approval)", self.listing_type.value, listing.id)
        return self.get(db, listing.id)

    def _load(self, db: Session, listing_id: int):
        return db.query(self.model).filter(self.model.id == listing_id).first()

    def update(self, db: Session, listing_id: int, patch: dict):
        listing = self._load(db, listing_id)
        if listing is None:
            return None

        for field, value in patch.items():
            if field in PROTECTED_FIELDS or not hasattr(self.model, field):
                continue
            column = self.model.__table__.columns.get(field)
            if value is None and column is not None and not column.nullable:
                continue
            setattr(listing, field, value)

        if patch.get("is_approved") and listing.approved_at is None:
            listing.approved_at = datetime.now(timezone.utc)
        listing.updated_at = datetime.now(timezone.utc)

        db.commit()
        return self.get(db, listing_id)

    def approve(self, db: Session, listing_id: int):
        listing = self._load(db, listing_id)
        if listing is None:
            return None
        now = datetime.now(timezone.utc)
        listing.is_approved = True
        listing.approved_at = now
        listing.updated_at = now
        db.commit()
        return self.get(db, listing_id)

    def _set_active(self, db: Session, listing_id: int, active: bool):
        listing = self._load(db, listing_id)
        if listing is None:
            return None
        listing.is_active = active
        listing.updated_at = datetime.now(timezone.utc)
        db.commit()
        return self.get(db, listing_id)

    def deactivate(self, db: Session, listing_id: int):
        return self._set_active(db, listing_id, False)

    def activate(self, db: Session, listing_id: int):
        return self._set_active(db, listing_id, True)

    def purge(self, db: Session, listing_id: int) -> bool:
        """
        Hard-delete a listing together with everything that references it:
        reviews (and reports filed against them), thumbs-up, bookmarks,
        view-tracking rows and reports filed against the listing.
        """
        listing = self._load(db, listing_id)
        if listing is None:
            return False

        listing_type = self.listing_type.value
        review_ids = select(Review.id).where(
            Review.listing_type == listing_type,
            Review.listing_id == listing_id,
        )

        try:
            db.query(Report).filter(
                Report.report_type == "review",
                Report.item_id.in_(review_ids),
            ).delete(synchronize_session=False)
            db.query(Report).filter(
                Report.report_type == "listing",
                Report.item_type == listing_type,
                Report.item_id == listing_id,
            ).delete(synchronize_session=False)
            for model in (Review, ThumbsUp, Bookmark, ViewTracking):
                db.query(model).filter(
                    model.listing_type == listing_type,
                    model.listing_id == listing_id,
                ).delete(synchronize_session=False)
            db.delete(listing)
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info("Purged %s %s and its dependents", listing_type, listing_id)
        return True

    # ------------------------------------------------------------------
    # Admin reads
    # ------------------------------------------------------------------

    def pending(self, db: Session) -> List:
        rows = (
            self._with_aggregates(db)
            .filter(self.model.is_approved == False)
            .order_by(desc(self.model.submitted_at), desc(self.model.id))
            .all()
        )
        return decorate(rows)

    def live(self, db: Session, limit: int = None) -> List:
        rows = (
            self._with_aggregates(db)
            .filter(self.model.is_approved == True)
            .order_by(desc(self.model.approved_at), desc(self.model.id))
            .limit(limit or settings.ADMIN_LIVE_LIMIT)
            .all()
        )
        return decorate(rows)

    def search(self, db: Session, query: str, limit: int = None) -> List:
        if not query or not query.strip():
            return []
        term = f"%{query.strip()}%"
        rows = (
            self._with_aggregates(db)
            .filter(
                self.model.is_approved == True,
                or_(*[getattr(self.model, name).ilike(term) for name in self.admin_search_columns]),
            )
            .order_by(desc(self.model.created_at), desc(self.model.id))
            .limit(limit or settings.ADMIN_SEARCH_LIMIT)
            .all()
        )
        return decorate(rows)


# ---------------------------------------------------------------------------
# Per-type stores
# ---------------------------------------------------------------------------


class TutoringProviderStore(ListingStore):
    model = TutoringProvider
    listing_type = ListingType.tutoring
    route_slug = "tutoring-providers"
    admin_slugs = ("tutoring-provider", "tutoring-providers", "tutoring")
    admin_key = "tutoring_providers"
    label = "Tutoring provider"

    create_schema = schemas.TutoringProviderCreate
    update_schema = schemas.TutoringProviderUpdate
    out_schema = schemas.TutoringProvider
    filter_schema = listing_filters.TutoringProviderFilters

    search_columns = ("name", "description")
    admin_search_columns = ("name", "description", "city", "state")
    array_filters = {"categories": "categories", "subjects": "subjects", "delivery_mode": "delivery_mode"}
    sort_columns = {"name": "name"}

    def filter_clauses(self, db, filters):
        clauses = super().filter_clauses(db, filters)
        if filters.type:
            clauses.append(self.model.type == filters.type)
        return clauses


class SummerCampStore(ListingStore):
    model = SummerCamp
    listing_type = ListingType.camp
    route_slug = "summer-camps"
    admin_slugs = ("summer-camp", "summer-camps", "camp")
    admin_key = "summer_camps"
    label = "Summer camp"

    create_schema = schemas.SummerCampCreate
    update_schema = schemas.SummerCampUpdate
    out_schema = schemas.SummerCamp
    filter_schema = listing_filters.SummerCampFilters

    search_columns = ("name", "description")
    admin_search_columns = ("name", "description", "city", "state")
    array_filters = {"categories": "categories", "tags": "tags"}
    in_filters = {"selectivity_level": "selectivity_level", "cost": "cost_range"}
    flag_filters = ("has_scholarship", "application_available")
    sort_columns = {
        "name": "name",
        "applicationDeadline": "application_deadline",
        "applicationAvailable": "application_available",
        "minimumAge": "minimum_age",
    }


class InternshipStore(ListingStore):
    model = Internship
    listing_type = ListingType.internship
    route_slug = "internships"
    admin_slugs = ("internship", "internships")
    admin_key = "internships"
    label = "Internship"

    create_schema = schemas.InternshipCreate
    update_schema = schemas.InternshipUpdate
    out_schema = schemas.Internship
    filter_schema = listing_filters.InternshipFilters

    search_columns = ("title", "company_name", "description")
    admin_search_columns = ("title", "company_name", "description", "city", "state")
    array_filters = {"types": "types", "duration": "duration"}
    in_filters = {"compensation": "compensation", "selectivity_level": "selectivity_level"}
    flag_filters = ("is_remote", "has_mentorship")
    sort_columns = {"title": "title", "companyName": "company_name"}


class JobStore(ListingStore):
    model = Job
    listing_type = ListingType.job
    route_slug = "jobs"
    admin_slugs = ("job", "jobs")
    admin_key = "jobs"
    label = "Job"

    create_schema = schemas.JobCreate
    update_schema = schemas.JobUpdate
    out_schema = schemas.Job
    filter_schema = listing_filters.JobFilters

    search_columns = ("title", "company_name", "description")
    admin_search_columns = ("title", "company_name", "description", "city", "state")
    array_filters = {"categories": "categories", "job_type": "job_type"}
    in_filters = {"compensation": "compensation"}
    flag_filters = ("is_remote", "has_training")
    sort_columns = {"title": "title", "companyName": "company_name"}


class ServiceStore(ListingStore):
    model = Service
    listing_type = ListingType.service
    route_slug = "services"
    admin_slugs = ("service", "services")
    admin_key = "services"
    label = "Service"

    create_schema = schemas.ServiceCreate
    update_schema = schemas.ServiceUpdate
    out_schema = schemas.Service
    filter_schema = listing_filters.ServiceFilters

    search_columns = ("name", "description")
    admin_search_columns = ("name", "description", "city", "state")
    array_filters = {"categories": "categories", "tags": "tags"}
    sort_columns = {"name": "name"}

    def filter_clauses(self, db, filters):
        clauses = super().filter_clauses(db, filters)
        if filters.type:
            clauses.append(self.model.type.ilike(filters.type))
        return clauses


class EventStore(ListingStore):
    model = Event
    listing_type = ListingType.event
    route_slug = "events"
    admin_slugs = ("event", "events")
    admin_key = "events"
    label = "Event"

    create_schema = schemas.EventCreate
    update_schema = schemas.EventUpdate
    out_schema = schemas.Event
    filter_schema = listing_filters.EventFilters

    search_columns = ("title", "organizer", "description")
    admin_search_columns = ("title", "organizer", "description", "city", "state")
    array_filters = {"categories": "categories", "target_audience": "target_audience"}
    in_filters = {"cost": "cost"}
    flag_filters = ("registration_required",)
    sort_columns = {"title": "title", "eventDate": "event_date"}

    def filter_clauses(self, db, filters):
        clauses = super().filter_clauses(db, filters)
        if filters.zipcode:
            clauses.append(self.model.zipcode == filters.zipcode)
        if filters.event_date:
            clauses.append(self.model.event_date == filters.event_date)
        return clauses


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

STORES = {
    store.listing_type: store
    for store in (
        TutoringProviderStore(),
        SummerCampStore(),
        InternshipStore(),
        JobStore(),
        ServiceStore(),
        EventStore(),
    )
}

ADMIN_SLUGS = {slug: store for store in STORES.values() for slug in store.admin_slugs}


def store_for(listing_type) -> ListingStore:
    """Store for a listing-type literal (`tutoring`, `camp`, ...)."""
    return STORES[ListingType(listing_type)]


def resolve_admin_store(slug: str) -> Optional[ListingStore]:
    """Store for an admin path type (`summer-camp`, `summer-camps`, `camp`, ...)."""
    return ADMIN_SLUGS.get(slug)


def listing_exists(db: Session, listing_type, listing_id: int) -> bool:
    return store_for(listing_type).exists(db, listing_id)
