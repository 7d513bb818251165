
from datetime import date, datetime, timezone

import pytest

from opportunities.models.listing import ListingType
from opportunities.models.social import Review, ThumbsUp, Bookmark, Report, ViewTracking
from opportunities.schemas.filters import (
    TutoringProviderFilters,
    SummerCampFilters,
    InternshipFilters,
    JobFilters,
    EventFilters,
)
from opportunities.schemas.listing import TutoringProviderCreate
from opportunities.services.aggregates import round_rating
from opportunities.services.listings import STORES, store_for, resolve_admin_store


def _ids(items):
    return [item.id for item in items]


@pytest.mark.parametrize("listing_type", list(ListingType))
def test_public_list_hides_unapproved_and_inactive(db, make_listing, listing_type):
    visible = make_listing(listing_type)
    make_listing(listing_type, approved=False)
    make_listing(listing_type, active=False)
    make_listing(listing_type, approved=False, active=False)

    items, total = store_for(listing_type).list(db)

    assert _ids(items) == [visible.id]
    assert total == 1


def test_array_filter_matches_any_shared_element(db, make_listing):
    both = make_listing("tutoring", categories=["Mathematics", "Science"])
    maths = make_listing("tutoring", categories=["Mathematics"])
    make_listing("tutoring", categories=["Languages"])
    make_listing("tutoring", categories=None)

    items, total = store_for("tutoring").list(db, TutoringProviderFilters(categories=["Mathematics", "Music & Arts"]))

    assert sorted(_ids(items)) == sorted([both.id, maths.id])
    assert total == 2


def test_search_is_case_insensitive_over_company_and_title(db, make_listing):
    by_company = make_listing("internship", company_name="Northwind Robotics", title="Intern")
    by_title = make_listing("internship", company_name="Acme", title="Robotics Assistant")
    make_listing("internship", company_name="Acme", title="Front Desk")

    items, _ = store_for("internship").list(db, InternshipFilters(search="robotics"))

    assert sorted(_ids(items)) == sorted([by_company.id, by_title.id])


def test_scalar_filters(db, make_listing):
    match = make_listing(
        "camp", city="San Mateo", state="CA", cost_range="$$", selectivity_level=2,
        has_scholarship=True, minimum_age=10,
    )
    make_listing("camp", city="San Mateo", state="NV", cost_range="$$", selectivity_level=2, has_scholarship=True)
    make_listing("camp", city="Oakland", state="CA", cost_range="$$$", selectivity_level=4, has_scholarship=False)
    make_listing("camp", city="San Mateo", state="CA", cost_range="$$", selectivity_level=2,
                 has_scholarship=True, minimum_age=16)

    filters = SummerCampFilters(
        city="mateo", state="CA", cost=["$", "$$"], selectivity_level=[1, 2],
        has_scholarship=True, minimum_age=12,
    )
    items, total = store_for("camp").list(db, filters)

    assert _ids(items) == [match.id]
    assert total == 1


def test_event_date_and_job_flags(db, make_listing):
    fair = make_listing("event", event_date=date(2026, 11, 14), registration_required=True)
    make_listing("event", event_date=date(2026, 12, 1), registration_required=True)
    items, _ = store_for("event").list(db, EventFilters(event_date=date(2026, 11, 14)))
    assert _ids(items) == [fair.id]

    remote = make_listing("job", is_remote=True, job_type=["Part-time"])
    make_listing("job", is_remote=False, job_type=["Part-time"])
    items, _ = store_for("job").list(db, JobFilters(is_remote=True, job_type=["Part-time", "Temporary"]))
    assert _ids(items) == [remote.id]


def test_pagination_total_ignores_limit_and_offset(db, make_listing):
    created = [make_listing("service", name=f"Service {i}") for i in range(5)]

    page, total = store_for("service").list(db, store_for("service").filter_schema(limit=2, offset=2))

    assert total == 5
    assert len(page) == 2
    # Default order is newest first, ties broken by id
    assert _ids(page) == [created[2].id, created[1].id]


def test_limit_is_defaulted_and_capped(db, make_listing):
    for i in range(12):
        make_listing("service", name=f"Service {i}")
    store = store_for("service")

    items, _ = store.list(db, store.filter_schema(limit=0))
    assert len(items) == 10

    items, _ = store.list(db, store.filter_schema(limit=10_000))
    assert len(items) == 12


def test_aggregates_and_rating_sort(db, make_listing, user, other_user):
    top = make_listing("tutoring", name="Top")
    middle = make_listing("tutoring", name="Middle")
    unrated = make_listing("tutoring", name="Unrated")

    db.add_all([
        Review(user_id=user.id, listing_type="tutoring", listing_id=top.id, title="a", rating=5),
        Review(user_id=other_user.id, listing_type="tutoring", listing_id=top.id, title="b", rating=4),
        Review(user_id=user.id, listing_type="tutoring", listing_id=middle.id, title="c", rating=3),
        ThumbsUp(user_id=user.id, listing_type="tutoring", listing_id=middle.id),
        # Same id, different type: must not leak into tutoring aggregates
        Review(user_id=user.id, listing_type="camp", listing_id=unrated.id, title="d", rating=1),
    ])
    db.commit()

    store = store_for("tutoring")
    items, _ = store.list(db, store.filter_schema(sort_by="rating", sort_order="desc"))
    assert _ids(items) == [top.id, middle.id, unrated.id]

    by_id = {item.id: item for item in items}
    assert by_id[top.id].average_rating == 4.5
    assert by_id[top.id].review_count == 2
    assert by_id[middle.id].thumbs_up_count == 1
    assert by_id[unrated.id].average_rating == 0
    assert by_id[unrated.id].review_count == 0

    items, _ = store.list(db, store.filter_schema(sort_by="rating", sort_order="asc"))
    assert _ids(items) == [unrated.id, middle.id, top.id]

    items, _ = store.list(db, store.filter_schema(sort_by="thumbsUp"))
    assert items[0].id == middle.id


def test_type_specific_sort_and_unknown_sort_key(db, make_listing):
    b = make_listing("camp", name="Beta", minimum_age=8)
    a = make_listing("camp", name="Alpha", minimum_age=14)
    store = store_for("camp")

    items, _ = store.list(db, store.filter_schema(sort_by="name", sort_order="asc"))
    assert _ids(items) == [a.id, b.id]

    items, _ = store.list(db, store.filter_schema(sort_by="minimumAge", sort_order="asc"))
    assert _ids(items) == [b.id, a.id]

    # Unknown keys fall back to newest first
    items, _ = store.list(db, store.filter_schema(sort_by="; DROP TABLE", sort_order="asc"))
    assert _ids(items) == [a.id, b.id]


def test_rating_rounds_half_up():
    assert round_rating(None) == 0.0
    assert round_rating(4) == 4.0
    assert round_rating(2.25) == 2.3
    assert round_rating("3.35") == 3.4
    assert round_rating(4.666666) == 4.7


def test_create_starts_pending_with_contributor(db, user):
    store = store_for("tutoring")
    data = TutoringProviderCreate(name="Ada's Algebra", type="private_tutor", categories=["Math"])

    listing = store.create(db, data, contributor=user)

    assert listing.is_approved is False
    assert listing.is_active is True
    assert listing.submitted_at is not None
    assert listing.user_id == user.id
    assert listing.contributor_nickname == "ada"
    assert listing.categories == ["Math"]
    assert listing.thumbs_up_count == 0


def test_get_ignores_visibility(db, make_listing):
    hidden = make_listing("job", approved=False, active=False)
    assert store_for("job").get(db, hidden.id).id == hidden.id
    assert store_for("job").get(db, 424242) is None


def test_approve_is_idempotent(db, make_listing):
    pending = make_listing("internship", approved=False)
    store = store_for("internship")

    first = store.approve(db, pending.id)
    assert first.is_approved is True
    assert first.approved_at is not None

    second = store.approve(db, pending.id)
    assert second.is_approved is True
    assert store.approve(db, 424242) is None


def test_deactivate_then_activate_restores_visibility(db, make_listing):
    listing = make_listing("service")
    store = store_for("service")

    store.deactivate(db, listing.id)
    assert store.list(db)[1] == 0
    assert store.get(db, listing.id).is_approved is True

    store.activate(db, listing.id)
    items, _ = store.list(db)
    assert _ids(items) == [listing.id]
    assert items[0].is_approved is True


def test_update_is_partial(db, make_listing):
    listing = make_listing("job", approved=False, title="Cashier", description="Evenings")
    store = store_for("job")

    updated = store.update(db, listing.id, {"title": "Shift Lead", "id": 999, "company_name": None})

    assert updated.id == listing.id
    assert updated.title == "Shift Lead"
    assert updated.description == "Evenings"
    assert updated.company_name == "Corner Market"
    assert updated.is_approved is False
    assert store.update(db, 424242, {"title": "x"}) is None


def test_purge_removes_dependents(db, make_listing, user):
    doomed = make_listing("event")
    kept = make_listing("event")

    for listing_id in (doomed.id, kept.id):
        review = Review(user_id=user.id, listing_type="event", listing_id=listing_id, title="t", rating=4)
        db.add(review)
        db.flush()
        db.add_all([
            ThumbsUp(user_id=user.id, listing_type="event", listing_id=listing_id),
            Bookmark(user_id=user.id, listing_type="event", listing_id=listing_id),
            ViewTracking(tracking_id=user.id, listing_type="event", listing_id=listing_id,
                         last_viewed_at=datetime.now(timezone.utc)),
            Report(user_id=user.id, report_type="listing", item_type="event", item_id=listing_id),
            Report(user_id=user.id, report_type="review", item_type="event", item_id=review.id),
        ])
    db.commit()

    assert store_for("event").purge(db, doomed.id) is True
    assert store_for("event").get(db, doomed.id) is None

    for model in (Review, ThumbsUp, Bookmark, ViewTracking):
        assert db.query(model).filter(model.listing_id == doomed.id).count() == 0
        assert db.query(model).filter(model.listing_id == kept.id).count() == 1
    assert db.query(Report).count() == 2

    assert store_for("event").purge(db, doomed.id) is False


def test_registry_slugs():
    assert len(STORES) == 6
    assert resolve_admin_store("tutoring-provider") is resolve_admin_store("tutoring")
    assert resolve_admin_store("summer-camps") is store_for("camp")
    assert resolve_admin_store("venues") is None
