
from datetime import datetime, timedelta, timezone

from opportunities.models.social import ViewTracking
from opportunities.services.views import track_view, tracking_identity

T0 = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def _views(db, listing):
    db.refresh(listing)
    return listing.view_count


def test_one_increment_per_identity_per_window(db, make_listing):
    listing = make_listing("internship")

    assert track_view(db, "anon_10.0.0.1", "internship", listing.id, now=T0) is True
    assert _views(db, listing) == 1

    assert track_view(db, "anon_10.0.0.1", "internship", listing.id, now=T0 + timedelta(minutes=2)) is False
    assert _views(db, listing) == 1

    assert track_view(db, "user-1", "internship", listing.id, now=T0 + timedelta(minutes=3)) is True
    assert _views(db, listing) == 2

    assert track_view(db, "anon_10.0.0.1", "internship", listing.id, now=T0 + timedelta(minutes=6)) is True
    assert _views(db, listing) == 3

    # The window restarts from the last counted view
    assert track_view(db, "anon_10.0.0.1", "internship", listing.id, now=T0 + timedelta(minutes=9)) is False
    assert _views(db, listing) == 3


def test_identity_is_scoped_per_listing(db, make_listing):
    a = make_listing("job")
    b = make_listing("job")

    assert track_view(db, "anon_10.0.0.1", "job", a.id, now=T0) is True
    assert track_view(db, "anon_10.0.0.1", "job", b.id, now=T0) is True
    assert _views(db, a) == 1
    assert _views(db, b) == 1


def test_unknown_listing_is_not_tracked(db):
    assert track_view(db, "anon_10.0.0.1", "camp", 999999, now=T0) is False
    assert db.query(ViewTracking).count() == 0


def test_failures_are_reported_as_not_tracked(db):
    assert track_view(db, "anon_10.0.0.1", "venue", 1, now=T0) is False


def test_database_errors_roll_back_and_report_not_tracked(db, make_listing):
    listing = make_listing("camp")
    db.commit()
    ViewTracking.__table__.drop(bind=db.get_bind())

    assert track_view(db, "anon_10.0.0.1", "camp", listing.id, now=T0) is False

    # The session is still usable after the rollback
    assert _views(db, listing) == 0


def test_view_exactly_one_window_later_counts(db, make_listing):
    listing = make_listing("event")

    assert track_view(db, "anon_10.0.0.1", "event", listing.id, now=T0) is True
    assert track_view(db, "anon_10.0.0.1", "event", listing.id, now=T0 + timedelta(minutes=4, seconds=59)) is False
    assert track_view(db, "anon_10.0.0.1", "event", listing.id, now=T0 + timedelta(minutes=5)) is True
    assert _views(db, listing) == 2


def test_tracking_identity(user):
    assert tracking_identity(user, "10.0.0.1") == user.id
    assert tracking_identity(None, "10.0.0.1") == "anon_10.0.0.1"


def test_track_endpoint(client, db, make_listing, user_headers):
    listing = make_listing("service")
    ref = {"listingType": "service", "listingId": listing.id}

    assert client.post("/api/views/track", json=ref).json() == {"tracked": True}
    assert client.post("/api/views/track", json=ref).json() == {"tracked": False}
    # A signed-in visitor is a different identity from the anonymous one
    assert client.post("/api/views/track", json=ref, headers=user_headers).json() == {"tracked": True}

    assert client.get(f"/api/services/{listing.id}").json()["viewCount"] == 2


def test_forwarded_for_header_does_not_create_new_identities(client, make_listing):
    listing = make_listing("job")
    ref = {"listingType": "job", "listingId": listing.id}

    results = [
        client.post("/api/views/track", json=ref, headers={"X-Forwarded-For": f"1.2.3.{i}"}).json()["tracked"]
        for i in range(20)
    ]

    assert results.count(True) == 1
    assert client.get(f"/api/jobs/{listing.id}").json()["viewCount"] == 1
