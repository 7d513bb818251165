
import pytest


@pytest.mark.parametrize(
    "slug, payload",
    [
        ("tutoring-providers", {"name": "Bright Minds", "type": "business", "categories": ["Math"]}),
        ("summer-camps", {"name": "Ocean Camp", "selectivityLevel": 2, "hasScholarship": True}),
        ("internships", {"companyName": "Acme Labs", "title": "Lab Intern", "types": ["Research"]}),
        ("jobs", {"companyName": "Corner Market", "title": "Cashier", "salaryType": "hourly"}),
        ("services", {"name": "Essay Coaching", "tags": ["Writing"]}),
        ("events", {"title": "STEM Fair", "organizer": "Library", "eventDate": "2026-11-14"}),
    ],
)
def test_submit_listing_is_created_pending(client, slug, payload):
    response = client.post(f"/api/{slug}", json=payload)

    assert response.status_code == 201
    body = response.json()
    assert body["id"] > 0
    assert body["isApproved"] is False
    assert body["isActive"] is True
    assert body["thumbsUpCount"] == 0
    assert body["averageRating"] == 0
    assert body["reviewCount"] == 0
    assert body["viewCount"] == 0

    # Pending submissions are not public
    listing = client.get(f"/api/{slug}").json()
    assert listing == {"items": [], "total": 0}


def test_submission_copies_contributor_when_signed_in(client, user_headers):
    response = client.post(
        "/api/services", json={"name": "Essay Coaching"}, headers=user_headers,
    )
    assert response.status_code == 201
    body = response.json()
    assert body["contributorNickname"] == "ada"
    assert body["contributorFirstName"] == "Ada"


def test_validation_errors_are_400_with_field_list(client):
    response = client.post("/api/tutoring-providers", json={"type": "franchise"})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid data"
    fields = {error["field"] for error in body["errors"]}
    assert {"name", "type"} <= fields


def test_selectivity_and_salary_type_domains(client):
    camp = client.post("/api/summer-camps", json={"name": "Camp", "selectivityLevel": 7})
    assert camp.status_code == 400

    job = client.post("/api/jobs", json={"companyName": "A", "title": "B", "salaryType": "weekly"})
    assert job.status_code == 400


def test_list_returns_items_and_total(client, make_listing):
    make_listing("job", title="Cashier", categories=["Retail"])
    make_listing("job", title="Barista", categories=["Food Service"])
    make_listing("job", title="Hidden", approved=False)

    body = client.get("/api/jobs", params={"limit": 1}).json()
    assert body["total"] == 2
    assert len(body["items"]) == 1
    item = body["items"][0]
    assert "companyName" in item and "thumbsUpCount" in item


def test_malformed_query_values_do_not_fail(client, make_listing):
    make_listing("camp", minimum_age=10)

    response = client.get(
        "/api/summer-camps",
        params={
            "limit": "ten",
            "offset": "x",
            "minimumAge": "old",
            "selectivityLevel": "abc",
            "hasScholarship": "perhaps",
            "sortBy": "nonsense",
            "sortOrder": "up",
        },
    )

    assert response.status_code == 200
    assert response.json()["total"] == 1


def test_filters_from_query_string(client, make_listing):
    match = make_listing("internship", is_remote=True, types=["Research", "STEM"], compensation="Paid")
    make_listing("internship", is_remote=True, types=["Arts"], compensation="Paid")
    make_listing("internship", is_remote=False, types=["Research"], compensation="Paid")

    body = client.get(
        "/api/internships",
        params={"types": "Research,Engineering", "isRemote": "true", "compensation": "Paid,Stipend"},
    ).json()

    assert [item["id"] for item in body["items"]] == [match.id]


def test_get_by_id(client, make_listing):
    hidden = make_listing("event", approved=False)

    response = client.get(f"/api/events/{hidden.id}")
    assert response.status_code == 200
    assert response.json()["title"] == "STEM Fair"

    missing = client.get("/api/events/999999")
    assert missing.status_code == 404
    assert missing.json() == {"message": "Event not found"}


def test_options_endpoint(client):
    body = client.get("/api/options").json()
    assert body["tutoringProviderTypes"] == ["private_tutor", "business"]
    assert body["selectivityLevels"] == [1, 2, 3, 4]
    assert "jobCategories" in body
