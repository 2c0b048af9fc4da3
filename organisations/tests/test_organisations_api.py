"""
API tests for the organisations app.

Validates that anyone can list and retrieve organisations, that search
parameters narrow the list, that unpublished contact details are hidden,
and that the markers endpoint returns the map payload.
"""
import pytest

from organisations.models import Organisation


@pytest.mark.django_db
def test_list_and_retrieve(client, organisation):
    list_resp = client.get("/api/organisations/")
    assert list_resp.status_code == 200
    ids = [o["id"] for o in list_resp.json()["results"]]
    assert ids == [organisation.id]

    detail = client.get(f"/api/organisations/{organisation.id}/")
    assert detail.status_code == 200
    assert detail.json()["name"] == "Friendly Group"


@pytest.mark.django_db
def test_list_filters_by_keyword_and_category(client, organisation, category):
    Organisation.objects.create(name="Unrelated", description="Nothing to see")
    organisation.categories.add(category)

    by_keyword = client.get("/api/organisations/", {"q": "friendly"}).json()["results"]
    assert [o["id"] for o in by_keyword] == [organisation.id]

    by_category = client.get("/api/organisations/", {"category_id": category.id}).json()["results"]
    assert [o["id"] for o in by_category] == [organisation.id]
    assert by_category[0]["categories"] == [category.id]


@pytest.mark.django_db
def test_unpublished_contact_details_hidden(client, organisation):
    organisation.publish_email = False
    organisation.save()

    data = client.get(f"/api/organisations/{organisation.id}/").json()

    assert data["email"] == ""
    assert data["address"] == ""


@pytest.mark.django_db
def test_markers_endpoint(client, organisation):
    Organisation.objects.create(name="Hidden", description="No coordinates")

    resp = client.get("/api/organisations/markers/")

    assert resp.status_code == 200
    markers = resp.json()
    assert len(markers) == 1
    assert markers[0]["lat"] == organisation.latitude
    assert organisation.name in markers[0]["infowindow"]


@pytest.mark.django_db
def test_api_is_read_only(client, organisation):
    resp = client.delete(f"/api/organisations/{organisation.id}/")
    assert resp.status_code == 405


@pytest.mark.django_db
def test_categories_list(client, category):
    resp = client.get("/api/categories/")
    assert resp.json() == [
        {"id": category.id, "name": "Health", "charity_commission_id": 102, "charity_commission_name": ""}
    ]
