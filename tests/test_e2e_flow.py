import pytest
from sqlalchemy import select, func

from app.models.application import Application


@pytest.mark.asyncio
async def test_e2e_browse_resources_find_listing_and_apply(client, db_session, seeded):
    # 1) browse the housing directory
    r = await client.get("/api/resources", params={"type": "Housing", "state": "GA"})
    assert r.status_code == 200, r.text
    assert [x["title"] for x in r.json()] == ["Transitional Housing"]

    # 2) search for a pet-friendly unit under budget
    r = await client.get("/api/listings", params={"state": "GA", "maxRent": "900", "pets": "true"})
    assert r.status_code == 200, r.text
    (listing,) = r.json()

    # 3) apply for it
    r = await client.post(
        "/api/applications",
        json={"listingId": listing["id"], "fullName": "Sam Rivera", "email": "sam@example.com"},
    )
    assert r.status_code == 201, r.text
    created = r.json()
    assert created["listingId"] == listing["id"]

    # 4) a second application for a bogus listing leaves only the first row
    r = await client.post(
        "/api/applications",
        json={"listingId": listing["id"] + "x", "fullName": "Sam Rivera", "email": "sam@example.com"},
    )
    assert r.status_code == 400

    count = (
        await db_session.execute(select(func.count()).select_from(Application))
    ).scalar_one()
    assert count == 1
