"""Donation Request Routes: create defaults, filters, lookup, partial update, delete."""

import uuid

from redhope.models.donation_request import DonationRequest


def _request(**fields):
    values = {"status": "pending", "extra": {}}
    values.update(fields)
    return DonationRequest(**values)


async def test_create_defaults_status_to_pending(client):
    res = await client.post("/donation-requests", json={
        "requesterName": "Rahim",
        "requesterEmail": "rahim@mail.com",
        "recipientName": "Karim",
        "bloodGroup": "O+",
        "recipientDistrict": "Dhaka",
        "recipientUpazila": "Savar",
        "hospitalName": "Dhaka Medical College Hospital",
        "donationDate": "2026-11-02",
        "donationTime": "10:30",
        "requestMessage": "Urgent surgery",
    })
    assert res.status_code == 200
    inserted_id = res.json()["insertedId"]

    doc = (await client.get(f"/donation-requests/{inserted_id}")).json()
    assert doc["status"] == "pending"
    assert doc["hospitalName"] == "Dhaka Medical College Hospital"
    assert doc["createdAt"]


async def test_create_keeps_given_status_and_opaque_fields(client):
    res = await client.post("/donation-requests", json={
        "requesterEmail": "rahim@mail.com",
        "status": "inprogress",
        "units": 2,
    })
    doc = (await client.get(f"/donation-requests/{res.json()['insertedId']}")).json()
    assert doc["status"] == "inprogress"
    assert doc["units"] == 2


async def test_create_with_empty_body_is_accepted(client):
    res = await client.post("/donation-requests", json={})
    assert res.status_code == 200
    assert res.json()["acknowledged"] is True


async def test_create_rejects_unknown_status(client):
    res = await client.post("/donation-requests", json={"status": "archived"})
    assert res.status_code == 400


async def test_status_filter_returns_only_matching(client, seed):
    await seed(
        _request(requester_email="a@mail.com", status="pending"),
        _request(requester_email="b@mail.com", status="done"),
        _request(requester_email="c@mail.com", status="pending"),
        _request(requester_email="d@mail.com", status="canceled"),
    )

    pending = (await client.get("/donation-requests", params={"status": "pending"})).json()
    assert {d["status"] for d in pending} == {"pending"}
    assert len(pending) == 2

    everything = (await client.get("/donation-requests")).json()
    assert {d["status"] for d in everything} == {"pending", "done", "canceled"}
    assert len(everything) == 4


async def test_list_newest_first(client, seed):
    await seed(
        _request(requester_email="first@mail.com"),
        _request(requester_email="second@mail.com"),
    )
    docs = (await client.get("/donation-requests")).json()
    assert [d["requesterEmail"] for d in docs] == ["second@mail.com", "first@mail.com"]


async def test_email_filter_matches_requester(client, seed):
    await seed(
        _request(requester_email="rahim@mail.com"),
        _request(requester_email="other@mail.com", donor_email="rahim@mail.com"),
    )
    docs = (await client.get("/donation-requests", params={"email": "rahim@mail.com"})).json()
    assert len(docs) == 1
    assert docs[0]["requesterEmail"] == "rahim@mail.com"


async def test_location_filters_match_recipient(client, seed):
    await seed(
        _request(blood_group="AB-", recipient_district="Dhaka", recipient_upazila="Savar"),
        _request(blood_group="AB-", recipient_district="Dhaka", recipient_upazila="Keraniganj"),
        _request(blood_group="B+", recipient_district="Dhaka", recipient_upazila="Savar"),
    )
    docs = (await client.get("/donation-requests", params={
        "bloodGroup": "AB-", "district": "Dhaka", "upazila": "Savar",
    })).json()
    assert len(docs) == 1
    assert docs[0]["recipientUpazila"] == "Savar"
    assert docs[0]["bloodGroup"] == "AB-"


async def test_get_unknown_request_returns_404(client):
    res = await client.get(f"/donation-requests/{uuid.uuid4()}")
    assert res.status_code == 404


async def test_get_malformed_id_returns_404(client):
    res = await client.get("/donation-requests/65f1c0ffee")
    assert res.status_code == 404


async def test_partial_update_sets_status_and_donor(client, seed, fetch):
    (request,) = await seed(_request(requester_email="rahim@mail.com", blood_group="A+"))

    res = await client.patch(f"/donation-requests/{request.id}", json={
        "status": "inprogress", "donorName": "Karim", "donorEmail": "karim@mail.com",
    })

    assert res.json() == {"acknowledged": True, "matchedCount": 1, "modifiedCount": 1}
    stored = await fetch(DonationRequest, request.id)
    assert stored.status == "inprogress"
    assert stored.donor_email == "karim@mail.com"
    assert stored.blood_group == "A+"


async def test_any_status_transition_is_allowed(client, seed, fetch):
    (request,) = await seed(_request(status="done"))
    await client.patch(f"/donation-requests/{request.id}", json={"status": "pending"})
    assert (await fetch(DonationRequest, request.id)).status == "pending"


async def test_update_with_same_values_modifies_nothing(client, seed):
    (request,) = await seed(_request(status="pending"))
    res = await client.patch(f"/donation-requests/{request.id}", json={"status": "pending"})
    assert res.json()["matchedCount"] == 1
    assert res.json()["modifiedCount"] == 0


async def test_update_unknown_request_matches_nothing(client):
    res = await client.patch(f"/donation-requests/{uuid.uuid4()}", json={"status": "done"})
    assert res.json()["matchedCount"] == 0


async def test_delete_request(client, seed, fetch):
    (request,) = await seed(_request())
    res = await client.delete(f"/donation-requests/{request.id}")
    assert res.json() == {"acknowledged": True, "deletedCount": 1}
    assert await fetch(DonationRequest, request.id) is None


async def test_delete_unknown_request_deletes_nothing(client):
    res = await client.delete(f"/donation-requests/{uuid.uuid4()}")
    assert res.json()["deletedCount"] == 0


async def test_update_cannot_clear_status(client, seed, fetch):
    (request,) = await seed(_request(status="inprogress"))

    res = await client.patch(f"/donation-requests/{request.id}", json={"status": None})

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["location"] == "body"
    assert error["details"][0]["field"] == "status"
    assert (await fetch(DonationRequest, request.id)).status == "inprogress"


async def test_create_with_null_status_defaults_to_pending(client):
    res = await client.post("/donation-requests", json={"status": None})
    doc = (await client.get(f"/donation-requests/{res.json()['insertedId']}")).json()
    assert doc["status"] == "pending"


async def test_validation_details_use_wire_field_names(client, seed):
    (request,) = await seed(_request())

    res = await client.patch(f"/donation-requests/{request.id}", json={"donorEmail": 42})

    assert res.status_code == 400
    detail = res.json()["error"]["details"][0]
    assert detail["location"] == "body"
    assert detail["field"] == "donorEmail"
