from conftest import API

LOCATION = {
    "location_type": "Physical",
    "street_name": "Market Street",
    "building_number": "12",
    "town_name": "Springfield",
    "country": "US",
    "checkout_description": "Front desk till",
}

OWNER = {
    "name": "Jane Doe",
    "identification_type": "Passport",
    "identification_number": "P1234567",
    "phone_number": "+15550100",
    "email": "jane.doe@example.com",
    "address": {"street_name": "Elm Street", "town_name": "Springfield", "country": "US"},
}


def test_create_location_links_first_checkout_counter(client, maker_headers, make_merchant):
    merchant = make_merchant(payinto_alias="till-alias")

    response = client.post(
        f"{API}/merchants/{merchant.id}/locations", json=LOCATION, headers=maker_headers)

    assert response.status_code == 201, response.text
    location = response.json()["data"]
    assert location["merchant_id"] == merchant.id
    assert location["town_name"] == "Springfield"

    counters = client.get(
        f"{API}/merchants/{merchant.id}/checkout-counters", headers=maker_headers).json()["data"]
    assert counters[0]["description"] == "Front desk till"
    assert counters[0]["checkout_location"]["id"] == location["id"]


def test_update_location(client, maker_headers, make_merchant):
    merchant = make_merchant()
    location_id = client.post(
        f"{API}/merchants/{merchant.id}/locations", json=LOCATION, headers=maker_headers).json()["data"]["id"]

    response = client.put(
        f"{API}/merchants/{merchant.id}/locations/{location_id}",
        json={**LOCATION, "location_type": "Virtual", "web_url": "https://shop.example.com"},
        headers=maker_headers,
    )

    assert response.status_code == 200
    assert response.json()["data"]["location_type"] == "Virtual"
    assert response.json()["data"]["web_url"] == "https://shop.example.com"


def test_update_unknown_location(client, maker_headers, make_merchant):
    merchant = make_merchant()

    response = client.put(
        f"{API}/merchants/{merchant.id}/locations/999999", json=LOCATION, headers=maker_headers)

    assert response.status_code == 404
    assert response.json() == {"message": "Location not found"}


def test_location_for_unknown_merchant(client, maker_headers):
    response = client.post(f"{API}/merchants/999999/locations", json=LOCATION, headers=maker_headers)

    assert response.status_code == 404


def test_location_with_malformed_merchant_id(client, maker_headers):
    response = client.post(f"{API}/merchants/not-a-number/locations", json=LOCATION, headers=maker_headers)

    assert response.status_code == 400


def test_create_and_update_business_owner(client, maker_headers, make_merchant):
    merchant = make_merchant()

    created = client.post(
        f"{API}/merchants/{merchant.id}/business-owners", json=OWNER, headers=maker_headers)

    assert created.status_code == 201, created.text
    owner = created.json()["data"]
    assert owner["address"]["street_name"] == "Elm Street"

    updated = client.put(
        f"{API}/merchants/{merchant.id}/business-owners/{owner['id']}",
        json={**OWNER, "name": "Jane Smith"},
        headers=maker_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["name"] == "Jane Smith"


def test_business_owner_validation(client, maker_headers, make_merchant):
    merchant = make_merchant()

    response = client.post(
        f"{API}/merchants/{merchant.id}/business-owners",
        json={**OWNER, "identification_type": "Driving Licence"},
        headers=maker_headers,
    )

    assert response.status_code == 422


def test_contact_person_copied_from_business_owner(client, maker_headers, make_merchant):
    merchant = make_merchant()
    client.post(f"{API}/merchants/{merchant.id}/business-owners", json=OWNER, headers=maker_headers)

    response = client.post(
        f"{API}/merchants/{merchant.id}/contact-persons",
        json={"is_same_as_business_owner": True},
        headers=maker_headers,
    )

    assert response.status_code == 201, response.text
    contact = response.json()["data"]
    assert contact["name"] == "Jane Doe"
    assert contact["email"] == "jane.doe@example.com"
    assert contact["phone_number"] == "+15550100"
    assert contact["is_same_as_business_owner"] is True


def test_contact_person_same_as_owner_without_owner(client, maker_headers, make_merchant):
    merchant = make_merchant()

    response = client.post(
        f"{API}/merchants/{merchant.id}/contact-persons",
        json={"is_same_as_business_owner": True},
        headers=maker_headers,
    )

    assert response.status_code == 400


def test_contact_person_requires_name(client, maker_headers, make_merchant):
    merchant = make_merchant()

    response = client.post(
        f"{API}/merchants/{merchant.id}/contact-persons",
        json={"email": "someone@example.com"},
        headers=maker_headers,
    )

    assert response.status_code == 422


def test_update_contact_person(client, maker_headers, make_merchant):
    merchant = make_merchant()
    contact_id = client.post(
        f"{API}/merchants/{merchant.id}/contact-persons",
        json={"name": "John Roe", "phone_number": "+15550199"},
        headers=maker_headers,
    ).json()["data"]["id"]

    response = client.put(
        f"{API}/merchants/{merchant.id}/contact-persons/{contact_id}",
        json={"name": "John Roe Jr", "email": "john@example.com"},
        headers=maker_headers,
    )

    assert response.status_code == 200
    assert response.json()["data"]["name"] == "John Roe Jr"
    assert response.json()["data"]["phone_number"] is None


def test_merchant_detail_includes_sub_resources(client, maker_headers, make_merchant):
    merchant = make_merchant()
    client.post(f"{API}/merchants/{merchant.id}/locations", json=LOCATION, headers=maker_headers)
    client.post(f"{API}/merchants/{merchant.id}/business-owners", json=OWNER, headers=maker_headers)

    data = client.get(f"{API}/merchants/{merchant.id}", headers=maker_headers).json()["data"]

    assert len(data["locations"]) == 1
    assert len(data["business_owners"]) == 1
    assert data["contact_persons"] == []
