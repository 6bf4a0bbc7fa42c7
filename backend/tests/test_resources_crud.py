"""
CRUD resource tests (list / create / update / delete)
"""

import pytest

from auth_utils import ADMIN_CM


def expense_payload(vehicle_id, **overrides):
    payload = {
        "vehicleId": vehicle_id,
        "date": "2025-03-14",
        "description": "Plein carburant",
        "amount": 45000,
        "statut": "PENDING",
        "devise": "XAF",
    }
    payload.update(overrides)
    return payload


# -----------------------------
# Create
# -----------------------------
async def test_create_returns_201_with_generated_id(client, vehicle_payload):
    response = await client.post("/vehicles", json=vehicle_payload, headers=ADMIN_CM)
    assert response.status_code == 201
    data = response.json()
    assert isinstance(data["vehicleId"], int)
    assert data["licensePlate"] == "LT-1234-AB"
    assert data["type"] == "TRUCK"
    assert data["createdAt"]
    assert data["updatedAt"]


async def test_create_tags_inserter_from_principal(client, vehicle_payload):
    response = await client.post("/vehicles", json=vehicle_payload, headers=ADMIN_CM)
    data = response.json()
    assert data["Inserteridentity"] == "42"
    assert data["InserterCountry"] == "CAMEROON"


async def test_create_coerces_identity_and_normalizes_country(client, vehicle_payload):
    body = dict(vehicle_payload, Inserteridentity=7, InserterCountry="coteIvoire")
    response = await client.post("/vehicles", json=body, headers={"X-User-Role": "SUPER_ADMIN"})
    assert response.status_code == 201
    data = response.json()
    assert data["Inserteridentity"] == "7"
    assert data["InserterCountry"] == "IVORY_COAST"


async def test_create_rejects_unknown_country(client, vehicle_payload):
    body = dict(vehicle_payload, InserterCountry="atlantis")
    response = await client.post("/vehicles", json=body, headers=ADMIN_CM)
    assert response.status_code == 400
    assert response.json() == {"error": "Field InserterCountry is invalid"}


async def test_create_missing_required_field_names_first_missing(client, vehicle):
    response = await client.post("/vehicle-expenses", json={}, headers=ADMIN_CM)
    assert response.status_code == 400
    assert response.json() == {"error": "Field vehicleId is required"}

    body = expense_payload(vehicle["vehicleId"])
    del body["date"]
    del body["devise"]
    response = await client.post("/vehicle-expenses", json=body, headers=ADMIN_CM)
    assert response.status_code == 400
    assert response.json() == {"error": "Field date is required"}


async def test_create_treats_empty_values_as_missing(client, vehicle):
    body = expense_payload(vehicle["vehicleId"], description="")
    response = await client.post("/vehicle-expenses", json=body, headers=ADMIN_CM)
    assert response.status_code == 400
    assert response.json() == {"error": "Field description is required"}

    body = expense_payload(vehicle["vehicleId"], amount=0)
    response = await client.post("/vehicle-expenses", json=body, headers=ADMIN_CM)
    assert response.status_code == 400
    assert response.json() == {"error": "Field amount is required"}


async def test_create_expense_embeds_vehicle_summary(client, vehicle):
    body = expense_payload(vehicle["vehicleId"], date="2025-03-14T00:00:00.000Z")
    response = await client.post("/vehicle-expenses", json=body, headers=ADMIN_CM)
    assert response.status_code == 201
    data = response.json()
    assert data["expenseId"]
    assert data["date"] == "2025-03-14"
    assert data["distance"] == 0
    assert data["vehicle"] == {
        "vehicleId": vehicle["vehicleId"],
        "licensePlate": "LT-1234-AB",
        "brand": "Toyota",
        "model": "Hilux",
    }


async def test_create_with_unknown_parent_is_store_error(client):
    response = await client.post("/vehicle-expenses", json=expense_payload(9999), headers=ADMIN_CM)
    assert response.status_code == 500
    assert "FOREIGN KEY" in response.json()["error"]


async def test_create_invalid_value_is_400(client, vehicle):
    body = expense_payload(vehicle["vehicleId"], amount="beaucoup")
    response = await client.post("/vehicle-expenses", json=body, headers=ADMIN_CM)
    assert response.status_code == 400
    assert response.json() == {"error": "Field amount is invalid"}


async def test_malformed_json_is_500(client):
    response = await client.post(
        "/vehicles",
        content=b'{"licensePlate": ',
        headers=dict(ADMIN_CM, **{"Content-Type": "application/json"}),
    )
    assert response.status_code == 500
    assert "error" in response.json()


async def test_unknown_fields_are_ignored(client, vehicle_payload):
    body = dict(vehicle_payload, color="blue")
    response = await client.post("/vehicles", json=body, headers=ADMIN_CM)
    assert response.status_code == 201
    assert "color" not in response.json()


# -----------------------------
# List
# -----------------------------
async def test_list_envelope_and_pagination(client, vehicle):
    response = await client.get("/vehicles", headers=ADMIN_CM)
    assert response.status_code == 200
    data = response.json()
    assert [v["vehicleId"] for v in data["vehicles"]] == [vehicle["vehicleId"]]
    assert data["pagination"] == {"page": 1, "limit": 10, "total": 1, "totalPages": 1}


async def test_pages_do_not_overlap_and_cover_total(client):
    for i in range(7):
        r = await client.post("/garages", json={"name": f"Garage {i}", "address": "Douala"}, headers=ADMIN_CM)
        assert r.status_code == 201

    seen = []
    for page in (1, 2, 3):
        r = await client.get("/garages", params={"page": page, "limit": 3}, headers=ADMIN_CM)
        data = r.json()
        assert data["pagination"]["total"] == 7
        assert data["pagination"]["totalPages"] == 3
        seen.extend(g["garageId"] for g in data["garages"])

    assert len(seen) == 7
    assert len(set(seen)) == 7


async def test_list_newest_first(client):
    ids = []
    for i in range(3):
        r = await client.post("/garages", json={"name": f"G{i}", "address": "Yaoundé"}, headers=ADMIN_CM)
        ids.append(r.json()["garageId"])

    r = await client.get("/garages", headers=ADMIN_CM)
    assert [g["garageId"] for g in r.json()["garages"]] == list(reversed(ids))


async def test_list_filters_with_all_sentinel(client, vehicle_payload):
    await client.post("/vehicles", json=vehicle_payload, headers=ADMIN_CM)
    await client.post(
        "/vehicles",
        json=dict(vehicle_payload, licensePlate="LT-9999-ZZ", status="IN_USE"),
        headers=ADMIN_CM,
    )

    r = await client.get("/vehicles", params={"status": "IN_USE"}, headers=ADMIN_CM)
    data = r.json()
    assert [v["licensePlate"] for v in data["vehicles"]] == ["LT-9999-ZZ"]
    assert data["pagination"]["total"] == 1

    r = await client.get("/vehicles", params={"status": "all"}, headers=ADMIN_CM)
    assert r.json()["pagination"]["total"] == 2


async def test_list_filter_by_parent_id(client, vehicle, vehicle_payload):
    other = await client.post(
        "/vehicles", json=dict(vehicle_payload, licensePlate="LT-0002-CD"), headers=ADMIN_CM
    )
    other_id = other.json()["vehicleId"]

    await client.post("/vehicle-expenses", json=expense_payload(vehicle["vehicleId"]), headers=ADMIN_CM)
    await client.post("/vehicle-expenses", json=expense_payload(other_id), headers=ADMIN_CM)
    await client.post("/vehicle-expenses", json=expense_payload(other_id, statut="PAID"), headers=ADMIN_CM)

    r = await client.get("/vehicle-expenses", params={"vehicleId": other_id}, headers=ADMIN_CM)
    assert r.json()["pagination"]["total"] == 2

    r = await client.get(
        "/vehicle-expenses", params={"vehicleId": other_id, "statut": "PAID"}, headers=ADMIN_CM
    )
    assert r.json()["pagination"]["total"] == 1


async def test_list_invalid_filter_value(client):
    r = await client.get("/vehicle-expenses", params={"vehicleId": "abc"}, headers=ADMIN_CM)
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid value for vehicleId"}


async def test_search_is_case_insensitive(client, vehicle_payload):
    await client.post("/vehicles", json=vehicle_payload, headers=ADMIN_CM)
    await client.post(
        "/vehicles",
        json=dict(vehicle_payload, licensePlate="LT-5555-PP", brand="Peugeot", model="308"),
        headers=ADMIN_CM,
    )

    r = await client.get("/vehicles", params={"search": "peug"}, headers=ADMIN_CM)
    assert [v["brand"] for v in r.json()["vehicles"]] == ["Peugeot"]


async def test_search_matches_parent_employee_name(client, employee):
    body = {
        "userId": employee["id"],
        "bonusType": "PERFORMANCE",
        "amount": 50000,
        "awardDate": "2025-01-31",
        "paymentMethod": "BANK_TRANSFER",
    }
    r = await client.post("/personnel-bonuses", json=body, headers=ADMIN_CM)
    assert r.status_code == 201
    assert r.json()["status"] == "PENDING"
    assert r.json()["currency"] == "XOF"

    r = await client.get("/personnel-bonuses", params={"search": "traoré"}, headers=ADMIN_CM)
    data = r.json()
    assert data["pagination"]["total"] == 1
    assert data["bonuses"][0]["user"]["lastName"] == "Traoré"

    r = await client.get("/personnel-bonuses", params={"search": "inconnu"}, headers=ADMIN_CM)
    assert r.json()["pagination"]["total"] == 0


@pytest.mark.parametrize("limit", [0, 100000])
async def test_list_limit_bounds(client, limit):
    r = await client.get("/garages", params={"limit": limit}, headers=ADMIN_CM)
    assert r.status_code == 400


# -----------------------------
# Update
# -----------------------------
async def test_update_is_partial(client, vehicle):
    vid = vehicle["vehicleId"]
    r = await client.put("/vehicles", params={"id": vid}, json={"status": "IN_USE"}, headers=ADMIN_CM)
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "IN_USE"
    assert data["brand"] == "Toyota"
    assert data["licensePlate"] == "LT-1234-AB"


async def test_update_ignores_null_on_mandatory_column(client, vehicle):
    vid = vehicle["vehicleId"]
    r = await client.put("/vehicles", params={"id": vid}, json={"brand": None, "year": 2020}, headers=ADMIN_CM)
    assert r.status_code == 200
    assert r.json()["brand"] == "Toyota"
    assert r.json()["year"] == 2020


async def test_update_coerces_numeric_strings(client, vehicle):
    vid = vehicle["vehicleId"]
    r = await client.put("/vehicles", params={"id": vid}, json={"mileage": "125000"}, headers=ADMIN_CM)
    assert r.status_code == 200
    assert r.json()["mileage"] == 125000


async def test_update_requires_id(client):
    r = await client.put("/vehicles", json={"status": "IN_USE"}, headers=ADMIN_CM)
    assert r.status_code == 400
    assert r.json() == {"error": "Vehicle ID is required"}


async def test_update_rejects_non_numeric_id(client):
    r = await client.put("/vehicles", params={"id": "abc"}, json={}, headers=ADMIN_CM)
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid Vehicle ID"}


async def test_update_unknown_id_is_404(client):
    r = await client.put("/vehicles", params={"id": 999}, json={"status": "IN_USE"}, headers=ADMIN_CM)
    assert r.status_code == 404
    assert r.json() == {"error": "Vehicle not found"}


# -----------------------------
# Delete
# -----------------------------
async def test_delete_then_get_is_404(client, vehicle):
    vid = vehicle["vehicleId"]
    r = await client.delete("/vehicles", params={"id": vid}, headers=ADMIN_CM)
    assert r.status_code == 200
    assert r.json() == {"message": "Vehicle deleted successfully"}

    r = await client.get(f"/vehicles/{vid}", headers=ADMIN_CM)
    assert r.status_code == 404

    r = await client.get("/vehicles", headers=ADMIN_CM)
    assert r.json()["pagination"]["total"] == 0


async def test_delete_requires_id(client):
    r = await client.delete("/personnel-medical-records", headers=ADMIN_CM)
    assert r.status_code == 400
    assert r.json() == {"error": "Medical record ID is required"}


async def test_delete_referenced_parent_is_store_error(client, vehicle):
    await client.post("/vehicle-expenses", json=expense_payload(vehicle["vehicleId"]), headers=ADMIN_CM)
    r = await client.delete("/vehicles", params={"id": vehicle["vehicleId"]}, headers=ADMIN_CM)
    assert r.status_code == 500
    assert "error" in r.json()


# -----------------------------
# Detail
# -----------------------------
async def test_get_record_and_details_view(client, vehicle):
    vid = vehicle["vehicleId"]
    r = await client.get(f"/vehicles/{vid}", headers=ADMIN_CM)
    assert r.status_code == 200
    assert r.json()["vehicleId"] == vid

    r = await client.get(f"/vehicles/{vid}/details", headers=ADMIN_CM)
    assert r.status_code == 200
    data = r.json()
    assert data["title"] == "Détails du véhicule LT-1234-AB"
    fields = {f["key"]: f for f in data["fields"]}
    assert fields["status"]["display"] == "Disponible"
    assert fields["status"]["color"] == "bg-green-100 text-green-800"
    assert fields["fuelType"]["display"] == "Diesel"
    assert fields["InserterCountry"]["display"] == "Cameroun"


async def test_irregular_wire_names_round_trip(client, employee):
    body = {
        "userId": employee["id"],
        "workLocation": "Douala",
        "site": "Port",
        "affectationtype": "TEMPORARY",
        "startDate": "2025-02-01",
        "attached_file": "https://cdn.example.com/public/1-ordre.pdf",
    }
    r = await client.post("/personnel-affectations", json=body, headers=ADMIN_CM)
    assert r.status_code == 201
    data = r.json()
    assert data["affectationsId"]
    assert data["affectationtype"] == "TEMPORARY"
    assert data["attached_file"].endswith("ordre.pdf")

    r = await client.get("/personnel-affectations", params={"affectationtype": "TEMPORARY"}, headers=ADMIN_CM)
    assert r.json()["pagination"]["total"] == 1
