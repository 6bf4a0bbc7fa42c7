"""
Resource registry / CRUD service tests
"""

import pytest

from backoffice.core.security import Principal, Role
from backoffice.services.crud import CrudService, pagination
from backoffice.services.registry import RESOURCES, get_resource, resources_for_domain
from backoffice.schemas.vehicles import VehicleExpenseIn, VehicleIn


def test_paths_and_collections_are_unique():
    paths = [r.path for r in RESOURCES]
    assert len(paths) == len(set(paths)) == 20


def test_required_fields_exist_on_models():
    for resource in RESOURCES:
        columns = resource.model.__table__.columns
        for attr in resource.required:
            assert attr in columns, f"{resource.path}.{attr}"
            assert attr in resource.schema_in.model_fields, f"{resource.path}.{attr}"


def test_wire_names_follow_front_contract():
    expenses = get_resource("vehicle-expenses")
    assert [expenses.wire_name(a) for a in expenses.required] == [
        "vehicleId",
        "date",
        "description",
        "amount",
        "statut",
        "devise",
    ]
    assert get_resource("vehicle-authorizations").wire_name("autorisation_type") == "autorisationtype"


def test_primary_key_attributes():
    assert get_resource("personnel-affectations").pk_attr == "affectations_id"
    assert get_resource("personnel-medical-records").pk_attr == "medical_records_id"
    assert get_resource("vehicles").pk_attr == "id"


def test_resources_for_domain():
    assert {r.path for r in resources_for_domain("offers")} == {"offers-dao", "offers-devis", "offers-ami"}


def test_get_resource_unknown():
    with pytest.raises(KeyError):
        get_resource("spaceships")


@pytest.mark.parametrize(
    "page, limit, total, pages",
    [(1, 10, 0, 0), (1, 10, 10, 1), (2, 10, 11, 2), (1, 3, 7, 3)],
)
def test_pagination_math(page, limit, total, pages):
    assert pagination(page, limit, total) == {"page": page, "limit": limit, "total": total, "totalPages": pages}


async def test_service_create_and_list(db_session):
    vehicles = CrudService(get_resource("vehicles"))
    principal = Principal(identity="9", role=Role.ADMIN, country="TOGO")

    payload = VehicleIn.model_validate(
        {"licensePlate": "TG-1", "brand": "Isuzu", "model": "D-Max", "type": "TRUCK", "fuelType": "DIESEL"}
    )
    created = await vehicles.create(db_session, payload, principal=principal)
    assert created.inserter_identity == "9"
    assert created.inserter_country == "TOGO"
    assert created.status == "AVAILABLE"

    rows, total = await vehicles.list(db_session, principal=principal)
    assert total == 1
    assert rows[0].license_plate == "TG-1"

    other = Principal(role=Role.ADMIN, country="BENIN")
    assert await vehicles.count(db_session, principal=other) == 0


def test_expense_payload_accepts_front_dates():
    payload = VehicleExpenseIn.model_validate({"date": "2025-03-14T00:00:00.000Z", "nextDate": ""})
    assert payload.expense_date.isoformat() == "2025-03-14"
    assert payload.next_date is None
