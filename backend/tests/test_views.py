"""
Presentation helpers tests (libellés, vues détail, listes locales)
"""

from datetime import date

import pytest

from backoffice.views.details import DETAIL_FIELDS, get_nested, render_details
from backoffice.views.labels import color, format_currency, format_date, format_value, label
from backoffice.views.listing import local_view, paginate, sort_records
from backoffice.services.registry import RESOURCES


# -----------------------------
# Labels
# -----------------------------
def test_label_known_and_unknown_codes():
    assert label("vehicle_status", "UNDER_MAINTENANCE") == "Maintenance"
    assert label("offer_status", "BID_SUBMITTED") == "Soumission"
    assert label("offer_status", "Under Review") == "En Étude"
    assert label("vehicle_status", "TELEPORTED") == "TELEPORTED"
    assert label("vehicle_status", None) == "-"


def test_color_defaults_to_gray():
    assert color("vehicle_status", "AVAILABLE") == "bg-green-100 text-green-800"
    assert color("offer_status", "Not Pursued") == "bg-red-100 text-red-800"
    assert color("vehicle_status", "TELEPORTED") == "bg-gray-100 text-gray-800"
    assert color("alert_type", "Inconnu") == "bg-gray-500"


def test_format_date():
    assert format_date("2025-03-14") == "14/03/2025"
    assert format_date("2025-03-14T10:00:00Z") == "14/03/2025"
    assert format_date(date(2024, 12, 1)) == "01/12/2024"
    assert format_date(None) == "-"
    assert format_date("") == "-"


def test_format_currency():
    assert format_currency(1250000, "XAF") == "1\u202f250\u202f000,00 FCFA"
    assert format_currency("99.5", "EUR") == "99,50 €"
    assert format_currency(10, None) == "10,00 FCFA"
    assert format_currency(None) == "-"
    assert format_currency("n/a") == "-"


def test_format_value():
    assert format_value(True) == "Oui"
    assert format_value(False) == "Non"
    assert format_value({"firstName": "Aminata", "lastName": "Traoré"}) == "Aminata Traoré"
    assert format_value("2025-01-02") == "02/01/2025"
    assert format_value("") == "-"
    assert format_value(12) == "12"


# -----------------------------
# Details
# -----------------------------
def test_every_resource_has_detail_fields():
    assert {r.path for r in RESOURCES} <= set(DETAIL_FIELDS)


def test_get_nested():
    record = {"vehicle": {"licensePlate": "LT-1"}, "user": None}
    assert get_nested(record, "vehicle.licensePlate") == "LT-1"
    assert get_nested(record, "user.lastName") is None
    assert get_nested(record, "missing") is None


def test_render_details_dao():
    record = {
        "daoNumber": "DAO-CAM-07",
        "clientName": "Ministère",
        "transmissionDate": "2025-04-02",
        "status": "SHORTLISTED",
        "submissionType": "ELECTRONIC",
        "devise": "XAF",
        "InserterCountry": "CAMEROON",
    }
    view = render_details("offers-dao", record)
    assert view["title"] == "Détails du DAO DAO-CAM-07"

    fields = {f["key"]: f for f in view["fields"]}
    assert fields["status"]["display"] == "Retenu"
    assert fields["status"]["color"] == "bg-green-100 text-green-800"
    assert fields["transmissionDate"]["display"] == "02/04/2025"
    assert fields["InserterCountry"]["display"] == "Cameroun"


def test_render_details_expense_amount_uses_record_currency():
    record = {"amount": 45000, "devise": "XOF", "vehicle": {"licensePlate": "LT-1"}}
    fields = {f["key"]: f for f in render_details("vehicle-expenses", record)["fields"]}
    assert fields["amount"]["display"] == "45\u202f000,00 F CFA"
    assert fields["vehicle.licensePlate"]["display"] == "LT-1"


def test_render_details_unknown_path_and_title_override():
    view = render_details("unknown", {"a": 1}, title="Fiche")
    assert view == {"title": "Fiche", "fields": []}
    assert render_details("unknown", {})["title"] == "Détails"


# -----------------------------
# Local listing
# -----------------------------
RECORDS = [
    {"id": 1, "name": "Beta", "status": "PAID", "amount": 30, "user": {"lastName": "Mbarga"}},
    {"id": 2, "name": "alpha", "status": "PENDING", "amount": None, "user": {"lastName": "Diallo"}},
    {"id": 3, "name": "Gamma", "status": "PAID", "amount": 10, "user": {"lastName": "Rossi"}},
    {"id": 4, "name": "delta", "status": "PENDING", "amount": 20, "user": None},
]


def test_local_view_search_on_nested_keys():
    page = local_view(RECORDS, search="DIAL", search_keys=("name", "user.lastName"))
    assert [r["id"] for r in page.items] == [2]


def test_local_view_filter_all_sentinel():
    assert local_view(RECORDS, filters={"status": "PAID"}).total == 2
    assert local_view(RECORDS, filters={"status": "all"}).total == 4
    assert local_view(RECORDS, filters={"status": ""}).total == 4


def test_sort_puts_empty_values_last():
    asc = sort_records(RECORDS, "amount")
    assert [r["id"] for r in asc] == [3, 4, 1, 2]
    desc = sort_records(RECORDS, "amount", descending=True)
    assert [r["id"] for r in desc] == [1, 4, 3, 2]


def test_sort_strings_case_insensitive():
    assert [r["name"] for r in sort_records(RECORDS, "name")] == ["alpha", "Beta", "delta", "Gamma"]


def test_paginate():
    page = paginate(RECORDS, page=2, per_page=3)
    assert [r["id"] for r in page.items] == [4]
    assert page.total == 4
    assert page.total_pages == 2

    empty = paginate([], page=1, per_page=10)
    assert empty.items == []
    assert empty.total_pages == 0

    with pytest.raises(ValueError):
        paginate(RECORDS, per_page=0)
