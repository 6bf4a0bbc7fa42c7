"""
Role dashboard tests
"""

from backoffice.core.settings import settings
from backoffice.services.dashboard_service import dashboard_title
from backoffice.services.registry import RESOURCES

from auth_utils import ACCOUNTANT_CM, ADMIN_CM, ADMIN_GH, EMPLOYEE_CM, user_headers


async def test_admin_dashboard_lists_every_resource(client, vehicle):
    r = await client.get("/dashboard", headers=ADMIN_CM)
    assert r.status_code == 200
    data = r.json()
    assert data["role"] == "ADMIN"
    assert data["title"] == "Tableau de bord Admin"
    assert data["subtitle"] == "Gestion complète du système"
    assert data["country"] == "CAMEROON"
    assert len(data["cards"]) == len(RESOURCES)

    cards = {c["path"]: c for c in data["cards"]}
    assert cards["vehicles"]["count"] == 1
    assert cards["garages"]["count"] == 0
    assert data["actions"]


async def test_dashboard_counts_are_country_scoped(client, vehicle):
    r = await client.get("/dashboard", headers=ADMIN_GH)
    cards = {c["path"]: c for c in r.json()["cards"]}
    assert cards["vehicles"]["count"] == 0


async def test_dashboard_cards_follow_role_domains(client):
    r = await client.get("/dashboard", headers=ACCOUNTANT_CM)
    data = r.json()
    assert data["title"] == "Tableau de bord Comptable"
    assert {c["domain"] for c in data["cards"]} == {"finance", "alerts"}

    r = await client.get("/dashboard", headers=EMPLOYEE_CM)
    data = r.json()
    assert data["title"] == "Tableau de bord Employé"
    assert [c["path"] for c in data["cards"]] == ["alerts"]
    assert [a["path"] for a in data["actions"]] == ["alerts"]


async def test_dashboard_without_role_is_forbidden(client):
    r = await client.get("/dashboard", headers=user_headers(None, "cameroun"))
    assert r.status_code == 403
    assert r.json() == {"error": "Accès non autorisé"}


def test_dashboard_title_lookup():
    assert dashboard_title("SECRETARY") == "Tableau de bord Secrétaire"
    assert dashboard_title("UNKNOWN") == "Accès non autorisé"
    assert dashboard_title(None) == "Accès non autorisé"


async def test_dashboard_without_role_requires_auth_when_enabled(client, monkeypatch):
    assert (await client.get("/dashboard")).status_code == 403

    monkeypatch.setattr(settings, "AUTH_REQUIRED", True)
    r = await client.get("/dashboard")
    assert r.status_code == 401
    assert r.json() == {"error": "Authentification requise"}
