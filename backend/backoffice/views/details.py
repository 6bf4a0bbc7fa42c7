from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from backoffice.views.labels import color, format_currency, format_date, format_value, label

"""
Vues détail (fenêtre “Détails” du front).

Rôle (fonctionnel) :
- Déclare, pour chaque ressource, la liste ordonnée des champs affichés dans la vue détail
  (clé camelCase, libellé FR, mode de rendu).
- render_details(path, record) produit une structure prête à afficher :
  {"title": ..., "fields": [{"key", "label", "value", "display", "color"}, ...]}

Modes de rendu :
- "text"     : valeur générique (booléen Oui/Non, date ISO, résumé salarié…)
- "date"     : jj/mm/aaaa
- "currency" : montant + devise (lue dans le champ `currency_key` de l’enregistrement)
- "label"    : code traduit via le catalogue (vocabulary) + couleur de badge
"""


@dataclass(frozen=True)
class DetailField:
    key: str
    label: str
    kind: str = "text"
    vocabulary: Optional[str] = None
    currency_key: str = "devise"


def _f(key: str, text: str, kind: str = "text", vocabulary: Optional[str] = None, currency_key: str = "devise"):
    return DetailField(key, text, kind, vocabulary, currency_key)


_INSERTER = (
    _f("Inserteridentity", "Saisi par"),
    _f("InserterCountry", "Pays", "label", "country"),
    _f("createdAt", "Créé le", "date"),
)

DETAIL_FIELDS: Dict[str, Tuple[DetailField, ...]] = {
    "vehicles": (
        _f("licensePlate", "Immatriculation"),
        _f("brand", "Marque"),
        _f("model", "Modèle"),
        _f("type", "Type", "label", "vehicle_type"),
        _f("fuelType", "Carburant", "label", "fuel_type"),
        _f("year", "Année"),
        _f("mileage", "Kilométrage"),
        _f("status", "Statut", "label", "vehicle_status"),
        _f("purchaseDate", "Date d'achat", "date"),
        _f("purchasePrice", "Prix d'achat", "currency"),
    ) + _INSERTER,
    "garages": (
        _f("name", "Nom"),
        _f("address", "Adresse"),
        _f("phone", "Téléphone"),
        _f("email", "Email"),
        _f("specialty", "Spécialité"),
    ) + _INSERTER,
    "vehicle-authorizations": (
        _f("vehicle.licensePlate", "Véhicule"),
        _f("authorizationNumber", "N° d'autorisation"),
        _f("autorisationtype", "Type d'autorisation"),
        _f("issueDate", "Date d'émission", "date"),
        _f("expiryDate", "Date d'expiration", "date"),
        _f("issuingAuthority", "Autorité émettrice"),
        _f("purpose", "Objet"),
        _f("status", "Statut", "label", "operation_status"),
    ) + _INSERTER,
    "vehicle-contentieux": (
        _f("vehicle.licensePlate", "Véhicule"),
        _f("incidentDate", "Date de l'incident", "date"),
        _f("description", "Description"),
        _f("faultAttribution", "Responsabilité"),
        _f("conclusion", "Conclusion"),
        _f("status", "Statut", "label", "operation_status"),
        _f("resolutionDate", "Date de résolution", "date"),
    ) + _INSERTER,
    "vehicle-expenses": (
        _f("vehicle.licensePlate", "Véhicule"),
        _f("date", "Date", "date"),
        _f("nextDate", "Prochaine échéance", "date"),
        _f("code", "Code"),
        _f("description", "Description"),
        _f("distance", "Distance (km)"),
        _f("amount", "Montant", "currency"),
        _f("statut", "Statut", "label", "operation_status"),
        _f("fichierJoint", "Fichier joint"),
    ) + _INSERTER,
    "vehicle-interventions": (
        _f("vehicle.licensePlate", "Véhicule"),
        _f("garage.name", "Garage"),
        _f("interventionDate", "Date d'intervention", "date"),
        _f("type", "Type", "label", "maintenance_type"),
        _f("description", "Description"),
        _f("cost", "Coût", "currency"),
        _f("technician", "Technicien"),
        _f("status", "Statut", "label", "operation_status"),
        _f("nextInterventionDate", "Prochaine intervention", "date"),
    ) + _INSERTER,
    "vehicle-pieces": (
        _f("vehicle.licensePlate", "Véhicule"),
        _f("type", "Type de pièce", "label", "piece_type"),
        _f("typeLibre", "Précision"),
        _f("montant", "Montant", "currency"),
        _f("dateDebut", "Date de début", "date"),
        _f("dateFin", "Date de fin", "date"),
        _f("dateProchaine", "Prochain renouvellement", "date"),
        _f("description", "Description"),
        _f("fichierJoint", "Fichier joint"),
    ) + _INSERTER,
    "personnel-users": (
        _f("employeeNumber", "Matricule"),
        _f("firstName", "Prénom"),
        _f("lastName", "Nom"),
        _f("email", "Email"),
        _f("phone", "Téléphone"),
        _f("role", "Rôle"),
        _f("status", "Statut", "label", "employee_status"),
        _f("department", "Département"),
        _f("position", "Poste"),
        _f("workcountry", "Pays de travail", "label", "country"),
        _f("hireDate", "Date d'embauche", "date"),
    ) + _INSERTER,
    "personnel-bonuses": (
        _f("user", "Employé"),
        _f("bonusType", "Type de prime"),
        _f("amount", "Montant", "currency", currency_key="currency"),
        _f("awardDate", "Date d'attribution", "date"),
        _f("reason", "Motif"),
        _f("paymentMethod", "Mode de paiement"),
        _f("status", "Statut", "label", "bonus_status"),
        _f("supportingDocument", "Justificatif"),
    ) + _INSERTER,
    "personnel-absences": (
        _f("user", "Employé"),
        _f("absenceType", "Type d'absence"),
        _f("description", "Description"),
        _f("startDate", "Date de début", "date"),
        _f("endDate", "Date de fin", "date"),
        _f("daysCount", "Nombre de jours"),
        _f("returnDate", "Date de retour", "date"),
        _f("supportingDocument", "Justificatif"),
    ) + _INSERTER,
    "personnel-affectations": (
        _f("user", "Employé"),
        _f("workLocation", "Lieu de travail"),
        _f("site", "Site"),
        _f("affectationtype", "Type d'affectation", "label", "affectation_type"),
        _f("description", "Description"),
        _f("startDate", "Date de début", "date"),
        _f("endDate", "Date de fin", "date"),
        _f("attached_file", "Fichier joint"),
    ) + _INSERTER,
    "personnel-contracts": (
        _f("user", "Employé"),
        _f("contractType", "Type de contrat", "label", "contract_type"),
        _f("startDate", "Date de début", "date"),
        _f("endDate", "Date de fin", "date"),
        _f("post", "Poste"),
        _f("department", "Département"),
        _f("unit", "Unité"),
        _f("grossSalary", "Salaire brut", "currency", currency_key="currency"),
        _f("netSalary", "Salaire net", "currency", currency_key="currency"),
        _f("contractFile", "Contrat signé"),
    ) + _INSERTER,
    "personnel-sanctions": (
        _f("user", "Employé"),
        _f("sanctionType", "Type de sanction"),
        _f("reason", "Motif"),
        _f("sanctionDate", "Date de la sanction", "date"),
        _f("durationDays", "Durée (jours)"),
        _f("decision", "Décision"),
        _f("supportingDocument", "Justificatif"),
    ) + _INSERTER,
    "personnel-medical-records": (
        _f("user", "Employé"),
        _f("visitDate", "Date de visite", "date"),
        _f("description", "Description"),
        _f("diagnosis", "Diagnostic"),
        _f("testsPerformed", "Examens réalisés"),
        _f("testResults", "Résultats"),
        _f("prescribedAction", "Action prescrite"),
        _f("notes", "Notes"),
        _f("nextVisitDate", "Prochaine visite", "date"),
        _f("medicalFile", "Dossier médical"),
    ) + _INSERTER,
    "bank-transactions": (
        _f("name", "Banque"),
        _f("date", "Date", "date"),
        _f("description", "Description"),
        _f("amount", "Montant", "currency"),
        _f("accountType", "Type de compte", "label", "account_type"),
        _f("accountNumber", "N° de compte"),
        _f("attachment", "Pièce jointe"),
    ) + _INSERTER,
    "invoices": (
        _f("invoiceNumber", "N° de facture"),
        _f("supplier", "Fournisseur"),
        _f("serviceType", "Type de service", "label", "service_type"),
        _f("amount", "Montant", "currency"),
        _f("issueDate", "Date d'émission", "date"),
        _f("dueDate", "Date d'échéance", "date"),
        _f("status", "Statut", "label", "invoice_status"),
        _f("attachment", "Pièce jointe"),
    ) + _INSERTER,
    "offers-dao": (
        _f("daoNumber", "N° DAO"),
        _f("clientname", "Client"),
        _f("contactname", "Contact"),
        _f("transmissionDate", "Date de transmission", "date"),
        _f("submissionDate", "Date de soumission", "date"),
        _f("submissionType", "Type de soumission", "label", "submission_type"),
        _f("status", "Statut", "label", "offer_status"),
        _f("activityCode", "Code activité"),
        _f("object", "Objet"),
        _f("attachment", "Pièce jointe"),
    ) + _INSERTER,
    "offers-devis": (
        _f("indexNumber", "N° de devis"),
        _f("clientname", "Client"),
        _f("amount", "Montant", "currency"),
        _f("validityDate", "Date de validité", "date"),
        _f("status", "Statut", "label", "offer_status"),
        _f("description", "Description"),
        _f("attachment", "Pièce jointe"),
    ) + _INSERTER,
    "offers-ami": (
        _f("name", "Nom"),
        _f("client", "Client"),
        _f("contact", "Contact"),
        _f("depositDate", "Date de dépôt", "date"),
        _f("submissionDate", "Date de soumission", "date"),
        _f("status", "Statut", "label", "offer_status"),
        _f("activityCode", "Code activité"),
        _f("soumissionType", "Type de soumission", "label", "submission_type"),
        _f("object", "Objet"),
        _f("comment", "Commentaire"),
        _f("attachment", "Pièce jointe"),
    ) + _INSERTER,
    "alerts": (
        _f("title", "Titre"),
        _f("description", "Description"),
        _f("dueDate", "Échéance", "date"),
        _f("priority", "Priorité", "label", "alert_priority"),
        _f("type", "Catégorie", "label", "alert_type"),
        _f("user", "Assignée à"),
    ) + _INSERTER,
}

# Titres de la fenêtre détail (placeholders = champs de l’enregistrement)
_TITLES: Dict[str, Callable[[Dict[str, Any]], str]] = {
    "vehicles": lambda r: f"Détails du véhicule {r.get('licensePlate') or ''}".strip(),
    "garages": lambda r: f"Détails du garage {r.get('name') or ''}".strip(),
    "offers-dao": lambda r: f"Détails du DAO {r.get('daoNumber') or ''}".strip(),
    "offers-devis": lambda r: f"Détails du Devis {r.get('indexNumber') or ''}".strip(),
    "offers-ami": lambda r: f"Détails de l'AMI {r.get('name') or ''}".strip(),
    "alerts": lambda r: f"Alerte : {r.get('title') or ''}".strip(),
}


def get_nested(data: Any, path: str) -> Any:
    """Lecture d’un chemin pointé ("vehicle.licensePlate") ; None dès qu’un maillon manque."""
    current = data
    for part in path.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current


def render_field(field: DetailField, record: Dict[str, Any]) -> Dict[str, Any]:
    value = get_nested(record, field.key)
    badge = None

    if field.kind == "date":
        display = format_date(value)
    elif field.kind == "currency":
        display = format_currency(value, record.get(field.currency_key) or "XAF")
    elif field.kind == "label" and field.vocabulary:
        display = label(field.vocabulary, value)
        badge = color(field.vocabulary, value) if value not in (None, "") else None
    else:
        display = format_value(value)

    return {"key": field.key, "label": field.label, "value": value, "display": display, "color": badge}


def render_details(path: str, record: Dict[str, Any], title: Optional[str] = None) -> Dict[str, Any]:
    """Construit la vue détail d’un enregistrement sérialisé (format camelCase de l’API)."""
    fields: List[Dict[str, Any]] = [render_field(f, record) for f in DETAIL_FIELDS.get(path, ())]

    if title is None:
        make_title = _TITLES.get(path)
        title = make_title(record) if make_title else "Détails"

    return {"title": title, "fields": fields}
