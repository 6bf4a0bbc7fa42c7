from __future__ import annotations

import json
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

"""
Catalogue des libellés (FR) et couleurs d’affichage.

Rôle (fonctionnel) :
- Traduit les codes stockés (AVAILABLE, GASOLINE, CHECKING_ACCOUNT…) en libellés français.
- Associe à certains codes une classe de couleur (badge) pour l’affichage.
- Un code inconnu s’affiche tel quel (pas d’erreur, pas de libellé inventé).
- Helpers de formatage : dates "jj/mm/aaaa" ("-" si vide), montants avec devise, valeurs génériques.
"""

GRAY = "bg-gray-100 text-gray-800"
GREEN = "bg-green-100 text-green-800"
BLUE = "bg-blue-100 text-blue-800"
YELLOW = "bg-yellow-100 text-yellow-800"
RED = "bg-red-100 text-red-800"
ORANGE = "bg-orange-100 text-orange-800"
PURPLE = "bg-purple-100 text-purple-800"

LABELS: Dict[str, Dict[str, str]] = {
    "vehicle_status": {
        "AVAILABLE": "Disponible",
        "IN_USE": "En service",
        "MAINTENANCE": "Maintenance",
        "UNDER_MAINTENANCE": "Maintenance",
        "OUT_OF_SERVICE": "Hors service",
    },
    "fuel_type": {
        "GASOLINE": "Essence",
        "DIESEL": "Diesel",
        "ELECTRIC": "Électrique",
        "HYBRID": "Hybride",
    },
    "vehicle_type": {
        "CAR": "Voiture",
        "TRUCK": "Camion",
        "VAN": "Fourgon",
        "MOTORCYCLE": "Moto",
    },
    "maintenance_type": {
        "PREVENTIVE": "Préventive",
        "CORRECTIVE": "Corrective",
        "PREDICTIVE": "Prédictive",
    },
    "operation_status": {
        "PENDING": "En attente",
        "COMPLETED": "Complété",
        "FAILED": "Échoué",
        "CANCELLED": "Annulé",
        "ACTIVE": "Actif",
        "EXPIRED": "Expiré",
        "SUSPENDED": "Suspendu",
        "SCHEDULED": "Planifiée",
        "IN_PROGRESS": "En cours",
        "RESOLVED": "Résolu",
        "CLOSED": "Clôturé",
    },
    "piece_type": {
        "INSURANCE": "Assurance",
        "TECHNICAL_VISIT": "Visite technique",
        "REGISTRATION": "Carte grise",
    },
    "equipment_status": {
        "GOOD": "Bon",
        "BAD": "Mauvais",
        "BROKEN": "En panne",
        "DECOMMISSIONED": "Réformé",
        "LOST": "Perdu",
        "ASSIGNED": "Affecté",
        "IN_TRANSIT": "En transit",
        "RETURNED": "Retourné",
        "CANCELLED": "Annulé",
    },
    "equipment_category": {
        "TOPOGRAPHIC_MATERIALS": "Matériels Topographiques",
        "COMPUTER_MATERIALS": "Matériels Informatiques",
        "OTHERS": "Autres",
    },
    "equipment_kind": {
        "TOTAL_STATION": "Station Totale",
        "GPS": "GPS",
        "LEVEL": "Niveau",
        "TABLET": "Tablette",
        "OTHERS": "Autres",
    },
    "ownership": {
        "OWNED": "Propriété",
        "LEASED": "Location",
        "BORROWED": "Emprunté",
    },
    "operation_type": {
        "MECHANICAL": "Mécanique",
        "ELECTRONIC": "Électronique",
        "SOFTWARE": "Logiciel",
        "BODYWORK": "Carrosserie",
        "OTHER": "Autre",
        "PURCHASE": "Achat",
        "REPAIR": "Réparation",
        "REVISION": "Révision",
        "CALIBRATION": "Calibration",
    },
    "employee_status": {
        "ACTIVE": "Actif",
        "SUSPENDED": "Suspendu",
        "FIRED": "Licencié",
        "ON_HOLIDAY": "En congé",
    },
    "bonus_status": {
        "APPROVED": "Approuvé",
        "PENDING": "En attente",
        "REJECTED": "Rejeté",
    },
    "contract_type": {
        "PERMANENT_CONTRACT_CDI": "CDI",
        "FIXED_TERM_CONTRACT_CDD": "CDD",
        "INTERNSHIP": "Stage",
        "CONSULTANT": "Consultant",
    },
    "affectation_type": {
        "PERMANENT": "Permanente",
        "TEMPORARY": "Temporaire",
        "TRANSFER": "Mutation",
        "PROJECT_BASED": "Basée sur projet",
        "SPECIAL_ASSIGNMENT": "Mission spéciale",
    },
    "account_type": {
        "CHECKING_ACCOUNT": "Compte courant",
        "SAVINGS_ACCOUNT": "Compte épargne",
        "PROJECT_ACCOUNT": "Compte projet",
    },
    "service_type": {
        "ACCOUNTING_SOFTWARE_LICENSE_FEE": "Redevance logiciel",
        "PROFESSIONAL_FEES": "Honoraires",
        "AIR_TICKET": "Billet d'avion",
        "BUILDING_RENTAL": "Location",
        "INTERNET": "Internet",
        "BUSINESS_TRIP_ASSIGNMENT": "Mission",
        "MAINTENANCE_REPAIR_MOVABLE_PROPERTY": "Entretien",
        "RECEPTIONS_HOSPITALITY": "Réceptions",
        "OTHER_SERVICE": "Autre",
    },
    "invoice_status": {
        "PAID": "Payé",
        "PENDING": "En attente",
        "OVERDUE": "En retard",
    },
    "offer_status": {
        "APPLICATION": "Candidature",
        "UNDER_REVIEW": "En Étude",
        "PENDING": "En Attente",
        "SHORTLISTED": "Retenu",
        "BID_SUBMITTED": "Soumission",
        "NOT_PURSUED": "Pas de suite",
    },
    "submission_type": {
        "ELECTRONIC": "Électronique",
        "PHYSICAL": "Physique",
        "EMAIL": "Email",
    },
    "alert_priority": {
        "HIGH": "Élevée",
        "MEDIUM": "Moyenne",
        "LOW": "Faible",
    },
    "contact_group": {
        "CLIENT": "Client",
        "SUPPLIER": "Fournisseur",
        "CONSULTANTS": "Consultants",
        "PUBLIC_ADMINISTRATION": "Administration Publique",
        "OTHERS": "Autres",
    },
    "company": {
        "SITINFRA_SARL": "SITINFRA SARL",
        "GEOTOP": "GEOTOP",
        "SITALIA": "SITALIA",
        "OTHER_COMPANY": "Autre Entreprise",
    },
    "country": {
        "IVORY_COAST": "Côte d'Ivoire",
        "GHANA": "Ghana",
        "BENIN": "Bénin",
        "CAMEROON": "Cameroun",
        "TOGO": "Togo",
        "ROMANIE": "Romanie",
        "ITALIE": "Italie",
    },
}

COLORS: Dict[str, Dict[str, str]] = {
    "vehicle_status": {
        "AVAILABLE": GREEN,
        "IN_USE": BLUE,
        "MAINTENANCE": YELLOW,
        "UNDER_MAINTENANCE": YELLOW,
        "OUT_OF_SERVICE": RED,
    },
    "operation_status": {
        "PENDING": YELLOW,
        "COMPLETED": GREEN,
        "FAILED": RED,
        "CANCELLED": GRAY,
        "ACTIVE": GREEN,
        "EXPIRED": RED,
        "SUSPENDED": YELLOW,
        "SCHEDULED": BLUE,
        "IN_PROGRESS": BLUE,
        "RESOLVED": GREEN,
        "CLOSED": GRAY,
    },
    "equipment_status": {
        "GOOD": GREEN,
        "BAD": YELLOW,
        "BROKEN": RED,
        "DECOMMISSIONED": GRAY,
        "LOST": ORANGE,
        "ASSIGNED": BLUE,
        "IN_TRANSIT": YELLOW,
        "RETURNED": GREEN,
        "CANCELLED": GRAY,
    },
    "operation_type": {
        "MECHANICAL": BLUE,
        "ELECTRONIC": YELLOW,
        "SOFTWARE": PURPLE,
        "BODYWORK": ORANGE,
        "OTHER": GRAY,
        "PURCHASE": GREEN,
        "REPAIR": RED,
        "REVISION": YELLOW,
        "CALIBRATION": PURPLE,
    },
    "employee_status": {
        "ACTIVE": GREEN,
        "SUSPENDED": YELLOW,
        "FIRED": RED,
        "ON_HOLIDAY": BLUE,
    },
    "bonus_status": {
        "APPROVED": GREEN,
        "PENDING": YELLOW,
        "REJECTED": RED,
    },
    "account_type": {
        "CHECKING_ACCOUNT": BLUE,
        "SAVINGS_ACCOUNT": GREEN,
        "PROJECT_ACCOUNT": PURPLE,
    },
    "invoice_status": {
        "PAID": GREEN,
        "PENDING": YELLOW,
        "OVERDUE": RED,
    },
    "offer_status": {
        "APPLICATION": BLUE,
        "UNDER_REVIEW": YELLOW,
        "PENDING": ORANGE,
        "SHORTLISTED": GREEN,
        "BID_SUBMITTED": PURPLE,
        "NOT_PURSUED": RED,
    },
    "alert_priority": {
        "HIGH": "bg-red-100 text-red-800 border-red-300",
        "MEDIUM": "bg-yellow-100 text-yellow-800 border-yellow-300",
        "LOW": "bg-green-100 text-green-800 border-green-300",
    },
    "contact_group": {
        "CLIENT": BLUE,
        "SUPPLIER": GREEN,
        "CONSULTANTS": PURPLE,
        "PUBLIC_ADMINISTRATION": ORANGE,
        "OTHERS": GRAY,
    },
    # Catégories d’alertes (libellés libres saisis par l’utilisateur)
    "alert_type": {
        "Parc auto": "bg-blue-500",
        "Personnel": "bg-red-500",
        "Affaire/Chantier": "bg-green-500",
        "Facture Client": "bg-purple-500",
        "Facture Fournisseur": "bg-pink-500",
        "Équipement": "bg-orange-500",
        "Général": "bg-gray-500",
    },
}

# Offres : le front historique envoyait aussi des statuts "lisibles" (ex: "Under Review")
_OFFER_STATUS_ALIASES = {
    "Application": "APPLICATION",
    "Under Review": "UNDER_REVIEW",
    "Pending": "PENDING",
    "Shortlisted": "SHORTLISTED",
    "Bid Submitted": "BID_SUBMITTED",
    "Not Pursued": "NOT_PURSUED",
}

_DEFAULT_COLORS = {"alert_type": "bg-gray-500"}

CURRENCY_SYMBOLS = {
    "XAF": "FCFA",
    "XOF": "F CFA",
    "EUR": "€",
    "USD": "$US",
    "GHS": "GH₵",
    "RON": "RON",
}

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}")


def _canonical(vocabulary: str, code: str) -> str:
    if vocabulary == "offer_status":
        return _OFFER_STATUS_ALIASES.get(code, code)
    return code


def label(vocabulary: str, code: Any) -> str:
    """Libellé FR d’un code ; un code inconnu est renvoyé tel quel ("-" si vide)."""
    if code is None or code == "":
        return "-"
    key = _canonical(vocabulary, str(code))
    return LABELS.get(vocabulary, {}).get(key, str(code))


def color(vocabulary: str, code: Any) -> str:
    """Classe de badge d’un code (gris par défaut)."""
    default = _DEFAULT_COLORS.get(vocabulary, GRAY)
    if code is None:
        return default
    key = _canonical(vocabulary, str(code))
    return COLORS.get(vocabulary, {}).get(key, default)


def _to_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and _ISO_DATE_RE.match(value):
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            return None
    return None


def format_date(value: Any) -> str:
    """Date au format français jj/mm/aaaa ; "-" si vide."""
    if value is None or value == "":
        return "-"
    d = _to_date(value)
    if d is None:
        return str(value)
    return d.strftime("%d/%m/%Y")


def format_currency(amount: Any, devise: Optional[str] = "XAF") -> str:
    """
    Montant au format français (espace fine pour les milliers, virgule décimale) + devise.

    Exemple : format_currency(1250000, "XAF") -> "1 250 000,00 FCFA"
    """
    if amount is None or amount == "" or isinstance(amount, bool):
        return "-"
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        return "-"
    if not value.is_finite():
        return "-"

    text = f"{value:,.2f}".replace(",", "\u202f").replace(".", ",")
    code = (devise or "XAF").upper()
    return f"{text} {CURRENCY_SYMBOLS.get(code, code)}"


def format_value(value: Any) -> str:
    """Rendu générique d’une valeur de détail (booléens, dates ISO, résumé salarié, objets)."""
    if value is None or value == "":
        return "-"
    if isinstance(value, bool):
        return "Oui" if value else "Non"
    if isinstance(value, (date, datetime)):
        return format_date(value)
    if isinstance(value, str) and _ISO_DATE_RE.match(value):
        return format_date(value)
    if isinstance(value, dict):
        if value.get("firstName") and value.get("lastName"):
            return f"{value['firstName']} {value['lastName']}"
        return json.dumps(value, ensure_ascii=False, default=str)
    return str(value)
