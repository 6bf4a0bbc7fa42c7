from __future__ import annotations

from typing import Dict, List

from backoffice.models import (
    Absence,
    Affectation,
    Alert,
    Ami,
    BankTransaction,
    Bonus,
    Contentieux,
    Contract,
    Dao,
    Devis,
    Employee,
    Garage,
    Invoice,
    MedicalRecord,
    Sanction,
    Vehicle,
    VehicleAuthorization,
    VehicleExpense,
    VehicleIntervention,
    VehiclePiece,
)
from backoffice.schemas.alerts import AlertIn, AlertOut
from backoffice.schemas.finance import BankTransactionIn, BankTransactionOut, InvoiceIn, InvoiceOut
from backoffice.schemas.offers import AmiIn, AmiOut, DaoIn, DaoOut, DevisIn, DevisOut
from backoffice.schemas.personnel import (
    AbsenceIn,
    AbsenceOut,
    AffectationIn,
    AffectationOut,
    BonusIn,
    BonusOut,
    ContractIn,
    ContractOut,
    EmployeeIn,
    EmployeeOut,
    MedicalRecordIn,
    MedicalRecordOut,
    SanctionIn,
    SanctionOut,
)
from backoffice.schemas.vehicles import (
    ContentieuxIn,
    ContentieuxOut,
    GarageIn,
    GarageOut,
    VehicleAuthorizationIn,
    VehicleAuthorizationOut,
    VehicleExpenseIn,
    VehicleExpenseOut,
    VehicleIn,
    VehicleInterventionIn,
    VehicleInterventionOut,
    VehicleOut,
    VehiclePieceIn,
    VehiclePieceOut,
)
from backoffice.services.crud import ListFilter, Resource

"""
Registry des ressources.

Rôle (fonctionnel) :
- Déclare chaque entité exposée par l’API (une entrée = un chemin HTTP) :
  - path / collection / label : contrat du front (clé de liste, messages d’erreur)
  - domain : domaine fonctionnel (contrôle d’accès par rôle, dashboards)
  - required : champs requis à la création, dans l’ordre de contrôle
  - search : champs de la recherche texte (y compris champs du parent)
  - filters : filtres d’égalité en query param (`all` = pas de filtre)
- Le filtre InserterCountry est ajouté automatiquement à toutes les ressources.
"""

_USER_SEARCH = (("user", "first_name"), ("user", "last_name"))

RESOURCES: List[Resource] = [
    # --- Parc automobile ---
    Resource(
        path="vehicles",
        model=Vehicle,
        schema_in=VehicleIn,
        schema_out=VehicleOut,
        collection="vehicles",
        label="Vehicle",
        domain="vehicles",
        title="Véhicules",
        required=("license_plate", "brand", "model", "vehicle_type", "fuel_type"),
        search=("license_plate", "brand", "model"),
        filters=(
            ListFilter("status", "status"),
            ListFilter("type", "vehicle_type"),
            ListFilter("fuelType", "fuel_type"),
        ),
    ),
    Resource(
        path="garages",
        model=Garage,
        schema_in=GarageIn,
        schema_out=GarageOut,
        collection="garages",
        label="Garage",
        domain="vehicles",
        title="Garages",
        required=("name", "address"),
        search=("name", "address", "specialty"),
    ),
    Resource(
        path="vehicle-authorizations",
        model=VehicleAuthorization,
        schema_in=VehicleAuthorizationIn,
        schema_out=VehicleAuthorizationOut,
        collection="authorizations",
        label="Authorization",
        domain="vehicles",
        title="Autorisations",
        required=(
            "vehicle_id",
            "authorization_number",
            "issue_date",
            "expiry_date",
            "issuing_authority",
            "autorisation_type",
            "purpose",
        ),
        search=("authorization_number", "issuing_authority", "purpose"),
        filters=(
            ListFilter("status", "status"),
            ListFilter("vehicleId", "vehicle_id", int),
        ),
    ),
    Resource(
        path="vehicle-contentieux",
        model=Contentieux,
        schema_in=ContentieuxIn,
        schema_out=ContentieuxOut,
        collection="contentieux",
        label="Contentieux",
        domain="vehicles",
        title="Contentieux",
        required=("vehicle_id", "incident_date", "description", "fault_attribution", "status"),
        search=("description", "conclusion"),
        filters=(
            ListFilter("status", "status"),
            ListFilter("vehicleId", "vehicle_id", int),
        ),
    ),
    Resource(
        path="vehicle-expenses",
        model=VehicleExpense,
        schema_in=VehicleExpenseIn,
        schema_out=VehicleExpenseOut,
        collection="expenses",
        label="Expense",
        domain="vehicles",
        title="Dépenses véhicules",
        required=("vehicle_id", "expense_date", "description", "amount", "statut", "devise"),
        search=("description", "code"),
        filters=(
            ListFilter("statut", "statut"),
            ListFilter("vehicleId", "vehicle_id", int),
        ),
    ),
    Resource(
        path="vehicle-interventions",
        model=VehicleIntervention,
        schema_in=VehicleInterventionIn,
        schema_out=VehicleInterventionOut,
        collection="interventions",
        label="Intervention",
        domain="vehicles",
        title="Interventions",
        required=(
            "vehicle_id",
            "garage_id",
            "intervention_date",
            "intervention_type",
            "description",
            "cost",
            "technician",
            "status",
            "devise",
        ),
        search=("description", "technician"),
        filters=(
            ListFilter("status", "status"),
            ListFilter("vehicleId", "vehicle_id", int),
            ListFilter("garageId", "garage_id", int),
        ),
    ),
    Resource(
        path="vehicle-pieces",
        model=VehiclePiece,
        schema_in=VehiclePieceIn,
        schema_out=VehiclePieceOut,
        collection="pieces",
        label="Piece",
        domain="vehicles",
        title="Pièces administratives",
        required=("vehicle_id", "piece_type", "date_debut", "date_fin"),
        search=("type_libre", "description", ("vehicle", "license_plate")),
        filters=(
            ListFilter("type", "piece_type"),
            ListFilter("vehicleId", "vehicle_id", int),
        ),
    ),
    # --- Personnel ---
    Resource(
        path="personnel-users",
        model=Employee,
        schema_in=EmployeeIn,
        schema_out=EmployeeOut,
        collection="users",
        label="User",
        domain="personnel",
        title="Employés",
        required=("first_name", "last_name", "email"),
        search=("first_name", "last_name", "email", "employee_number"),
        filters=(
            ListFilter("status", "status"),
            ListFilter("role", "role"),
            ListFilter("department", "department"),
        ),
    ),
    Resource(
        path="personnel-bonuses",
        model=Bonus,
        schema_in=BonusIn,
        schema_out=BonusOut,
        collection="bonuses",
        label="Bonus",
        domain="personnel",
        title="Primes",
        required=("user_id", "bonus_type", "amount", "award_date", "payment_method"),
        search=_USER_SEARCH + ("bonus_type",),
        filters=(
            ListFilter("status", "status"),
            ListFilter("userId", "user_id", int),
        ),
    ),
    Resource(
        path="personnel-absences",
        model=Absence,
        schema_in=AbsenceIn,
        schema_out=AbsenceOut,
        collection="absences",
        label="Absence",
        domain="personnel",
        title="Absences",
        required=("user_id", "absence_type", "start_date", "end_date"),
        search=_USER_SEARCH + ("absence_type",),
        filters=(
            ListFilter("absenceType", "absence_type"),
            ListFilter("userId", "user_id", int),
        ),
    ),
    Resource(
        path="personnel-affectations",
        model=Affectation,
        schema_in=AffectationIn,
        schema_out=AffectationOut,
        collection="affectations",
        label="Affectation",
        domain="personnel",
        title="Affectations",
        required=("user_id", "work_location", "site", "affectation_type", "start_date"),
        search=_USER_SEARCH + ("work_location", "site"),
        filters=(
            ListFilter("affectationtype", "affectation_type"),
            ListFilter("userId", "user_id", int),
        ),
    ),
    Resource(
        path="personnel-contracts",
        model=Contract,
        schema_in=ContractIn,
        schema_out=ContractOut,
        collection="contracts",
        label="Contract",
        domain="personnel",
        title="Contrats",
        required=(
            "user_id",
            "contract_type",
            "start_date",
            "post",
            "department",
            "gross_salary",
            "net_salary",
        ),
        search=_USER_SEARCH + ("contract_type", "department", "post"),
        filters=(
            ListFilter("contractType", "contract_type"),
            ListFilter("userId", "user_id", int),
        ),
    ),
    Resource(
        path="personnel-sanctions",
        model=Sanction,
        schema_in=SanctionIn,
        schema_out=SanctionOut,
        collection="sanctions",
        label="Sanction",
        domain="personnel",
        title="Sanctions",
        required=("user_id", "sanction_type", "reason", "sanction_date"),
        search=_USER_SEARCH + ("sanction_type", "reason"),
        filters=(
            ListFilter("sanctionType", "sanction_type"),
            ListFilter("userId", "user_id", int),
        ),
    ),
    Resource(
        path="personnel-medical-records",
        model=MedicalRecord,
        schema_in=MedicalRecordIn,
        schema_out=MedicalRecordOut,
        collection="medicalRecords",
        label="Medical record",
        domain="personnel",
        title="Dossiers médicaux",
        required=("user_id", "visit_date"),
        search=_USER_SEARCH + ("description", "diagnosis"),
        filters=(ListFilter("userId", "user_id", int),),
    ),
    # --- Finance ---
    Resource(
        path="bank-transactions",
        model=BankTransaction,
        schema_in=BankTransactionIn,
        schema_out=BankTransactionOut,
        collection="transactions",
        label="Transaction",
        domain="finance",
        title="Transactions bancaires",
        required=("bank_id", "transaction_date", "amount", "account_type", "account_number", "devise"),
        search=("name", "description", "account_number"),
        filters=(
            ListFilter("accountType", "account_type"),
            ListFilter("bankId", "bank_id", int),
        ),
    ),
    Resource(
        path="invoices",
        model=Invoice,
        schema_in=InvoiceIn,
        schema_out=InvoiceOut,
        collection="invoices",
        label="Invoice",
        domain="finance",
        title="Factures",
        required=("issue_date",),
        search=("invoice_number", "supplier"),
        filters=(
            ListFilter("status", "status"),
            ListFilter("serviceType", "service_type"),
        ),
    ),
    # --- Offres ---
    Resource(
        path="offers-dao",
        model=Dao,
        schema_in=DaoIn,
        schema_out=DaoOut,
        collection="daos",
        label="DAO",
        domain="offers",
        title="Appels d’offres (DAO)",
        required=("dao_number", "client_name", "transmission_date", "submission_type", "object"),
        search=("dao_number", "client_name", "object"),
        filters=(
            ListFilter("status", "status"),
            ListFilter("submissionType", "submission_type"),
        ),
    ),
    Resource(
        path="offers-devis",
        model=Devis,
        schema_in=DevisIn,
        schema_out=DevisOut,
        collection="devis",
        label="Devis",
        domain="offers",
        title="Devis",
        required=("index_number", "client_name", "amount", "validity_date", "devise"),
        search=("index_number", "client_name", "description"),
        filters=(ListFilter("status", "status"),),
    ),
    Resource(
        path="offers-ami",
        model=Ami,
        schema_in=AmiIn,
        schema_out=AmiOut,
        collection="amis",
        label="AMI",
        domain="offers",
        title="Manifestations d’intérêt (AMI)",
        required=("name", "client", "deposit_date", "object"),
        search=("name", "client", "object"),
        filters=(ListFilter("status", "status"),),
    ),
    # --- Alertes ---
    Resource(
        path="alerts",
        model=Alert,
        schema_in=AlertIn,
        schema_out=AlertOut,
        collection="alerts",
        label="Alert",
        domain="alerts",
        title="Alertes",
        required=("title", "due_date", "priority", "alert_type"),
        search=("title", "description", "alert_type"),
        filters=(
            ListFilter("priority", "priority"),
            ListFilter("type", "alert_type"),
            ListFilter("userId", "user_id", int),
        ),
    ),
]

_BY_PATH: Dict[str, Resource] = {r.path: r for r in RESOURCES}


def get_resource(path: str) -> Resource:
    """Retourne la ressource déclarée pour un chemin (KeyError si inconnue)."""
    return _BY_PATH[path]


def resources_for_domain(domain: str) -> List[Resource]:
    return [r for r in RESOURCES if r.domain == domain]
