"""Schéma initial du back-office.

Rôle (fonctionnel) :
- Crée les tables des cinq domaines : parc automobile, personnel, finance, offres, alertes.
- Chaque table porte les colonnes de tenue (created_at, updated_at, inserter_identity, inserter_country).
- Ordre de création : parents (vehicles, garages, users) avant les tables qui les référencent.

Revision ID: 5c2e8f41a7b3
Revises:
Create Date: 2026-10-17 09:12:44.118203
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# Identifiants Alembic
revision: str = "5c2e8f41a7b3"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


MONEY = sa.Numeric(14, 2)
FILE = sa.String(length=500)


def _pk(name: str = "id") -> sa.Column:
    return sa.Column(name, sa.Integer(), primary_key=True, autoincrement=True)


def _record_columns() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("inserter_identity", sa.String(length=120), nullable=True),
        sa.Column("inserter_country", sa.String(length=30), nullable=True),
    ]


def _fk(column: str, target: str, nullable: bool = False) -> sa.Column:
    return sa.Column(column, sa.Integer(), sa.ForeignKey(target), nullable=nullable)


def _indexes(table: str, *columns: str) -> None:
    for col in ("created_at", "inserter_country") + columns:
        op.create_index(op.f(f"ix_{table}_{col}"), table, [col], unique=False)


def upgrade() -> None:
    """Application des changements de schéma."""
    # --- Parc automobile ---
    op.create_table(
        "vehicles",
        _pk(),
        sa.Column("license_plate", sa.String(length=30), nullable=False),
        sa.Column("brand", sa.String(length=80), nullable=False),
        sa.Column("model", sa.String(length=80), nullable=False),
        sa.Column("vehicle_type", sa.String(length=30), nullable=False),
        sa.Column("fuel_type", sa.String(length=30), nullable=False),
        sa.Column("year", sa.Integer(), nullable=True),
        sa.Column("mileage", sa.Integer(), nullable=True),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("purchase_date", sa.Date(), nullable=True),
        sa.Column("purchase_price", MONEY, nullable=True),
        sa.Column("devise", sa.String(length=3), nullable=True),
        *_record_columns(),
    )
    _indexes("vehicles", "license_plate", "status")

    op.create_table(
        "garages",
        _pk(),
        sa.Column("name", sa.String(length=150), nullable=False),
        sa.Column("address", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=40), nullable=True),
        sa.Column("email", sa.String(length=150), nullable=True),
        sa.Column("specialty", sa.String(length=150), nullable=True),
        *_record_columns(),
    )
    _indexes("garages", "name")

    op.create_table(
        "vehicle_authorizations",
        _pk(),
        _fk("vehicle_id", "vehicles.id"),
        sa.Column("authorization_number", sa.String(length=60), nullable=False),
        sa.Column("issue_date", sa.Date(), nullable=False),
        sa.Column("expiry_date", sa.Date(), nullable=False),
        sa.Column("issuing_authority", sa.String(length=150), nullable=False),
        sa.Column("autorisation_type", sa.String(length=60), nullable=False),
        sa.Column("purpose", sa.Text(), nullable=False),
        sa.Column("status", sa.String(length=30), nullable=False),
        *_record_columns(),
    )
    _indexes("vehicle_authorizations", "vehicle_id", "status")

    op.create_table(
        "contentieux",
        _pk(),
        _fk("vehicle_id", "vehicles.id"),
        sa.Column("incident_date", sa.Date(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("fault_attribution", sa.String(length=150), nullable=False),
        sa.Column("conclusion", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("resolution_date", sa.Date(), nullable=True),
        *_record_columns(),
    )
    _indexes("contentieux", "vehicle_id", "status")

    op.create_table(
        "vehicle_expenses",
        _pk(),
        _fk("vehicle_id", "vehicles.id"),
        sa.Column("expense_date", sa.Date(), nullable=False),
        sa.Column("next_date", sa.Date(), nullable=True),
        sa.Column("code", sa.String(length=40), nullable=True),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("distance", sa.Integer(), nullable=False),
        sa.Column("amount", MONEY, nullable=False),
        sa.Column("devise", sa.String(length=3), nullable=False),
        sa.Column("statut", sa.String(length=30), nullable=False),
        sa.Column("fichier_joint", FILE, nullable=True),
        *_record_columns(),
    )
    _indexes("vehicle_expenses", "vehicle_id", "expense_date", "statut")

    op.create_table(
        "vehicle_interventions",
        _pk(),
        _fk("vehicle_id", "vehicles.id"),
        _fk("garage_id", "garages.id"),
        sa.Column("intervention_date", sa.Date(), nullable=False),
        sa.Column("intervention_type", sa.String(length=60), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("cost", MONEY, nullable=False),
        sa.Column("technician", sa.String(length=120), nullable=False),
        sa.Column("devise", sa.String(length=3), nullable=False),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("next_intervention_date", sa.Date(), nullable=True),
        *_record_columns(),
    )
    _indexes("vehicle_interventions", "vehicle_id", "garage_id", "status")

    op.create_table(
        "vehicle_pieces",
        _pk(),
        _fk("vehicle_id", "vehicles.id"),
        sa.Column("piece_type", sa.String(length=40), nullable=False),
        sa.Column("type_libre", sa.String(length=120), nullable=True),
        sa.Column("montant", MONEY, nullable=True),
        sa.Column("date_debut", sa.Date(), nullable=False),
        sa.Column("date_fin", sa.Date(), nullable=False),
        sa.Column("date_prochaine", sa.Date(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("fichier_joint", FILE, nullable=True),
        *_record_columns(),
    )
    _indexes("vehicle_pieces", "vehicle_id", "piece_type")
    op.create_index("ix_vehicle_pieces_vehicle_type", "vehicle_pieces", ["vehicle_id", "piece_type"], unique=False)

    # --- Personnel ---
    op.create_table(
        "users",
        _pk(),
        sa.Column("employee_number", sa.String(length=40), nullable=True),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=150), nullable=False),
        sa.Column("phone", sa.String(length=40), nullable=True),
        sa.Column("role", sa.String(length=40), nullable=False),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("department", sa.String(length=100), nullable=True),
        sa.Column("position", sa.String(length=100), nullable=True),
        sa.Column("work_country", sa.String(length=30), nullable=True),
        sa.Column("hire_date", sa.Date(), nullable=True),
        *_record_columns(),
        sa.UniqueConstraint("email"),
    )
    _indexes("users", "employee_number", "last_name", "status")

    op.create_table(
        "bonuses",
        _pk(),
        _fk("user_id", "users.id"),
        sa.Column("bonus_type", sa.String(length=60), nullable=False),
        sa.Column("amount", MONEY, nullable=False),
        sa.Column("currency", sa.String(length=3), nullable=False),
        sa.Column("award_date", sa.Date(), nullable=False),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column("payment_method", sa.String(length=40), nullable=False),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("supporting_document", FILE, nullable=True),
        *_record_columns(),
    )
    _indexes("bonuses", "user_id", "status")

    op.create_table(
        "absences",
        _pk(),
        _fk("user_id", "users.id"),
        sa.Column("absence_type", sa.String(length=60), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("days_count", sa.Integer(), nullable=True),
        sa.Column("return_date", sa.Date(), nullable=True),
        sa.Column("supporting_document", FILE, nullable=True),
        *_record_columns(),
    )
    _indexes("absences", "user_id", "absence_type")

    op.create_table(
        "affectations",
        _pk("affectations_id"),
        _fk("user_id", "users.id"),
        sa.Column("work_location", sa.String(length=150), nullable=False),
        sa.Column("site", sa.String(length=150), nullable=False),
        sa.Column("affectation_type", sa.String(length=40), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("attached_file", FILE, nullable=True),
        *_record_columns(),
    )
    _indexes("affectations", "user_id", "affectation_type")

    op.create_table(
        "contracts",
        _pk(),
        _fk("user_id", "users.id"),
        sa.Column("contract_type", sa.String(length=40), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("post", sa.String(length=120), nullable=False),
        sa.Column("department", sa.String(length=120), nullable=False),
        sa.Column("unit", sa.String(length=120), nullable=True),
        sa.Column("gross_salary", MONEY, nullable=False),
        sa.Column("net_salary", MONEY, nullable=False),
        sa.Column("currency", sa.String(length=3), nullable=True),
        sa.Column("contract_file", FILE, nullable=True),
        *_record_columns(),
    )
    _indexes("contracts", "user_id", "contract_type")

    op.create_table(
        "sanctions",
        _pk(),
        _fk("user_id", "users.id"),
        sa.Column("sanction_type", sa.String(length=60), nullable=False),
        sa.Column("reason", sa.Text(), nullable=False),
        sa.Column("sanction_date", sa.Date(), nullable=False),
        sa.Column("duration_days", sa.Integer(), nullable=True),
        sa.Column("decision", sa.Text(), nullable=True),
        sa.Column("supporting_document", FILE, nullable=True),
        *_record_columns(),
    )
    _indexes("sanctions", "user_id", "sanction_type")

    op.create_table(
        "medical_records",
        _pk("medical_records_id"),
        _fk("user_id", "users.id"),
        sa.Column("visit_date", sa.Date(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("diagnosis", sa.Text(), nullable=True),
        sa.Column("tests_performed", sa.Text(), nullable=True),
        sa.Column("test_results", sa.Text(), nullable=True),
        sa.Column("prescribed_action", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("next_visit_date", sa.Date(), nullable=True),
        sa.Column("medical_file", FILE, nullable=True),
        *_record_columns(),
    )
    _indexes("medical_records", "user_id")

    # --- Finance ---
    op.create_table(
        "bank_transactions",
        _pk(),
        sa.Column("bank_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=150), nullable=True),
        sa.Column("transaction_date", sa.Date(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("amount", MONEY, nullable=False),
        sa.Column("devise", sa.String(length=3), nullable=False),
        sa.Column("account_type", sa.String(length=40), nullable=False),
        sa.Column("account_number", sa.String(length=60), nullable=False),
        sa.Column("attachment", FILE, nullable=True),
        *_record_columns(),
    )
    _indexes("bank_transactions", "bank_id", "transaction_date", "account_type")

    op.create_table(
        "invoices",
        _pk(),
        sa.Column("invoice_number", sa.String(length=60), nullable=True),
        sa.Column("supplier", sa.String(length=150), nullable=True),
        sa.Column("service_type", sa.String(length=60), nullable=True),
        sa.Column("amount", MONEY, nullable=True),
        sa.Column("devise", sa.String(length=3), nullable=True),
        sa.Column("issue_date", sa.Date(), nullable=False),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("attachment", FILE, nullable=True),
        *_record_columns(),
    )
    _indexes("invoices", "invoice_number", "status")

    # --- Offres ---
    op.create_table(
        "offers_dao",
        _pk(),
        sa.Column("dao_number", sa.String(length=60), nullable=False),
        sa.Column("client_name", sa.String(length=150), nullable=False),
        sa.Column("contact_name", sa.String(length=150), nullable=True),
        sa.Column("transmission_date", sa.Date(), nullable=False),
        sa.Column("submission_date", sa.Date(), nullable=True),
        sa.Column("submission_type", sa.String(length=30), nullable=False),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("activity_code", sa.String(length=40), nullable=True),
        sa.Column("devise", sa.String(length=3), nullable=True),
        sa.Column("object", sa.Text(), nullable=False),
        sa.Column("attachment", FILE, nullable=True),
        *_record_columns(),
    )
    _indexes("offers_dao", "dao_number", "status")

    op.create_table(
        "offers_devis",
        _pk(),
        sa.Column("index_number", sa.String(length=60), nullable=False),
        sa.Column("client_name", sa.String(length=150), nullable=False),
        sa.Column("amount", MONEY, nullable=False),
        sa.Column("validity_date", sa.Date(), nullable=False),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("devise", sa.String(length=3), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("attachment", FILE, nullable=True),
        *_record_columns(),
    )
    _indexes("offers_devis", "index_number", "status")

    op.create_table(
        "offers_ami",
        _pk(),
        sa.Column("name", sa.String(length=150), nullable=False),
        sa.Column("client", sa.String(length=150), nullable=False),
        sa.Column("contact", sa.String(length=150), nullable=True),
        sa.Column("deposit_date", sa.Date(), nullable=False),
        sa.Column("submission_date", sa.Date(), nullable=True),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("activity_code", sa.String(length=40), nullable=True),
        sa.Column("soumission_type", sa.String(length=30), nullable=True),
        sa.Column("object", sa.Text(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("attachment", FILE, nullable=True),
        *_record_columns(),
    )
    _indexes("offers_ami", "name", "status")

    # --- Alertes ---
    op.create_table(
        "alerts",
        _pk(),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("due_date", sa.Date(), nullable=False),
        sa.Column("priority", sa.String(length=10), nullable=False),
        sa.Column("alert_type", sa.String(length=60), nullable=False),
        _fk("user_id", "users.id", nullable=True),
        *_record_columns(),
    )
    _indexes("alerts", "priority", "alert_type", "user_id")
    op.create_index("ix_alerts_due_priority", "alerts", ["due_date", "priority"], unique=False)


def downgrade() -> None:
    """Retour arrière des changements de schéma."""
    # Enfants avant parents (contraintes FK)
    for table in (
        "alerts",
        "offers_ami",
        "offers_devis",
        "offers_dao",
        "invoices",
        "bank_transactions",
        "medical_records",
        "sanctions",
        "contracts",
        "affectations",
        "absences",
        "bonuses",
        "users",
        "vehicle_pieces",
        "vehicle_interventions",
        "vehicle_expenses",
        "contentieux",
        "vehicle_authorizations",
        "garages",
        "vehicles",
    ):
        op.drop_table(table)
