"""
backoffice.models

Package ORM (SQLAlchemy) : définition des entités persistées en base.

Rôle (fonctionnel) :
- Centralise les modèles des cinq domaines (parc automobile, personnel, finance, offres, alertes).
- Permet des imports plus simples depuis backoffice.models (ex: from backoffice.models import Vehicle).
- Importer ce package enregistre toutes les tables dans Base.metadata (Alembic, tests).
"""

from backoffice.models.vehicle import (
    Contentieux,
    Garage,
    Vehicle,
    VehicleAuthorization,
    VehicleExpense,
    VehicleIntervention,
    VehiclePiece,
)
from backoffice.models.personnel import Absence, Affectation, Bonus, Contract, Employee, MedicalRecord, Sanction
from backoffice.models.finance import BankTransaction, Invoice
from backoffice.models.offer import Ami, Dao, Devis
from backoffice.models.alert import Alert

__all__ = [
    "Vehicle",
    "Garage",
    "VehicleAuthorization",
    "Contentieux",
    "VehicleExpense",
    "VehicleIntervention",
    "VehiclePiece",
    "Employee",
    "Bonus",
    "Absence",
    "Affectation",
    "Contract",
    "Sanction",
    "MedicalRecord",
    "BankTransaction",
    "Invoice",
    "Dao",
    "Devis",
    "Ami",
    "Alert",
]
