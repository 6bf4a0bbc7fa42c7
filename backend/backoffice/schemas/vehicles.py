from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import Field

from backoffice.schemas.common import GarageSummary, IsoDate, RecordOut, VehicleSummary, WriteModel

"""
Schemas Parc automobile (Pydantic).

Rôle (fonctionnel) :
- *In  : payload POST/PUT (champs optionnels, contrôle des requis dans le service CRUD).
- *Out : enregistrement renvoyé (création, mise à jour, liste, détail) avec résumé parent.

Noms irréguliers conservés sur le fil : "type", "autorisationtype", "date".
"""


class VehicleIn(WriteModel):
    license_plate: Optional[str] = None
    brand: Optional[str] = None
    model: Optional[str] = None
    vehicle_type: Optional[str] = Field(default=None, alias="type")
    fuel_type: Optional[str] = None
    year: Optional[int] = None
    mileage: Optional[int] = None
    status: Optional[str] = None
    purchase_date: Optional[IsoDate] = None
    purchase_price: Optional[float] = None
    devise: Optional[str] = None


class VehicleOut(RecordOut):
    id: int = Field(alias="vehicleId")
    license_plate: str
    brand: str
    model: str
    vehicle_type: str = Field(alias="type")
    fuel_type: str
    year: Optional[int] = None
    mileage: Optional[int] = None
    status: str
    purchase_date: Optional[date] = None
    purchase_price: Optional[float] = None
    devise: Optional[str] = None


class GarageIn(WriteModel):
    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    specialty: Optional[str] = None


class GarageOut(RecordOut):
    id: int = Field(alias="garageId")
    name: str
    address: str
    phone: Optional[str] = None
    email: Optional[str] = None
    specialty: Optional[str] = None


class VehicleAuthorizationIn(WriteModel):
    vehicle_id: Optional[int] = None
    authorization_number: Optional[str] = None
    issue_date: Optional[IsoDate] = None
    expiry_date: Optional[IsoDate] = None
    issuing_authority: Optional[str] = None
    autorisation_type: Optional[str] = Field(default=None, alias="autorisationtype")
    purpose: Optional[str] = None
    status: Optional[str] = None


class VehicleAuthorizationOut(RecordOut):
    id: int = Field(alias="authorizationId")
    vehicle_id: int
    authorization_number: str
    issue_date: date
    expiry_date: date
    issuing_authority: str
    autorisation_type: str = Field(alias="autorisationtype")
    purpose: str
    status: str
    vehicle: Optional[VehicleSummary] = None


class ContentieuxIn(WriteModel):
    vehicle_id: Optional[int] = None
    incident_date: Optional[IsoDate] = None
    description: Optional[str] = None
    fault_attribution: Optional[str] = None
    conclusion: Optional[str] = None
    status: Optional[str] = None
    resolution_date: Optional[IsoDate] = None


class ContentieuxOut(RecordOut):
    id: int = Field(alias="contentieuxId")
    vehicle_id: int
    incident_date: date
    description: str
    fault_attribution: str
    conclusion: Optional[str] = None
    status: str
    resolution_date: Optional[date] = None
    vehicle: Optional[VehicleSummary] = None


class VehicleExpenseIn(WriteModel):
    vehicle_id: Optional[int] = None
    expense_date: Optional[IsoDate] = Field(default=None, alias="date")
    next_date: Optional[IsoDate] = None
    code: Optional[str] = None
    description: Optional[str] = None
    distance: Optional[int] = None
    amount: Optional[float] = None
    devise: Optional[str] = None
    statut: Optional[str] = None
    fichier_joint: Optional[str] = None


class VehicleExpenseOut(RecordOut):
    id: int = Field(alias="expenseId")
    vehicle_id: int
    expense_date: date = Field(alias="date")
    next_date: Optional[date] = None
    code: Optional[str] = None
    description: str
    distance: int
    amount: float
    devise: str
    statut: str
    fichier_joint: Optional[str] = None
    vehicle: Optional[VehicleSummary] = None


class VehicleInterventionIn(WriteModel):
    vehicle_id: Optional[int] = None
    garage_id: Optional[int] = None
    intervention_date: Optional[IsoDate] = None
    intervention_type: Optional[str] = Field(default=None, alias="type")
    description: Optional[str] = None
    cost: Optional[float] = None
    technician: Optional[str] = None
    devise: Optional[str] = None
    status: Optional[str] = None
    next_intervention_date: Optional[IsoDate] = None


class VehicleInterventionOut(RecordOut):
    id: int = Field(alias="interventionId")
    vehicle_id: int
    garage_id: int
    intervention_date: date
    intervention_type: str = Field(alias="type")
    description: str
    cost: float
    technician: str
    devise: str
    status: str
    next_intervention_date: Optional[date] = None
    vehicle: Optional[VehicleSummary] = None
    garage: Optional[GarageSummary] = None


class VehiclePieceIn(WriteModel):
    vehicle_id: Optional[int] = None
    piece_type: Optional[str] = Field(default=None, alias="type")
    type_libre: Optional[str] = None
    montant: Optional[float] = None
    date_debut: Optional[IsoDate] = None
    date_fin: Optional[IsoDate] = None
    date_prochaine: Optional[IsoDate] = None
    description: Optional[str] = None
    fichier_joint: Optional[str] = None


class VehiclePieceOut(RecordOut):
    id: int = Field(alias="pieceId")
    vehicle_id: int
    piece_type: str = Field(alias="type")
    type_libre: Optional[str] = None
    montant: Optional[float] = None
    date_debut: date
    date_fin: date
    date_prochaine: Optional[date] = None
    description: Optional[str] = None
    fichier_joint: Optional[str] = None
    vehicle: Optional[VehicleSummary] = None
