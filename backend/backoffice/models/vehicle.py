from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.db.base import Base, RecordMixin

"""
Models Parc automobile.

Rôle (fonctionnel) :
- Vehicle : véhicule du parc (immatriculation, marque, modèle, statut).
- Garage : prestataire d’entretien.
- VehicleAuthorization : autorisation administrative rattachée à un véhicule.
- Contentieux : litige / sinistre rattaché à un véhicule.
- VehicleExpense : dépense (carburant, péage, entretien…) rattachée à un véhicule.
- VehicleIntervention : passage au garage (véhicule + garage).
- VehiclePiece : pièce administrative (assurance, visite technique, carte grise).

Relations :
- Les enregistrements enfants référencent Vehicle (et Garage pour les interventions).
- Chargement joint (lazy="joined") : les listes renvoient un résumé du parent sans requête supplémentaire.
- Suppression d’un véhicule/garage référencé : refusée par la contrainte FK (erreur store).
"""


class Vehicle(RecordMixin, Base):
    __tablename__ = "vehicles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    license_plate: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    brand: Mapped[str] = mapped_column(String(80), nullable=False)
    model: Mapped[str] = mapped_column(String(80), nullable=False)

    # Type (CAR, TRUCK, VAN, MOTORCYCLE) et carburant (GASOLINE, DIESEL, ELECTRIC, HYBRID)
    vehicle_type: Mapped[str] = mapped_column(String(30), nullable=False)
    fuel_type: Mapped[str] = mapped_column(String(30), nullable=False)

    year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    mileage: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Statut opérationnel (AVAILABLE / IN_USE / UNDER_MAINTENANCE / OUT_OF_SERVICE)
    status: Mapped[str] = mapped_column(String(30), nullable=False, default="AVAILABLE", index=True)

    purchase_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    purchase_price: Mapped[float | None] = mapped_column(Numeric(14, 2), nullable=True)
    devise: Mapped[str | None] = mapped_column(String(3), nullable=True)


class Garage(RecordMixin, Base):
    __tablename__ = "garages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(150), nullable=False, index=True)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(40), nullable=True)
    email: Mapped[str | None] = mapped_column(String(150), nullable=True)
    specialty: Mapped[str | None] = mapped_column(String(150), nullable=True)


class VehicleAuthorization(RecordMixin, Base):
    __tablename__ = "vehicle_authorizations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    vehicle_id: Mapped[int] = mapped_column(ForeignKey("vehicles.id"), nullable=False, index=True)

    authorization_number: Mapped[str] = mapped_column(String(60), nullable=False)
    issue_date: Mapped[date] = mapped_column(Date, nullable=False)
    expiry_date: Mapped[date] = mapped_column(Date, nullable=False)
    issuing_authority: Mapped[str] = mapped_column(String(150), nullable=False)
    autorisation_type: Mapped[str] = mapped_column(String(60), nullable=False)
    purpose: Mapped[str] = mapped_column(Text, nullable=False)

    # ACTIVE / EXPIRED / SUSPENDED
    status: Mapped[str] = mapped_column(String(30), nullable=False, default="ACTIVE", index=True)

    vehicle = relationship("Vehicle", lazy="joined")


class Contentieux(RecordMixin, Base):
    __tablename__ = "contentieux"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    vehicle_id: Mapped[int] = mapped_column(ForeignKey("vehicles.id"), nullable=False, index=True)

    incident_date: Mapped[date] = mapped_column(Date, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    fault_attribution: Mapped[str] = mapped_column(String(150), nullable=False)
    conclusion: Mapped[str | None] = mapped_column(Text, nullable=True)

    # PENDING / IN_PROGRESS / RESOLVED / CLOSED
    status: Mapped[str] = mapped_column(String(30), nullable=False, default="PENDING", index=True)
    resolution_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    vehicle = relationship("Vehicle", lazy="joined")


class VehicleExpense(RecordMixin, Base):
    __tablename__ = "vehicle_expenses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    vehicle_id: Mapped[int] = mapped_column(ForeignKey("vehicles.id"), nullable=False, index=True)

    expense_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    next_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Code de dépense (FUEL, TOLL, MAINTENANCE...)
    code: Mapped[str | None] = mapped_column(String(40), nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    distance: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    amount: Mapped[float] = mapped_column(Numeric(14, 2), nullable=False)
    devise: Mapped[str] = mapped_column(String(3), nullable=False)
    statut: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    fichier_joint: Mapped[str | None] = mapped_column(String(500), nullable=True)

    vehicle = relationship("Vehicle", lazy="joined")


class VehicleIntervention(RecordMixin, Base):
    __tablename__ = "vehicle_interventions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    vehicle_id: Mapped[int] = mapped_column(ForeignKey("vehicles.id"), nullable=False, index=True)
    garage_id: Mapped[int] = mapped_column(ForeignKey("garages.id"), nullable=False, index=True)

    intervention_date: Mapped[date] = mapped_column(Date, nullable=False)
    intervention_type: Mapped[str] = mapped_column(String(60), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    cost: Mapped[float] = mapped_column(Numeric(14, 2), nullable=False)
    technician: Mapped[str] = mapped_column(String(120), nullable=False)
    devise: Mapped[str] = mapped_column(String(3), nullable=False)

    # SCHEDULED / IN_PROGRESS / COMPLETED / CANCELLED
    status: Mapped[str] = mapped_column(String(30), nullable=False, default="SCHEDULED", index=True)
    next_intervention_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    vehicle = relationship("Vehicle", lazy="joined")
    garage = relationship("Garage", lazy="joined")


class VehiclePiece(RecordMixin, Base):
    __tablename__ = "vehicle_pieces"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    vehicle_id: Mapped[int] = mapped_column(ForeignKey("vehicles.id"), nullable=False, index=True)

    # INSURANCE / TECHNICAL_VISIT / REGISTRATION (+ libellé libre éventuel)
    piece_type: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    type_libre: Mapped[str | None] = mapped_column(String(120), nullable=True)

    montant: Mapped[float | None] = mapped_column(Numeric(14, 2), nullable=True)
    date_debut: Mapped[date] = mapped_column(Date, nullable=False)
    date_fin: Mapped[date] = mapped_column(Date, nullable=False)
    date_prochaine: Mapped[date | None] = mapped_column(Date, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    fichier_joint: Mapped[str | None] = mapped_column(String(500), nullable=True)

    vehicle = relationship("Vehicle", lazy="joined")

    __table_args__ = (
        Index("ix_vehicle_pieces_vehicle_type", "vehicle_id", "piece_type"),
    )
