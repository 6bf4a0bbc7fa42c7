from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.db.base import Base, RecordMixin

"""
Models Personnel.

Rôle (fonctionnel) :
- Employee : fiche salarié (table `users`), pivot du domaine RH.
- Bonus, Absence, Affectation, Contract, Sanction, MedicalRecord : dossiers RH rattachés à un salarié.

Relations :
- Chaque dossier référence Employee via user_id (FK users.id).
- Chargement joint : les listes exposent un résumé salarié (nom, prénom, matricule, email),
  ce qui permet aussi la recherche par nom de l’employé.
"""


class Employee(RecordMixin, Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    employee_number: Mapped[str | None] = mapped_column(String(40), nullable=True, index=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(150), nullable=False, unique=True)
    phone: Mapped[str | None] = mapped_column(String(40), nullable=True)

    # Rôle applicatif (voir core/security.Role) et statut RH
    role: Mapped[str] = mapped_column(String(40), nullable=False, default="EMPLOYEE")
    status: Mapped[str] = mapped_column(String(30), nullable=False, default="ACTIVE", index=True)

    department: Mapped[str | None] = mapped_column(String(100), nullable=True)
    position: Mapped[str | None] = mapped_column(String(100), nullable=True)
    work_country: Mapped[str | None] = mapped_column(String(30), nullable=True)
    hire_date: Mapped[date | None] = mapped_column(Date, nullable=True)


class Bonus(RecordMixin, Base):
    __tablename__ = "bonuses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)

    bonus_type: Mapped[str] = mapped_column(String(60), nullable=False)
    amount: Mapped[float] = mapped_column(Numeric(14, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="XOF")
    award_date: Mapped[date] = mapped_column(Date, nullable=False)
    reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    payment_method: Mapped[str] = mapped_column(String(40), nullable=False)

    # PENDING / APPROVED / REJECTED
    status: Mapped[str] = mapped_column(String(30), nullable=False, default="PENDING", index=True)
    supporting_document: Mapped[str | None] = mapped_column(String(500), nullable=True)

    user = relationship("Employee", lazy="joined")


class Absence(RecordMixin, Base):
    __tablename__ = "absences"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)

    absence_type: Mapped[str] = mapped_column(String(60), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    days_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    return_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    supporting_document: Mapped[str | None] = mapped_column(String(500), nullable=True)

    user = relationship("Employee", lazy="joined")


class Affectation(RecordMixin, Base):
    __tablename__ = "affectations"

    affectations_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)

    work_location: Mapped[str] = mapped_column(String(150), nullable=False)
    site: Mapped[str] = mapped_column(String(150), nullable=False)
    # PERMANENT / TEMPORARY / TRANSFER / PROJECT_BASED / SPECIAL_ASSIGNMENT
    affectation_type: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    attached_file: Mapped[str | None] = mapped_column(String(500), nullable=True)

    user = relationship("Employee", lazy="joined")


class Contract(RecordMixin, Base):
    __tablename__ = "contracts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)

    # PERMANENT_CONTRACT_CDI / FIXED_TERM_CONTRACT_CDD / INTERNSHIP / CONSULTANT
    contract_type: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    post: Mapped[str] = mapped_column(String(120), nullable=False)
    department: Mapped[str] = mapped_column(String(120), nullable=False)
    unit: Mapped[str | None] = mapped_column(String(120), nullable=True)

    gross_salary: Mapped[float] = mapped_column(Numeric(14, 2), nullable=False)
    net_salary: Mapped[float] = mapped_column(Numeric(14, 2), nullable=False)
    currency: Mapped[str | None] = mapped_column(String(3), nullable=True)
    contract_file: Mapped[str | None] = mapped_column(String(500), nullable=True)

    user = relationship("Employee", lazy="joined")


class Sanction(RecordMixin, Base):
    __tablename__ = "sanctions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)

    sanction_type: Mapped[str] = mapped_column(String(60), nullable=False, index=True)
    reason: Mapped[str] = mapped_column(Text, nullable=False)
    sanction_date: Mapped[date] = mapped_column(Date, nullable=False)
    duration_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    decision: Mapped[str | None] = mapped_column(Text, nullable=True)
    supporting_document: Mapped[str | None] = mapped_column(String(500), nullable=True)

    user = relationship("Employee", lazy="joined")


class MedicalRecord(RecordMixin, Base):
    __tablename__ = "medical_records"

    medical_records_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)

    visit_date: Mapped[date] = mapped_column(Date, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    diagnosis: Mapped[str | None] = mapped_column(Text, nullable=True)
    tests_performed: Mapped[str | None] = mapped_column(Text, nullable=True)
    test_results: Mapped[str | None] = mapped_column(Text, nullable=True)
    prescribed_action: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    next_visit_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    medical_file: Mapped[str | None] = mapped_column(String(500), nullable=True)

    user = relationship("Employee", lazy="joined")
