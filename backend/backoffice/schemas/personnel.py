from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import Field

from backoffice.schemas.common import IsoDate, RecordOut, UserSummary, WriteModel

"""
Schemas Personnel (Pydantic).

Noms irréguliers conservés sur le fil : "workcountry", "affectationtype", "attached_file",
"affectationsId", "medicalRecordsId".
"""


class EmployeeIn(WriteModel):
    employee_number: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[str] = None
    status: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    work_country: Optional[str] = Field(default=None, alias="workcountry")
    hire_date: Optional[IsoDate] = None


class EmployeeOut(RecordOut):
    id: int
    employee_number: Optional[str] = None
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    role: str
    status: str
    department: Optional[str] = None
    position: Optional[str] = None
    work_country: Optional[str] = Field(default=None, alias="workcountry")
    hire_date: Optional[date] = None


class BonusIn(WriteModel):
    user_id: Optional[int] = None
    bonus_type: Optional[str] = None
    amount: Optional[float] = None
    currency: Optional[str] = None
    award_date: Optional[IsoDate] = None
    reason: Optional[str] = None
    payment_method: Optional[str] = None
    status: Optional[str] = None
    supporting_document: Optional[str] = None


class BonusOut(RecordOut):
    id: int = Field(alias="bonusId")
    user_id: int
    bonus_type: str
    amount: float
    currency: str
    award_date: date
    reason: Optional[str] = None
    payment_method: str
    status: str
    supporting_document: Optional[str] = None
    user: Optional[UserSummary] = None


class AbsenceIn(WriteModel):
    user_id: Optional[int] = None
    absence_type: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[IsoDate] = None
    end_date: Optional[IsoDate] = None
    days_count: Optional[int] = None
    return_date: Optional[IsoDate] = None
    supporting_document: Optional[str] = None


class AbsenceOut(RecordOut):
    id: int = Field(alias="absenceId")
    user_id: int
    absence_type: str
    description: Optional[str] = None
    start_date: date
    end_date: date
    days_count: Optional[int] = None
    return_date: Optional[date] = None
    supporting_document: Optional[str] = None
    user: Optional[UserSummary] = None


class AffectationIn(WriteModel):
    user_id: Optional[int] = None
    work_location: Optional[str] = None
    site: Optional[str] = None
    affectation_type: Optional[str] = Field(default=None, alias="affectationtype")
    description: Optional[str] = None
    start_date: Optional[IsoDate] = None
    end_date: Optional[IsoDate] = None
    attached_file: Optional[str] = Field(default=None, alias="attached_file")


class AffectationOut(RecordOut):
    affectations_id: int
    user_id: int
    work_location: str
    site: str
    affectation_type: str = Field(alias="affectationtype")
    description: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None
    attached_file: Optional[str] = Field(default=None, alias="attached_file")
    user: Optional[UserSummary] = None


class ContractIn(WriteModel):
    user_id: Optional[int] = None
    contract_type: Optional[str] = None
    start_date: Optional[IsoDate] = None
    end_date: Optional[IsoDate] = None
    post: Optional[str] = None
    department: Optional[str] = None
    unit: Optional[str] = None
    gross_salary: Optional[float] = None
    net_salary: Optional[float] = None
    currency: Optional[str] = None
    contract_file: Optional[str] = None


class ContractOut(RecordOut):
    id: int = Field(alias="contractId")
    user_id: int
    contract_type: str
    start_date: date
    end_date: Optional[date] = None
    post: str
    department: str
    unit: Optional[str] = None
    gross_salary: float
    net_salary: float
    currency: Optional[str] = None
    contract_file: Optional[str] = None
    user: Optional[UserSummary] = None


class SanctionIn(WriteModel):
    user_id: Optional[int] = None
    sanction_type: Optional[str] = None
    reason: Optional[str] = None
    sanction_date: Optional[IsoDate] = None
    duration_days: Optional[int] = None
    decision: Optional[str] = None
    supporting_document: Optional[str] = None


class SanctionOut(RecordOut):
    id: int = Field(alias="sanctionId")
    user_id: int
    sanction_type: str
    reason: str
    sanction_date: date
    duration_days: Optional[int] = None
    decision: Optional[str] = None
    supporting_document: Optional[str] = None
    user: Optional[UserSummary] = None


class MedicalRecordIn(WriteModel):
    user_id: Optional[int] = None
    visit_date: Optional[IsoDate] = None
    description: Optional[str] = None
    diagnosis: Optional[str] = None
    tests_performed: Optional[str] = None
    test_results: Optional[str] = None
    prescribed_action: Optional[str] = None
    notes: Optional[str] = None
    next_visit_date: Optional[IsoDate] = None
    medical_file: Optional[str] = None


class MedicalRecordOut(RecordOut):
    medical_records_id: int
    user_id: int
    visit_date: date
    description: Optional[str] = None
    diagnosis: Optional[str] = None
    tests_performed: Optional[str] = None
    test_results: Optional[str] = None
    prescribed_action: Optional[str] = None
    notes: Optional[str] = None
    next_visit_date: Optional[date] = None
    medical_file: Optional[str] = None
    user: Optional[UserSummary] = None
