from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import Field

from backoffice.schemas.common import IsoDate, RecordOut, WriteModel

"""
Schemas Offres (Pydantic) : DAO, devis, AMI.

Noms irréguliers conservés sur le fil : "clientname", "contactname".
"""


class DaoIn(WriteModel):
    dao_number: Optional[str] = None
    client_name: Optional[str] = Field(default=None, alias="clientname")
    contact_name: Optional[str] = Field(default=None, alias="contactname")
    transmission_date: Optional[IsoDate] = None
    submission_date: Optional[IsoDate] = None
    submission_type: Optional[str] = None
    status: Optional[str] = None
    activity_code: Optional[str] = None
    devise: Optional[str] = None
    object: Optional[str] = None
    attachment: Optional[str] = None


class DaoOut(RecordOut):
    id: int = Field(alias="daoId")
    dao_number: str
    client_name: str = Field(alias="clientname")
    contact_name: Optional[str] = Field(default=None, alias="contactname")
    transmission_date: date
    submission_date: Optional[date] = None
    submission_type: str
    status: str
    activity_code: Optional[str] = None
    devise: Optional[str] = None
    object: str
    attachment: Optional[str] = None


class DevisIn(WriteModel):
    index_number: Optional[str] = None
    client_name: Optional[str] = Field(default=None, alias="clientname")
    amount: Optional[float] = None
    validity_date: Optional[IsoDate] = None
    status: Optional[str] = None
    devise: Optional[str] = None
    description: Optional[str] = None
    attachment: Optional[str] = None


class DevisOut(RecordOut):
    id: int = Field(alias="devisId")
    index_number: str
    client_name: str = Field(alias="clientname")
    amount: float
    validity_date: date
    status: str
    devise: str
    description: Optional[str] = None
    attachment: Optional[str] = None


class AmiIn(WriteModel):
    name: Optional[str] = None
    client: Optional[str] = None
    contact: Optional[str] = None
    deposit_date: Optional[IsoDate] = None
    submission_date: Optional[IsoDate] = None
    status: Optional[str] = None
    activity_code: Optional[str] = None
    soumission_type: Optional[str] = None
    object: Optional[str] = None
    comment: Optional[str] = None
    attachment: Optional[str] = None


class AmiOut(RecordOut):
    id: int = Field(alias="amiId")
    name: str
    client: str
    contact: Optional[str] = None
    deposit_date: date
    submission_date: Optional[date] = None
    status: str
    activity_code: Optional[str] = None
    soumission_type: Optional[str] = None
    object: str
    comment: Optional[str] = None
    attachment: Optional[str] = None
