from __future__ import annotations

from datetime import date
from typing import Literal, Optional

from pydantic import Field

from backoffice.schemas.common import IsoDate, RecordOut, UserSummary, WriteModel

"""
Schemas Alerts (Pydantic).

Rôle (fonctionnel) :
- Contrat HTTP des alertes (rappels / échéances).
- La priorité est contrainte (HIGH / MEDIUM / LOW) : une valeur hors liste -> 400.
"""

AlertPriority = Literal["HIGH", "MEDIUM", "LOW"]


class AlertIn(WriteModel):
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[IsoDate] = None
    priority: Optional[AlertPriority] = None
    alert_type: Optional[str] = Field(default=None, alias="type")
    user_id: Optional[int] = None


class AlertOut(RecordOut):
    id: int = Field(alias="alertId")
    title: str
    description: Optional[str] = None
    due_date: date
    priority: str
    alert_type: str = Field(alias="type")
    user_id: Optional[int] = None
    user: Optional[UserSummary] = None
