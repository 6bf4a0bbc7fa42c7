from __future__ import annotations

from datetime import date, datetime
from typing import Any, Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from backoffice.core.countries import normalize_country

"""
Schemas communs (Pydantic).

Rôle (fonctionnel) :
- ApiModel : base de tous les schémas, noms camelCase sur le fil (licensePlate, userId…),
  noms snake_case côté Python.
- WriteModel : base des payloads POST/PUT :
  - tous les champs sont optionnels (la présence des champs requis est vérifiée par le service CRUD,
    qui nomme le premier champ manquant) ;
  - chaîne vide = valeur absente (formulaires du front) ;
  - champs inconnus ignorés ;
  - Inserteridentity toujours converti en chaîne, InserterCountry normalisé (codes front acceptés).
- RecordOut : colonnes de tenue exposées sur chaque enregistrement.
- Résumés parents (véhicule, garage, salarié) imbriqués dans les listes et le détail.
- Pagination : enveloppe commune des listes.
"""


def _date_part(value: Any) -> Any:
    """
    Parse tolérant des dates envoyées par le front.

    Accepte :
    - "2025-03-14"
    - "2025-03-14T00:00:00.000Z" (horodatage ISO : seule la partie date est conservée)
    - "" -> None
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        s = value.strip()
        if not s:
            return None
        if "T" in s:
            return s.split("T", 1)[0]
        return s
    return value


IsoDate = Annotated[date, BeforeValidator(_date_part)]


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class WriteModel(ApiModel):
    model_config = ConfigDict(extra="ignore")

    inserter_identity: Optional[str] = Field(default=None, alias="Inserteridentity")
    inserter_country: Optional[str] = Field(default=None, alias="InserterCountry")

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("inserter_identity", mode="before")
    @classmethod
    def _identity_to_str(cls, v: Any) -> Any:
        # Le front envoie parfois l’identifiant numérique de l’utilisateur
        if v is None:
            return None
        s = str(v).strip()
        return s or None

    @field_validator("inserter_country", mode="before")
    @classmethod
    def _country_normalized(cls, v: Any) -> Any:
        return normalize_country(v)


class RecordOut(ApiModel):
    created_at: datetime
    updated_at: datetime
    inserter_identity: Optional[str] = Field(default=None, alias="Inserteridentity")
    inserter_country: Optional[str] = Field(default=None, alias="InserterCountry")


class VehicleSummary(ApiModel):
    id: int = Field(alias="vehicleId")
    license_plate: str
    brand: str
    model: str


class GarageSummary(ApiModel):
    id: int = Field(alias="garageId")
    name: str
    address: str


class UserSummary(ApiModel):
    id: int
    first_name: str
    last_name: str
    employee_number: Optional[str] = None
    email: Optional[str] = None


class Pagination(ApiModel):
    page: int
    limit: int
    total: int
    total_pages: int


class DeleteOut(BaseModel):
    message: str
