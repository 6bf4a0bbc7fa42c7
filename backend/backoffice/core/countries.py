from __future__ import annotations

from enum import Enum
from typing import Any

"""
Core Countries (multi-pays).

Rôle (fonctionnel) :
- Référentiel des pays d’exploitation (valeurs stockées dans InserterCountry).
- Normalise les codes envoyés par le front (ex: "cameroun", "coteIvoire") vers l’enum stockée.

Décision : une valeur inconnue est refusée (ValueError -> 400) au lieu d’être remplacée
silencieusement par un pays par défaut.
"""


class Country(str, Enum):
    CAMEROON = "CAMEROON"
    IVORY_COAST = "IVORY_COAST"
    ITALIE = "ITALIE"
    GHANA = "GHANA"
    BENIN = "BENIN"
    TOGO = "TOGO"
    ROMANIE = "ROMANIE"


# Codes front (sélecteur de pays) -> enum
_FRONT_CODES = {
    "cameroun": Country.CAMEROON,
    "coteivoire": Country.IVORY_COAST,
    "italie": Country.ITALIE,
    "ghana": Country.GHANA,
    "benin": Country.BENIN,
    "togo": Country.TOGO,
    "romanie": Country.ROMANIE,
}


def normalize_country(value: Any) -> str | None:
    """Retourne la valeur d’enum (str) ou None si vide. Lève ValueError si le code est inconnu."""
    if value is None:
        return None
    if isinstance(value, Country):
        return value.value

    raw = str(value).strip()
    if not raw:
        return None

    upper = raw.upper()
    if upper in Country.__members__:
        return Country[upper].value

    front = _FRONT_CODES.get(raw.lower())
    if front is not None:
        return front.value

    raise ValueError(f"Unknown country: {raw}")
