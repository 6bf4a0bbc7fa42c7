from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.errors import AppHTTPException
from backoffice.core.security import ROLE_DOMAINS, Principal, Role
from backoffice.schemas.dashboard import DashboardAction, DashboardCard, DashboardOut
from backoffice.services.crud import CrudService
from backoffice.services.registry import RESOURCES

"""
Dashboard Service.

Rôle (fonctionnel) :
- Calcule la “vue d’accueil” d’un utilisateur selon son rôle (1 endpoint = 1 payload complet) :
  - en-tête (titre + sous-titre du rôle)
  - une carte par ressource accessible, avec le nombre d’enregistrements dans son périmètre pays
  - actions rapides (formulaires les plus utilisés par le rôle)
- Rôle absent ou inconnu : 403 "Accès non autorisé".

Notes :
- Les domaines visibles viennent de la matrice rôle -> domaines (core/security.py) :
  le dashboard n’affiche jamais une ressource que le rôle ne peut pas consulter.
"""

log = logging.getLogger("backoffice.dashboard")

# En-têtes par rôle (titre, sous-titre)
HEADERS: Dict[Role, Tuple[str, str]] = {
    Role.SUPER_ADMIN: ("Tableau de bord Super Admin", "Vision consolidée de tous les pays"),
    Role.ADMIN: ("Tableau de bord Admin", "Gestion complète du système"),
    Role.DIRECTOR: ("Tableau de bord Direction", "Pilotage de l'activité"),
    Role.DIRECTEUR_TECHNIQUE: ("Tableau de bord Directeur Technique", "Parc automobile et offres"),
    Role.DIRECTEUR_ADMINISTRATIF: ("Tableau de bord Directeur Administratif", "Personnel et finances"),
    Role.ACCOUNTANT: ("Tableau de bord Comptable", "Suivi financier"),
    Role.SECRETARY: ("Tableau de bord Secrétaire", "Gestion administrative"),
    Role.EMPLOYEE: ("Tableau de bord Employé", "Votre espace de travail"),
}

# Actions rapides par domaine (libellé, ressource)
_DOMAIN_ACTIONS: Dict[str, List[Tuple[str, str]]] = {
    "vehicles": [("Ajouter un véhicule", "vehicles"), ("Saisir une dépense", "vehicle-expenses")],
    "personnel": [("Ajouter un employé", "personnel-users"), ("Saisir une absence", "personnel-absences")],
    "finance": [("Saisir une transaction", "bank-transactions"), ("Enregistrer une facture", "invoices")],
    "offers": [("Nouveau DAO", "offers-dao"), ("Nouveau devis", "offers-devis")],
    "alerts": [("Créer une alerte", "alerts")],
}


def resolve_role(principal: Principal) -> Role:
    if principal.role is None or principal.role not in HEADERS:
        raise AppHTTPException(403, "Accès non autorisé", code="FORBIDDEN")
    return principal.role


async def get_dashboard(db: AsyncSession, principal: Principal) -> DashboardOut:
    role = resolve_role(principal)
    title, subtitle = HEADERS[role]
    domains = ROLE_DOMAINS.get(role, ())

    cards: List[DashboardCard] = []
    for resource in RESOURCES:
        if resource.domain not in domains:
            continue
        count = await CrudService(resource).count(db, principal=principal)
        cards.append(
            DashboardCard(
                key=resource.collection,
                title=resource.title or resource.label,
                path=resource.path,
                domain=resource.domain,
                count=count,
            )
        )

    actions = [
        DashboardAction(label=text, path=path)
        for domain in domains
        for text, path in _DOMAIN_ACTIONS.get(domain, [])
    ]

    log.info(
        "dashboard_built",
        extra={"role": role.value, "country": principal.scoped_country, "actor": principal.identity},
    )

    return DashboardOut(
        role=role.value,
        title=title,
        subtitle=subtitle,
        country=principal.scoped_country,
        cards=cards,
        actions=actions,
    )


def dashboard_title(role: Optional[str]) -> str:
    """Titre affiché pour un code rôle (utilitaire front / scripts)."""
    try:
        return HEADERS[Role(role)][0]
    except (KeyError, ValueError):
        return "Accès non autorisé"
