# backend/scripts/browse.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Sequence

import httpx
from pydantic.alias_generators import to_camel

# Permet de lancer le script depuis backend/ sans souci d'import
BACKEND_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_DIR))

from backoffice.services.dashboard_service import dashboard_title
from backoffice.services.registry import RESOURCES, get_resource
from backoffice.views.details import get_nested, render_details
from backoffice.views.labels import format_value
from backoffice.views.listing import local_view

"""
Consultation du back-office en terminal.

Rôle (fonctionnel) :
- `list`  : charge une page de la ressource via l’API, puis recherche / filtre / trie localement
            (comme les écrans liste du front) et affiche un tableau.
- `show`  : affiche la vue détail d’un enregistrement (libellés FR, montants, dates).
- `dashboard` : affiche le tableau de bord du rôle courant.

Exemples :
    python scripts/browse.py --role ADMIN --country cameroun list vehicles --search toyota
    python scripts/browse.py list vehicle-expenses --filter statut=PAID --sort date --desc
    python scripts/browse.py show vehicles 12
"""


def _client(args: argparse.Namespace) -> httpx.Client:
    headers = {}
    if args.role:
        headers["X-User-Role"] = args.role
    if args.country:
        headers["X-User-Country"] = args.country
    if args.user:
        headers["X-User-Id"] = args.user
    if args.api_key:
        headers["X-API-Key"] = args.api_key
    return httpx.Client(base_url=args.base_url, headers=headers, timeout=15.0)


def _fail(response: httpx.Response) -> None:
    try:
        message = response.json().get("error", response.text)
    except ValueError:
        message = response.text
    print(f"❌ {response.status_code}: {message}", file=sys.stderr)
    raise SystemExit(1)


def search_keys(path: str) -> List[str]:
    """Clés de recherche locale (noms du front, chemins pointés pour les parents)."""
    resource = get_resource(path)
    keys = []
    for spec in resource.search:
        if isinstance(spec, tuple):
            relation, attr = spec
            keys.append(f"{relation}.{to_camel(attr)}")
        else:
            keys.append(resource.wire_name(spec))
    return keys


def render_table(rows: Sequence[Dict[str, Any]], columns: Sequence[str]) -> str:
    cells = [[format_value(get_nested(r, c)) for c in columns] for r in rows]
    widths = [max([len(c)] + [len(row[i]) for row in cells]) for i, c in enumerate(columns)]
    lines = ["  ".join(c.ljust(w) for c, w in zip(columns, widths))]
    lines.append("  ".join("-" * w for w in widths))
    for row in cells:
        lines.append("  ".join(v.ljust(w) for v, w in zip(row, widths)))
    return "\n".join(lines)


def _parse_filters(raw: Sequence[str]) -> Dict[str, str]:
    filters = {}
    for item in raw:
        key, sep, value = item.partition("=")
        if not sep:
            raise SystemExit(f"Filtre invalide (attendu clé=valeur): {item}")
        filters[key.strip()] = value.strip()
    return filters


def cmd_list(args: argparse.Namespace) -> None:
    resource = get_resource(args.resource)
    with _client(args) as client:
        r = client.get(f"/{resource.path}", params={"page": 1, "limit": args.fetch})
    if r.status_code != 200:
        _fail(r)

    records = r.json()[resource.collection]
    view = local_view(
        records,
        search=args.search,
        search_keys=search_keys(resource.path),
        filters=_parse_filters(args.filter),
        sort_by=args.sort,
        descending=args.desc,
        page=args.page,
        per_page=args.per_page,
    )

    if args.columns:
        columns = args.columns.split(",")
    else:
        columns = list(records[0].keys())[:6] if records else []
    print(render_table(view.items, columns))
    print(f"\nPage {view.page}/{max(view.total_pages, 1)} ({view.total} enregistrement(s))")


def cmd_show(args: argparse.Namespace) -> None:
    resource = get_resource(args.resource)
    with _client(args) as client:
        r = client.get(f"/{resource.path}/{args.id}")
    if r.status_code != 200:
        _fail(r)

    details = render_details(resource.path, r.json())
    print(details["title"])
    print("=" * len(details["title"]))
    width = max((len(f["label"]) for f in details["fields"]), default=0)
    for f in details["fields"]:
        print(f"{f['label'].ljust(width)}  {f['display']}")


def cmd_dashboard(args: argparse.Namespace) -> None:
    with _client(args) as client:
        r = client.get("/dashboard")
    if r.status_code != 200:
        print(dashboard_title(args.role), file=sys.stderr)
        _fail(r)

    data = r.json()
    print(f"{data['title']} - {data['subtitle']}")
    for card in data["cards"]:
        print(f"  {card['title']:<35} {card['count']:>6}")
    if data["actions"]:
        print("\nActions : " + ", ".join(a["label"] for a in data["actions"]))


def main():
    parser = argparse.ArgumentParser(description="Consultation du back-office (terminal)")
    parser.add_argument("--base-url", default="http://127.0.0.1:8000", help="URL de l’API")
    parser.add_argument("--role", default="ADMIN", help="Rôle (X-User-Role)")
    parser.add_argument("--country", default=None, help="Pays (X-User-Country), ex: cameroun")
    parser.add_argument("--user", default=None, help="Identité (X-User-Id)")
    parser.add_argument("--api-key", default=None, help="Clé API (si API_KEY est configurée)")
    sub = parser.add_subparsers(dest="command", required=True)

    paths = [r.path for r in RESOURCES]

    p_list = sub.add_parser("list", help="Liste paginée d’une ressource")
    p_list.add_argument("resource", choices=paths)
    p_list.add_argument("--search", default=None)
    p_list.add_argument("--filter", action="append", default=[], help="clé=valeur (répétable, 'all' = pas de filtre)")
    p_list.add_argument("--sort", default=None, help="Clé de tri (ex: createdAt, user.lastName)")
    p_list.add_argument("--desc", action="store_true")
    p_list.add_argument("--page", type=int, default=1)
    p_list.add_argument("--per-page", type=int, default=10)
    p_list.add_argument("--fetch", type=int, default=200, help="Nombre d’enregistrements chargés depuis l’API")
    p_list.add_argument("--columns", default=None, help="Colonnes affichées (CSV)")
    p_list.set_defaults(func=cmd_list)

    p_show = sub.add_parser("show", help="Vue détail d’un enregistrement")
    p_show.add_argument("resource", choices=paths)
    p_show.add_argument("id", type=int)
    p_show.set_defaults(func=cmd_show)

    p_dash = sub.add_parser("dashboard", help="Tableau de bord du rôle")
    p_dash.set_defaults(func=cmd_dashboard)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
