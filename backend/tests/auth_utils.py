"""
Utilities for testing the auth context (headers X-User-*)
"""

from typing import Dict, Optional


def user_headers(role: Optional[str], country: Optional[str] = None, user_id: str = "42") -> Dict[str, str]:
    """Headers envoyés par le front après connexion."""
    headers = {"X-User-Id": user_id}
    if role:
        headers["X-User-Role"] = role
    if country:
        headers["X-User-Country"] = country
    return headers


ADMIN_CM = user_headers("ADMIN", "cameroun", "42")
ADMIN_GH = user_headers("ADMIN", "ghana", "43")
SUPER_ADMIN = user_headers("SUPER_ADMIN", "cameroun", "1")
EMPLOYEE_CM = user_headers("EMPLOYEE", "cameroun", "77")
ACCOUNTANT_CM = user_headers("ACCOUNTANT", "cameroun", "88")
