from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .enums import Role
from .exceptions import AuthorizationError

LOGIN_PATH = "/auth/login"
PROTECTED_PATH = "/protected"

DASHBOARDS = {
    Role.ADMIN: "/admin/dashboard",
    Role.MANAGER: "/manager/dashboard",
    Role.EMPLOYEE: "/employee/dashboard",
}

# Path prefix -> roles allowed under it.
SECTION_ROLES = {
    "/admin": frozenset({Role.ADMIN}),
    "/manager": frozenset({Role.MANAGER}),
    "/employee": frozenset({Role.MANAGER, Role.EMPLOYEE}),
}


@dataclass(frozen=True)
class Identity:
    """What the request layer knows about the signed-in user."""

    user_id: str
    email: Optional[str]
    role: Optional[Role]


def dashboard_for(role: Optional[Role]) -> str:
    return DASHBOARDS.get(role, PROTECTED_PATH) if role else PROTECTED_PATH


def _in_section(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix + "/")


def authorize(path: str, *, authenticated: bool, role: Optional[Role]) -> Optional[str]:
    """Decide whether a request for ``path`` may proceed.

    Returns the path to redirect to, or None when the request is allowed.
    """
    path = path or "/"

    if not authenticated:
        if path.startswith("/auth") or path.startswith("/login"):
            return None
        return LOGIN_PATH

    if path == "/" or path.startswith("/auth"):
        return dashboard_for(role)

    if _in_section(path, PROTECTED_PATH):
        return DASHBOARDS.get(role) if role else None

    for prefix, allowed in SECTION_ROLES.items():
        if _in_section(path, prefix) and role not in allowed:
            return PROTECTED_PATH

    return None


def require_role(identity: Optional[Identity], *allowed: Role) -> Identity:
    """Service-level guard: raise unless the identity holds one of ``allowed``."""
    if identity is None or identity.role not in allowed:
        raise AuthorizationError("You do not have permission to perform this action.")
    return identity
