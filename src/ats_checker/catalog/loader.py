"""Role catalog: an immutable, id-indexed registry of job roles."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

import yaml

from ats_checker.models.role import JobRole

logger = logging.getLogger(__name__)

ROLES_FILE = Path(__file__).parent / "roles.yaml"


class RoleCatalog:
    """Read-only lookup over a fixed sequence of roles.

    Lookups never raise: an unknown id yields ``None`` so callers can
    degrade to an empty result.
    """

    def __init__(self, roles: list[JobRole] | tuple[JobRole, ...]):
        self._roles = tuple(roles)
        self._by_id: dict[str, JobRole] = {}
        for role in self._roles:
            if role.id in self._by_id:
                raise ValueError(f"Duplicate role id: {role.id}")
            self._by_id[role.id] = role

    def get_role(self, role_id: str) -> JobRole | None:
        return self._by_id.get(role_id)

    def list_roles(self) -> list[JobRole]:
        """Roles in catalog-definition order."""
        return list(self._roles)

    def list_choices(self) -> list[dict[str, str]]:
        """``{id, name}`` pairs for populating a role selector."""
        return [{"id": r.id, "name": r.name} for r in self._roles]

    def __contains__(self, role_id: object) -> bool:
        return role_id in self._by_id

    def __len__(self) -> int:
        return len(self._roles)


def load_catalog(path: str | Path | None = None) -> RoleCatalog:
    """Load a role catalog from YAML (the bundled roles by default)."""
    p = Path(path) if path is not None else ROLES_FILE
    if not p.exists():
        raise FileNotFoundError(f"Role catalog not found: {p}")
    with open(p, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    roles = [JobRole(**entry) for entry in data.get("roles", [])]
    logger.debug("Loaded %d roles from %s", len(roles), p)
    return RoleCatalog(roles)


@lru_cache(maxsize=1)
def default_catalog() -> RoleCatalog:
    """Process-wide catalog built once from the bundled roles file."""
    return load_catalog()
