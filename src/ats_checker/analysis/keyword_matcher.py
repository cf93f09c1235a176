"""Keyword matcher: partitions a role's keywords into found and missing."""

from __future__ import annotations

import logging

from ats_checker.catalog.loader import RoleCatalog, default_catalog
from ats_checker.models.analysis import MatchResult, MissingKeyword, Priority
from ats_checker.models.role import JobRole

logger = logging.getLogger(__name__)

# Case-sensitive substrings that mark a keyword as generally important
MEDIUM_PRIORITY_TERMS = ("Git", "Testing", "Agile", "API", "Database")


def determine_priority(keyword: str, role: JobRole) -> Priority:
    if keyword in role.priority_keywords:
        return Priority.HIGH
    if any(term in keyword for term in MEDIUM_PRIORITY_TERMS):
        return Priority.MEDIUM
    return Priority.LOW


def match_role(resume_text: str, role: JobRole) -> MatchResult:
    """Match resume text against one role.

    Plain case-insensitive substring containment: no tokenizing or
    stemming, so "react" also matches inside "reaction".
    """
    normalized = resume_text.lower()
    found: list[str] = []
    missing: list[MissingKeyword] = []

    for keyword in role.keywords:
        if keyword.lower() in normalized:
            found.append(keyword)
        else:
            missing.append(
                MissingKeyword(keyword=keyword, priority=determine_priority(keyword, role))
            )

    # sorted() is stable: catalog order is kept within a tier
    missing = sorted(missing, key=lambda k: k.priority.rank)
    return MatchResult(found=tuple(found), missing=tuple(missing))


class KeywordMatcher:
    def __init__(self, catalog: RoleCatalog | None = None):
        self.catalog = catalog or default_catalog()

    def match(self, resume_text: str, role_id: str) -> MatchResult:
        """Match against a role by id; an unknown id gives an empty result."""
        role = self.catalog.get_role(role_id)
        if role is None:
            logger.warning("Unknown role id %r, returning empty match", role_id)
            return MatchResult()
        result = match_role(resume_text, role)
        logger.debug(
            "Role %s: %d/%d keywords found",
            role.id, len(result.found), len(role.keywords),
        )
        return result
