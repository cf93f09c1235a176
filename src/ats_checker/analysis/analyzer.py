"""Analysis entry point: resume text + role id -> ResumeAnalysis."""

from __future__ import annotations

import logging

from ats_checker.analysis.keyword_matcher import KeywordMatcher
from ats_checker.analysis.scorer import ATSScorer
from ats_checker.catalog.loader import RoleCatalog, default_catalog
from ats_checker.config import SuggestionConfig
from ats_checker.models.analysis import ResumeAnalysis

logger = logging.getLogger(__name__)


class ResumeAnalyzer:
    """Runs the keyword matcher and scorer for one (text, role) pair.

    Stateless apart from the read-only catalog, so one instance can be
    shared between threads or requests.
    """

    def __init__(
        self,
        catalog: RoleCatalog | None = None,
        *,
        suggestions: SuggestionConfig | None = None,
    ):
        self.catalog = catalog or default_catalog()
        self.matcher = KeywordMatcher(self.catalog)
        self.scorer = ATSScorer(suggestions)

    def analyze(self, resume_text: str, role_id: str) -> ResumeAnalysis:
        role = self.catalog.get_role(role_id)
        match = self.matcher.match(resume_text, role_id)
        total = len(role.keywords) if role is not None else 0

        analysis = self.scorer.calculate_score(
            match.found,
            match.missing,
            total,
            resume_text,
            role_id=role_id,
            role_found=role is not None,
        )
        logger.info(
            "Analyzed resume for %s: score=%d found=%d/%d suggestions=%d",
            role_id, analysis.score, len(analysis.found_keywords), total,
            len(analysis.suggestions),
        )
        return analysis


def analyze_resume(resume_text: str, role_id: str) -> ResumeAnalysis:
    """Analyze against the bundled role catalog."""
    return ResumeAnalyzer().analyze(resume_text, role_id)
