"""Score & suggestion engine: turns match results into a score and tips."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Callable, Sequence

from ats_checker.analysis.format_evaluator import grade_format
from ats_checker.config import SuggestionConfig
from ats_checker.models.analysis import (
    MissingKeyword,
    Priority,
    ResumeAnalysis,
    describe_score,
)

logger = logging.getLogger(__name__)

KEYWORD_WEIGHT = 70
PRIORITY_WEIGHT = 20
INDUSTRY_TERMS_THRESHOLD = 70

METRIC_PATTERN = re.compile(r"\d+%|\d+x|\$\d+")


@dataclass(frozen=True)
class SuggestionContext:
    score: int
    missing: Sequence[MissingKeyword]
    resume_text: str
    config: SuggestionConfig

    @property
    def normalized_text(self) -> str:
        return self.resume_text.lower()

    def highlighted_keywords(self) -> list[MissingKeyword]:
        high = [k for k in self.missing if k.priority is Priority.HIGH]
        return high[: self.config.max_highlighted_keywords]


@dataclass(frozen=True)
class SuggestionRule:
    name: str
    applies: Callable[[SuggestionContext], bool]
    render: Callable[[SuggestionContext], str]


def _missing_keywords_tip(ctx: SuggestionContext) -> str:
    keywords = ctx.highlighted_keywords()
    joined = " and ".join(f'"{k.keyword}"' for k in keywords)
    gain = len(keywords) * ctx.config.percent_per_keyword
    return f"Add missing high priority keywords: {joined} to improve your ATS score by ~{gain}%."


SUGGESTION_RULES: tuple[SuggestionRule, ...] = (
    SuggestionRule(
        name="high_priority_keywords",
        applies=lambda ctx: bool(ctx.highlighted_keywords()),
        render=_missing_keywords_tip,
    ),
    SuggestionRule(
        name="quantify",
        applies=lambda ctx: not METRIC_PATTERN.search(ctx.resume_text),
        render=lambda ctx: (
            "Quantify your achievements with specific metrics (e.g., "
            '"Improved page load time by 40%" instead of "Improved performance").'
        ),
    ),
    SuggestionRule(
        name="industry_terms",
        applies=lambda ctx: ctx.score < INDUSTRY_TERMS_THRESHOLD,
        render=lambda ctx: (
            "Use industry-standard terms and replace generic phrases with "
            "specific technologies mentioned in job descriptions."
        ),
    ),
    SuggestionRule(
        name="experience_section",
        applies=lambda ctx: (
            "experience" not in ctx.normalized_text
            and "work history" not in ctx.normalized_text
        ),
        render=lambda ctx: (
            'Ensure your resume has a clear "Experience" or "Work History" '
            "section with relevant job titles."
        ),
    ),
    SuggestionRule(
        name="skills_section",
        applies=lambda ctx: "skill" not in ctx.normalized_text,
        render=lambda ctx: (
            'Add a dedicated "Skills" or "Technical Skills" section to '
            "highlight your expertise."
        ),
    ),
)


def _round_half_up(value: float) -> int:
    # round() is banker's rounding; scores round .5 upwards
    return math.floor(value + 0.5)


def keyword_score(found_count: int, total_keywords: int) -> float:
    if total_keywords == 0:
        return 0
    return found_count / total_keywords * KEYWORD_WEIGHT


def priority_bonus(found_count: int, missing: Sequence[MissingKeyword]) -> int:
    # Every found keyword counts towards the high-priority total, not only
    # the priority ones.
    high_missing = sum(1 for k in missing if k.priority is Priority.HIGH)
    high_total = high_missing + found_count
    if high_total == 0:
        return 0
    return _round_half_up((high_total - high_missing) / high_total * PRIORITY_WEIGHT)


def generate_suggestions(
    score: int,
    missing: Sequence[MissingKeyword],
    resume_text: str,
    config: SuggestionConfig | None = None,
) -> list[str]:
    ctx = SuggestionContext(
        score=score,
        missing=missing,
        resume_text=resume_text,
        config=config or SuggestionConfig(),
    )
    return [rule.render(ctx) for rule in SUGGESTION_RULES if rule.applies(ctx)]


class ATSScorer:
    def __init__(self, config: SuggestionConfig | None = None):
        self.config = config or SuggestionConfig()

    def calculate_score(
        self,
        found: Sequence[str],
        missing: Sequence[MissingKeyword],
        total_keywords: int,
        resume_text: str,
        *,
        role_id: str = "",
        role_found: bool = True,
    ) -> ResumeAnalysis:
        kw_score = keyword_score(len(found), total_keywords)
        bonus = priority_bonus(len(found), missing)
        score = min(100, _round_half_up(kw_score + bonus))
        logger.debug(
            "keyword_score=%.2f priority_bonus=%d score=%d", kw_score, bonus, score
        )

        return ResumeAnalysis(
            role_id=role_id,
            role_found=role_found,
            score=score,
            found_keywords=tuple(found),
            missing_keywords=tuple(missing),
            total_keywords=total_keywords,
            format_score=grade_format(resume_text),
            suggestions=tuple(generate_suggestions(score, missing, resume_text, self.config)),
        )


def score_tone(score: int) -> str:
    """Display tone for a score: "success", "warning" or "error"."""
    if score >= 70:
        return "success"
    if score >= 60:
        return "warning"
    return "error"
