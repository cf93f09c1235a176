"""Heuristic check of resume structure: sections, bullets, dates, contact info."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ats_checker.models.analysis import FormatGrade

SECTION_NAMES = ("experience", "education", "skills", "projects")
BULLET_MARKERS = ("•", "-", "*")

YEAR_PATTERN = re.compile(r"\b(19|20)\d{2}\b")
PHONE_PATTERN = re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b")

EXCELLENT_POINTS = 6
GOOD_POINTS = 4


@dataclass
class FormatCheck:
    """Result of the structural heuristics, 0-8 points."""
    sections_found: list[str]
    has_bullets: bool
    has_dates: bool
    has_email: bool
    has_phone: bool

    @property
    def points(self) -> int:
        return (
            len(self.sections_found)
            + self.has_bullets
            + self.has_dates
            + self.has_email
            + self.has_phone
        )

    @property
    def grade(self) -> FormatGrade:
        if self.points >= EXCELLENT_POINTS:
            return FormatGrade.EXCELLENT
        if self.points >= GOOD_POINTS:
            return FormatGrade.GOOD
        return FormatGrade.NEEDS_IMPROVEMENT


def evaluate_format(resume_text: str) -> FormatCheck:
    text = resume_text.lower()
    return FormatCheck(
        sections_found=[s for s in SECTION_NAMES if s in text],
        has_bullets=any(m in text for m in BULLET_MARKERS),
        has_dates=bool(YEAR_PATTERN.search(text)),
        has_email="@" in text,
        has_phone=bool(PHONE_PATTERN.search(text)),
    )


def grade_format(resume_text: str) -> FormatGrade:
    return evaluate_format(resume_text).grade
