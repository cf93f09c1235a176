"""Pydantic models for keyword matching and scoring output."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Priority(str, Enum):
    HIGH = "High Priority"
    MEDIUM = "Medium Priority"
    LOW = "Low Priority"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


class FormatGrade(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    NEEDS_IMPROVEMENT = "Needs Improvement"


def describe_score(score: int) -> str:
    if score >= 80:
        return "Excellent Match"
    if score >= 70:
        return "Good Match"
    if score >= 60:
        return "Fair Match"
    return "Needs Improvement"


class MissingKeyword(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyword: str
    priority: Priority


class MatchResult(BaseModel):
    """Partition of a role's keywords into found and missing."""

    model_config = ConfigDict(frozen=True)

    found: tuple[str, ...] = ()
    missing: tuple[MissingKeyword, ...] = ()  # High, then Medium, then Low


class ResumeAnalysis(BaseModel):
    """Final result of one analysis run."""

    model_config = ConfigDict(frozen=True)

    role_id: str
    role_found: bool = True
    score: int  # 0-100
    found_keywords: tuple[str, ...]
    missing_keywords: tuple[MissingKeyword, ...]
    total_keywords: int
    format_score: FormatGrade
    suggestions: tuple[str, ...]  # empty means well optimized

    @property
    def score_description(self) -> str:
        return describe_score(self.score)

    @property
    def high_priority_missing(self) -> list[MissingKeyword]:
        return [k for k in self.missing_keywords if k.priority is Priority.HIGH]
