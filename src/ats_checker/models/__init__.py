"""Data models for the ATS checker."""

from ats_checker.models.analysis import (
    FormatGrade,
    MatchResult,
    MissingKeyword,
    Priority,
    ResumeAnalysis,
)
from ats_checker.models.role import JobRole

__all__ = [
    "FormatGrade",
    "JobRole",
    "MatchResult",
    "MissingKeyword",
    "Priority",
    "ResumeAnalysis",
]
