"""Keyword matching, format heuristics and ATS scoring."""

from ats_checker.analysis.analyzer import ResumeAnalyzer, analyze_resume
from ats_checker.analysis.format_evaluator import FormatCheck, evaluate_format, grade_format
from ats_checker.analysis.keyword_matcher import KeywordMatcher, determine_priority, match_role
from ats_checker.analysis.scorer import ATSScorer, describe_score, score_tone

__all__ = [
    "ATSScorer",
    "FormatCheck",
    "KeywordMatcher",
    "ResumeAnalyzer",
    "analyze_resume",
    "describe_score",
    "determine_priority",
    "evaluate_format",
    "grade_format",
    "match_role",
    "score_tone",
]
