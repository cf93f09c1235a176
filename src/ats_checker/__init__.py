"""ATS resume checker: keyword coverage scoring against job roles."""

from ats_checker.analysis import ResumeAnalyzer, analyze_resume
from ats_checker.catalog import default_catalog

__all__ = ["ResumeAnalyzer", "analyze_resume", "default_catalog"]
__version__ = "0.1.0"
