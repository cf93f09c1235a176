"""HTML report for an analysis result."""

from ats_checker.report.renderer import render_report, save_report

__all__ = ["render_report", "save_report"]
