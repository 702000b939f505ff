"""
cinex.reports - HTML report generation.

Generates a self-contained HTML summary of the records in an EXPORT file.
"""

from __future__ import annotations

from cinex.reports.generator import ReportGenerator
from cinex.reports.summary import build_summary_data, generate_summary

__all__ = ["ReportGenerator", "build_summary_data", "generate_summary"]
