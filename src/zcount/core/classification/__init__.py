"""Threshold classification and verbosity-dependent reporting."""

from .reporter import ReportLine, classify_source, format_report, report

__all__ = ["ReportLine", "classify_source", "format_report", "report"]
