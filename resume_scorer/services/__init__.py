"""Service exports."""

from .report_service import export_json, generate_report, report_filename

__all__ = [
    "export_json",
    "generate_report",
    "report_filename",
]
