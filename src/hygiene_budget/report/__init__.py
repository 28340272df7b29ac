"""Report renderer — plain-text output of an energy budget."""

from hygiene_budget.report.headers import section_header
from hygiene_budget.report.renderer import (
    ReportSection,
    build_report,
    render_report,
    write_report,
)

__all__ = [
    "ReportSection",
    "build_report",
    "render_report",
    "section_header",
    "write_report",
]
