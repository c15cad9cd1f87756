"""Pipeline orchestration and workflow management."""

from acf_report_csv.orchestration.runners import (
    RunSummary,
    convert_report,
    copy_templates,
    discover_reports,
    plan_conversion,
    run_conversion,
)

__all__ = [
    "RunSummary",
    "convert_report",
    "copy_templates",
    "discover_reports",
    "plan_conversion",
    "run_conversion",
]
