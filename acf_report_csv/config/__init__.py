"""Configuration management for the ACF report conversion pipeline."""

from acf_report_csv.config.settings import get_settings, Settings

__all__ = ["get_settings", "Settings"]
