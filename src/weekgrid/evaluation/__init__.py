"""Evaluation layer (summary aggregates)."""

from .summary import SUMMARY_COLUMNS, per_day_minutes, summary_dataframe

__all__ = ["SUMMARY_COLUMNS", "per_day_minutes", "summary_dataframe"]
