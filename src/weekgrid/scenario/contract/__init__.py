"""Schedule document contract models (Pydantic schemas, validators)."""

from .models import CALENDAR_DAYS, Entry, ScheduleDocument

__all__ = ["CALENDAR_DAYS", "Entry", "ScheduleDocument"]
