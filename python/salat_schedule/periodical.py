"""Named date ranges a schedule can cover."""

from datetime import date, timedelta
from enum import StrEnum

from .ephemeris import days_in_months


class Periodical(StrEnum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    CUSTOM = "custom"

    def date_range(self, start: date) -> tuple[date, date]:
        """Inclusive (start, end) covered by this period when it begins at ``start``.

        MONTHLY and YEARLY run to the end of ``start``'s month or year.
        """
        match self:
            case Periodical.DAILY:
                return start, start
            case Periodical.WEEKLY:
                return start, start + timedelta(days=6)
            case Periodical.MONTHLY:
                last_day = days_in_months(start.year)[start.month - 1]
                return start, start.replace(day=last_day)
            case Periodical.YEARLY:
                return start, date(start.year, 12, 31)
            case _:
                raise ValueError(f"{self} has no implied date range; set both dates")

    @classmethod
    def from_date_range(cls, start: date, end: date) -> "Periodical":
        for periodical in (cls.DAILY, cls.WEEKLY, cls.MONTHLY, cls.YEARLY):
            if periodical.date_range(start) == (start, end):
                return periodical
        return cls.CUSTOM
