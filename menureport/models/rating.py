"""
Rating data model.

One person's score for one menu item, as read from a ratings file.
"""

from dataclasses import dataclass
from datetime import date as Date
from typing import Optional


@dataclass
class Rating:
    """
    A single rating entry.
    Series order is the person's visit order; callers must not reorder it.
    """
    number: int  # Menu item number, not required to exist in the menu
    date: Optional[Date]  # None when the visit date is unknown
    value: float  # Score given
    max: float  # Top of the scale the score was given on

    @property
    def formatted_date(self) -> str:
        """Human-readable date, e.g. 'Thu Jan 1 2015'. Empty when undated."""
        if self.date is None:
            return ""
        return f"{self.date:%a %b} {self.date.day} {self.date.year}"
