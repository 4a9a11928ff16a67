"""
Per-person statistics data model.

Output of the aggregation pass, consumed by the renderer.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import List

WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


@dataclass
class PersonStatistics:
    """
    Aggregate statistics for one person's rating series.
    Ratios are percentages (0-100) of all entries, dated or not.
    """
    entries: int = 0
    has_date: bool = False
    max_per_week: int = 0
    longest: timedelta = field(default_factory=timedelta)
    longest_after: str = ""  # Name of the item reached after the longest gap

    weekdays: List[int] = field(default_factory=lambda: [0] * 7)  # Sunday first
    weekday_ratios: List[float] = field(default_factory=list)
    ratings: List[int] = field(default_factory=list)  # Value histogram
    rating_ratios: List[float] = field(default_factory=list)

    @property
    def longest_days(self) -> float:
        return self.longest.total_seconds() / 3600 / 24

    @property
    def formatted_longest(self) -> str:
        return f"{self.longest_days:.0f} days"

    def to_dict(self) -> dict:
        """Flatten into a single summary row."""
        row = {
            "entries": self.entries,
            "has_date": self.has_date,
            "max_per_week": self.max_per_week,
            "longest_days": round(self.longest_days),
            "longest_after": self.longest_after,
        }
        for name, ratio in zip(WEEKDAY_NAMES, self.weekday_ratios):
            row[f"pct_{name.lower()}"] = ratio
        for value, ratio in enumerate(self.rating_ratios):
            row[f"pct_rating_{value}"] = ratio
        return row
