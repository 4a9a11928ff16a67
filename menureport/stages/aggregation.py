"""
Statistics Aggregator.

Folds one person's rating series into PersonStatistics in a single pass,
attaching each rating to its menu item along the way.
"""

import logging
from datetime import date
from typing import List, Optional, Tuple, Union

from menureport.errors import ScaleError
from menureport.models.rating import Rating
from menureport.models.stats import PersonStatistics
from menureport.registry.menu_registry import MenuRegistry

logger = logging.getLogger(__name__)

MAX_HISTOGRAM_WIDTH = 1000


def sunday_weekday(day: date) -> int:
    """Day of week with Sunday as 0."""
    return (day.weekday() + 1) % 7


def percentages(counts: List[int], total: int) -> List[float]:
    """Scale counts to percentages of total. All zero when total is 0."""
    if total == 0:
        return [0.0] * len(counts)
    return [count / total * 100 for count in counts]


class StatsAggregator:
    """
    Computes per-person statistics over a chronological rating series.

    The busiest-week tally is compared against the maximum only when the
    ISO week number changes, so the last week of a series is not counted
    unless flush_final_week is set. Weeks are told apart by week number
    alone unless iso_year_weeks is set.
    """

    def __init__(
        self,
        registry: MenuRegistry,
        flush_final_week: bool = False,
        strict_scale: bool = False,
        iso_year_weeks: bool = False
    ):
        """
        Initialize aggregator.

        Args:
            registry: Menu the ratings are attached to
            flush_final_week: Compare the last week's tally at end of series
            strict_scale: Raise ScaleError on mixed scales or out-of-range values
                instead of dropping them
            iso_year_weeks: Tell weeks apart by (ISO year, week number)
        """
        self.registry = registry
        self.flush_final_week = flush_final_week
        self.strict_scale = strict_scale
        self.iso_year_weeks = iso_year_weeks

    def aggregate(self, who: str, ratings: List[Rating]) -> PersonStatistics:
        """
        Attach ratings to the menu and compute statistics for one person.

        Args:
            who: Person the series belongs to
            ratings: Ratings in visit order

        Returns:
            PersonStatistics for the series

        Raises:
            ScaleError: If the first rating's scale is too wide to chart, or in
                strict mode, if a rating does not fit that scale
        """
        stats = PersonStatistics()

        week: Optional[Union[int, Tuple[int, int]]] = None
        week_count = 1
        prev: Optional[date] = None
        scale: Optional[float] = None

        for rating in ratings:
            item = self.registry.attach(who, rating)
            name = item.name if item else ""

            stats.entries += 1

            # Histogram width is fixed by the first rating's scale
            if scale is None:
                scale = rating.max
                stats.ratings = self._value_histogram(who, rating)
            self._count_value(who, stats, rating, scale)

            if rating.date is None:
                continue

            stats.weekdays[sunday_weekday(rating.date)] += 1

            iso_year, iso_week, _ = rating.date.isocalendar()
            current = (iso_year, iso_week) if self.iso_year_weeks else iso_week
            if current == week:
                week_count += 1
            else:
                if week_count > stats.max_per_week:
                    stats.max_per_week = week_count
                week = current
                week_count = 1

            if prev is None:
                prev = rating.date
            gap = rating.date - prev
            if gap > stats.longest:
                stats.longest = gap
                stats.longest_after = name
            prev = rating.date

            stats.has_date = True

        if self.flush_final_week and week is not None and week_count > stats.max_per_week:
            stats.max_per_week = week_count

        stats.weekday_ratios = percentages(stats.weekdays, stats.entries)
        stats.rating_ratios = percentages(stats.ratings, stats.entries)

        logger.info(
            f"{who}: {stats.entries} ratings, busiest week {stats.max_per_week}, "
            f"longest gap {stats.formatted_longest}"
        )
        return stats

    def _value_histogram(self, who: str, rating: Rating) -> List[int]:
        """Empty value histogram sized by a rating's scale."""
        if rating.max + 1 > MAX_HISTOGRAM_WIDTH:
            raise ScaleError(
                f"{who}: scale 0-{rating.max:g} for item #{rating.number} is too wide "
                f"(at most {MAX_HISTOGRAM_WIDTH - 1})"
            )
        return [0] * int(rating.max + 1)

    def _count_value(
        self,
        who: str,
        stats: PersonStatistics,
        rating: Rating,
        scale: float
    ) -> None:
        """Increment the value histogram bucket for a rating."""
        if self.strict_scale and rating.max != scale:
            raise ScaleError(
                f"{who}: rating for item #{rating.number} is out of {rating.max:g}, "
                f"series started out of {scale:g}"
            )

        bucket = int(rating.value)
        if 0 <= bucket < len(stats.ratings):
            stats.ratings[bucket] += 1
            return

        if self.strict_scale:
            raise ScaleError(
                f"{who}: value {rating.value:g} for item #{rating.number} "
                f"is outside 0-{scale:g}"
            )
        logger.warning(
            f"{who}: value {rating.value:g} for item #{rating.number} is outside "
            f"the 0-{scale:g} scale, left out of the rating histogram"
        )

