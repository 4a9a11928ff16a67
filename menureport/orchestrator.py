"""
Report Orchestrator.

Loads the menu once, then runs every person's rating series through
loading and aggregation in file listing order.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from menureport.models.menu_item import MenuItem
from menureport.models.stats import PersonStatistics
from menureport.registry.menu_registry import MenuRegistry
from menureport.stages.aggregation import StatsAggregator
from menureport.stages.menu_loader import read_menu
from menureport.stages.rating_loader import read_ratings
from menureport.utils.storage import RatingStore

logger = logging.getLogger(__name__)


@dataclass
class Report:
    """Everything the renderer needs: rated menu plus per-person statistics."""
    menu: List[MenuItem]
    stats: Dict[str, PersonStatistics] = field(default_factory=dict)


class ReportOrchestrator:
    """
    Orchestrates one report run.

    Coordinates:
    1. Menu Loading → 2. Series Discovery
    → for each person: 3. Rating Loading → 4. Aggregation

    Any error aborts the whole run; there is no partial report.
    """

    def __init__(
        self,
        menu_path: str,
        ratings_dir: str,
        flush_final_week: bool = False,
        strict_scale: bool = False,
        iso_year_weeks: bool = False,
        ratings_suffix: str = ".csv"
    ):
        """
        Initialize report orchestrator.

        Args:
            menu_path: Path to the menu CSV
            ratings_dir: Directory with one ratings CSV per person
            flush_final_week: Count the last week of each series towards the busiest week
            strict_scale: Fail on ratings that do not fit the series' scale
            iso_year_weeks: Tell weeks apart by ISO year as well as week number
            ratings_suffix: File suffix of rating files
        """
        self.menu_path = menu_path
        self.store = RatingStore(ratings_dir, pattern=ratings_suffix)
        self.flush_final_week = flush_final_week
        self.strict_scale = strict_scale
        self.iso_year_weeks = iso_year_weeks

    def run(self) -> Report:
        """
        Load all inputs and compute statistics.

        Returns:
            Report with the menu (ratings attached) and statistics by person

        Raises:
            ReportError: On any unreadable or malformed input
        """
        logger.info(f"Loading menu from {self.menu_path}")
        registry = MenuRegistry(read_menu(self.menu_path))

        aggregator = StatsAggregator(
            registry=registry,
            flush_final_week=self.flush_final_week,
            strict_scale=self.strict_scale,
            iso_year_weeks=self.iso_year_weeks
        )

        report = Report(menu=registry.items)

        for who, path in self.store.discover():
            logger.info(f"Processing ratings for {who}")
            ratings = read_ratings(path)
            report.stats[who] = aggregator.aggregate(who, ratings)

        logger.info(
            f"Report complete: {len(report.menu)} items, {len(report.stats)} people"
        )
        return report
