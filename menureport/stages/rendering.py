"""
Report Renderer.

Turns the menu and per-person statistics into the HTML page, and into a
one-row-per-person summary table.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd
from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from menureport.models.menu_item import MenuItem
from menureport.models.stats import WEEKDAY_NAMES, PersonStatistics

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "report.html.j2"


def format_number(value: float) -> str:
    """Shortest form of a score: 8.5 -> '8.5', 10.0 -> '10'."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_percent(value: float) -> str:
    """Bar label, rounded to a whole percent and padded to two characters."""
    return f"{value:2.0f}%"


def _template_env(templates_path: Path) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(templates_path)),
        autoescape=select_autoescape(enabled_extensions=("html", "j2")),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["number"] = format_number
    env.filters["percent"] = format_percent
    return env


class ReportRenderer:
    """
    Renders the static report page.
    """

    def __init__(
        self,
        title: str,
        intro: str = "",
        image_dir: str = "img",
        templates_path: Optional[Path] = None
    ):
        """
        Initialize renderer.

        Args:
            title: Page heading
            intro: Paragraph shown under the heading
            image_dir: Directory (relative to the page) holding item photos
            templates_path: Override for the bundled templates directory
        """
        self.title = title
        self.intro = intro
        self.image_dir = image_dir
        if templates_path is None:
            templates_path = Path(__file__).resolve().parent.parent / "templates"
        self.env = _template_env(templates_path)

    def render(self, menu: List[MenuItem], stats: Dict[str, PersonStatistics]) -> str:
        """
        Render the full HTML document.

        People are listed in name order, both under each item and in the
        statistics section.
        """
        template = self.env.get_template(TEMPLATE_NAME)
        html = template.render(
            title=self.title,
            intro=self.intro,
            image_dir=self.image_dir,
            menu=[
                {
                    "number": item.number,
                    "name": item.name,
                    "image": item.image,
                    "ratings": sorted(item.ratings.items()),
                }
                for item in menu
            ],
            stats=sorted(stats.items()),
            weekday_names=WEEKDAY_NAMES,
        )
        logger.info(f"Rendered report: {len(menu)} items, {len(stats)} people")
        return html


def summary_frame(stats: Dict[str, PersonStatistics]) -> pd.DataFrame:
    """
    Build a summary table with one row per person, sorted by name.

    Rating percentage columns are padded with zeros when people rated on
    different scales.
    """
    rows = []
    for who, person_stats in sorted(stats.items()):
        row = {"person": who}
        row.update(person_stats.to_dict())
        rows.append(row)

    df = pd.DataFrame(rows)
    if df.empty:
        return pd.DataFrame(columns=["person", "entries", "has_date", "max_per_week",
                                     "longest_days", "longest_after"])

    rating_columns = [col for col in df.columns if col.startswith("pct_rating_")]
    if rating_columns:
        df[rating_columns] = df[rating_columns].fillna(0.0)
    return df
