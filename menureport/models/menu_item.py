"""
Menu item data model.
"""

from dataclasses import dataclass, field
from typing import Dict

from menureport.models.rating import Rating


@dataclass
class MenuItem:
    """
    An entry of the fixed menu catalog.
    Ratings are attached per person after the catalog is loaded.
    """
    number: int  # Externally assigned, not necessarily contiguous
    name: str
    ratings: Dict[str, Rating] = field(default_factory=dict)  # person -> Rating

    @property
    def image(self) -> str:
        """Image file name derived from the item number (e.g. '07.jpg')."""
        return f"{self.number:02d}.jpg"

    def rate(self, who: str, rating: Rating) -> None:
        """Attach a rating; a later rating by the same person replaces the earlier one."""
        self.ratings[who] = rating
