"""
Menu Registry - ordered catalog with lookup by item number.
"""

import logging
from typing import Dict, List, Optional

from menureport.models.menu_item import MenuItem
from menureport.models.rating import Rating

logger = logging.getLogger(__name__)


class MenuRegistry:
    """
    Holds the menu in catalog order and indexes it by item number.

    Item numbers are not required to be unique; lookups resolve to the
    first item in catalog order carrying the number.
    """

    def __init__(self, items: List[MenuItem]):
        """
        Args:
            items: Menu items in catalog order
        """
        self.items = items
        self._by_number: Dict[int, MenuItem] = {}

        for item in items:
            if item.number in self._by_number:
                logger.warning(
                    f"Duplicate menu number {item.number}: '{item.name}' is "
                    f"shadowed by '{self._by_number[item.number].name}'"
                )
                continue
            self._by_number[item.number] = item

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def get_item(self, number: int) -> Optional[MenuItem]:
        """Retrieve item by number. Returns None if not on the menu."""
        return self._by_number.get(number)

    def attach(self, who: str, rating: Rating) -> Optional[MenuItem]:
        """
        Attach a person's rating to the item it refers to.

        Args:
            who: Person the rating belongs to
            rating: Rating to attach

        Returns:
            The item rated, or None if the number is not on the menu
        """
        item = self.get_item(rating.number)
        if item is None:
            logger.debug(f"{who}: rating for unknown item #{rating.number} not attached")
            return None

        item.rate(who, rating)
        return item
