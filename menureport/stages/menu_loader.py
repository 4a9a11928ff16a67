"""
Menu Loader.

Reads the fixed menu catalog: a header row, then one (number, name) row per item.
"""

import logging
from typing import List

from menureport.errors import FieldError
from menureport.models.menu_item import MenuItem
from menureport.utils.fields import parse_int
from menureport.utils.storage import read_records

logger = logging.getLogger(__name__)

MENU_FIELDS = 2


def read_menu(path: str) -> List[MenuItem]:
    """
    Load the menu catalog in file order.

    Args:
        path: Path to the menu CSV file

    Returns:
        List of MenuItem objects with empty ratings

    Raises:
        InputError: If the file cannot be opened
        RecordError: If a row does not have exactly two fields
        FieldError: If an item number is not an integer
    """
    menu = []

    for line, record in read_records(path, MENU_FIELDS):
        try:
            number = parse_int(record[0], "item number")
        except FieldError as e:
            raise FieldError(str(e), path=path, line=line) from e

        menu.append(MenuItem(number=number, name=record[1]))
        logger.debug(f"{path}:{line}: item #{number} {record[1]!r}")

    logger.info(f"Loaded {len(menu)} menu items from {path}")
    return menu
