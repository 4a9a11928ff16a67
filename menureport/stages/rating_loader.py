"""
Rating Loader.

Reads one person's rating series: a header row, then one
(item number, date, value, max) row per visit in visit order.
"""

import logging
from typing import List

from menureport.errors import FieldError
from menureport.models.rating import Rating
from menureport.utils.fields import parse_compact_date, parse_float, parse_int
from menureport.utils.storage import read_records

logger = logging.getLogger(__name__)

RATING_FIELDS = 4


def parse_rating(record: List[str]) -> Rating:
    """
    Build a Rating from a four-field record.

    An empty date field means the visit date is unknown.
    """
    number = parse_int(record[0], "item number")
    date = parse_compact_date(record[1]) if record[1] != "" else None
    value = parse_float(record[2], "value")
    top = parse_float(record[3], "max")
    return Rating(number=number, date=date, value=value, max=top)


def read_ratings(path: str) -> List[Rating]:
    """
    Load a rating series in file order.

    Args:
        path: Path to the person's ratings CSV file

    Returns:
        List of Rating objects, file order preserved

    Raises:
        InputError: If the file cannot be opened
        RecordError: If a row does not have exactly four fields
        FieldError: If a number or date cannot be parsed
    """
    ratings = []

    for line, record in read_records(path, RATING_FIELDS):
        try:
            ratings.append(parse_rating(record))
        except FieldError as e:
            raise FieldError(str(e), path=path, line=line) from e

    undated = sum(1 for r in ratings if r.date is None)
    logger.info(f"Loaded {len(ratings)} ratings from {path} ({undated} undated)")
    return ratings
