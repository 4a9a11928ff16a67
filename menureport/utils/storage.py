"""
Storage utility.

File I/O helpers: raw CSV records and rating-file discovery.
"""

import csv
import os
import re
import logging
from typing import Iterator, List, Tuple

from menureport.errors import InputError, RecordError

logger = logging.getLogger(__name__)

_WORD_START = re.compile(r"\b(\w)")


def person_name(filename: str) -> str:
    """
    Derive a display name from a ratings file name.

    The extension is stripped and the first letter of each word is
    upper-cased; other letters are left alone ("mary-ann.csv" -> "Mary-Ann").
    """
    stem, _ = os.path.splitext(os.path.basename(filename))
    return _WORD_START.sub(lambda m: m.group(1).upper(), stem)


def _checked_lines(lines: Iterator[str], path: str) -> Iterator[str]:
    """
    Pass lines through, rejecting a quote inside an unquoted field (`1,So"up`).

    Quoted fields may span lines, so quoting state carries over. The header
    line is not checked.
    """
    in_quotes = False
    for line_number, line in enumerate(lines, start=1):
        field_start = not in_quotes
        i = 0
        while i < len(line):
            c = line[i]
            if in_quotes:
                if c == '"':
                    if line[i + 1:i + 2] == '"':
                        i += 1
                    else:
                        in_quotes = False
            elif c == '"':
                if not field_start and line_number > 1:
                    raise RecordError(
                        'bare " in non-quoted field', path=path, line=line_number
                    )
                in_quotes = True
                field_start = False
            else:
                field_start = c in ",\r\n"
            i += 1
        yield line


def read_records(path: str, fields: int) -> Iterator[Tuple[int, List[str]]]:
    """
    Yield (line_number, record) for every data record of a CSV file.

    The first record is a header and is discarded without validation.
    Blank lines are skipped.

    Raises:
        InputError: If the file cannot be opened
        RecordError: If a record has other than `fields` fields or bad quoting
            (including a bare quote inside an unquoted field)
    """
    try:
        f = open(path, "r", newline="", encoding="utf-8")
    except OSError as e:
        raise InputError(e.strerror or str(e), path=path) from e

    with f:
        reader = csv.reader(_checked_lines(f, path), strict=True)
        header_seen = False
        try:
            for record in reader:
                if not record:
                    continue
                if not header_seen:
                    header_seen = True
                    continue
                if len(record) != fields:
                    raise RecordError(
                        f"expected {fields} fields, got {len(record)}",
                        path=path,
                        line=reader.line_num
                    )
                yield reader.line_num, record
        except csv.Error as e:
            raise RecordError(str(e), path=path, line=reader.line_num) from e
        except UnicodeDecodeError as e:
            raise InputError(f"not valid UTF-8 text: {e}", path=path) from e


class RatingStore:
    """
    Locates the per-person rating files.

    Handles:
    - Rating series (ratings/<person>.csv), one file per person
    """

    def __init__(self, ratings_dir: str, pattern: str = ".csv"):
        """
        Initialize rating store.

        Args:
            ratings_dir: Directory holding one ratings file per person
            pattern: File suffix of rating files
        """
        self.ratings_dir = ratings_dir
        self.pattern = pattern

    def discover(self) -> List[Tuple[str, str]]:
        """
        List rating series in file name order.

        Returns:
            List of (person, path) tuples

        Raises:
            InputError: If the directory cannot be listed
        """
        try:
            names = sorted(os.listdir(self.ratings_dir))
        except OSError as e:
            raise InputError(e.strerror or str(e), path=self.ratings_dir) from e

        series = []
        for filename in names:
            path = os.path.join(self.ratings_dir, filename)
            if not filename.endswith(self.pattern) or not os.path.isfile(path):
                logger.debug(f"Skipping {path}")
                continue
            series.append((person_name(filename), path))

        logger.info(f"Found {len(series)} rating series in {self.ratings_dir}")
        return series
