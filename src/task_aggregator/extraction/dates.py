"""Infer dates for markdown files and date headers."""

import logging
import os
import re
from datetime import datetime
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

ISO_DATE_FORMAT = "%Y-%m-%d"
FILENAME_DATE = re.compile(r"^(\d{4}-\d{2}-\d{2})")


def parse_iso_date(text: str) -> Optional[datetime]:
    """Parse a YYYY-MM-DD string, returning None if it is not a real date."""
    try:
        return datetime.strptime(text, ISO_DATE_FORMAT)
    except ValueError:
        return None


def date_from_filename(name: str) -> Optional[datetime]:
    """Extract date from a filename like 2025-03-15-standup.md"""
    match = FILENAME_DATE.match(name)
    if not match:
        return None
    return parse_iso_date(match.group(1))


def creation_time(path: Path) -> Optional[datetime]:
    """Return the file's creation timestamp where the platform records one.

    Only macOS and the BSDs (and some Windows builds of Python) expose
    ``st_birthtime``. Everywhere else this returns None and callers fall
    back to in-document date headers.
    """
    try:
        stat = os.stat(path)
    except OSError as e:
        logger.debug(f"Could not stat {path}: {e}")
        return None

    birthtime = getattr(stat, "st_birthtime", None)
    if birthtime is None:
        return None
    return datetime.fromtimestamp(birthtime)


def infer_file_date(path: Path) -> Optional[datetime]:
    """Filename date first, then creation time, otherwise no date."""
    return date_from_filename(path.name) or creation_time(path)
