"""Data models for task aggregation."""

from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class DiscoveredFile:
    """Markdown file found under the scan root."""

    path: Path
    name: str
    inferred_date: Optional[datetime] = None


@dataclass(frozen=True)
class Task:
    """Checkbox item extracted from a markdown line."""

    date: Optional[datetime]
    complete: bool
    source_path: str
    section_header: str
    text: str

    @property
    def day(self) -> date:
        """Calendar day used for ordering; undated tasks come first."""
        if self.date is None:
            return date.min
        return self.date.date()


@dataclass(frozen=True)
class ScanState:
    """Running state carried from line to line while scanning a file."""

    current_date: Optional[datetime] = None
    current_header: str = ""
