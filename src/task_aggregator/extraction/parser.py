"""Parse checkbox tasks from markdown files."""

import logging
import re
from datetime import datetime
from typing import Iterable, Optional

from ..storage.models import DiscoveredFile, ScanState, Task
from .dates import parse_iso_date

logger = logging.getLogger(__name__)

# Regex patterns
DATE_HEADER = re.compile(r"^#+\s+(\d{4}-\d{2}-\d{2})")
HEADER = re.compile(r"^\s*#+\s+(.*)$")
COMPLETE_TASK = re.compile(r"^\s*[-+*]?\s*\[x\]", re.IGNORECASE)
INCOMPLETE_TASK = re.compile(r"^\s*[-+*]?\s*\[\s+\]")


def advance_state(state: ScanState, line: str) -> ScanState:
    """Apply the date header and section header rules for one line."""
    current_date = state.current_date
    current_header = state.current_header

    date_match = DATE_HEADER.match(line)
    if date_match:
        # A malformed date such as 2023-02-30 keeps the previous context
        current_date = parse_iso_date(date_match.group(1)) or current_date

    header_match = HEADER.match(line)
    if header_match:
        current_header = header_match.group(1).strip()

    return ScanState(current_date=current_date, current_header=current_header)


def extract_task(state: ScanState, line: str, source_path: str) -> Optional[Task]:
    """Build a Task from the line, or return None if it is not a checkbox item."""
    if COMPLETE_TASK.match(line):
        complete = True
    elif INCOMPLETE_TASK.match(line):
        complete = False
    else:
        return None

    # Display text is everything after the checkbox's closing bracket
    text = line[line.index("]") + 1 :].strip()
    return Task(
        date=state.current_date,
        complete=complete,
        source_path=source_path,
        section_header=state.current_header,
        text=text,
    )


def scan_lines(
    lines: Iterable[str], source_path: str, initial_date: Optional[datetime] = None
) -> list[Task]:
    """Fold over lines top to bottom, collecting tasks with their context."""
    state = ScanState(current_date=initial_date)
    tasks = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        state = advance_state(state, line)
        task = extract_task(state, line, source_path)
        if task:
            tasks.append(task)
    return tasks


class MarkdownTaskParser:
    """Parse tasks from discovered markdown files."""

    def parse_file(self, file: DiscoveredFile) -> list[Task]:
        """Parse all tasks from a file; unreadable files contribute none.

        Undecodable bytes are replaced rather than failing the whole file.
        """
        try:
            with open(file.path, encoding="utf-8", errors="replace") as f:
                tasks = scan_lines(f, str(file.path), file.inferred_date)
        except OSError as e:
            logger.warning(f"Skipping unreadable file {file.path}: {e}")
            return []

        logger.debug(f"Found {len(tasks)} tasks in {file.path}")
        return tasks
