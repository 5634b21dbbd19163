"""Scan a directory tree for markdown files."""

import logging
import re
from pathlib import Path

from ..storage.models import DiscoveredFile
from .dates import infer_file_date

logger = logging.getLogger(__name__)


class DiscoveryError(Exception):
    """A directory under the scan root could not be listed."""


class MarkdownFileScanner:
    """Find every markdown file beneath a root directory."""

    MARKDOWN_FILENAME = re.compile(r"\.md$", re.IGNORECASE)

    def __init__(self, root_path: Path, output_filename: str):
        self.root_path = Path(root_path)
        # Only the file name is compared, at any depth
        self.output_filename = Path(output_filename).name

    def scan(self) -> list[DiscoveredFile]:
        """
        Walk the tree below the root, depth first.

        Returns:
            Markdown files in name order within each directory, excluding
            any file named like the report output

        Raises:
            DiscoveryError: if any directory cannot be listed
        """
        files = self._scan_directory(self.root_path)
        logger.debug(f"Discovered {len(files)} markdown files under {self.root_path}")
        return files

    def _scan_directory(self, dir_path: Path) -> list[DiscoveredFile]:
        try:
            entries = sorted(dir_path.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise DiscoveryError(f"Cannot list directory {dir_path}: {e}") from e

        files = []
        for entry in entries:
            # Symlinked directories are not followed
            if entry.is_dir() and not entry.is_symlink():
                files.extend(self._scan_directory(entry))
                continue

            if not self.MARKDOWN_FILENAME.search(entry.name):
                continue
            if entry.name == self.output_filename:
                continue

            files.append(
                DiscoveredFile(
                    path=entry,
                    name=entry.name,
                    inferred_date=infer_file_date(entry),
                )
            )

        return files
