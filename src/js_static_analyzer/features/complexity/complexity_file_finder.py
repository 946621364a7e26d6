"""File discovery for complexity analysis.

This module finds the source files to analyze under a path, keeping only
files with a source extension and skipping dependency directories at any
depth.
"""
import os
from pathlib import Path
from typing import List, Sequence

from js_static_analyzer.constants import SourceDefaults
from js_static_analyzer.core.exceptions import AnalysisPathError
from js_static_analyzer.core.logging import get_logger


class ComplexityFileFinder:
    """Finds and filters files for complexity analysis."""

    def __init__(
        self,
        extensions: Sequence[str] = SourceDefaults.EXTENSIONS,
        skip_directories: Sequence[str] = SourceDefaults.SKIP_DIRECTORIES,
    ) -> None:
        """Initialize the file finder.

        Args:
            extensions: File extensions to analyze (e.g. ['.js'])
            skip_directories: Directory names never descended into
        """
        self.extensions = tuple(extensions)
        self.skip_directories = frozenset(skip_directories)
        self.logger = get_logger("complexity.file_finder")

    def find_files(self, path: str) -> List[str]:
        """Find files to analyze under a file or directory path.

        Directory entries are visited in sorted name order, so discovery
        order is stable between runs.

        Args:
            path: File or directory to analyze

        Returns:
            List of file paths to analyze, in discovery order

        Raises:
            AnalysisPathError: If the path does not exist or a directory
                cannot be listed
        """
        self.logger.info("find_files_start", path=path, extensions=list(self.extensions))

        root = Path(path)
        if not root.exists():
            raise AnalysisPathError(path)

        if root.is_file():
            all_files = [path]
        else:
            all_files = self._list_files(path)

        files_to_analyze = [f for f in all_files if self._has_source_extension(f)]

        self.logger.info(
            "find_files_complete",
            total_found=len(all_files),
            after_filtering=len(files_to_analyze),
        )
        return files_to_analyze

    def _has_source_extension(self, file_path: str) -> bool:
        return file_path.endswith(self.extensions)

    def _list_files(self, directory: str) -> List[str]:
        """Recursively list files, skipping dependency directories.

        Args:
            directory: Directory to list

        Returns:
            File paths in depth-first, name-sorted order

        Raises:
            AnalysisPathError: If a directory cannot be listed
        """
        files: List[str] = []
        try:
            names = sorted(os.listdir(directory))
        except OSError as e:
            raise AnalysisPathError(directory, f"Cannot list directory ({e.strerror or e})") from e

        for name in names:
            if name in self.skip_directories:
                self.logger.debug("directory_skipped", directory=os.path.join(directory, name))
                continue
            entry = os.path.join(directory, name)
            if os.path.isdir(entry):
                files.extend(self._list_files(entry))
            else:
                files.append(entry)
        return files
