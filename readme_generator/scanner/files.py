"""File selection for Drupal module scanning.

Enumerates the curated set of files declared in FILE_PATTERNS, plus the
manifests of nested submodules.
"""

import logging
from pathlib import Path
from typing import Union

from readme_generator.scanner.patterns import FILE_PATTERNS, SUBMODULE_PATTERN

logger = logging.getLogger(__name__)


def _glob_files(root: Path, pattern: str) -> list[Path]:
    # Path.glob yields in directory order; sort for stable output.
    return sorted(p for p in root.glob(pattern) if p.is_file())


def select_files(root_path: Union[str, Path]) -> list[Path]:
    """List the relevant module files under a module root.

    Each pattern matches a single directory level. Results are grouped by
    pattern, in FILE_PATTERNS order, without de-duplication.

    Args:
        root_path: Module root directory. Must already exist.

    Returns:
        Absolute matching file paths, possibly empty.
    """
    root = Path(root_path).absolute()
    files: list[Path] = []
    for file_pattern in FILE_PATTERNS:
        matches = _glob_files(root, file_pattern.glob)
        if matches:
            logger.debug(
                "%s: %d %s file(s)",
                file_pattern.glob,
                len(matches),
                file_pattern.category.value,
            )
        files.extend(matches)

    logger.info("Selected %d files under %s", len(files), root)
    return files


def select_submodules(root_path: Union[str, Path]) -> list[Path]:
    """List submodule manifests exactly one level under ``modules/``."""
    return _glob_files(Path(root_path).absolute(), SUBMODULE_PATTERN)
