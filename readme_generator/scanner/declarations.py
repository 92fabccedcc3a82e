"""Lexical declaration extraction from module source files.

Runs every ExtractionRule over the text of each selected file. This is
pattern matching only: nothing is parsed into a syntax tree.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from readme_generator.scanner.patterns import EXTRACTION_RULES, ExtractionRule
from readme_generator.scanner.structure import Declarations

logger = logging.getLogger(__name__)


def relative_name(path: Path, root: Path) -> str:
    """Return ``path`` relative to ``root`` in POSIX form."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def extract_declarations(
    file_paths: Iterable[Union[str, Path]],
    root_path: Union[str, Path],
    rules: Optional[Sequence[ExtractionRule]] = None,
) -> Declarations:
    """Collect qualified declaration names from source files.

    Every match is recorded as ``"<relative path>::<identifier>"`` in
    file-then-match order. Duplicates are kept.

    Args:
        file_paths: Files to scan, in selection order.
        root_path: Module root the recorded paths are relative to.
        rules: Extraction rules; defaults to EXTRACTION_RULES.

    Returns:
        A Declarations record.

    Raises:
        OSError: If a file cannot be read.
        UnicodeDecodeError: If a file is not valid UTF-8.
    """
    root = Path(root_path)
    rules = EXTRACTION_RULES if rules is None else rules
    found: dict[str, list[str]] = {rule.target: [] for rule in rules}

    for file_path in file_paths:
        path = Path(file_path)
        relative = relative_name(path, root)
        code = path.read_text(encoding="utf-8")

        for rule in rules:
            if not rule.applies_to(relative):
                continue
            found[rule.target].extend(
                f"{relative}::{identifier}" for identifier in rule.find(code)
            )

    logger.info(
        "Extracted %d functions, %d classes, %d hooks",
        len(found.get("functions", [])),
        len(found.get("classes", [])),
        len(found.get("hooks", [])),
    )
    return Declarations(
        **{target: tuple(names) for target, names in found.items()}
    )
