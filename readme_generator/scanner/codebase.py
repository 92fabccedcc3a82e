"""Whole-module scan combining file selection, manifest and declarations."""

import logging
from pathlib import Path
from typing import Union

from readme_generator.scanner.declarations import extract_declarations
from readme_generator.scanner.files import select_files
from readme_generator.scanner.manifest import read_manifest, read_submodules
from readme_generator.scanner.structure import ModuleRecord, aggregate

logger = logging.getLogger(__name__)


class CodebaseScanner:
    """Scans a Drupal module directory into a ModuleRecord.

    The directory is expected to exist; callers validate it.
    """

    def __init__(self, module_path: Union[str, Path]) -> None:
        self.module_path = Path(module_path).absolute()

    def scan(self) -> ModuleRecord:
        """Run the full scan.

        Returns:
            The aggregated ModuleRecord.

        Raises:
            yaml.YAMLError: If a manifest is malformed.
            ManifestError: If a manifest is not a mapping.
            OSError: If a selected file cannot be read.
        """
        logger.info("Scanning module at %s", self.module_path)
        manifest = read_manifest(self.module_path)
        files = select_files(self.module_path)
        declarations = extract_declarations(files, self.module_path)
        submodules = read_submodules(self.module_path)

        return aggregate(
            manifest=manifest,
            files=files,
            declarations=declarations,
            submodules=submodules,
        )
