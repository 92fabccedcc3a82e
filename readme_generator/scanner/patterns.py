"""Glob and regex tables driving the module scanner.

Everything the scanner looks for is declared here: which files are
selected, where submodules live, and which lexical rules pull
declarations out of source text.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FileCategory(str, Enum):
    """What a selected file holds."""

    MANIFEST = "manifest"
    MODULE = "module"
    INSTALL = "install"
    ROUTING = "routing"
    PERMISSIONS = "permissions"
    MENU_LINKS = "menu_links"
    TASK_LINKS = "task_links"
    SCHEMA = "schema"
    CONTROLLER = "controller"
    FORM = "form"
    PLUGIN = "plugin"
    ENTITY = "entity"
    UTILITY = "utility"
    INSTALL_CONFIG = "install_config"


@dataclass(frozen=True)
class FilePattern:
    """A single-level glob, relative to the module root."""

    glob: str
    category: FileCategory


MANIFEST_GLOB = "*.info.yml"

# Evaluated in order; results are concatenated in this order.
FILE_PATTERNS: tuple[FilePattern, ...] = (
    FilePattern(MANIFEST_GLOB, FileCategory.MANIFEST),
    FilePattern("*.module", FileCategory.MODULE),
    FilePattern("*.install", FileCategory.INSTALL),
    FilePattern("*.routing.yml", FileCategory.ROUTING),
    FilePattern("*.permissions.yml", FileCategory.PERMISSIONS),
    FilePattern("*.links.menu.yml", FileCategory.MENU_LINKS),
    FilePattern("*.links.task.yml", FileCategory.TASK_LINKS),
    FilePattern("*.schema.yml", FileCategory.SCHEMA),
    FilePattern("src/Controller/*.php", FileCategory.CONTROLLER),
    FilePattern("src/Form/*.php", FileCategory.FORM),
    FilePattern("src/Plugin/*.php", FileCategory.PLUGIN),
    FilePattern("src/Entity/*.php", FileCategory.ENTITY),
    FilePattern("src/Utility/*.php", FileCategory.UTILITY),
    FilePattern("config/install/*.yml", FileCategory.INSTALL_CONFIG),
)

SUBMODULE_PATTERN = "modules/*/" + MANIFEST_GLOB

FUNCTION_PATTERN = re.compile(r"function\s+(\w+)\s*\(")
CLASS_PATTERN = re.compile(r"class\s+(\w+)")
HOOK_PATTERN = re.compile(r"function\s+(hook_[a-zA-Z_]+)\s*\(")

CONTROLLER_PATH = "src/Controller/"
FORM_PATH = "src/Form/"


@dataclass(frozen=True)
class ExtractionRule:
    """A lexical rule feeding one declaration list.

    Attributes:
        target: Name of the Declarations field the matches go to.
        pattern: Regex whose first group is the declared identifier.
        path_marker: Only files whose relative path contains this apply.
        first_only: Record only the first match per file.
    """

    target: str
    pattern: re.Pattern
    path_marker: Optional[str] = None
    first_only: bool = False

    def applies_to(self, relative_path: str) -> bool:
        return self.path_marker is None or self.path_marker in relative_path

    def find(self, code: str) -> list[str]:
        """Return the identifiers this rule records for ``code``."""
        if self.first_only:
            match = self.pattern.search(code)
            return [match.group(1)] if match else []
        return self.pattern.findall(code)


EXTRACTION_RULES: tuple[ExtractionRule, ...] = (
    ExtractionRule("functions", FUNCTION_PATTERN),
    ExtractionRule("classes", CLASS_PATTERN),
    ExtractionRule("hooks", HOOK_PATTERN),
    ExtractionRule("controllers", CLASS_PATTERN, CONTROLLER_PATH, first_only=True),
    ExtractionRule("forms", CLASS_PATTERN, FORM_PATH, first_only=True),
)
