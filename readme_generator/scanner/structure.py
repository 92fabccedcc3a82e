"""Data models for scanned Drupal module metadata.

Defines the manifest, submodule and declaration records produced by the
scanner, and the aggregated ModuleRecord handed to the prompt builder.
All sequences are tuples: order and duplicates are preserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence, Union

NO_MANIFEST_DESCRIPTION = "No description found."
MISSING_DESCRIPTION = "No description available."
UNKNOWN_MODULE = "Unknown Module"


@dataclass(frozen=True)
class ManifestInfo:
    """Fields read from a module's ``*.info.yml`` manifest.

    Attributes:
        name: Human-readable module name.
        description: Module description.
        dependencies: Declared dependencies, in manifest order.
    """

    name: str
    description: str = MISSING_DESCRIPTION
    dependencies: tuple[str, ...] = ()


@dataclass(frozen=True)
class SubmoduleInfo:
    """A nested module found under ``modules/<name>/``."""

    name: str
    description: str = MISSING_DESCRIPTION

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "description": self.description}


@dataclass(frozen=True)
class Declarations:
    """Qualified ``path::identifier`` names collected from source files."""

    classes: tuple[str, ...] = ()
    functions: tuple[str, ...] = ()
    hooks: tuple[str, ...] = ()
    controllers: tuple[str, ...] = ()
    forms: tuple[str, ...] = ()


@dataclass(frozen=True)
class ModuleRecord:
    """Everything known about a scanned module.

    Attributes:
        name: Module name.
        description: Module description.
        dependencies: Declared dependencies.
        files: Selected files, in selection order.
        classes: Every class declaration.
        functions: Every function declaration.
        hooks: Function declarations following the ``hook_`` convention.
        controllers: First class of each ``src/Controller/`` file.
        forms: First class of each ``src/Form/`` file.
        submodules: Nested modules one level under ``modules/``.
    """

    name: str = UNKNOWN_MODULE
    description: str = MISSING_DESCRIPTION
    dependencies: tuple[str, ...] = ()
    files: tuple[str, ...] = ()
    classes: tuple[str, ...] = ()
    functions: tuple[str, ...] = ()
    hooks: tuple[str, ...] = ()
    controllers: tuple[str, ...] = ()
    forms: tuple[str, ...] = ()
    submodules: tuple[SubmoduleInfo, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary with a stable key order.

        Returns:
            Dictionary representation of this record.
        """
        return {
            "name": self.name,
            "description": self.description,
            "dependencies": list(self.dependencies),
            "files": list(self.files),
            "classes": list(self.classes),
            "functions": list(self.functions),
            "hooks": list(self.hooks),
            "controllers": list(self.controllers),
            "forms": list(self.forms),
            "submodules": [s.to_dict() for s in self.submodules],
        }


def aggregate(
    manifest: Optional[ManifestInfo] = None,
    files: Optional[Iterable[Union[str, Path]]] = None,
    declarations: Optional[Declarations] = None,
    submodules: Optional[Sequence[SubmoduleInfo]] = None,
) -> ModuleRecord:
    """Merge scanner outputs into a single ModuleRecord.

    Absent inputs fall back to the record defaults. No filtering or
    de-duplication takes place.
    """
    declarations = declarations or Declarations()
    return ModuleRecord(
        name=manifest.name if manifest else UNKNOWN_MODULE,
        description=manifest.description if manifest else MISSING_DESCRIPTION,
        dependencies=tuple(manifest.dependencies) if manifest else (),
        files=tuple(str(f) for f in files or ()),
        classes=declarations.classes,
        functions=declarations.functions,
        hooks=declarations.hooks,
        controllers=declarations.controllers,
        forms=declarations.forms,
        submodules=tuple(submodules or ()),
    )
