"""Manifest (``*.info.yml``) parsing for Drupal modules.

A missing manifest is not an error: defaults are returned. A manifest
that exists but cannot be parsed aborts the scan.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from readme_generator.scanner.files import select_submodules
from readme_generator.scanner.patterns import MANIFEST_GLOB
from readme_generator.scanner.structure import (
    MISSING_DESCRIPTION,
    NO_MANIFEST_DESCRIPTION,
    ManifestInfo,
    SubmoduleInfo,
)

logger = logging.getLogger(__name__)

_MANIFEST_SUFFIX = ".info.yml"


class ManifestError(ValueError):
    """Raised when a manifest parses but is not a mapping."""


def find_manifest(root_path: Union[str, Path]) -> Optional[Path]:
    """Return the first ``*.info.yml`` file in the module root, if any."""
    candidates = sorted(p for p in Path(root_path).glob(MANIFEST_GLOB) if p.is_file())
    return candidates[0] if candidates else None


def load_manifest(path: Union[str, Path]) -> dict[str, Any]:
    """Parse a manifest file into a mapping.

    Args:
        path: Manifest file path.

    Returns:
        The parsed mapping; an empty document yields an empty mapping.

    Raises:
        yaml.YAMLError: If the file is not valid YAML.
        ManifestError: If the document is not a mapping.
        OSError: If the file cannot be read.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ManifestError(f"Manifest {path} is not a mapping")
    return data


def _dependencies(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(str(v) for v in value)
    return (str(value),)


def read_manifest(root_path: Union[str, Path]) -> ManifestInfo:
    """Read name, description and dependencies for a module.

    Without a manifest file the directory name is used and the
    description is "No description found.". With a manifest, each
    absent key falls back on its own; a missing description becomes
    "No description available.".

    Args:
        root_path: Module root directory.

    Returns:
        The module's ManifestInfo.
    """
    root = Path(root_path)
    fallback_name = root.resolve().name
    manifest_path = find_manifest(root)

    if manifest_path is None:
        logger.warning("No %s manifest found in %s", MANIFEST_GLOB, root)
        return ManifestInfo(
            name=fallback_name,
            description=NO_MANIFEST_DESCRIPTION,
            dependencies=(),
        )

    data = load_manifest(manifest_path)
    logger.info("Read manifest %s", manifest_path.name)

    name = data.get("name")
    description = data.get("description")
    return ManifestInfo(
        name=str(name) if name is not None else fallback_name,
        description=str(description) if description is not None else MISSING_DESCRIPTION,
        dependencies=_dependencies(data.get("dependencies")),
    )


def read_submodules(root_path: Union[str, Path]) -> list[SubmoduleInfo]:
    """Summarize each submodule found under ``modules/*/``.

    The submodule name is its manifest's machine name, i.e. the file name
    without the ``.info.yml`` suffix.
    """
    submodules = []
    for info_file in select_submodules(root_path):
        machine_name = info_file.name[: -len(_MANIFEST_SUFFIX)]
        description = load_manifest(info_file).get("description")
        submodules.append(
            SubmoduleInfo(
                name=machine_name,
                description=(
                    str(description) if description is not None else MISSING_DESCRIPTION
                ),
            )
        )

    logger.debug("Found %d submodules", len(submodules))
    return submodules
