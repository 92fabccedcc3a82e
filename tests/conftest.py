"""Shared fixtures: small Drupal module trees on disk."""

import logging
import textwrap
from pathlib import Path

import pytest


def write(root: Path, relative: str, content: str = "") -> Path:
    """Write a file under ``root``, creating parent directories."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


@pytest.fixture
def module_dir(tmp_path: Path) -> Path:
    """Create a representative Drupal module named 'foo'."""
    root = tmp_path / "foo"
    root.mkdir()
    write(
        root,
        "foo.info.yml",
        """\
        name: Foo
        type: module
        description: Does X
        core_version_requirement: ^10
        dependencies:
          - token
        """,
    )
    write(
        root,
        "foo.module",
        """\
        <?php

        function foo_help() {}

        function hook_menu() {}
        """,
    )
    write(root, "foo.routing.yml", "foo.page:\n  path: '/foo'\n")
    write(
        root,
        "src/Controller/FooController.php",
        """\
        <?php
        namespace Drupal\\foo\\Controller;

        class FooController extends ControllerBase {
          public function content() {}
        }

        class FooHelper {}
        """,
    )
    write(
        root,
        "src/Form/FooSettingsForm.php",
        """\
        <?php
        class FooSettingsForm extends ConfigFormBase {
          public function getFormId() {}
          public function buildForm(array $form) {}
        }
        """,
    )
    write(root, "config/install/foo.settings.yml", "enabled: true\n")
    write(
        root,
        "modules/foo_extra/foo_extra.info.yml",
        "name: Foo Extra\ndescription: Extra bits\n",
    )
    return root


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers bound to streams that a CliRunner has since closed."""
    yield
    logging.getLogger("readme_generator").handlers.clear()
