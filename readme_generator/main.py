"""Entry point for the Drupal README Generator.

Delegates to the Click command group, which initializes configuration
and logging itself.
"""

from readme_generator.cli.commands import readme_gen


def main() -> None:
    """Launch the CLI."""
    readme_gen()


if __name__ == "__main__":
    main()
