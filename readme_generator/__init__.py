"""Drupal README Generator.

Scans a Drupal module's source tree for its manifest, declarations and
submodules, and asks an LLM chat endpoint to write its README.md.
"""

__version__ = "0.1.0"
