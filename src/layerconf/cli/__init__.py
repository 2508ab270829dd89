"""Command-line interface for layerconf.

This package contains the runner logic, making scripts/ optional and deletable.
"""

from layerconf.cli.run_layerconf import main, run_layerconf, load_field_table

__all__ = ['main', 'run_layerconf', 'load_field_table']
