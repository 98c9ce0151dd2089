"""
Unified test infrastructure for bundle-coverage.

Modules:
- file_utils: Utilities for creating files and directories
- bundle_builders: Builders for webpack chunks and coverage profiles
- cli_utils: Running the CLI in-process
"""

from .file_utils import write, write_profile
from .bundle_builders import SAMPLE_MODULES, make_chunk, span_of, utf16_index, make_asset
from .cli_utils import run_cli, jload

__all__ = [
    # File utilities
    "write", "write_profile",

    # Bundle builders
    "SAMPLE_MODULES", "make_chunk", "span_of", "utf16_index", "make_asset",

    # CLI utilities
    "run_cli", "jload",
]
