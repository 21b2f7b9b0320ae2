"""Centralized constants for the pdx_explorer utils package.

Single source of truth for output locations shared by the CLI, the
runtime configuration and the error handler.
"""

from pathlib import Path

# ============================================================================
# OUTPUT DIRECTORIES
# ============================================================================

# Primary output directory for all pdx-explorer artifacts
PDX_DIR = Path("./.pdx")

# Log files
ERROR_LOG_FILE = PDX_DIR / "error.log"

# Index database
DATABASE_FILE = PDX_DIR / "index.db"

# Optional user configuration (relative to the indexed root)
CONFIG_FILE_NAME = "config.json"

# Environment variable prefix for every runtime override
ENV_PREFIX = "PDX_EXPLORER"
