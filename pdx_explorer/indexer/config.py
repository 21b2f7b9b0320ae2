"""Indexer configuration - constants of the localization file convention.

This module contains ONLY configuration constants. The values are fixed
by the external localization-script convention and must not be tuned.
"""

import os

# =============================================================================
# PERFORMANCE CONFIGURATION
# =============================================================================

def _get_batch_size(env_var: str, default: int, max_value: int) -> int:
    """Get batch size from environment or use default."""
    try:
        value = int(os.environ.get(env_var, default))
        return min(value, max_value)
    except (ValueError, TypeError):
        return default


# Rows buffered per table before an executemany flush
DEFAULT_BATCH_SIZE = _get_batch_size("PDX_EXPLORER_LIMITS_BATCH_SIZE", 200, 5000)
MAX_BATCH_SIZE = 5000


# =============================================================================
# TREE CLASSIFICATION
# =============================================================================

# Top-level segment whose subtree holds localization content
LOCALIZATION_SEGMENT = "localization"

# Path segment that marks override files when the replace tier is enabled
REPLACE_SEGMENT = "replace"


# =============================================================================
# LOCALIZATION FILE FORMAT
# =============================================================================

# UTF-8 byte order mark every localization file starts with
ENCODING_MARKER = b"\xef\xbb\xbf"

# Everything from this character to end of line is a comment
COMMENT_DELIMITER = "#"

# Separates the language specifier / key from the rest of the line
KEY_SEPARATOR = ":"

# Delimits a value
VALUE_QUOTE = '"'
