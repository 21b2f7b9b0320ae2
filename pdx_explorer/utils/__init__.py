"""pdx_explorer utilities package."""

from .constants import CONFIG_FILE_NAME, DATABASE_FILE, ENV_PREFIX, ERROR_LOG_FILE, PDX_DIR
from .error_handler import handle_exceptions
from .logging import logger

__all__ = [
    "PDX_DIR",
    "ERROR_LOG_FILE",
    "DATABASE_FILE",
    "CONFIG_FILE_NAME",
    "ENV_PREFIX",
    "handle_exceptions",
    "logger",
]
