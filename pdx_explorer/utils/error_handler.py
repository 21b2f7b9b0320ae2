"""Command-level error handling for the pdx CLI.

Every command is wrapped in ``handle_exceptions``. Indexing failures
(IndexerError) are expected outcomes of bad input and are reported in one
line; anything else is a bug and is logged with its traceback. Both are
appended to ``.pdx/error.log`` and turned into a non-zero exit.
"""

import traceback
from collections.abc import Callable
from datetime import datetime
from functools import wraps
from typing import Any

import click

from pdx_explorer.utils.logging import logger

from .constants import ERROR_LOG_FILE


def _append_error_log(command: str, error: BaseException) -> None:
    ERROR_LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

    rule = "=" * 80
    with open(ERROR_LOG_FILE, "a", encoding="utf-8") as f:
        f.write(f"\n{rule}\n[{datetime.now().isoformat()}] pdx {command}\n{rule}\n")
        f.write("".join(traceback.format_exception(type(error), error, error.__traceback__)))
        f.write(f"{rule}\n")


def handle_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Log a failed command and exit through click.ClickException.

    ClickExceptions raised by the command itself (usage errors) pass
    through unchanged.
    """
    # Imported lazily so that utils does not depend on the indexer package
    from pdx_explorer.indexer.exceptions import IndexerError

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            raise
        except IndexerError as e:
            logger.error(f"{func.__name__} failed: {e}")
            _append_error_log(func.__name__, e)
            raise click.ClickException(f"{type(e).__name__}: {e}") from e
        except Exception as e:
            logger.opt(exception=True).error(
                "Command '{cmd}' failed: {err}", cmd=func.__name__, err=str(e)
            )
            _append_error_log(func.__name__, e)
            raise click.ClickException(
                f"{type(e).__name__}: {e}\n\nFull traceback logged to: {ERROR_LOG_FILE}"
            ) from e

    return wrapper
