"""Query resolved localization keys from the index database."""

import click
from rich.table import Table
from rich.text import Text

from pdx_explorer.pipeline.ui import console, print_warning
from pdx_explorer.utils.error_handler import handle_exceptions


@click.command()
@handle_exceptions
@click.option("--db", "db_path", default=None, help="Database path (default: ./.pdx/index.db)")
@click.option("--language", default=None, help="Language specifier, e.g. l_english")
@click.option("--key", "key_contains", default=None, help="Only keys containing this text")
@click.option("--limit", type=int, default=None, help="Maximum number of rows")
def loc(db_path, language, key_contains, limit):
    """Show the resolved localization table.

    Each key appears once, with the value and source file that won
    override resolution.

    \b
    EXAMPLES:
      pdx loc --language l_english --key canal
      pdx loc --limit 20
    """
    from pdx_explorer.config_runtime import load_runtime_config
    from pdx_explorer.indexer import read_localization
    from pdx_explorer.indexer.language import Language

    selected = None
    if language is not None:
        selected = Language.from_specifier(language)
        if selected is None:
            raise click.BadParameter(
                f"Unknown language '{language}'. "
                f"Valid: {', '.join(lang.value for lang in Language)}",
                param_hint="--language",
            )

    if db_path is None:
        db_path = load_runtime_config()["paths"]["db"]

    db_manager = read_localization(db_path)
    try:
        rows = db_manager.get_localization_entries(selected, key_contains, limit)
    finally:
        db_manager.close()

    if not rows:
        print_warning("No localization keys found")
        return

    table = Table(title="Localization", header_style="bold")
    table.add_column("Key", style="key", no_wrap=True)
    table.add_column("Value", style="loc")
    table.add_column("Language", style="dim", no_wrap=True)
    table.add_column("Source", style="path")
    for key, value, lang, source in rows:
        table.add_row(Text(key), Text(value), lang, Text(source))
    console.print(table)
    console.print(f"{len(rows)} keys", style="dim")
