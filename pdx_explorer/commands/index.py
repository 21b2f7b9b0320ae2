"""Index a game/mod directory into the localization database."""

import click
from rich.markup import escape

from pdx_explorer.pipeline.ui import console, print_header, print_stats, print_success
from pdx_explorer.utils.error_handler import handle_exceptions


@click.command()
@handle_exceptions
@click.argument("root", type=click.Path(file_okay=False, path_type=str))
@click.option("--db", "db_path", default=None, help="Database path (default: ./.pdx/index.db)")
@click.option(
    "--replace-tier",
    is_flag=True,
    help="Let files under a 'replace' folder override all other localization files",
)
@click.option("--no-follow-symlinks", is_flag=True, help="Leave symlinked directories out of the tree")
def index(root, db_path, replace_tier, no_follow_symlinks):
    """Build the directory tree and resolve localization keys.

    Every run replaces the previous index. When two localization files
    define the same key, the file whose name sorts first alphabetically
    wins (a_overrides.yml beats z_base.yml). A failed run leaves the
    previous index untouched.

    \b
    EXAMPLES:
      pdx index ~/games/victoria3/game
      pdx index ./my_mod --db ./my_mod.db --replace-tier
    """
    from pdx_explorer.indexer import run_repository_index

    # Unset flags defer to the runtime configuration
    result = run_repository_index(
        root,
        db_path=db_path,
        follow_symlinks=False if no_follow_symlinks else None,
        replace_tier=replace_tier or None,
    )

    counts = result["extract_counts"]
    print_header("INDEX")
    console.print(f"[path]{escape(str(result['tree'].root_path))}[/path]")
    print_stats({
        "Directories": counts["directories"],
        "Files": counts["files"],
        "Localization files": counts["localization_files"],
        "Localization keys": counts["resolved_keys"],
        "Elapsed": f"{int(result['elapsed'] * 1000)}ms",
    })
    print_success(f"Index written to {result['db_path']}")
