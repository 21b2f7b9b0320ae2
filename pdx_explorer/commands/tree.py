"""Render the directory tree of a game/mod directory."""

import click
from rich.markup import escape
from rich.tree import Tree

from pdx_explorer.indexer.content_type import ContentType
from pdx_explorer.pipeline.ui import console
from pdx_explorer.utils.error_handler import handle_exceptions


def _label(node) -> str:
    kind = "dir" if node.is_dir else "file"
    style = "loc" if node.content_type is ContentType.LOCALIZATION else "white"
    name = escape(node.name or node.full_path)
    return f"[{style}]{name}[/{style}] [dim]({kind} #{node.id}, {node.content_type.value})[/dim]"


def _add_children(branch: Tree, node, localization_only: bool):
    for child in node.children:
        if localization_only and child.content_type is not ContentType.LOCALIZATION:
            continue
        sub = branch.add(_label(child))
        if child.is_dir:
            _add_children(sub, child, localization_only)


@click.command()
@handle_exceptions
@click.argument("root", type=click.Path(file_okay=False, path_type=str))
@click.option("--localization-only", is_flag=True, help="Only show the localization subtree")
@click.option("--no-follow-symlinks", is_flag=True, help="Leave symlinked directories out of the tree")
def tree(root, localization_only, no_follow_symlinks):
    """Show the directory tree with node ids and content types.

    Nothing is written to the database.
    """
    from pdx_explorer.indexer import DirTree

    dir_tree = DirTree.build(root, follow_symlinks=not no_follow_symlinks)

    view = Tree(_label(dir_tree.root))
    _add_children(view, dir_tree.root, localization_only)
    console.print(view)

    stats = dir_tree.stats
    console.print(
        f"{stats['directories']} directories, {stats['files']} files "
        f"({stats['localization_files']} localization)",
        style="dim",
    )
