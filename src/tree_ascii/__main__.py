"""CLI entry point for tree-ascii."""

import json
import logging
import sys

import click
import networkx as nx

from tree_ascii.adapters import from_graph, from_mapping, graph_from_json, is_graph_document
from tree_ascii.errors import TreePrintError
from tree_ascii.layout.base import UNLIMITED_DEPTH
from tree_ascii.printer import TreeLayout, TreePrinter

_LAYOUT_NAMES = [layout.cli_name for layout in TreeLayout]


def _resolve_root(graph: nx.DiGraph, root: str):
    """Map a command line root id onto the graph node it names; ids from JSON may be numbers."""
    if root in graph:
        return root
    return next((n for n in graph if str(n) == root), root)


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option(
    "--layout",
    "-l",
    "layout",
    type=click.Choice(_LAYOUT_NAMES, case_sensitive=False),
    default="top-down",
    show_default=True,
    help="Tree layout",
)
@click.option("--max-depth", "-m", "max_depth", type=int, default=None, help="Number of levels to print")
@click.option("--root", "-r", "root", type=str, default=None, help="Root node id (graph input only)")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log layout details to stderr")
def main(
    input: str | None, layout: str, max_depth: int | None, root: str | None, output: str | None, verbose: bool
) -> None:
    """Print a tree given as JSON as a text diagram.

    INPUT is either a nested tree ({"label": ..., "children": [...]}) or a
    graph ({"nodes": [...], "edges": [...]}); stdin is read if omitted.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        data = json.loads(text)
    except ValueError as e:
        click.echo(f"parse error:\n{e}", err=True)
        sys.exit(1)

    try:
        if is_graph_document(data):
            graph = graph_from_json(data)
            tree = from_graph(graph, root=_resolve_root(graph, root) if root is not None else data.get("root"))
        else:
            tree = from_mapping(data)
        printer = TreePrinter(TreeLayout.from_name(layout))
        rendered = printer.print(tree, UNLIMITED_DEPTH if max_depth is None else max_depth).export()
    except (TreePrintError, ValueError) as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)
    except RecursionError:
        click.echo("error: tree too deep or cyclic; use --max-depth", err=True)
        sys.exit(1)

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered + "\n")
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered)


if __name__ == "__main__":
    main()
