"""Conversion of collected imports to AST nodes.

Code generators that assemble ``ast.Module`` bodies can splice these nodes
directly instead of going through the text renderer.
"""

import ast
from collections.abc import Iterable, Sequence

from py_import_helper.helper.types import WILDCARD, ImportItem, ModuleEntry

__all__ = ['entry_to_ast', 'imports_to_ast']


def _import(module: str, alias: str | None = None) -> ast.Import:
    return ast.Import(names=[ast.alias(name=module, asname=alias)])


def _import_from(entry: ModuleEntry, items: list[ImportItem]) -> ast.ImportFrom:
    # ast keeps the leading dots in ``level`` and None for a bare ``from . import``
    module = entry.module[entry.relative_level :] or None
    return ast.ImportFrom(
        module=module,
        names=[ast.alias(name=item.name, asname=item.alias) for item in items],
        level=entry.relative_level,
    )


def entry_to_ast(entry: ModuleEntry) -> list[ast.stmt]:
    """Convert one entry: direct imports, named from-import, then ``*``."""
    statements: list[ast.stmt] = []
    if entry.direct:
        statements.append(_import(entry.module))
    for alias in entry.sorted_module_aliases():
        statements.append(_import(entry.module, alias))
    named = entry.named_items()
    if named:
        statements.append(_import_from(entry, named))
    if entry.has_wildcard:
        statements.append(_import_from(entry, [ImportItem(WILDCARD)]))
    return statements


def imports_to_ast(groups: Sequence[Iterable[ModuleEntry]]) -> list[ast.stmt]:
    """Convert categorized groups into a flat list of import statements.

    Args:
        groups: Groups in render order, e.g. ``helper.get_categorized()``.

    Returns:
        ``ast.Import`` and ``ast.ImportFrom`` nodes in the same order as
        the text renderer emits them.
    """
    statements: list[ast.stmt] = []
    for group in groups:
        for entry in group:
            statements.extend(entry_to_ast(entry))
    return statements
