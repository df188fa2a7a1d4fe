"""Parsing of single import statements.

Only the import-statement subset of the Python grammar is accepted:

    import <module>[ as <alias>]
    from <module-or-dots> import <name>[ as <alias>][, <name>[ as <alias>]]...

The name list of a ``from`` statement may be wrapped in parentheses (with an
optional trailing comma) as long as the whole statement sits on one line.
"""

import keyword
import re

from py_import_helper.exceptions import (
    InvalidAliasError,
    InvalidModulePathError,
    MalformedFromImportError,
    NotAnImportError,
)
from py_import_helper.helper.types import WILDCARD, ImportItem, ImportSpec

__all__ = ['parse_import', 'is_identifier', 'is_dotted_path']

_LEADING_WORD = re.compile(r'\s*(\w+)')
_FROM_STATEMENT = re.compile(
    r'^from\b(?P<source>.*?)\bimport\b(?P<names>.*)$', re.DOTALL
)
_IMPORT_STATEMENT = re.compile(r'^import\b(?P<rest>.*)$', re.DOTALL)
_DOT_SPACING = re.compile(r'\s*\.\s*')


def is_identifier(name: str) -> bool:
    return name.isidentifier() and not keyword.iskeyword(name)


def is_dotted_path(path: str) -> bool:
    return bool(path) and all(is_identifier(part) for part in path.split('.'))


def _normalize(text: str) -> str:
    statement = text.strip()
    if statement.endswith(';'):
        statement = statement[:-1].rstrip()
    return statement


def parse_import(text: str) -> ImportSpec:
    """Parse one line of import-statement text.

    Args:
        text: The statement, e.g. ``'from typing import Any, Optional'``.
            Surrounding whitespace and a trailing semicolon are ignored.

    Returns:
        The parsed ImportSpec.

    Raises:
        NotAnImportError: The text does not start with ``import`` or ``from``.
        MalformedFromImportError: A ``from`` statement has no ``import``
            keyword, no names, or an invalid name.
        InvalidAliasError: An ``as`` is not followed by a valid identifier.
        InvalidModulePathError: The module is not a dotted identifier path.
    """
    statement = _normalize(text)
    match = _LEADING_WORD.match(statement)
    leading = match.group(1) if match else None

    if leading == 'from':
        return _parse_from_import(statement)
    if leading == 'import':
        return _parse_direct_import(statement)
    raise NotAnImportError(statement)


def _parse_direct_import(statement: str) -> ImportSpec:
    rest = _IMPORT_STATEMENT.match(statement).group('rest')
    tokens = rest.split()
    if not tokens:
        raise InvalidModulePathError(statement, '', 'missing module name')

    alias = None
    if 'as' in tokens:
        index = tokens.index('as')
        alias_tokens = tokens[index + 1 :]
        if len(alias_tokens) != 1 or not is_identifier(alias_tokens[0]):
            raise InvalidAliasError(statement, ' '.join(alias_tokens))
        alias = alias_tokens[0]
        tokens = tokens[:index]

    module = _DOT_SPACING.sub('.', ' '.join(tokens))
    if ',' in module:
        raise InvalidModulePathError(
            statement, module, 'only one module may be imported per statement'
        )
    if module.startswith('.'):
        raise InvalidModulePathError(
            statement, module, "relative imports require the 'from' form"
        )
    if not is_dotted_path(module):
        raise InvalidModulePathError(statement, module)

    return ImportSpec(module=module, module_alias=alias)


def _parse_from_import(statement: str) -> ImportSpec:
    match = _FROM_STATEMENT.match(statement)
    if match is None:
        raise MalformedFromImportError(statement, "missing 'import' keyword")

    source = _DOT_SPACING.sub('.', match.group('source').strip())
    module = source.lstrip('.')
    level = len(source) - len(module)
    if not source:
        raise InvalidModulePathError(statement, source, 'missing module name')
    if module and not is_dotted_path(module):
        raise InvalidModulePathError(statement, source)

    parts = _split_names(statement, match.group('names').strip())
    names: dict[str, str | None] = {}
    for part in parts:
        name, alias = _parse_item(statement, part)
        if name == WILDCARD and (len(parts) > 1 or alias):
            raise MalformedFromImportError(
                statement, "'*' must be the only imported name and cannot be aliased"
            )
        names[name] = alias

    items = tuple(ImportItem(name, alias) for name, alias in names.items())
    return ImportSpec(module=module, items=items, relative_level=level)


def _split_names(statement: str, names: str) -> list[str]:
    if not names:
        raise MalformedFromImportError(statement, 'no names to import')

    if names.startswith('('):
        if not names.endswith(')'):
            raise MalformedFromImportError(statement, 'unbalanced parentheses')
        parts = names[1:-1].split(',')
        # a trailing comma is only legal inside parentheses
        if len(parts) > 1 and not parts[-1].strip():
            parts.pop()
    elif '(' in names or ')' in names:
        raise MalformedFromImportError(statement, 'unbalanced parentheses')
    else:
        parts = names.split(',')

    parts = [part.strip() for part in parts]
    if parts == ['']:
        raise MalformedFromImportError(statement, 'no names to import')
    if '' in parts:
        raise MalformedFromImportError(statement, 'empty name in import list')
    return parts


def _parse_item(statement: str, part: str) -> tuple[str, str | None]:
    tokens = part.split()
    name = tokens[0]
    if name != WILDCARD and not is_identifier(name):
        raise MalformedFromImportError(statement, f"'{name}' is not a valid name")

    if len(tokens) == 1:
        return name, None
    if tokens[1] != 'as':
        raise MalformedFromImportError(statement, f"unexpected text in '{part}'")
    if len(tokens) != 3 or not is_identifier(tokens[2]):
        raise InvalidAliasError(statement, ' '.join(tokens[2:]))
    return name, tokens[2]
