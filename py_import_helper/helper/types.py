"""Type definitions for import collection.

This module provides:
- ImportCategory, the four PEP 8 import groups in render order
- ImportItem and ImportSpec, the parsed form of a single import statement
- ModuleEntry, the merged store entry for one module
- AliasConflict, the record of a same-name/different-alias merge
- ImportGroups and AllImportGroups, the categorized retrieval results
"""

import dataclasses
from enum import Enum
from typing import NamedTuple

__all__ = [
    'ImportCategory',
    'ImportItem',
    'ImportSpec',
    'ModuleEntry',
    'AliasConflict',
    'ImportGroups',
    'AllImportGroups',
    'name_sort_key',
    'module_sort_key',
]

WILDCARD = '*'


class ImportCategory(str, Enum):
    """Top-level grouping of an import, declared in render order."""

    FUTURE = 'future'
    STDLIB = 'stdlib'
    THIRD_PARTY = 'third_party'
    LOCAL = 'local'


def name_sort_key(name: str) -> tuple[bool, str, str]:
    """Case-insensitive ordering for imported names, wildcard last."""
    return name == WILDCARD, name.lower(), name


def module_sort_key(module: str) -> tuple[str, str]:
    """Case-insensitive ordering for dotted module paths."""
    return module.lower(), module


@dataclasses.dataclass(frozen=True)
class ImportItem:
    name: str
    alias: str | None = None

    def render(self) -> str:
        if self.alias:
            return f'{self.name} as {self.alias}'
        return self.name


@dataclasses.dataclass(frozen=True)
class ImportSpec:
    """One parsed import statement.

    A spec is either a direct import (``import X [as Y]``, ``items`` empty) or
    a from-import (``from X import a, b``, ``items`` non-empty), never both.

    Attributes:
        module: Dotted module path, without leading dots. Empty only for
            pure relative imports such as ``from . import x``.
        items: Imported names with optional aliases, unique by name.
        relative_level: Number of leading dots (0 for absolute imports).
        module_alias: Alias of a direct import (``import X as Y``).
    """

    module: str
    items: tuple[ImportItem, ...] = ()
    relative_level: int = 0
    module_alias: str | None = None

    def __post_init__(self):
        if self.relative_level < 0:
            raise ValueError('relative_level cannot be negative')
        if self.items:
            if self.module_alias is not None:
                raise ValueError('a from-import cannot carry a module alias')
            names = [item.name for item in self.items]
            if len(set(names)) != len(names):
                raise ValueError(f'duplicate imported names in {names}')
        else:
            if self.relative_level:
                raise ValueError('a direct import cannot be relative')
            if not self.module:
                raise ValueError('a direct import needs a module')
        if not self.module and not self.relative_level:
            raise ValueError('only relative imports may omit the module')

    @property
    def is_relative(self) -> bool:
        return self.relative_level > 0

    @property
    def is_direct(self) -> bool:
        return not self.items

    @property
    def qualified_module(self) -> str:
        """Module path including leading dots, e.g. ``..models``."""
        return '.' * self.relative_level + self.module


@dataclasses.dataclass
class ModuleEntry:
    """Merged imports of a single module within one category.

    Attributes:
        module: Qualified module path (leading dots kept for relative imports).
        relative_level: Number of leading dots of ``module``.
        names: Imported names mapped to their alias (or None).
        direct: Whether the module was imported with a plain ``import X``.
        module_aliases: Aliases from ``import X as Y`` statements.
    """

    module: str
    relative_level: int = 0
    names: dict[str, str | None] = dataclasses.field(default_factory=dict)
    direct: bool = False
    module_aliases: set[str] = dataclasses.field(default_factory=set)

    @property
    def has_from_import(self) -> bool:
        return bool(self.names)

    @property
    def has_direct_import(self) -> bool:
        return self.direct or bool(self.module_aliases)

    def sorted_items(self) -> list[ImportItem]:
        return [
            ImportItem(name, self.names[name])
            for name in sorted(self.names, key=name_sort_key)
        ]

    @property
    def has_wildcard(self) -> bool:
        return WILDCARD in self.names

    def named_items(self) -> list[ImportItem]:
        """Sorted items without ``*``, which always renders on a line of its own."""
        return [item for item in self.sorted_items() if item.name != WILDCARD]

    def sorted_module_aliases(self) -> list[str]:
        return sorted(self.module_aliases, key=name_sort_key)

    def binding_count(self) -> int:
        """Number of distinct names this entry binds in the importing module."""
        return len(self.names) + int(self.direct) + len(self.module_aliases)

    def copy(self) -> 'ModuleEntry':
        return dataclasses.replace(
            self, names=dict(self.names), module_aliases=set(self.module_aliases)
        )


@dataclasses.dataclass(frozen=True)
class AliasConflict:
    module: str
    name: str
    previous_alias: str
    alias: str
    type_checking: bool = False

    def __str__(self) -> str:
        block = ' (TYPE_CHECKING)' if self.type_checking else ''
        return (
            f"'{self.name}' from '{self.module}'{block} re-aliased "
            f"'{self.previous_alias}' -> '{self.alias}'"
        )


class ImportGroups(NamedTuple):
    """Entries of one store, grouped by category in render order."""

    future: list[ModuleEntry]
    stdlib: list[ModuleEntry]
    third_party: list[ModuleEntry]
    local: list[ModuleEntry]

    def is_empty(self) -> bool:
        return not any(self)


class AllImportGroups(NamedTuple):
    """Runtime groups followed by the TYPE_CHECKING groups."""

    future: list[ModuleEntry]
    stdlib: list[ModuleEntry]
    third_party: list[ModuleEntry]
    local: list[ModuleEntry]
    type_checking_future: list[ModuleEntry]
    type_checking_stdlib: list[ModuleEntry]
    type_checking_third_party: list[ModuleEntry]
    type_checking_local: list[ModuleEntry]

    @property
    def runtime(self) -> ImportGroups:
        return ImportGroups(*self[:4])

    @property
    def type_checking(self) -> ImportGroups:
        return ImportGroups(*self[4:])
