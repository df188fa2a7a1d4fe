"""Accumulating store of categorized imports.

The store keeps one ModuleEntry per ``(category, module)`` pair and merges
every new ImportSpec for the same module into it.
"""

import logging

from py_import_helper.helper.types import (
    AliasConflict,
    ImportCategory,
    ImportGroups,
    ImportSpec,
    ModuleEntry,
    module_sort_key,
)

__all__ = ['ImportStore']

logger = logging.getLogger(__name__)


class ImportStore:
    """Collects import specs keyed by category and qualified module path.

    Example:
        >>> store = ImportStore()
        >>> stdlib = ImportCategory.STDLIB
        >>> _ = store.merge(stdlib, parse_import('from typing import Any'))
        >>> _ = store.merge(stdlib, parse_import('from typing import Optional'))
        >>> store.groups().stdlib[0].names
        {'Any': None, 'Optional': None}
    """

    def __init__(self, type_checking: bool = False):
        self.type_checking = type_checking
        self._entries: dict[tuple[ImportCategory, str], ModuleEntry] = {}
        self._conflicts: list[AliasConflict] = []

    @property
    def conflicts(self) -> list[AliasConflict]:
        return list(self._conflicts)

    def merge(self, category: ImportCategory, spec: ImportSpec) -> list[AliasConflict]:
        """Merge a spec into the entry for its module.

        Names are unioned. An alias given later replaces a missing alias; a
        missing alias given later keeps the existing one. Two different
        aliases for the same name are a conflict: the later one wins and the
        conflict is recorded.

        Returns:
            The conflicts produced by this merge.
        """
        module = spec.qualified_module
        entry = self._entries.get((category, module))
        if entry is None:
            entry = ModuleEntry(module=module, relative_level=spec.relative_level)
            self._entries[(category, module)] = entry

        if spec.is_direct:
            if spec.module_alias:
                entry.module_aliases.add(spec.module_alias)
            else:
                entry.direct = True
            return []

        conflicts = []
        for item in spec.items:
            previous = entry.names.get(item.name)
            if item.name not in entry.names or previous is None:
                entry.names[item.name] = item.alias
            elif item.alias and item.alias != previous:
                conflict = AliasConflict(
                    module=module,
                    name=item.name,
                    previous_alias=previous,
                    alias=item.alias,
                    type_checking=self.type_checking,
                )
                logger.warning(f'Alias conflict: {conflict}; keeping {item.alias!r}')
                entry.names[item.name] = item.alias
                conflicts.append(conflict)

        self._conflicts.extend(conflicts)
        return conflicts

    def entries(self, category: ImportCategory) -> list[ModuleEntry]:
        """Copies of the entries of one category, sorted case-insensitively.

        Changing a returned entry never changes the store.
        """
        entries = [
            entry.copy() for (cat, _), entry in self._entries.items() if cat is category
        ]
        return sorted(entries, key=lambda entry: module_sort_key(entry.module))

    def groups(self) -> ImportGroups:
        return ImportGroups(*(self.entries(category) for category in ImportCategory))

    def count(self) -> int:
        """Number of distinct names bound by all entries."""
        return sum(entry.binding_count() for entry in self._entries.values())

    def is_empty(self) -> bool:
        return not self._entries

    def clear(self) -> None:
        self._entries.clear()
        self._conflicts.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, module: str) -> bool:
        return any(key_module == module for _, key_module in self._entries)
