"""The ImportHelper engine.

ImportHelper ties the parser, classifier, store and formatter together. It is
the object code generators talk to: statements go in one at a time and a
sorted, deduplicated import block comes out.
"""

import ast
import logging
from collections.abc import Iterable

from py_import_helper.config import ImportHelperConfig
from py_import_helper.exceptions import ImportParseError
from py_import_helper.helper.ast_utils import imports_to_ast
from py_import_helper.helper.classifier import ModuleClassifier
from py_import_helper.helper.formatting import ImportFormatter
from py_import_helper.helper.parsing import parse_import
from py_import_helper.helper.store import ImportStore
from py_import_helper.helper.types import (
    AliasConflict,
    AllImportGroups,
    ImportCategory,
    ImportGroups,
    ImportSpec,
    ModuleEntry,
    module_sort_key,
)

__all__ = ['ImportHelper']

logger = logging.getLogger(__name__)

ImportItemLike = str | tuple[str, str | None]

_DATETIME_TYPES = ('datetime', 'date', 'time', 'timedelta')
_TYPING_NAMES = ('Any', 'Generic', 'TypeVar', 'Protocol')


def _render_item(item: ImportItemLike) -> str:
    if isinstance(item, tuple):
        name, alias = item
        return f'{name} as {alias}' if alias else name
    return item


class ImportHelper:
    """Collects, categorizes and formats the imports of one generated module.

    Runtime imports and imports that belong in an ``if TYPE_CHECKING:`` block
    are kept in two separate stores. Configuration changes only affect
    statements added afterwards; merged entries are never reclassified.

    Example:
        >>> helper = ImportHelper(package_name='myproject')
        >>> helper.add_import_string('import json')
        >>> helper.add_import_string('from typing import Any, Optional')
        >>> helper.add_import_string('from pydantic import BaseModel')
        >>> helper.add_import_string('from myproject.models import User')
        >>> for line in helper.get_formatted():
        ...     print(line)
        import json
        from typing import Any, Optional
        <BLANKLINE>
        from pydantic import BaseModel
        <BLANKLINE>
        from myproject.models import User
    """

    def __init__(
        self,
        package_name: str = '',
        local_package_prefixes: Iterable[str] = (),
        max_line_length: int | None = None,
        config: ImportHelperConfig | None = None,
    ):
        config = config.model_copy(deep=True) if config else ImportHelperConfig()
        if package_name:
            config.package_name = package_name
        if local_package_prefixes:
            config.local_package_prefixes = (
                config.local_package_prefixes | set(local_package_prefixes)
            )
        if max_line_length is not None:
            config.max_line_length = max_line_length

        self._config = config
        self._classifier = ModuleClassifier(
            config.package_name, config.local_package_prefixes
        )
        self._store = ImportStore()
        self._type_checking_store = ImportStore(type_checking=True)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def config(self) -> ImportHelperConfig:
        """A copy of the current configuration."""
        return self._config.model_copy(deep=True)

    @property
    def package_name(self) -> str:
        return self._config.package_name

    @package_name.setter
    def package_name(self, value: str) -> None:
        self._config.package_name = value
        self._sync_classifier()

    @property
    def local_package_prefixes(self) -> frozenset[str]:
        return frozenset(self._config.local_package_prefixes)

    @property
    def max_line_length(self) -> int:
        return self._config.max_line_length

    @max_line_length.setter
    def max_line_length(self, value: int) -> None:
        self._config.max_line_length = value

    def add_local_package_prefix(self, prefix: str) -> None:
        self.add_local_package_prefixes([prefix])

    def add_local_package_prefixes(self, prefixes: Iterable[str]) -> None:
        self._config.local_package_prefixes = self._config.local_package_prefixes | set(
            prefixes
        )
        self._sync_classifier()

    def remove_local_package_prefix(self, prefix: str) -> None:
        self._config.local_package_prefixes = self._config.local_package_prefixes - {
            prefix
        }
        self._sync_classifier()

    def _sync_classifier(self) -> None:
        self._classifier.configure(
            self._config.package_name, self._config.local_package_prefixes
        )

    def clone_config(self) -> 'ImportHelper':
        """Create an empty helper with the same configuration."""
        return ImportHelper(config=self._config)

    # ------------------------------------------------------------------
    # Collection
    # ------------------------------------------------------------------

    def classify_module(self, module: str, relative_level: int = 0) -> ImportCategory:
        """Category a module would be stored under with the current config."""
        return self._classifier.classify(module, relative_level)

    def classify(self, spec: ImportSpec) -> ImportCategory:
        return self.classify_module(spec.module, spec.relative_level)

    def add_import(self, spec: ImportSpec, type_checking: bool = False) -> None:
        """Classify a parsed spec and merge it into the matching store."""
        store = self._type_checking_store if type_checking else self._store
        store.merge(self.classify(spec), spec)

    def add_import_string(self, import_statement: str) -> None:
        """Parse and add a runtime import statement.

        Raises:
            ImportParseError: The statement could not be parsed. Nothing is
                added in that case.
        """
        self.add_import(parse_import(import_statement))

    def add_type_checking_import(self, import_statement: str) -> None:
        """Parse and add a statement to the TYPE_CHECKING block."""
        self.add_import(parse_import(import_statement), type_checking=True)

    def add_import_strings(
        self, import_statements: Iterable[str], type_checking: bool = False
    ) -> list[ImportParseError]:
        """Add many statements, collecting parse errors instead of raising.

        Returns:
            The errors of the statements that could not be parsed, in input
            order. Every valid statement is added regardless.
        """
        errors = []
        for statement in import_statements:
            try:
                spec = parse_import(statement)
            except ImportParseError as e:
                logger.debug(f'Skipping unparseable import: {e}')
                errors.append(e)
                continue
            self.add_import(spec, type_checking=type_checking)
        return errors

    def add_from_import(self, module: str, items: Iterable[ImportItemLike]) -> None:
        """Add ``from module import items``.

        Items may be plain names, ``'name as alias'`` strings or
        ``(name, alias)`` tuples.
        """
        self.add_import(self._from_spec(module, items))

    def add_type_checking_from_import(
        self, module: str, items: Iterable[ImportItemLike]
    ) -> None:
        self.add_import(self._from_spec(module, items), type_checking=True)

    def add_direct_import(self, module: str, alias: str | None = None) -> None:
        self.add_import(self._direct_spec(module, alias))

    def add_type_checking_direct_import(
        self, module: str, alias: str | None = None
    ) -> None:
        self.add_import(self._direct_spec(module, alias), type_checking=True)

    @staticmethod
    def _from_spec(module: str, items: Iterable[ImportItemLike]) -> ImportSpec:
        names = ', '.join(_render_item(item) for item in items)
        return parse_import(f'from {module} import {names}')

    @staticmethod
    def _direct_spec(module: str, alias: str | None) -> ImportSpec:
        suffix = f' as {alias}' if alias else ''
        return parse_import(f'import {module}{suffix}')

    def create_model_imports(self, required_types: Iterable[str]) -> None:
        """Add the imports a generated pydantic model module needs.

        Args:
            required_types: Type names or annotation strings used by the
                models, e.g. ``['datetime', 'UUID', 'dict[str, Any]']``.
        """
        self.add_from_import('pydantic', ['BaseModel', 'ConfigDict', 'Field'])

        datetime_names = set()
        typing_names = set()
        needs_callable = False
        for type_name in required_types:
            if type_name in _DATETIME_TYPES:
                datetime_names.add(type_name)
            elif type_name == 'Decimal':
                self.add_from_import('decimal', ['Decimal'])
            elif type_name == 'UUID':
                self.add_from_import('uuid', ['UUID'])
            else:
                typing_names.update(name for name in _TYPING_NAMES if name in type_name)
                needs_callable = needs_callable or 'Callable' in type_name

        if datetime_names:
            self.add_from_import('datetime', datetime_names)
        if typing_names:
            self.add_from_import('typing', typing_names)
        if needs_callable:
            self.add_from_import('collections.abc', ['Callable'])

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def count(self) -> int:
        """Number of distinct runtime names imported."""
        return self._store.count()

    def count_type_checking(self) -> int:
        return self._type_checking_store.count()

    def is_empty(self) -> bool:
        return self._store.is_empty()

    def is_type_checking_empty(self) -> bool:
        return self._type_checking_store.is_empty()

    @property
    def conflicts(self) -> list[AliasConflict]:
        """Alias conflicts recorded by both stores, runtime first."""
        return self._store.conflicts + self._type_checking_store.conflicts

    @property
    def cache_size(self) -> int:
        return self._classifier.cache_size

    def reset(self) -> None:
        """Drop all collected imports and cached classifications.

        The configuration is preserved so the helper can be reused for the
        next generated file.
        """
        self._store.clear()
        self._type_checking_store.clear()
        self._classifier.clear_cache()
        logger.debug('Import helper reset')

    def clear_cache(self) -> None:
        """Drop cached classifications; collected imports are kept."""
        self._classifier.clear_cache()

    # ------------------------------------------------------------------
    # Retrieval
    # ------------------------------------------------------------------

    def get_categorized(self) -> ImportGroups:
        return self._store.groups()

    def get_type_checking_categorized(self) -> ImportGroups:
        return self._type_checking_store.groups()

    def get_all_categorized(self) -> AllImportGroups:
        return AllImportGroups(
            *self.get_categorized(), *self.get_type_checking_categorized()
        )

    def _formatter(self) -> ImportFormatter:
        return ImportFormatter.from_config(self._config)

    def _runtime_groups_with_guard(self) -> ImportGroups:
        """Runtime groups with ``TYPE_CHECKING`` added to the typing import.

        The groups are copies, so the store never sees the guard import. A
        ``from typing import *`` still renders on its own line.
        """
        groups = self.get_categorized()
        stdlib = list(groups.stdlib)
        typing_entry = next(
            (entry for entry in stdlib if entry.module == 'typing'), None
        )
        if typing_entry is None:
            typing_entry = ModuleEntry(module='typing')
            stdlib.append(typing_entry)
            stdlib.sort(key=lambda entry: module_sort_key(entry.module))
        typing_entry.names.setdefault('TYPE_CHECKING', None)
        return groups._replace(stdlib=stdlib)

    def get_formatted(self, include_type_checking: bool = False) -> list[str]:
        """Render the collected imports as lines.

        Args:
            include_type_checking: Append the ``if TYPE_CHECKING:`` block and
                add ``TYPE_CHECKING`` to the typing import. Ignored when no
                type-checking imports were collected.

        Returns:
            Lines without newlines; blank strings separate groups.
        """
        formatter = self._formatter()
        if not include_type_checking or self.is_type_checking_empty():
            return formatter.format_groups(self.get_categorized())

        lines = formatter.format_groups(self._runtime_groups_with_guard())
        lines.append('')
        lines.extend(
            formatter.format_type_checking_block(self.get_type_checking_categorized())
        )
        return lines

    def get_type_checking_formatted(self) -> list[str]:
        """Render only the ``if TYPE_CHECKING:`` block."""
        return self._formatter().format_type_checking_block(
            self.get_type_checking_categorized()
        )

    def render(self, include_type_checking: bool = True) -> str:
        """Render the import block as source text ending with a newline."""
        lines = self.get_formatted(include_type_checking=include_type_checking)
        return '\n'.join(lines) + '\n' if lines else ''

    def to_ast(self) -> list[ast.stmt]:
        """Runtime imports as ``ast.Import``/``ast.ImportFrom`` nodes."""
        return imports_to_ast(self.get_categorized())

    def __repr__(self) -> str:
        return (
            f'{type(self).__name__}(package_name={self.package_name!r}, '
            f'imports={self.count()}, '
            f'type_checking_imports={self.count_type_checking()})'
        )
