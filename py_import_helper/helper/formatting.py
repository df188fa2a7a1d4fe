"""Rendering of categorized imports into PEP 8 import blocks.

Groups are emitted in category order and separated by exactly one blank
line. ``from`` imports that do not fit on one line are wrapped into the
parenthesized form used by black, isort and ruff:

    from package.module import (
        First,
        Second,
    )
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from py_import_helper.helper.types import WILDCARD, ImportGroups, ModuleEntry

if TYPE_CHECKING:
    from py_import_helper.config import ImportHelperConfig

__all__ = [
    'DEFAULT_MAX_LINE_LENGTH',
    'TYPE_CHECKING_GUARD',
    'ImportFormatter',
    'format_groups',
    'format_type_checking_block',
]

DEFAULT_MAX_LINE_LENGTH = 88
TYPE_CHECKING_GUARD = 'if TYPE_CHECKING:'


class ImportFormatter:
    """Renders ModuleEntry groups as lines of Python source.

    Args:
        max_line_length: Longest single-line ``from`` import, indentation
            included, before it is wrapped.
        indent_size: Spaces per indentation level.
        use_trailing_comma: Put a comma after the last wrapped name.
        force_single_line: Never wrap ``from`` imports.
        force_multiline: Always wrap ``from`` imports.
    """

    def __init__(
        self,
        max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
        indent_size: int = 4,
        use_trailing_comma: bool = True,
        force_single_line: bool = False,
        force_multiline: bool = False,
    ):
        self.max_line_length = max_line_length
        self.indent = ' ' * indent_size
        self.use_trailing_comma = use_trailing_comma
        self.force_single_line = force_single_line
        self.force_multiline = force_multiline

    @classmethod
    def from_config(cls, config: 'ImportHelperConfig') -> 'ImportFormatter':
        """Build a formatter from an ImportHelperConfig."""
        return cls(
            max_line_length=config.max_line_length,
            indent_size=config.indent_size,
            use_trailing_comma=config.use_trailing_comma,
            force_single_line=config.force_single_line,
            force_multiline=config.force_multiline,
        )

    def render_entry(self, entry: ModuleEntry, level: int = 0) -> list[str]:
        """Render one module: direct imports first, then its ``from`` import."""
        prefix = self.indent * level
        lines = []
        if entry.direct:
            lines.append(f'{prefix}import {entry.module}')
        for alias in entry.sorted_module_aliases():
            lines.append(f'{prefix}import {entry.module} as {alias}')
        if entry.has_from_import:
            lines.extend(self._render_from(entry, prefix))
        return lines

    def _render_from(self, entry: ModuleEntry, prefix: str) -> list[str]:
        lines = []
        items = [item.render() for item in entry.named_items()]
        if items:
            lines.extend(self._render_names(entry.module, items, prefix))
        # a wildcard cannot share a statement with other names
        if entry.has_wildcard:
            lines.append(f'{prefix}from {entry.module} import {WILDCARD}')
        return lines

    def _render_names(self, module: str, items: list[str], prefix: str) -> list[str]:
        single = f'{prefix}from {module} import {", ".join(items)}'
        if self.force_single_line:
            return [single]
        if not self.force_multiline and len(single) <= self.max_line_length:
            return [single]

        lines = [f'{prefix}from {module} import (']
        for index, item in enumerate(items):
            is_last = index == len(items) - 1
            comma = ',' if not is_last or self.use_trailing_comma else ''
            lines.append(f'{prefix}{self.indent}{item}{comma}')
        lines.append(f'{prefix})')
        return lines

    def format_groups(
        self, groups: Sequence[Sequence[ModuleEntry]], level: int = 0
    ) -> list[str]:
        """Render groups in order, one blank line between non-empty groups."""
        lines: list[str] = []
        for group in groups:
            if not group:
                continue
            if lines:
                lines.append('')
            for entry in group:
                lines.extend(self.render_entry(entry, level))
        return lines

    def format_type_checking_block(self, groups: ImportGroups) -> list[str]:
        """Render groups nested under an ``if TYPE_CHECKING:`` guard.

        Returns an empty list when there is nothing to guard.
        """
        body = self.format_groups(groups, level=1)
        if not body:
            return []
        return [TYPE_CHECKING_GUARD, *body]


def format_groups(
    groups: Sequence[Sequence[ModuleEntry]],
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
    **options,
) -> list[str]:
    """Render groups with a one-off ImportFormatter.

    Example:
        >>> format_groups(helper.get_categorized(), max_line_length=79)
        ['import json', 'from typing import Any', '', 'from pydantic import BaseModel']
    """
    return ImportFormatter(max_line_length, **options).format_groups(groups)


def format_type_checking_block(
    groups: ImportGroups, max_line_length: int = DEFAULT_MAX_LINE_LENGTH, **options
) -> list[str]:
    return ImportFormatter(max_line_length, **options).format_type_checking_block(
        groups
    )
