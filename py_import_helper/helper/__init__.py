"""Import collection engine for py-import-helper.

Main Components:
    - ImportHelper: Collects statements and renders the import block
    - parse_import: Parses one import statement into an ImportSpec
    - ModuleClassifier: Assigns future/stdlib/third-party/local categories
    - ImportStore: Merges specs per (category, module)
    - ImportFormatter: Renders groups with PEP 8 spacing and line wrapping

Example:
    >>> from py_import_helper.helper import ImportHelper
    >>>
    >>> helper = ImportHelper(package_name='myapp')
    >>> helper.add_import_string('from typing import Any')
    >>> helper.add_type_checking_from_import('httpx', ['Client'])
    >>> print(helper.render())
"""

from py_import_helper.helper.ast_utils import entry_to_ast, imports_to_ast
from py_import_helper.helper.classifier import ModuleClassifier, classify
from py_import_helper.helper.core import ImportHelper
from py_import_helper.helper.formatting import (
    DEFAULT_MAX_LINE_LENGTH,
    TYPE_CHECKING_GUARD,
    ImportFormatter,
    format_groups,
    format_type_checking_block,
)
from py_import_helper.helper.parsing import parse_import
from py_import_helper.helper.registry import STDLIB_MODULES, is_stdlib_module
from py_import_helper.helper.store import ImportStore
from py_import_helper.helper.types import (
    AliasConflict,
    AllImportGroups,
    ImportCategory,
    ImportGroups,
    ImportItem,
    ImportSpec,
    ModuleEntry,
)

__all__ = [
    # Engine
    'ImportHelper',
    # Parsing and classification
    'parse_import',
    'classify',
    'ModuleClassifier',
    'STDLIB_MODULES',
    'is_stdlib_module',
    # Storage
    'ImportStore',
    # Formatting
    'ImportFormatter',
    'format_groups',
    'format_type_checking_block',
    'DEFAULT_MAX_LINE_LENGTH',
    'TYPE_CHECKING_GUARD',
    'imports_to_ast',
    'entry_to_ast',
    # Types
    'ImportCategory',
    'ImportItem',
    'ImportSpec',
    'ModuleEntry',
    'AliasConflict',
    'ImportGroups',
    'AllImportGroups',
]
