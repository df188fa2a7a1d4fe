"""py-import-helper - Collect and format the imports of generated Python code.

Code generators feed import statements to an ImportHelper one at a time. The
helper classifies each module (future, standard library, third-party, local),
merges repeated imports of the same module and renders a PEP 8 ordered,
line-wrapped import block.

Quick Start:
    >>> from py_import_helper import ImportHelper
    >>>
    >>> helper = ImportHelper(package_name='myproject')
    >>> helper.add_import_string('from typing import Any')
    >>> helper.add_import_string('from typing import Optional')
    >>> helper.add_import_string('from myproject.models import User')
    >>> helper.get_formatted()
    ['from typing import Any, Optional', '', 'from myproject.models import User']

CLI Usage:
    $ py-import-helper format imports.txt --package-name myproject
    $ py-import-helper classify os pydantic myproject.models -p myproject
"""

from py_import_helper.config import ImportHelperConfig, get_config
from py_import_helper.exceptions import (
    ConfigurationError,
    ImportHelperError,
    ImportParseError,
    InvalidAliasError,
    InvalidModulePathError,
    MalformedFromImportError,
    NotAnImportError,
)
from py_import_helper.helper import (
    AliasConflict,
    AllImportGroups,
    ImportCategory,
    ImportFormatter,
    ImportGroups,
    ImportHelper,
    ImportItem,
    ImportSpec,
    ModuleEntry,
    classify,
    format_groups,
    parse_import,
)

__all__ = [
    # Main classes
    'ImportHelper',
    'ImportFormatter',
    'parse_import',
    'classify',
    'format_groups',
    # Types
    'ImportCategory',
    'ImportItem',
    'ImportSpec',
    'ModuleEntry',
    'AliasConflict',
    'ImportGroups',
    'AllImportGroups',
    # Configuration
    'ImportHelperConfig',
    'get_config',
    # Exceptions
    'ImportHelperError',
    'ImportParseError',
    'NotAnImportError',
    'MalformedFromImportError',
    'InvalidAliasError',
    'InvalidModulePathError',
    'ConfigurationError',
]

try:
    from importlib.metadata import version as _version

    __version__ = _version('py-import-helper')
except ImportError:
    __version__ = 'unknown'
