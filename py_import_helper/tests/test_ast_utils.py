"""Tests for converting collected imports into AST nodes."""

import ast

from py_import_helper.helper.ast_utils import entry_to_ast, imports_to_ast
from py_import_helper.helper.types import ImportGroups, ModuleEntry


def _unparse(statements):
    module = ast.Module(body=statements, type_ignores=[])
    return ast.unparse(ast.fix_missing_locations(module)).splitlines()


class TestEntryToAst:
    """Test conversion of single entries."""

    def test_from_import(self):
        """Test that names keep their sorted order and aliases."""
        entry = ModuleEntry(module='numpy', names={'ndarray': None, 'array': 'arr'})

        (node,) = entry_to_ast(entry)

        assert isinstance(node, ast.ImportFrom)
        assert node.module == 'numpy'
        assert node.level == 0
        assert [(a.name, a.asname) for a in node.names] == [
            ('array', 'arr'),
            ('ndarray', None),
        ]

    def test_direct_imports_come_first(self):
        entry = ModuleEntry(
            module='os', names={'path': None}, direct=True, module_aliases={'_os'}
        )

        assert _unparse(entry_to_ast(entry)) == [
            'import os',
            'import os as _os',
            'from os import path',
        ]

    def test_relative_import_level(self):
        """Test that leading dots move into ``level``."""
        entry = ModuleEntry(module='..models', relative_level=2, names={'User': None})

        (node,) = entry_to_ast(entry)

        assert node.module == 'models'
        assert node.level == 2
        assert _unparse([node]) == ['from ..models import User']

    def test_bare_relative_import(self):
        entry = ModuleEntry(module='.', relative_level=1, names={'utils': None})

        (node,) = entry_to_ast(entry)

        assert node.module is None
        assert _unparse([node]) == ['from . import utils']


    def test_wildcard_is_a_separate_statement(self):
        entry = ModuleEntry(module='os.path', names={'*': None, 'join': None})

        assert _unparse(entry_to_ast(entry)) == [
            'from os.path import join',
            'from os.path import *',
        ]

class TestImportsToAst:
    """Test conversion of whole groups."""

    def test_flattens_groups_in_order(self):
        groups = ImportGroups(
            future=[ModuleEntry(module='__future__', names={'annotations': None})],
            stdlib=[ModuleEntry(module='json', direct=True)],
            third_party=[],
            local=[ModuleEntry(module='.', relative_level=1, names={'x': None})],
        )

        assert _unparse(imports_to_ast(groups)) == [
            'from __future__ import annotations',
            'import json',
            'from . import x',
        ]

    def test_empty_groups(self):
        assert imports_to_ast(ImportGroups([], [], [], [])) == []
