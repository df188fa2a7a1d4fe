"""Test the exception hierarchy."""

import pytest

from py_import_helper.exceptions import (
    ConfigurationError,
    ImportHelperError,
    ImportParseError,
    InvalidAliasError,
    InvalidModulePathError,
    MalformedFromImportError,
    NotAnImportError,
)
from py_import_helper.helper.parsing import parse_import


class TestHierarchy:
    """Test that every error can be caught through its base classes."""

    @pytest.mark.parametrize(
        'error',
        [
            NotAnImportError('x = 1'),
            MalformedFromImportError('from os', "missing 'import' keyword"),
            InvalidAliasError('import os as', ''),
            InvalidModulePathError('import 1x', '1x'),
        ],
    )
    def test_parse_errors(self, error):
        assert isinstance(error, ImportParseError)
        assert isinstance(error, ImportHelperError)

    def test_configuration_error_is_not_a_parse_error(self):
        error = ConfigurationError('bad')
        assert isinstance(error, ImportHelperError)
        assert not isinstance(error, ImportParseError)


class TestMessages:
    """Test exception messages and attributes."""

    def test_base_error_message(self):
        error = ImportHelperError('something went wrong')
        assert error.message == 'something went wrong'
        assert str(error) == 'something went wrong'

    def test_parse_error_keeps_statement_and_reason(self):
        error = ImportParseError('import', 'missing module name')

        assert error.statement == 'import'
        assert error.reason == 'missing module name'
        assert str(error) == (
            "Cannot parse import statement 'import': missing module name"
        )

    def test_parse_error_without_reason(self):
        assert str(ImportParseError('???')) == "Cannot parse import statement '???'"

    def test_not_an_import(self):
        error = NotAnImportError('print(1)')
        assert "expected 'import' or 'from'" in str(error)

    def test_invalid_alias(self):
        missing = InvalidAliasError('import os as')
        invalid = InvalidAliasError('import os as 1x', '1x')

        assert missing.alias == ''
        assert "missing alias after 'as'" in str(missing)
        assert invalid.alias == '1x'
        assert "'1x' is not a valid alias" in str(invalid)

    def test_invalid_module_path(self):
        error = InvalidModulePathError('import a-b', 'a-b')
        assert error.module == 'a-b'
        assert "invalid module path 'a-b'" in str(error)

    def test_configuration_error(self):
        error = ConfigurationError(
            'Invalid configuration',
            config_path='import-helper.yaml',
            field='indent_size',
        )

        assert error.config_path == 'import-helper.yaml'
        assert error.field == 'indent_size'
        assert str(error) == (
            "Invalid configuration in 'import-helper.yaml' (field: indent_size)"
        )


class TestRaisedByParser:
    """Test that the parser raises the documented error types."""

    def test_statement_attribute_is_normalized(self):
        with pytest.raises(NotAnImportError) as exc_info:
            parse_import('  x = 1;  ')
        assert exc_info.value.statement == 'x = 1'

    def test_alias_error_attribute(self):
        with pytest.raises(InvalidAliasError) as exc_info:
            parse_import('from typing import Any as 1x')
        assert exc_info.value.alias == '1x'

    def test_module_error_attribute(self):
        with pytest.raises(InvalidModulePathError) as exc_info:
            parse_import('import my-package')
        assert exc_info.value.module == 'my-package'
