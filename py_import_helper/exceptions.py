"""Custom exceptions for py-import-helper.

This module defines the exception hierarchy used by the library. Parsing is the
only step that can fail on malformed input; classification and formatting are
total and never raise.
"""


class ImportHelperError(Exception):
    """Base exception for all py-import-helper errors.

    Example:
        try:
            helper.add_import_string(line)
        except ImportHelperError as e:
            print(f"import-helper error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ImportParseError(ImportHelperError):
    """A line of text could not be parsed as an import statement.

    Attributes:
        statement: The text that failed to parse.
        reason: Explanation of what is wrong with it.
    """

    def __init__(self, statement: str, reason: str | None = None):
        self.statement = statement
        self.reason = reason
        message = f"Cannot parse import statement '{statement}'"
        if reason:
            message += f': {reason}'
        super().__init__(message)


class NotAnImportError(ImportParseError):
    """The text does not start with ``import`` or ``from``."""

    def __init__(self, statement: str):
        super().__init__(statement, "expected 'import' or 'from'")


class MalformedFromImportError(ImportParseError):
    """A ``from`` statement lacks the ``import`` keyword or a valid name list."""

    pass


class InvalidAliasError(ImportParseError):
    """An ``as`` clause is not followed by a single valid identifier.

    Attributes:
        alias: The alias text found after ``as`` (empty when missing).
    """

    def __init__(self, statement: str, alias: str = ''):
        self.alias = alias
        if alias:
            reason = f"'{alias}' is not a valid alias"
        else:
            reason = "missing alias after 'as'"
        super().__init__(statement, reason)


class InvalidModulePathError(ImportParseError):
    """The module part of the statement is not a dotted identifier path.

    Attributes:
        module: The offending module text.
    """

    def __init__(self, statement: str, module: str, reason: str | None = None):
        self.module = module
        super().__init__(statement, reason or f"invalid module path '{module}'")


class ConfigurationError(ImportHelperError):
    """Error in configuration.

    This exception is raised when the configuration is invalid or
    cannot be loaded.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)
